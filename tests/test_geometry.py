"""Tests for floorplanner/utils.py rectangle helpers."""
from PySide6.QtCore import QRectF, QPointF

from floorplanner import Room, RoomType
from floorplanner.utils import outer_bounds, intersects, contains, clamp


# --- outer_bounds ---

def test_outer_bounds_adds_wall_on_every_side():
    r = outer_bounds(Room(10, 20, 200, 100, RoomType.BEDROOM))
    assert (r.x(), r.y(), r.width(), r.height()) == (8, 18, 204, 104)


# --- intersects ---

def test_intersects_overlapping():
    assert intersects(QRectF(0, 0, 10, 10), QRectF(5, 5, 10, 10))


def test_intersects_touching_edges_is_not_overlap():
    assert not intersects(QRectF(0, 0, 10, 10), QRectF(10, 0, 10, 10))
    assert not intersects(QRectF(0, 0, 10, 10), QRectF(0, 10, 10, 10))


def test_intersects_disjoint():
    assert not intersects(QRectF(0, 0, 10, 10), QRectF(50, 50, 10, 10))


def test_intersects_zero_area_rect():
    assert not intersects(QRectF(0, 0, 0, 10), QRectF(-5, 0, 10, 10))


# --- contains ---

def test_contains_inclusive_edges():
    r = QRectF(0, 0, 10, 10)
    for p in ((0, 0), (10, 10), (10, 0), (5, 10), (5, 5)):
        assert contains(r, QPointF(*p))


def test_contains_outside():
    r = QRectF(0, 0, 10, 10)
    assert not contains(r, QPointF(10.5, 5))
    assert not contains(r, QPointF(5, -0.1))


def test_contains_negative_size_rect():
    assert contains(QRectF(10, 10, -10, -10), QPointF(5, 5))


# --- clamp ---

def test_clamp_in_range():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_clamp_inverted_range_takes_lower_bound():
    assert clamp(5, 2, -100) == 2
