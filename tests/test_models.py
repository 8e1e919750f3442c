"""Tests for Room and Furniture entity operations."""
import math
import pytest
from PySide6.QtCore import QPointF

from floorplanner import Room, Furniture, RoomType, FurnitureKind, WALL_THICKNESS
from floorplanner.models import ROOM_COLORS, DEFAULT_ICON, Outcome, Status


# --- Room ---

def test_room_color_follows_type():
    assert Room(0, 0, 10, 10, RoomType.KITCHEN).color == ROOM_COLORS[RoomType.KITCHEN]
    assert Room(0, 0, 10, 10, RoomType.BATHROOM).color == "#0000FF"


def test_room_unknown_type_raises():
    with pytest.raises(ValueError, match="unknown room type"):
        Room(0, 0, 10, 10, "GARAGE")


def test_room_clamp_to_canvas_keeps_walls_inside():
    r = Room(-50, 700, 100, 100, RoomType.BEDROOM)
    r.clamp_to_canvas(900, 600)
    assert r.x == WALL_THICKNESS
    assert r.y == 600 - 100 - WALL_THICKNESS


def test_room_clamp_larger_than_canvas_does_not_raise():
    r = Room(10, 10, 1000, 700, RoomType.BEDROOM)
    r.clamp_to_canvas(900, 600)
    assert (r.x, r.y) == (WALL_THICKNESS, WALL_THICKNESS)


def test_room_overlaps_uses_outer_bounds():
    a = Room(10, 10, 100, 100, RoomType.BEDROOM)
    # inner rects are 3px apart, walls make them collide
    b = Room(113, 10, 100, 100, RoomType.KITCHEN)
    assert a.overlaps(b.outer_bounds())
    c = Room(114, 10, 100, 100, RoomType.KITCHEN)
    assert not a.overlaps(c.outer_bounds())


def test_clamp_against_siblings_does_not_separate_rooms():
    a = Room(10, 10, 100, 100, RoomType.BEDROOM)
    b = Room(50, 50, 100, 100, RoomType.KITCHEN)
    b.clamp_against_siblings([a, b], 900, 600)
    assert (b.x, b.y) == (50, 50)
    assert a.overlaps(b.outer_bounds())


def test_clamp_against_siblings_reclamps_when_overlapping():
    a = Room(10, 10, 100, 100, RoomType.BEDROOM)
    b = Room(-20, 50, 100, 100, RoomType.KITCHEN)
    b.clamp_against_siblings([a, b], 900, 600)
    assert b.x == WALL_THICKNESS


def test_clamp_against_siblings_ignores_self_only_list():
    b = Room(-20, 50, 100, 100, RoomType.KITCHEN)
    b.clamp_against_siblings([b], 900, 600)
    assert b.x == -20


# --- Furniture ---

def test_furniture_icon_from_catalog():
    assert Furniture(0, 0, 1, 1, "Dining_Set").icon_path == "/diningset.png"
    assert Furniture(0, 0, 1, 1, "Lamp").icon_path == DEFAULT_ICON


def test_furniture_kind_tag():
    assert Furniture(0, 0, 1, 1, "Door").kind == FurnitureKind.DOOR
    assert Furniture(0, 0, 1, 1, "Window").kind == FurnitureKind.WINDOW
    assert Furniture(0, 0, 1, 1, "Sofa").kind == FurnitureKind.PIECE
    assert Furniture(0, 0, 1, 1, "Door").is_passage
    assert not Furniture(0, 0, 1, 1, "Window").is_passage


def test_resize_then_inverse_restores_size():
    f = Furniture(0, 0, 50, 30, "Sofa")
    f.resize(17, -4)
    assert (f.width, f.height) == (67, 26)
    f.resize(-17, 4)
    assert (f.width, f.height) == (50, 30)


def test_resize_allows_negative_size():
    f = Furniture(10, 10, 50, 30, "Sofa")
    f.resize(-80, -40)
    assert (f.width, f.height) == (-30, -10)
    f.clamp_to_canvas(900, 600)
    assert (f.x, f.y) == (10, 10)


def test_rotate_swaps_size_and_adds_quarter_turn():
    f = Furniture(0, 0, 50, 30, "Bed")
    f.rotate()
    assert (f.width, f.height) == (30, 50)
    assert f.angle == pytest.approx(math.pi / 2)


def test_rotate_has_period_four():
    f = Furniture(5, 5, 50, 30, "Bed")
    for _ in range(4):
        f.rotate()
    assert (f.width, f.height, f.angle) == (50, 30, 0.0)


def test_rotate_wraps_angle():
    f = Furniture(0, 0, 50, 30, "Bed", angle=3 * math.pi / 2)
    f.rotate()
    assert f.angle == 0.0


def test_furniture_clamp_to_canvas():
    f = Furniture(10050, -10, 50, 30, "Sofa")
    f.clamp_to_canvas(900, 600)
    assert (f.x, f.y) == (850, 0)


def test_furniture_clamp_into_area():
    room = Room(100, 100, 300, 200, RoomType.LIVINGROOM)
    f = Furniture(1000, 0, 50, 30, "Sofa")
    f.clamp_into(room.rect())
    assert (f.x, f.y) == (350, 100)


def test_handle_region_is_bottom_right_square():
    f = Furniture(50, 50, 50, 30, "Sofa")
    assert f.is_near_handle(QPointF(100, 80))
    assert f.is_near_handle(QPointF(92, 72))
    assert not f.is_near_handle(QPointF(91, 72))
    assert not f.is_near_handle(QPointF(60, 60))


def test_equality_ignores_containing_room():
    a = Furniture(1, 2, 3, 4, "Sink")
    b = Furniture(1, 2, 3, 4, "Sink")
    b.containing_room = Room(0, 0, 100, 100, RoomType.KITCHEN)
    assert a == b


# --- Outcome ---

def test_outcome_constructors():
    assert Outcome.accepted().ok
    rej = Outcome.rejected("overlap", "Rooms cannot overlap!")
    assert rej.status == Status.REJECTED and not rej.ok
    assert Outcome.noop("no_selection").status == Status.NOOP
