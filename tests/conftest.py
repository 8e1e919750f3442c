"""Shared fixtures for the layout engine tests."""
import pytest
from PySide6.QtCore import QPointF

from floorplanner import PlanScene, ItemFactory, Room, Furniture, RoomType


@pytest.fixture
def scene():
    """Empty 900x600 plan."""
    return PlanScene(900, 600)


@pytest.fixture
def factory():
    return ItemFactory()


@pytest.fixture
def furnished(scene):
    """A living room with a sofa inside it and a free-standing table."""
    scene.add_room(Room(100, 100, 300, 200, RoomType.LIVINGROOM))
    scene.add_furniture(Furniture(150, 150, 50, 30, "Sofa"))
    scene.add_furniture(Furniture(600, 400, 50, 30, "Table"))
    return scene


def drag(scene, start, *points):
    """Press at start, move through points, release at the last one."""
    scene.pointer_down(QPointF(*start))
    outcomes = [scene.pointer_drag(QPointF(*p)) for p in points]
    scene.pointer_up(QPointF(*(points[-1] if points else start)))
    return outcomes


@pytest.fixture(name="drag")
def drag_fixture():
    return drag
