from .utils import CANVAS_W, CANVAS_H, GRID_SIZE, WALL_THICKNESS, HANDLE_SIZE
from .models import (RoomType, Room, Furniture, FurnitureKind, Outcome, Status, Reason,
                     InvalidDimension, PersistenceError, FURNITURE_TYPES)
from .factory import ItemFactory, parse_dimension
from .scene import PlanScene, Interaction
from .state import PlanState

# widgets (view, palette, items) are imported explicitly; they need QtGui
__all__ = [
    "CANVAS_W", "CANVAS_H", "GRID_SIZE", "WALL_THICKNESS", "HANDLE_SIZE",
    "RoomType", "Room", "Furniture", "FurnitureKind", "Outcome", "Status", "Reason",
    "InvalidDimension", "PersistenceError", "FURNITURE_TYPES",
    "ItemFactory", "parse_dimension", "PlanScene", "Interaction", "PlanState",
]
