from __future__ import annotations
import os
from PySide6.QtCore import QRectF, QPointF

# ===== Canvas / grid =====
CANVAS_W = 900.0
CANVAS_H = 600.0
GRID_SIZE = 20.0          # not applied to placement
WALL_THICKNESS = 2.0
HANDLE_SIZE = 8.0

# ===== Spawn positions =====
ROOM_SPAWN = (10.0, 10.0)
FURNITURE_SPAWN = (50.0, 50.0)
WINDOW_SPAWN = (100.0, 50.0)

# ===== Settings =====
SETTINGS_ORG = "FloorPlanner"
SETTINGS_APP = "Editor"
RECENT_MAX = 10
LOG_LEVEL = os.environ.get("FLOORPLANNER_LOG", "INFO").upper()

def clamp(v: float, lo: float, hi: float) -> float:
    # lower bound wins when the range is inverted
    return max(lo, min(v, hi))

def outer_bounds(room) -> QRectF:
    t = room.WALL
    return QRectF(room.x - t, room.y - t, room.width + 2 * t, room.height + 2 * t)

def intersects(a: QRectF, b: QRectF) -> bool:
    """Positive shared area only; rects that merely touch do not intersect."""
    return a.intersects(b)

def contains(r: QRectF, p: QPointF) -> bool:
    # inclusive of all four edges, also for rects with negative size
    left, right = sorted((r.left(), r.right()))
    top, bottom = sorted((r.top(), r.bottom()))
    return left <= p.x() <= right and top <= p.y() <= bottom
