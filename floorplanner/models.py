from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Optional, Iterable
from PySide6.QtCore import QRectF, QPointF
from .utils import WALL_THICKNESS, HANDLE_SIZE, clamp, outer_bounds, intersects, contains


class RoomType:
    BEDROOM = "BEDROOM"
    BATHROOM = "BATHROOM"
    KITCHEN = "KITCHEN"
    LIVINGROOM = "LIVINGROOM"
    ALL = (BEDROOM, BATHROOM, KITCHEN, LIVINGROOM)


ROOM_COLORS = {
    RoomType.BEDROOM: "#00FF00",
    RoomType.BATHROOM: "#0000FF",
    RoomType.KITCHEN: "#FF0000",
    RoomType.LIVINGROOM: "#FFC800",
}


class FurnitureKind:
    PIECE = "piece"
    DOOR = "door"
    WINDOW = "window"


# combo order of the control panel
FURNITURE_TYPES = ("Sofa", "Table", "Chair", "Bed", "Dining_Set", "Door", "Window",
                   "Commode", "Wash_Basin", "Shower", "Sink", "Stove")

FURNITURE_ICONS = {
    "Sofa": "/sofa.png",
    "Table": "/table.png",
    "Chair": "/chair.png",
    "Bed": "/bed.png",
    "Dining_Set": "/diningset.png",
    "Door": "/door.png",
    "Window": "/window.png",
    "Stove": "/stove.png",
    "Shower": "/shower.png",
    "Commode": "/commode.png",
    "Wash_Basin": "/washbasin.png",
    "Sink": "/sink.png",
}
DEFAULT_ICON = "/default.png"

QUARTER_TURN = math.pi / 2


def icon_for(type_: str) -> str:
    return FURNITURE_ICONS.get(type_, DEFAULT_ICON)


class InvalidDimension(ValueError):
    """Size input that is not a number; raised at the UI boundary."""


class PersistenceError(Exception):
    """Save or load failed; live state is left as it was."""


@dataclass
class Room:
    x: float
    y: float
    width: float
    height: float
    type: str = RoomType.BEDROOM

    WALL = WALL_THICKNESS

    def __post_init__(self):
        if self.type not in RoomType.ALL:
            raise ValueError(f"unknown room type: {self.type!r}")

    @property
    def color(self) -> str:
        return ROOM_COLORS[self.type]

    def rect(self) -> QRectF:
        return QRectF(self.x, self.y, self.width, self.height)

    def outer_bounds(self) -> QRectF:
        return outer_bounds(self)

    def overlaps(self, other: QRectF) -> bool:
        return intersects(self.outer_bounds(), other)

    def move_by(self, dx: float, dy: float):
        self.x += dx
        self.y += dy

    def clamp_to_canvas(self, canvas_w: float, canvas_h: float):
        t = self.WALL
        self.x = clamp(self.x, t, canvas_w - self.width - t)
        self.y = clamp(self.y, t, canvas_h - self.height - t)

    def clamp_against_siblings(self, rooms: Iterable["Room"], canvas_w: float, canvas_h: float):
        # re-clamps to the canvas only; an overlap is not pushed apart
        for other in rooms:
            if other is not self and other.overlaps(self.outer_bounds()):
                self.clamp_to_canvas(canvas_w, canvas_h)


@dataclass
class Furniture:
    x: float
    y: float
    width: float
    height: float
    type: str
    angle: float = 0.0
    icon_path: str = ""
    containing_room: Optional[Room] = field(default=None, compare=False, repr=False)

    HANDLE = HANDLE_SIZE

    def __post_init__(self):
        if not self.icon_path:
            self.icon_path = icon_for(self.type)

    @property
    def kind(self) -> str:
        if self.type == "Door":
            return FurnitureKind.DOOR
        if self.type == "Window":
            return FurnitureKind.WINDOW
        return FurnitureKind.PIECE

    @property
    def is_passage(self) -> bool:
        return self.kind == FurnitureKind.DOOR

    def bounds(self) -> QRectF:
        return QRectF(self.x, self.y, self.width, self.height)

    def handle_rect(self) -> QRectF:
        s = self.HANDLE
        return QRectF(self.x + self.width - s, self.y + self.height - s, s, s)

    def is_near_handle(self, p: QPointF) -> bool:
        return contains(self.handle_rect(), p)

    def move_by(self, dx: float, dy: float):
        self.x += dx
        self.y += dy

    def resize(self, dx: float, dy: float):
        # no lower bound; zero or negative sizes are allowed
        self.width += dx
        self.height += dy

    def rotate(self):
        self.width, self.height = self.height, self.width
        quarters = (round(self.angle / QUARTER_TURN) + 1) % 4
        self.angle = quarters * QUARTER_TURN

    def clamp_to_canvas(self, canvas_w: float, canvas_h: float):
        self.x = clamp(self.x, 0.0, canvas_w - self.width)
        self.y = clamp(self.y, 0.0, canvas_h - self.height)

    def clamp_into(self, area: QRectF):
        self.x = clamp(self.x, area.left(), area.left() + area.width() - self.width)
        self.y = clamp(self.y, area.top(), area.top() + area.height() - self.height)


class Status:
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    NOOP = "noop"


class Reason:
    OVERLAP = "overlap"
    NO_SELECTION = "no_selection"
    IDLE = "idle"


@dataclass(frozen=True)
class Outcome:
    status: str
    reason: Optional[str] = None
    message: str = ""

    @classmethod
    def accepted(cls, message: str = "") -> "Outcome":
        return cls(Status.ACCEPTED, None, message)

    @classmethod
    def rejected(cls, reason: str, message: str) -> "Outcome":
        return cls(Status.REJECTED, reason, message)

    @classmethod
    def noop(cls, reason: str, message: str = "") -> "Outcome":
        return cls(Status.NOOP, reason, message)

    @property
    def ok(self) -> bool:
        return self.status == Status.ACCEPTED
