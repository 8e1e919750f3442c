from __future__ import annotations
from typing import Dict, Tuple
from .models import Room, Furniture, RoomType, InvalidDimension, icon_for
from .utils import ROOM_SPAWN, FURNITURE_SPAWN, WINDOW_SPAWN

# type -> (x, y, w, h)
SPAWN: Dict[str, Tuple[float, float, float, float]] = {
    "Door":   (FURNITURE_SPAWN[0], FURNITURE_SPAWN[1], 50.0, 20.0),
    "Window": (WINDOW_SPAWN[0],    WINDOW_SPAWN[1],    60.0, 20.0),
}
DEFAULT_SPAWN = (FURNITURE_SPAWN[0], FURNITURE_SPAWN[1], 50.0, 30.0)


def parse_dimension(text) -> float:
    try:
        v = float(str(text).strip())
    except (TypeError, ValueError):
        raise InvalidDimension(f"not a number: {text!r}") from None
    if v != v or v in (float("inf"), float("-inf")):
        raise InvalidDimension(f"not a finite number: {text!r}")
    return v


class ItemFactory:
    """Builds candidate entities from what the control panel supplies."""

    def create_room(self, width, height, room_type: str = RoomType.BEDROOM) -> Room:
        w = parse_dimension(width); h = parse_dimension(height)
        x, y = ROOM_SPAWN
        return Room(x, y, w, h, room_type)

    def create_furniture(self, type_: str) -> Furniture:
        x, y, w, h = SPAWN.get(type_, DEFAULT_SPAWN)
        return Furniture(x, y, w, h, type_, icon_path=icon_for(type_))
