from __future__ import annotations
import logging
from typing import Optional, List, Callable, Iterable, Tuple

from PySide6.QtCore import QPointF

from .models import Room, Furniture, Outcome, Reason
from .utils import CANVAS_W, CANVAS_H, contains, intersects

log = logging.getLogger(__name__)


class Interaction:
    IDLE = "idle"
    ROOM_SELECTED = "room_selected"
    FURNITURE_SELECTED = "furniture_selected"
    DRAGGING = "dragging"
    RESIZING = "resizing"


class PlanScene:
    """Rooms, furniture and the pointer session of one open plan.

    Collections are painted in insertion order and hit-tested in reverse, so
    the entity drawn on top is the one a click picks.
    """

    def __init__(self, canvas_w: float = CANVAS_W, canvas_h: float = CANVAS_H,
                 status_cb: Optional[Callable[[str], None]] = None,
                 on_change: Optional[Callable[[], None]] = None):
        self.canvas_w = canvas_w
        self.canvas_h = canvas_h
        self.rooms: List[Room] = []
        self.furniture: List[Furniture] = []
        self.selected_room: Optional[Room] = None
        self.selected_furniture: Optional[Furniture] = None
        self.resizing: Optional[Furniture] = None
        self._dragging = False
        self._anchor: Optional[QPointF] = None
        self._status_cb = status_cb
        self.on_change = on_change

    # ---- session ----
    @property
    def interaction(self) -> str:
        if self.resizing is not None:
            return Interaction.RESIZING
        if self._dragging:
            return Interaction.DRAGGING
        if self.selected_furniture is not None:
            return Interaction.FURNITURE_SELECTED
        if self.selected_room is not None:
            return Interaction.ROOM_SELECTED
        return Interaction.IDLE

    def clear_selection(self):
        self.selected_room = None
        self.selected_furniture = None
        self.resizing = None
        self._dragging = False
        self._anchor = None

    # ---- hit testing ----
    def room_at(self, p: QPointF) -> Optional[Room]:
        for room in reversed(self.rooms):
            if contains(room.outer_bounds(), p):
                return room
        return None

    def furniture_at(self, p: QPointF) -> Optional[Furniture]:
        for item in reversed(self.furniture):
            if contains(item.bounds(), p):
                return item
        return None

    def handle_at(self, p: QPointF) -> Optional[Furniture]:
        for item in reversed(self.furniture):
            if item.is_near_handle(p):
                return item
        return None

    def room_containing(self, item: Furniture) -> Optional[Room]:
        b = item.bounds()
        for room in reversed(self.rooms):
            r = room.rect()
            if (b.left() >= r.left() and b.top() >= r.top() and
                    b.right() <= r.right() and b.bottom() <= r.bottom()):
                return room
        return None

    def _room_collides(self, room: Room) -> bool:
        mine = room.outer_bounds()
        return any(other is not room and intersects(other.outer_bounds(), mine)
                   for other in self.rooms)

    def _furniture_collides(self, item: Furniture) -> bool:
        mine = item.bounds()
        return any(other is not item and intersects(other.bounds(), mine)
                   for other in self.furniture)

    # ---- pointer events ----
    def pointer_down(self, p: QPointF) -> Outcome:
        handle_owner = self.handle_at(p)
        if handle_owner is not None:
            self.resizing = handle_owner
            self._anchor = QPointF(p)
            return Outcome.accepted()
        # selections are independent: a click may pick a room and a furniture item
        self.selected_room = self.room_at(p)
        self.selected_furniture = self.furniture_at(p)
        self._anchor = QPointF(p)
        self._dragging = self.selected_room is not None or self.selected_furniture is not None
        if not self._dragging:
            return Outcome.noop(Reason.IDLE)
        return Outcome.accepted()

    def pointer_drag(self, p: QPointF) -> Outcome:
        if self._anchor is None:
            return Outcome.noop(Reason.IDLE)
        dx = p.x() - self._anchor.x()
        dy = p.y() - self._anchor.y()
        self._anchor = QPointF(p)

        if self.resizing is not None:
            self.resizing.resize(dx, dy)
            return self._changed(Outcome.accepted())

        room, item = self.selected_room, self.selected_furniture
        if room is not None and item is not None:
            item.move_by(dx, dy)
            item.clamp_into(room.rect())
            item.containing_room = room
            return self._changed(Outcome.accepted())

        if room is not None:
            old = (room.x, room.y)
            room.move_by(dx, dy)
            # clamped before the overlap test, not after: the tested position is the one that is kept
            room.clamp_to_canvas(self.canvas_w, self.canvas_h)
            if self._room_collides(room):
                room.x, room.y = old
                return self._reject("Cannot move the room: Overlap detected!")
            return self._changed(Outcome.accepted())

        if item is not None:
            old = (item.x, item.y)
            item.move_by(dx, dy)
            if self._furniture_collides(item):
                item.x, item.y = old
                return self._reject("No overlap between furniture!")
            return self._changed(Outcome.accepted())

        return Outcome.noop(Reason.IDLE)

    def pointer_up(self, p: Optional[QPointF] = None) -> Outcome:
        resized = self.resizing
        self.resizing = None
        self._dragging = False
        self._anchor = None
        if resized is not None:
            resized.clamp_to_canvas(self.canvas_w, self.canvas_h)
        if self.selected_room is not None:
            self.selected_room.clamp_to_canvas(self.canvas_w, self.canvas_h)
            self.selected_room.clamp_against_siblings(self.rooms, self.canvas_w, self.canvas_h)
        if self.selected_furniture is not None:
            self.selected_furniture.clamp_to_canvas(self.canvas_w, self.canvas_h)
            self.selected_furniture.containing_room = self.room_containing(self.selected_furniture)
        return self._changed(Outcome.accepted())

    # ---- editing operations ----
    def add_room(self, room: Room) -> Outcome:
        room.clamp_to_canvas(self.canvas_w, self.canvas_h)
        for existing in self.rooms:
            if existing.overlaps(room.outer_bounds()):
                return self._reject("Rooms cannot overlap!")
        self.rooms.append(room)
        log.info("room added: %s at (%g, %g) %gx%g", room.type, room.x, room.y, room.width, room.height)
        return self._changed(Outcome.accepted("Room added."))

    def add_furniture(self, item: Furniture) -> Outcome:
        for existing in self.furniture:
            if intersects(existing.bounds(), item.bounds()):
                return self._reject("Furniture cannot overlap!")
        old = (item.x, item.y)
        item.clamp_to_canvas(self.canvas_w, self.canvas_h)
        # the clamp may push the candidate onto an item at the canvas edge
        if self._furniture_collides(item):
            item.x, item.y = old
            return self._reject("Furniture cannot overlap!")
        self.furniture.append(item)
        log.info("furniture added: %s at (%g, %g)", item.type, item.x, item.y)
        return self._changed(Outcome.accepted(f"{item.type} added."))

    def delete_selected_room(self) -> Outcome:
        room = self.selected_room
        if room is None:
            return self._noop("No room selected to delete.")
        # by identity: entities with equal fields are still distinct
        self.rooms = [r for r in self.rooms if r is not room]
        self.selected_room = None
        for item in self.furniture:
            if item.containing_room is room:
                item.containing_room = None
        return self._changed(Outcome.accepted("Room deleted."))

    def delete_selected_furniture(self) -> Outcome:
        item = self.selected_furniture
        if item is None:
            return self._noop("No furniture selected to delete.")
        self.furniture = [f for f in self.furniture if f is not item]
        self.selected_furniture = None
        if self.resizing is item:
            self.resizing = None
        return self._changed(Outcome.accepted("Furniture deleted."))

    def rotate_selected_furniture(self) -> Outcome:
        item = self.selected_furniture
        if item is None:
            return self._noop("No furniture selected to rotate.")
        item.rotate()
        item.clamp_to_canvas(self.canvas_w, self.canvas_h)
        return self._changed(Outcome.accepted())

    def replace_all(self, rooms: Iterable[Room], furniture: Iterable[Furniture]):
        """Swap in a whole new model (used by load); the session is reset."""
        self.rooms = list(rooms)
        self.furniture = list(furniture)
        for item in self.furniture:
            item.containing_room = self.room_containing(item)
        self.clear_selection()
        self._changed(Outcome.accepted())

    def snapshot(self) -> Tuple[List[Room], List[Furniture]]:
        return list(self.rooms), list(self.furniture)

    # ---- feedback ----
    def _reject(self, message: str) -> Outcome:
        log.info("rejected: %s", message)
        return Outcome.rejected(Reason.OVERLAP, message)

    def _noop(self, message: str) -> Outcome:
        log.info("no-op: %s", message)
        return Outcome.noop(Reason.NO_SELECTION, message)

    def _changed(self, outcome: Outcome) -> Outcome:
        if self._status_cb and outcome.message:
            self._status_cb(outcome.message)
        if self.on_change:
            self.on_change()
        return outcome
