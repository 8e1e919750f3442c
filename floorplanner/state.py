from __future__ import annotations
import json
import logging
import math
import os
import tempfile
from numbers import Real
from typing import Dict, List, Tuple

from .models import Room, Furniture, RoomType, PersistenceError, icon_for
from .utils import GRID_SIZE

log = logging.getLogger(__name__)

FORMAT_TAG = "floorplanner"
FORMAT_VERSION = 1


def _num(rec: Dict, key: str, where: str) -> float:
    v = rec.get(key)
    # bool is a Real subclass; reject it explicitly
    if isinstance(v, bool) or not isinstance(v, Real):
        raise PersistenceError(f"{where}: field {key!r} must be a number, got {v!r}")
    if not math.isfinite(v):
        raise PersistenceError(f"{where}: field {key!r} must be finite, got {v!r}")
    return v


def _records(data: Dict, key: str) -> List[Dict]:
    recs = data.get(key)
    if not isinstance(recs, list):
        raise PersistenceError(f"missing list {key!r}")
    for i, r in enumerate(recs):
        if not isinstance(r, dict):
            raise PersistenceError(f"{key}[{i}] is not an object")
    return recs


class PlanState:
    """JSON codec for the room and furniture collections of a PlanScene."""

    def __init__(self, scene):
        self.scene = scene

    # ---- encode ----
    def serialize(self) -> Dict:
        rooms, furniture = self.scene.snapshot()
        return {
            "format": FORMAT_TAG,
            "version": FORMAT_VERSION,
            "canvas": {"w": self.scene.canvas_w, "h": self.scene.canvas_h, "grid": GRID_SIZE},
            "rooms": [{"x": r.x, "y": r.y, "w": r.width, "h": r.height, "type": r.type}
                      for r in rooms],
            "furniture": [{"x": f.x, "y": f.y, "w": f.width, "h": f.height,
                           "type": f.type, "angle": f.angle, "icon": f.icon_path}
                          for f in furniture],
        }

    # ---- decode ----
    @staticmethod
    def decode(data) -> Tuple[List[Room], List[Furniture]]:
        """Build both collections or raise PersistenceError; nothing is applied."""
        if not isinstance(data, dict):
            raise PersistenceError("plan must be a JSON object")
        tag = data.get("format", FORMAT_TAG)
        if tag != FORMAT_TAG:
            raise PersistenceError(f"not a floor plan: format={tag!r}")
        version = data.get("version", FORMAT_VERSION)
        if version != FORMAT_VERSION:
            raise PersistenceError(f"unsupported version {version!r}")

        rooms: List[Room] = []
        for i, r in enumerate(_records(data, "rooms")):
            where = f"rooms[{i}]"
            rtype = r.get("type")
            if rtype not in RoomType.ALL:
                raise PersistenceError(f"{where}: unknown room type {rtype!r}")
            rooms.append(Room(_num(r, "x", where), _num(r, "y", where),
                              _num(r, "w", where), _num(r, "h", where), rtype))

        furniture: List[Furniture] = []
        for i, f in enumerate(_records(data, "furniture")):
            where = f"furniture[{i}]"
            ftype = f.get("type")
            if not isinstance(ftype, str):
                raise PersistenceError(f"{where}: field 'type' must be a string")
            icon = f.get("icon") or icon_for(ftype)
            if not isinstance(icon, str):
                raise PersistenceError(f"{where}: field 'icon' must be a string")
            angle = _num(f, "angle", where) if "angle" in f else 0.0
            furniture.append(Furniture(_num(f, "x", where), _num(f, "y", where),
                                       _num(f, "w", where), _num(f, "h", where),
                                       ftype, angle, icon))
        return rooms, furniture

    def deserialize(self, data: Dict):
        rooms, furniture = self.decode(data)
        self.scene.replace_all(rooms, furniture)

    # ---- files ----
    def save(self, path: str):
        text = json.dumps(self.serialize(), ensure_ascii=False, indent=2)
        folder = os.path.dirname(os.path.abspath(path))
        tmp = None
        try:
            fd, tmp = tempfile.mkstemp(prefix=".plan-", suffix=".tmp", dir=folder)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp, path)
            tmp = None
        except OSError as e:
            log.warning("save failed: %s: %s", path, e)
            raise PersistenceError(f"Failed to save the plan: {e}") from e
        finally:
            if tmp and os.path.exists(tmp):
                os.remove(tmp)
        log.info("plan saved: %s", path)

    def load(self, path: str):
        # decode errors are ValueErrors; deeply nested input raises RecursionError
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            log.warning("load failed: %s: %s", path, e)
            raise PersistenceError(f"Failed to load the plan: {e}") from e
        try:
            self.deserialize(data)
        except PersistenceError as e:
            log.warning("load failed: %s: %s", path, e)
            raise
        log.info("plan loaded: %s (%d rooms, %d furniture)",
                 path, len(self.scene.rooms), len(self.scene.furniture))
