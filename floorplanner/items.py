from __future__ import annotations
import os
from typing import Dict, Optional
from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QBrush, QColor, QPainter, QPen, QPixmap, QFont
from PySide6.QtSvg import QSvgRenderer

from .models import Room, Furniture

# ===== Colors =====
WALL_COLOR = QColor(64, 64, 64)
ROOM_OUTLINE = QColor(0, 0, 0)
HANDLE_COLOR = QColor(0, 0, 0)
FALLBACK_FILL = QColor(226, 232, 240)
FALLBACK_BORDER = QColor("#334155")
SELECT_PEN = QPen(QColor(255, 140, 0), 2, Qt.DashLine)

ASSETS_DIR = os.path.join(os.path.dirname(__file__), "assets")

_icon_cache: Dict[str, Optional[QPixmap]] = {}


def _render_svg(path: str, size: int) -> Optional[QPixmap]:
    renderer = QSvgRenderer(path)
    if not renderer.isValid():
        return None
    pm = QPixmap(size, size)
    pm.fill(Qt.transparent)
    p = QPainter(pm)
    renderer.render(p, QRectF(0, 0, size, size))
    p.end()
    return pm


def load_icon(icon_path: str, size: int = 128) -> Optional[QPixmap]:
    """Resolve a stored icon path ("/sofa.png") against the assets folder.

    SVG is preferred over raster; None means "draw the fallback box".
    """
    if icon_path in _icon_cache:
        return _icon_cache[icon_path]
    stem = os.path.splitext(os.path.basename(icon_path))[0]
    pm = None
    for ext in (".svg", ".png"):
        path = os.path.join(ASSETS_DIR, stem + ext)
        if not os.path.exists(path):
            continue
        pm = _render_svg(path, size) if ext == ".svg" else QPixmap(path)
        if pm is not None and not pm.isNull():
            break
        pm = None
    _icon_cache[icon_path] = pm
    return pm


def paint_room(painter: QPainter, room: Room, selected: bool = False):
    painter.setPen(Qt.NoPen)
    painter.setBrush(WALL_COLOR)
    painter.drawRect(room.outer_bounds())
    painter.setBrush(QBrush(QColor(room.color)))
    painter.drawRect(room.rect())
    painter.setBrush(Qt.NoBrush)
    painter.setPen(QPen(ROOM_OUTLINE, 1))
    painter.drawRect(room.rect())
    if selected:
        painter.setPen(SELECT_PEN)
        painter.drawRect(room.outer_bounds().adjusted(-2, -2, 2, 2))


def paint_furniture(painter: QPainter, item: Furniture, selected: bool = False):
    # negative sizes are legal in the model; draw the normalized box
    box = item.bounds().normalized()
    w, h = box.width(), box.height()
    painter.save()
    painter.translate(box.center())
    painter.rotate(item.angle * 180.0 / 3.141592653589793)
    local = QRectF(-w / 2, -h / 2, w, h)
    pm = load_icon(item.icon_path)
    if pm is not None and w > 0 and h > 0:
        painter.drawPixmap(local, pm, QRectF(pm.rect()))
    else:
        painter.setPen(QPen(FALLBACK_BORDER, 1))
        painter.setBrush(FALLBACK_FILL)
        painter.drawRect(local)
        painter.setFont(QFont("", 7))
        painter.drawText(local, Qt.AlignCenter, item.type.replace("_", " "))
    painter.restore()

    if selected:
        painter.setPen(SELECT_PEN)
        painter.setBrush(Qt.NoBrush)
        painter.drawRect(box.adjusted(-1, -1, 1, 1))
    painter.setPen(Qt.NoPen)
    painter.setBrush(HANDLE_COLOR)
    painter.drawRect(item.handle_rect())
