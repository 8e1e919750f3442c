from __future__ import annotations
from PySide6.QtCore import Qt, QPointF, QSize, Signal
from PySide6.QtGui import QPainter, QPen, QColor
from PySide6.QtWidgets import QWidget, QMessageBox

from .models import Outcome, Status
from .scene import PlanScene
from .items import paint_room, paint_furniture

BG_COLOR = QColor(192, 192, 192)
CANVAS_BORDER = QColor("#111827")


class PlanView(QWidget):
    """Canvas widget: forwards pointer events to a PlanScene and paints it."""
    selectionChanged = Signal()

    def __init__(self, scene: PlanScene, parent=None):
        super().__init__(parent)
        self.scene = scene
        self.setFixedSize(int(scene.canvas_w), int(scene.canvas_h))
        self.setMouseTracking(True)
        self.setAttribute(Qt.WA_OpaquePaintEvent, True)
        self.scene.on_change = self.update
        self._pressed = False

    def sizeHint(self) -> QSize:
        return QSize(int(self.scene.canvas_w), int(self.scene.canvas_h))

    # ---- outcome -> notice ----
    def report(self, outcome: Outcome):
        if outcome.status == Status.ACCEPTED:
            return
        if outcome.message:
            QMessageBox.information(self, "Floor Planner", outcome.message)

    # ---- pointer ----
    def mousePressEvent(self, e):
        if e.button() != Qt.LeftButton:
            return super().mousePressEvent(e)
        self._pressed = True
        self.scene.pointer_down(QPointF(e.position()))
        self.selectionChanged.emit()
        self.update()

    def mouseMoveEvent(self, e):
        furn = self.scene.handle_at(QPointF(e.position()))
        self.setCursor(Qt.SizeFDiagCursor if furn is not None else Qt.ArrowCursor)
        if not (self._pressed and e.buttons() & Qt.LeftButton):
            return
        outcome = self.scene.pointer_drag(QPointF(e.position()))
        if outcome.status == Status.REJECTED:
            # a modal box would swallow the release; end the gesture first
            self._pressed = False
            self.scene.pointer_up(QPointF(e.position()))
            self.report(outcome)

    def mouseReleaseEvent(self, e):
        if e.button() != Qt.LeftButton or not self._pressed:
            return super().mouseReleaseEvent(e)
        self._pressed = False
        self.scene.pointer_up(QPointF(e.position()))

    # ---- paint ----
    def paintEvent(self, event):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing, True)
        p.setRenderHint(QPainter.SmoothPixmapTransform, True)
        p.fillRect(self.rect(), BG_COLOR)
        for room in self.scene.rooms:
            paint_room(p, room, room is self.scene.selected_room)
        for item in self.scene.furniture:
            paint_furniture(p, item, item is self.scene.selected_furniture)
        p.setPen(QPen(CANVAS_BORDER, 1)); p.setBrush(Qt.NoBrush)
        p.drawRect(self.rect().adjusted(0, 0, -1, -1))
        p.end()
