from __future__ import annotations
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QIcon, QPainter, QPen, QPixmap
from PySide6.QtWidgets import (
    QWidget, QGridLayout, QLabel, QLineEdit, QComboBox, QPushButton
)

from .models import RoomType, ROOM_COLORS, FURNITURE_TYPES


def make_swatch(color: str, size: int = 14) -> QIcon:
    pm = QPixmap(size, size); pm.fill(Qt.transparent)
    p = QPainter(pm)
    p.setBrush(QColor(color)); p.setPen(QPen(QColor(70, 70, 70), 1))
    p.drawRect(1, 1, size - 3, size - 3)
    p.end()
    return QIcon(pm)


class PalettePanel(QWidget):
    """Inputs and buttons of the left-hand control panel.

    The panel only collects parameters; the main window turns each signal into
    a PlanScene call.
    """
    addRoomRequested = Signal(str, str, str)      # width text, height text, room type
    addFurnitureRequested = Signal(str)           # furniture type
    deleteRoomRequested = Signal()
    deleteFurnitureRequested = Signal()
    rotateRequested = Signal()
    saveRequested = Signal()
    loadRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        lay = QGridLayout(self)
        lay.setContentsMargins(8, 8, 8, 8)
        lay.setHorizontalSpacing(5); lay.setVerticalSpacing(5)

        self.ed_width = QLineEdit(); self.ed_height = QLineEdit()
        for ed in (self.ed_width, self.ed_height):
            ed.setMaxLength(6); ed.setFixedWidth(90)

        self.cb_room_type = QComboBox()
        for t in RoomType.ALL:
            self.cb_room_type.addItem(make_swatch(ROOM_COLORS[t]), t.title(), t)

        self.cb_furniture = QComboBox()
        for name in FURNITURE_TYPES:
            self.cb_furniture.addItem(name.replace("_", " "), name)

        btn_add_room = QPushButton("Add Room")
        btn_del_room = QPushButton("Delete Room")
        btn_add_furn = QPushButton("Add Furniture/Fixture")
        btn_del_furn = QPushButton("Delete Furniture/Fixture")
        btn_save = QPushButton("Save Plan")
        btn_load = QPushButton("Load Plan")
        btn_rotate = QPushButton("Rotate Furniture")

        btn_add_room.clicked.connect(lambda: self.addRoomRequested.emit(
            self.ed_width.text(), self.ed_height.text(), self.cb_room_type.currentData()))
        btn_add_furn.clicked.connect(lambda: self.addFurnitureRequested.emit(self.cb_furniture.currentData()))
        btn_del_room.clicked.connect(lambda: self.deleteRoomRequested.emit())
        btn_del_furn.clicked.connect(lambda: self.deleteFurnitureRequested.emit())
        btn_rotate.clicked.connect(lambda: self.rotateRequested.emit())
        btn_save.clicked.connect(lambda: self.saveRequested.emit())
        btn_load.clicked.connect(lambda: self.loadRequested.emit())

        rows = [
            (QLabel("Width:"), self.ed_width),
            (QLabel("Height:"), self.ed_height),
            (QLabel("Room Type:"), self.cb_room_type),
            (btn_add_room, btn_del_room),
            (QLabel("Furniture/Fixture:"), self.cb_furniture),
            (btn_add_furn, btn_del_furn),
            (btn_save, btn_load),
            (btn_rotate, None),
        ]
        for i, (a, b) in enumerate(rows):
            lay.addWidget(a, i, 0)
            if b is not None:
                lay.addWidget(b, i, 1)
        lay.setRowStretch(len(rows), 1)
