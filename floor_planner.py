#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations
import sys, os, logging
from PySide6.QtCore import Qt, QSettings
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QToolBar, QStatusBar, QFileDialog, QMessageBox,
    QDockWidget, QStyle, QMenu, QScrollArea, QLabel
)
from floorplanner import (PlanScene, PlanState, ItemFactory, InvalidDimension, PersistenceError,
                          CANVAS_W, CANVAS_H)
from floorplanner.utils import SETTINGS_ORG, SETTINGS_APP, RECENT_MAX, LOG_LEVEL
from floorplanner.view import PlanView
from floorplanner.palette import PalettePanel

PLAN_FILTER = "Floor Plan (*.json);;All files (*)"


def _ensure_ext(path: str, ext: str) -> str:
    ext = ext.lower()
    return path if path.lower().endswith(ext) else path + ext


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("2D Floor Planner")
        self.resize(1200, 800)
        self.settings = QSettings(SETTINGS_ORG, SETTINGS_APP)

        # scene / canvas
        self.scene = PlanScene(CANVAS_W, CANVAS_H, status_cb=self._status)
        self.state = PlanState(self.scene)
        self.factory = ItemFactory()
        self.view = PlanView(self.scene)
        scroll = QScrollArea(self)
        scroll.setWidget(self.view)
        scroll.setAlignment(Qt.AlignCenter)
        self.setCentralWidget(scroll)

        # control panel
        self.palette = PalettePanel()
        self.palette_dock = QDockWidget("Controls", self)
        self.palette_dock.setWidget(self.palette)
        self.palette_dock.setAllowedAreas(Qt.LeftDockWidgetArea | Qt.RightDockWidgetArea)
        self.palette_dock.setFeatures(QDockWidget.DockWidgetMovable)
        self.addDockWidget(Qt.LeftDockWidgetArea, self.palette_dock)

        self.palette.addRoomRequested.connect(self._add_room)
        self.palette.addFurnitureRequested.connect(self._add_furniture)
        self.palette.deleteRoomRequested.connect(lambda: self._apply(self.scene.delete_selected_room()))
        self.palette.deleteFurnitureRequested.connect(lambda: self._apply(self.scene.delete_selected_furniture()))
        self.palette.rotateRequested.connect(lambda: self._apply(self.scene.rotate_selected_furniture()))
        self.palette.saveRequested.connect(self._save_plan_dialog)
        self.palette.loadRequested.connect(self._open_plan_dialog)
        self.view.selectionChanged.connect(self._update_status)

        self._build_toolbar()
        self.setStatusBar(QStatusBar(self))
        self.lbl_info = QLabel()
        self.statusBar().addPermanentWidget(self.lbl_info)
        self._update_status()

    def _build_toolbar(self):
        tb = QToolBar("Plan", self)
        tb.setMovable(False)
        tb.setToolButtonStyle(Qt.ToolButtonTextBesideIcon)
        self.addToolBar(Qt.TopToolBarArea, tb)
        style = self.style()

        self.act_new = QAction(style.standardIcon(QStyle.SP_FileIcon), "New", self)
        self.act_new.setShortcut(QKeySequence("Ctrl+N"))
        self.act_new.triggered.connect(self._new_plan)

        self.act_open = QAction(style.standardIcon(QStyle.SP_DirOpenIcon), "Load Plan…", self)
        self.act_open.setShortcut(QKeySequence("Ctrl+O"))
        self.act_open.triggered.connect(self._open_plan_dialog)

        self.act_save = QAction(style.standardIcon(QStyle.SP_DialogSaveButton), "Save Plan…", self)
        self.act_save.setShortcut(QKeySequence("Ctrl+S"))
        self.act_save.triggered.connect(self._save_plan_dialog)

        self.act_rotate = QAction(style.standardIcon(QStyle.SP_BrowserReload), "Rotate", self)
        self.act_rotate.setShortcut(QKeySequence("R"))
        self.act_rotate.triggered.connect(lambda: self._apply(self.scene.rotate_selected_furniture()))

        self.act_delete = QAction(style.standardIcon(QStyle.SP_TrashIcon), "Delete", self)
        self.act_delete.setShortcut(QKeySequence("Del"))
        self.act_delete.triggered.connect(self._delete_selection)

        self.recent_menu = QMenu("Recent", self)
        self.recent_menu.aboutToShow.connect(self._fill_recent_menu)
        self.act_recent = self.recent_menu.menuAction()
        self.act_recent.setIcon(style.standardIcon(QStyle.SP_FileDialogDetailedView))

        for act in (self.act_new, self.act_open, self.act_save, self.act_recent):
            tb.addAction(act)
        tb.addSeparator()
        tb.addAction(self.act_rotate)
        tb.addAction(self.act_delete)

    # ---- editing ----
    def _add_room(self, w_text: str, h_text: str, room_type: str):
        try:
            room = self.factory.create_room(w_text, h_text, room_type)
        except InvalidDimension:
            QMessageBox.warning(self, "Add Room", "Enter valid dimensions.")
            return
        self._apply(self.scene.add_room(room))

    def _add_furniture(self, type_: str):
        self._apply(self.scene.add_furniture(self.factory.create_furniture(type_)))

    def _delete_selection(self):
        # furniture first: it is drawn above the room it sits in
        if self.scene.selected_furniture is not None:
            self._apply(self.scene.delete_selected_furniture())
        else:
            self._apply(self.scene.delete_selected_room())

    def _apply(self, outcome):
        self.view.report(outcome)
        self._update_status()

    def _new_plan(self):
        self.scene.replace_all([], [])
        self._status("New plan.")

    # ---- files ----
    def _last_dir(self) -> str:
        return self.settings.value("last_dir", "", str)

    def _push_recent(self, path: str):
        files = self.settings.value("recent", [], list)
        if path in files: files.remove(path)
        files.insert(0, path)
        self.settings.setValue("recent", files[:RECENT_MAX])
        self.settings.setValue("last_dir", os.path.dirname(path))

    def _fill_recent_menu(self):
        self.recent_menu.clear()
        files = [p for p in self.settings.value("recent", [], list) if os.path.exists(p)]
        if not files:
            self.recent_menu.addAction("(empty)").setEnabled(False)
            return
        for p in files:
            act = self.recent_menu.addAction(os.path.basename(p))
            act.setToolTip(p)
            act.triggered.connect(lambda _=False, path=p: self._load_plan(path))

    def _open_plan_dialog(self):
        path, _ = QFileDialog.getOpenFileName(self, "Load Plan", self._last_dir(), PLAN_FILTER)
        if not path:
            return
        self._load_plan(path)

    def _load_plan(self, path: str):
        try:
            self.state.load(path)
        except PersistenceError as e:
            QMessageBox.critical(self, "Load Plan", f"Failed to load the plan.\n{e}")
            return
        self._push_recent(path)
        self._update_status()
        QMessageBox.information(self, "Load Plan", "Plan loaded successfully!")

    def _save_plan_dialog(self):
        path, _ = QFileDialog.getSaveFileName(self, "Save Plan",
                                              os.path.join(self._last_dir(), "plan.json"), PLAN_FILTER)
        if not path:
            return
        path = _ensure_ext(path, ".json")
        try:
            self.state.save(path)
        except PersistenceError as e:
            QMessageBox.critical(self, "Save Plan", f"Failed to save the plan.\n{e}")
            return
        self._push_recent(path)
        QMessageBox.information(self, "Save Plan", "Plan saved successfully!")

    # ---- status ----
    def _status(self, text: str):
        self.statusBar().showMessage(text, 3000)

    def _update_status(self):
        sel = []
        if self.scene.selected_room is not None:
            sel.append(self.scene.selected_room.type.title())
        if self.scene.selected_furniture is not None:
            sel.append(self.scene.selected_furniture.type.replace("_", " "))
        self.lbl_info.setText(
            f"Rooms: {len(self.scene.rooms)} | Furniture: {len(self.scene.furniture)} | "
            f"Selected: {', '.join(sel) or '—'} | Canvas: {int(CANVAS_W)}×{int(CANVAS_H)} px"
        )


def main():
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO),
                        format="%(levelname)s: %(message)s")
    app = QApplication(sys.argv)
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
