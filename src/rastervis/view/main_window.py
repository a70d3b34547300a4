"""
Main Application Window
=======================
The primary GUI container: control panel, drawing canvas and step log.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects widget signals to the playback controller and the
   controller's signals back to the widgets. No widget talks to another
   widget directly.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QFileDialog, QMainWindow, QMessageBox, QSplitter

from rastervis import config
from rastervis.app.application import VISIBLE_APP_NAME
from rastervis.controller.playback import PlaybackController, PlaybackState
from rastervis.model.geometry import GridPoint
from rastervis.model.inputs import CircleParams, InputKind, LineParams, PointPicker
from rastervis.model.scene import Scene
from rastervis.model.viewport import OriginMode
from rastervis.view.canvas import GridCanvas
from rastervis.view.panels.controls import ControlPanel
from rastervis.view.panels.step_log import StepLogPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 800)

        self.scene = Scene()
        self.controller = PlaybackController(self.scene, parent=self)
        self.picker = PointPicker()

        # --- Layout: controls | canvas | step log ---
        splitter = QSplitter(Qt.Orientation.Horizontal, self)
        splitter.setChildrenCollapsible(False)
        self.controls = ControlPanel(splitter)
        self.canvas = GridCanvas(self.scene, splitter)
        self.step_log = StepLogPanel(splitter)
        splitter.addWidget(self.controls)
        splitter.addWidget(self.canvas)
        splitter.addWidget(self.step_log)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setStretchFactor(2, 0)
        self.setCentralWidget(splitter)

        self._connect_controls()
        self._connect_canvas()
        self._connect_controller()

        # --- Initial state from the widgets ---
        self.controller.show_arrows = self.controls.chk_arrows.isChecked()
        self.controller.step_delay_ms = self.controls.spin_delay.value()
        self.canvas.set_snap(self.controls.chk_snap.isChecked())
        self.controller.set_line_params(self.controls.line_params())
        self.controller.set_circle_params(self.controls.circle_params())
        self.controller.set_algorithm(self.controls.current_algorithm())
        self._sync_inputs()

    # ------------------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------------------

    def _connect_controls(self) -> None:
        c = self.controls
        c.algorithm_changed.connect(self.on_algorithm_changed)
        c.line_params_changed.connect(self.on_line_params_changed)
        c.circle_params_changed.connect(self.on_circle_params_changed)

        c.play_clicked.connect(self.on_play)
        c.pause_clicked.connect(self.controller.pause)
        c.next_clicked.connect(self.on_next)
        c.reset_clicked.connect(self.controller.reset)
        c.export_clicked.connect(self.on_export)

        c.step_delay_changed.connect(self.on_step_delay_changed)
        c.zoom_changed.connect(self.canvas.set_scale)
        c.snap_toggled.connect(self.canvas.set_snap)
        c.arrows_toggled.connect(self.on_arrows_toggled)
        c.top_left_origin_toggled.connect(self.on_origin_toggled)

    def _connect_canvas(self) -> None:
        self.canvas.grid_clicked.connect(self.on_grid_clicked)
        self.canvas.hover_moved.connect(self.step_log.set_coords)
        self.canvas.scale_changed.connect(self.controls.set_zoom)

    def _connect_controller(self) -> None:
        ctrl = self.controller
        ctrl.scene_changed.connect(self.canvas.update)
        ctrl.table_reset.connect(self.step_log.reset_table)
        ctrl.table_row_added.connect(self.step_log.add_row)
        ctrl.info_changed.connect(self.step_log.set_info)
        ctrl.slope_changed.connect(self.step_log.set_slope)
        ctrl.status_changed.connect(self.step_log.set_status)
        ctrl.status_changed.connect(self.statusBar().showMessage)

    def _sync_inputs(self) -> None:
        self.canvas.set_inputs(
            self.controller.input_kind,
            self.controller.line_params,
            self.controller.circle_params,
        )

    # ------------------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------------------

    @Slot(str)
    def on_algorithm_changed(self, key: str) -> None:
        self.picker.cancel()
        self.controller.set_algorithm(key)
        self._sync_inputs()

    @Slot(object)
    def on_line_params_changed(self, params: LineParams) -> None:
        self.controller.set_line_params(params)
        self._sync_inputs()

    @Slot(object)
    def on_circle_params_changed(self, params: CircleParams) -> None:
        self.controller.set_circle_params(params)
        self._sync_inputs()

    @Slot(object)
    def on_grid_clicked(self, point: GridPoint) -> None:
        if self.controller.input_kind == InputKind.CIRCLE:
            self.controls.set_circle_params(self.picker.pick_circle(self.controller.circle_params, point))
        else:
            self.controls.set_line_params(self.picker.pick_line(self.controller.line_params, point))

    @Slot()
    def on_play(self) -> None:
        # a finished run replays from the start
        if self.controller.state == PlaybackState.FINISHED:
            self.controller.reset()
        self.controller.play()

    @Slot()
    def on_next(self) -> None:
        self.controller.pause()
        self.controller.step()

    @Slot(int)
    def on_step_delay_changed(self, value: int) -> None:
        self.controller.step_delay_ms = value

    @Slot(bool)
    def on_arrows_toggled(self, enabled: bool) -> None:
        self.controller.show_arrows = enabled

    @Slot(bool)
    def on_origin_toggled(self, top_left: bool) -> None:
        self.canvas.set_origin_mode(OriginMode.TOP_LEFT if top_left else OriginMode.CENTERED)

    @Slot()
    def on_export(self) -> None:
        path, _ = QFileDialog.getSaveFileName(
            self,
            self.tr("Export PNG"),
            config.EXPORT_FILENAME,
            self.tr("PNG Image (*.png);;All Files (*)"),
        )
        if not path:
            return
        if not self.canvas.export_png(path):
            logger.warning(f"Export to '{path}' failed")
            QMessageBox.warning(self, self.tr("Export failed"), self.tr("Could not save {path}").format(path=path))
