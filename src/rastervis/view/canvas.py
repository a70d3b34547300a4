"""
Grid Canvas
===========
The interactive drawing surface.

- left-drag pans the grid,
- the mouse wheel zooms around the cursor,
- a left click (without dragging) picks a grid point for the inputs,
- hovering shows a ghost pixel and reports the grid coordinate.

The canvas owns the `Viewport`. The plotted `Scene` is shared with the
playback controller; the canvas only reads it when painting.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QResizeEvent, QWheelEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from rastervis import config
from rastervis.model.geometry import GridPoint
from rastervis.model.inputs import CircleParams, InputKind, LineParams
from rastervis.model.scene import Scene
from rastervis.model.viewport import OriginMode, Viewport
from rastervis.view.qt_painter import QtPainter
from rastervis.view.renderer import GridRenderer, InputOverlay

logger = logging.getLogger(__name__)


class GridCanvas(QWidget):
    grid_clicked = Signal(object)      # GridPoint (already snapped if snapping is on)
    hover_moved = Signal(object)       # GridPoint
    scale_changed = Signal(float)

    def __init__(self, scene: Scene, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(config.CANVAS_MIN_WIDTH, config.CANVAS_HEIGHT)
        self.setMaximumWidth(config.CANVAS_MAX_WIDTH)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMouseTracking(True)

        self.scene = scene
        self.viewport = Viewport(self.width(), self.height())
        self.renderer = GridRenderer()
        self.overlay = InputOverlay()

        self._dragging = False
        self._press_pos: QPointF | None = None
        self._last_drag: QPointF | None = None
        self._moved_px = 0.0

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_snap(self, enabled: bool) -> None:
        self.overlay.snap = bool(enabled)
        self.update()

    def set_inputs(self, kind: InputKind, line: LineParams, circle: CircleParams) -> None:
        self.overlay.kind = kind
        self.overlay.line = line
        self.overlay.circle = circle
        self.update()

    def set_origin_mode(self, mode: OriginMode) -> None:
        self.viewport.set_origin_mode(mode)
        self.update()

    def set_scale(self, scale: float) -> None:
        if scale == self.viewport.scale:
            return
        self.viewport.set_scale(scale)
        self.scale_changed.emit(self.viewport.scale)
        self.update()

    def export_png(self, path: str) -> bool:
        ok = self.grab().save(path, "PNG")
        if ok:
            logger.info(f"Canvas exported to {path}")
        else:
            logger.error(f"Could not export canvas to {path}")
        return ok

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            self.renderer.render(QtPainter(painter), self.viewport, self.scene, self.overlay)
        finally:
            painter.end()

    def resizeEvent(self, event: QResizeEvent) -> None:
        self.viewport.resize(event.size().width(), event.size().height())
        super().resizeEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        delta = event.angleDelta().y()
        if delta == 0:
            event.ignore()
            return
        pos = event.position()
        self.viewport.zoom_at_cursor(pos.x(), pos.y(), 1 if delta > 0 else -1)
        self.scale_changed.emit(self.viewport.scale)
        self.update()
        event.accept()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return
        self._dragging = True
        self._press_pos = event.position()
        self._last_drag = event.position()
        self._moved_px = 0.0

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        if self._dragging and self._last_drag is not None:
            dx = pos.x() - self._last_drag.x()
            dy = pos.y() - self._last_drag.y()
            self._moved_px += abs(dx) + abs(dy)
            self._last_drag = pos
            self.viewport.pan_by(dx, dy)

        g = self.viewport.to_grid(pos.x(), pos.y())
        self.overlay.hover = g
        self.hover_moved.emit(g)
        self.update()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton or not self._dragging:
            return
        self._dragging = False
        if self._moved_px <= config.DRAG_CLICK_TOLERANCE_PX:
            pos = event.position()
            self.grid_clicked.emit(self._pick(pos.x(), pos.y()))

    def leaveEvent(self, event) -> None:
        self.overlay.hover = None
        self.update()
        super().leaveEvent(event)

    def _pick(self, px: float, py: float) -> GridPoint:
        g = self.viewport.to_grid(px, py)
        return g.snapped() if self.overlay.snap else g
