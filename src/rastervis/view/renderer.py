"""
Grid Renderer
=============
Paints the grid, axes, tick labels, the static inputs and the plotted scene.

Why is this file needed?
------------------------
The renderer only *consumes* state: the viewport (where things are), the
tick policy (which labels to show), the scene (what playback has drawn) and
the input overlay. It talks to a `Painter` with primitive, role-tagged
requests, so it does not depend on Qt and can be tested with a recording fake.
The Qt implementation of `Painter` lives in `view/qt_painter.py`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import math
from typing import Protocol

from rastervis.model.geometry import GridPoint, PixelPoint
from rastervis.model.inputs import CircleParams, InputKind, LineParams
from rastervis.model.scene import Scene
from rastervis.model.ticks import label_visible, tick_step_units, tick_values
from rastervis.model.viewport import Viewport

TICK_HALF_LENGTH = 6.0
GHOST_SIZE = 4.0


class DrawRole(StrEnum):
    GRID_LINE = "grid_line"
    AXIS = "axis"
    TICK = "tick"
    LABEL = "label"
    ENDPOINT = "endpoint"
    INPUT_OUTLINE = "input_outline"
    RADIUS_GUIDE = "radius_guide"
    PLOTTED_PIXEL = "plotted_pixel"
    ARROW = "arrow"
    GHOST = "ghost"


class Painter(Protocol):
    def clear(self, width: int, height: int) -> None: ...
    def line(self, start: PixelPoint, end: PixelPoint, role: DrawRole) -> None: ...
    def marker(self, center: PixelPoint, size: float, role: DrawRole, color: str | None = None) -> None: ...
    def circle(self, center: PixelPoint, radius: float, role: DrawRole) -> None: ...
    def arrow(self, start: PixelPoint, end: PixelPoint, role: DrawRole) -> None: ...
    def text(self, anchor: PixelPoint, text: str, role: DrawRole, size: float) -> None: ...


@dataclass
class InputOverlay:
    """The user inputs drawn underneath the plotted pixels."""
    kind: InputKind = InputKind.LINE
    line: LineParams = field(default_factory=LineParams)
    circle: CircleParams = field(default_factory=CircleParams)
    hover: GridPoint | None = None
    snap: bool = False


def pixel_marker_size(scale: float) -> float:
    return max(2.0, min(6.0, scale / 4))


def endpoint_radius(scale: float) -> float:
    return max(3.0, min(6.0, scale / 4))


def label_font_size(scale: float) -> float:
    return max(10.0, min(14.0, scale / 1.8))


class GridRenderer:
    def __init__(self, suppress_zero_y_label: bool = True) -> None:
        self.suppress_zero_y_label = suppress_zero_y_label

    def render(self, painter: Painter, viewport: Viewport, scene: Scene, overlay: InputOverlay) -> None:
        width, height = viewport.size
        painter.clear(width, height)
        self._draw_grid(painter, viewport)
        self._draw_axes(painter, viewport)
        self._draw_ticks(painter, viewport)
        self._draw_inputs(painter, viewport, overlay)
        self._draw_scene(painter, viewport, scene)
        self._draw_hover(painter, viewport, overlay)

    # ---- background ----

    @staticmethod
    def _draw_grid(painter: Painter, viewport: Viewport) -> None:
        width, height = viewport.size
        x_min, x_max, y_min, y_max = viewport.visible_bounds()
        for gx in tick_values(x_min, x_max, 1):
            px = viewport.to_pixel(float(gx), 0.0).x
            painter.line(PixelPoint(px, 0.0), PixelPoint(px, float(height)), DrawRole.GRID_LINE)
        for gy in tick_values(y_min, y_max, 1):
            py = viewport.to_pixel(0.0, float(gy)).y
            painter.line(PixelPoint(0.0, py), PixelPoint(float(width), py), DrawRole.GRID_LINE)

    @staticmethod
    def _draw_axes(painter: Painter, viewport: Viewport) -> None:
        width, height = viewport.size
        origin = viewport.origin
        painter.line(PixelPoint(0.0, origin.y), PixelPoint(float(width), origin.y), DrawRole.AXIS)
        painter.line(PixelPoint(origin.x, 0.0), PixelPoint(origin.x, float(height)), DrawRole.AXIS)

    def _draw_ticks(self, painter: Painter, viewport: Viewport) -> None:
        origin = viewport.origin
        step = tick_step_units(viewport.scale)
        font = label_font_size(viewport.scale)
        x_min, x_max, y_min, y_max = viewport.visible_bounds()

        for gx in tick_values(x_min, x_max, step):
            px = viewport.to_pixel(float(gx), 0.0).x
            painter.line(
                PixelPoint(px, origin.y - TICK_HALF_LENGTH),
                PixelPoint(px, origin.y + TICK_HALF_LENGTH),
                DrawRole.TICK,
            )
            painter.text(PixelPoint(px - 8, origin.y + 16), str(int(gx)), DrawRole.LABEL, font)

        for gy in tick_values(y_min, y_max, step):
            py = viewport.to_pixel(0.0, float(gy)).y
            painter.line(
                PixelPoint(origin.x - TICK_HALF_LENGTH, py),
                PixelPoint(origin.x + TICK_HALF_LENGTH, py),
                DrawRole.TICK,
            )
            if label_visible(int(gy), "y", viewport.origin_mode, self.suppress_zero_y_label):
                painter.text(PixelPoint(origin.x + 8, py + 4), str(int(gy)), DrawRole.LABEL, font)

    # ---- inputs ----

    @staticmethod
    def _draw_inputs(painter: Painter, viewport: Viewport, overlay: InputOverlay) -> None:
        radius = endpoint_radius(viewport.scale)

        if overlay.kind == InputKind.CIRCLE:
            c = overlay.circle
            center = viewport.to_pixel(c.xc, c.yc)
            painter.marker(center, radius, DrawRole.ENDPOINT)
            if math.isfinite(c.r):
                painter.circle(center, max(2.0, c.r * viewport.scale), DrawRole.INPUT_OUTLINE)
                painter.line(center, viewport.to_pixel(c.xc + c.r, c.yc), DrawRole.RADIUS_GUIDE)
            return

        line = overlay.line
        painter.marker(viewport.to_pixel(line.x1, line.y1), radius, DrawRole.ENDPOINT)
        painter.marker(viewport.to_pixel(line.x2, line.y2), radius, DrawRole.ENDPOINT)

    # ---- playback output ----

    @staticmethod
    def _draw_scene(painter: Painter, viewport: Viewport, scene: Scene) -> None:
        size = pixel_marker_size(viewport.scale)
        for pixel in scene.pixels:
            painter.marker(viewport.to_pixel(pixel.point.x, pixel.point.y), size, DrawRole.PLOTTED_PIXEL, pixel.color)
        for arrow in scene.arrows:
            painter.arrow(
                viewport.to_pixel(arrow.start.x, arrow.start.y),
                viewport.to_pixel(arrow.end.x, arrow.end.y),
                DrawRole.ARROW,
            )

    @staticmethod
    def _draw_hover(painter: Painter, viewport: Viewport, overlay: InputOverlay) -> None:
        if overlay.hover is None:
            return
        point = overlay.hover.snapped() if overlay.snap else overlay.hover
        painter.marker(viewport.to_pixel(point.x, point.y), GHOST_SIZE, DrawRole.GHOST)
