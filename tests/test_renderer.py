from __future__ import annotations

from collections import Counter

import pytest

from rastervis.model.events import PlottedPixel
from rastervis.model.geometry import GridPoint, PixelPoint
from rastervis.model.inputs import CircleParams, InputKind, LineParams
from rastervis.model.scene import Scene
from rastervis.model.viewport import OriginMode, Viewport
from rastervis.view.renderer import (
    DrawRole, GridRenderer, InputOverlay, label_font_size, pixel_marker_size,
)


class RecordingPainter:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def clear(self, width, height):
        self.calls.append(("clear", None, width, height))

    def line(self, start, end, role):
        self.calls.append(("line", role, start, end))

    def marker(self, center, size, role, color=None):
        self.calls.append(("marker", role, center, size, color))

    def circle(self, center, radius, role):
        self.calls.append(("circle", role, center, radius))

    def arrow(self, start, end, role):
        self.calls.append(("arrow", role, start, end))

    def text(self, anchor, text, role, size):
        self.calls.append(("text", role, anchor, text, size))

    def roles(self) -> Counter:
        return Counter(call[1] for call in self.calls)

    def labels(self) -> list[str]:
        return [call[3] for call in self.calls if call[0] == "text"]


def render(viewport: Viewport, scene: Scene | None = None, overlay: InputOverlay | None = None,
           renderer: GridRenderer | None = None) -> RecordingPainter:
    painter = RecordingPainter()
    (renderer or GridRenderer()).render(painter, viewport, scene or Scene(), overlay or InputOverlay())
    return painter


def test_clear_comes_first() -> None:
    painter = render(Viewport(400, 200))
    assert painter.calls[0] == ("clear", None, 400, 200)


def test_one_grid_line_per_unit() -> None:
    painter = render(Viewport(400, 200, scale=20.0))
    # x: -10..10, y: -5..5
    assert painter.roles()[DrawRole.GRID_LINE] == 21 + 11
    assert painter.roles()[DrawRole.AXIS] == 2


def test_tick_spacing_follows_scale() -> None:
    painter = render(Viewport(400, 200, scale=20.0))
    x_labels = [c[3] for c in painter.calls if c[0] == "text" and c[2].y == 100 + 16]
    assert x_labels == [str(v) for v in range(-10, 11, 2)]


def test_zero_y_label_suppressed_when_centered() -> None:
    painter = render(Viewport(400, 200, scale=30.0, origin_mode=OriginMode.CENTERED))
    assert painter.labels().count("0") == 1


def test_zero_y_label_shown_in_top_left_mode() -> None:
    painter = render(Viewport(400, 200, scale=30.0, origin_mode=OriginMode.TOP_LEFT))
    assert painter.labels().count("0") == 2


def test_zero_y_label_option() -> None:
    painter = render(
        Viewport(400, 200, scale=30.0),
        renderer=GridRenderer(suppress_zero_y_label=False),
    )
    assert painter.labels().count("0") == 2


def test_line_inputs_draw_two_endpoints() -> None:
    overlay = InputOverlay(kind=InputKind.LINE, line=LineParams(1, 2, 3, 4))
    vp = Viewport(400, 200, scale=20.0)
    painter = render(vp, overlay=overlay)
    endpoints = [c[2] for c in painter.calls if c[1] == DrawRole.ENDPOINT]
    assert endpoints == [vp.to_pixel(1, 2), vp.to_pixel(3, 4)]
    assert painter.roles()[DrawRole.INPUT_OUTLINE] == 0


def test_circle_inputs_draw_outline_and_guide() -> None:
    vp = Viewport(400, 200, scale=20.0)
    overlay = InputOverlay(kind=InputKind.CIRCLE, circle=CircleParams(1, 1, 3))
    painter = render(vp, overlay=overlay)
    (outline,) = [c for c in painter.calls if c[1] == DrawRole.INPUT_OUTLINE]
    assert outline[2] == vp.to_pixel(1, 1)
    assert outline[3] == pytest.approx(60.0)
    (guide,) = [c for c in painter.calls if c[1] == DrawRole.RADIUS_GUIDE]
    assert guide[3] == vp.to_pixel(4, 1)


def test_zero_radius_outline_stays_visible() -> None:
    overlay = InputOverlay(kind=InputKind.CIRCLE, circle=CircleParams(0, 0, 0))
    painter = render(Viewport(400, 200), overlay=overlay)
    (outline,) = [c for c in painter.calls if c[1] == DrawRole.INPUT_OUTLINE]
    assert outline[3] == 2.0


def test_scene_drawn_after_inputs_and_follows_viewport() -> None:
    vp = Viewport(400, 200, scale=20.0)
    scene = Scene()
    scene.plot_pixel(PlottedPixel(GridPoint(2, 3), "#0a7a0a"))
    scene.plot_arrow(GridPoint(0, 0), GridPoint(2, 3))

    painter = render(vp, scene=scene)
    roles = [c[1] for c in painter.calls]
    assert roles.index(DrawRole.PLOTTED_PIXEL) > roles.index(DrawRole.ENDPOINT)
    (pixel,) = [c for c in painter.calls if c[1] == DrawRole.PLOTTED_PIXEL]
    assert pixel[2] == vp.to_pixel(2, 3)
    assert pixel[4] == "#0a7a0a"

    vp.pan_by(15, -5)
    painter = render(vp, scene=scene)
    (arrow,) = [c for c in painter.calls if c[1] == DrawRole.ARROW]
    assert arrow[2:] == (vp.to_pixel(0, 0), vp.to_pixel(2, 3))


def test_hover_ghost_snaps_when_enabled() -> None:
    vp = Viewport(400, 200, scale=20.0)
    overlay = InputOverlay(hover=GridPoint(1.4, -2.6), snap=True)
    painter = render(vp, overlay=overlay)
    (ghost,) = [c for c in painter.calls if c[1] == DrawRole.GHOST]
    assert ghost[2] == vp.to_pixel(1, -3)

    overlay.snap = False
    painter = render(vp, overlay=overlay)
    (ghost,) = [c for c in painter.calls if c[1] == DrawRole.GHOST]
    assert ghost[2] == PixelPoint(200 + 1.4 * 20, 100 + 2.6 * 20)


@pytest.mark.parametrize("scale, size, font", [(6, 2.0, 10.0), (20, 5.0, 11.11), (120, 6.0, 14.0)])
def test_size_helpers_are_clamped(scale: float, size: float, font: float) -> None:
    assert pixel_marker_size(scale) == pytest.approx(size)
    assert label_font_size(scale) == pytest.approx(font, abs=0.01)
