from __future__ import annotations

import pytest

from rastervis import config
from rastervis.model.geometry import GridPoint, PixelPoint
from rastervis.model.viewport import OriginMode, Viewport

GRID_POINTS = [(0.0, 0.0), (3.5, -2.25), (-17.0, 42.125), (1e3, -1e3), (0.1, 0.2)]


def make_viewport(**kwargs) -> Viewport:
    vp = Viewport(width=800, height=560, **kwargs)
    return vp


@pytest.mark.parametrize("mode", list(OriginMode))
def test_base_origin_per_mode(mode: OriginMode) -> None:
    vp = make_viewport(origin_mode=mode)
    expected = PixelPoint(0.0, 0.0) if mode == OriginMode.TOP_LEFT else PixelPoint(400.0, 280.0)
    assert vp.origin == expected


def test_y_axis_is_inverted() -> None:
    vp = make_viewport()
    above = vp.to_pixel(0.0, 1.0)
    assert above.y < vp.origin.y
    assert vp.to_grid(vp.origin.x, vp.origin.y - vp.scale) == GridPoint(0.0, 1.0)


@pytest.mark.parametrize("gx, gy", GRID_POINTS)
@pytest.mark.parametrize("scale", [6.0, 13.0, 20.0, 77.0, 120.0])
def test_round_trip(gx: float, gy: float, scale: float) -> None:
    vp = make_viewport(scale=scale)
    vp.pan_by(37.5, -12.25)
    p = vp.to_pixel(gx, gy)
    g = vp.to_grid(p.x, p.y)
    assert g.x == pytest.approx(gx, abs=1e-9)
    assert g.y == pytest.approx(gy, abs=1e-9)


def test_round_trip_after_mode_switch_and_resize() -> None:
    vp = make_viewport()
    vp.set_origin_mode(OriginMode.TOP_LEFT)
    vp.resize(1024, 700)
    vp.zoom_at_cursor(311.0, 97.0, +1)
    for gx, gy in GRID_POINTS:
        p = vp.to_pixel(gx, gy)
        g = vp.to_grid(p.x, p.y)
        assert (g.x, g.y) == pytest.approx((gx, gy), abs=1e-9)


def test_transform_does_not_snap() -> None:
    vp = make_viewport()
    g = vp.to_grid(vp.origin.x + 0.3 * vp.scale, vp.origin.y)
    assert g.x == pytest.approx(0.3)


@pytest.mark.parametrize("direction", [+1, -1])
@pytest.mark.parametrize("cursor", [(0.0, 0.0), (123.0, 456.0), (799.0, 1.0), (400.0, 280.0)])
def test_zoom_keeps_cursor_grid_point_fixed(direction: int, cursor: tuple[float, float]) -> None:
    vp = make_viewport()
    vp.pan_by(-55.0, 31.0)
    before = vp.to_grid(*cursor)
    vp.zoom_at_cursor(*cursor, direction)
    after = vp.to_grid(*cursor)
    assert after.x == pytest.approx(before.x, abs=1e-9)
    assert after.y == pytest.approx(before.y, abs=1e-9)


def test_zoom_changes_scale_by_one_step() -> None:
    vp = make_viewport(scale=20.0)
    vp.zoom_at_cursor(10.0, 10.0, +1)
    assert vp.scale == 20.0 + config.ZOOM_STEP
    vp.zoom_at_cursor(10.0, 10.0, -1)
    vp.zoom_at_cursor(10.0, 10.0, -1)
    assert vp.scale == 20.0 - config.ZOOM_STEP


def test_zoom_scale_is_clamped() -> None:
    vp = make_viewport()
    for _ in range(200):
        vp.zoom_at_cursor(200.0, 100.0, +1)
    assert vp.scale == config.SCALE_MAX
    for _ in range(200):
        vp.zoom_at_cursor(200.0, 100.0, -1)
    assert vp.scale == config.SCALE_MIN


def test_zoom_anchor_holds_at_clamp_limit() -> None:
    vp = make_viewport(scale=config.SCALE_MAX)
    before = vp.to_grid(250.0, 75.0)
    vp.zoom_at_cursor(250.0, 75.0, +1)
    after = vp.to_grid(250.0, 75.0)
    assert vp.scale == config.SCALE_MAX
    assert (after.x, after.y) == pytest.approx((before.x, before.y))


def test_set_scale_is_clamped() -> None:
    vp = make_viewport()
    vp.set_scale(1000)
    assert vp.scale == config.SCALE_MAX
    vp.set_scale(0)
    assert vp.scale == config.SCALE_MIN


def test_constructor_clamps_scale() -> None:
    assert Viewport(scale=2.0).scale == config.SCALE_MIN


def test_pan_moves_origin_in_pixels() -> None:
    vp = make_viewport(scale=40.0)
    vp.pan_by(10.0, -5.0)
    assert vp.pan == (10.0, -5.0)
    assert vp.origin == PixelPoint(410.0, 275.0)


def test_origin_mode_switch_resets_pan() -> None:
    vp = make_viewport()
    vp.pan_by(100.0, 50.0)
    vp.zoom_at_cursor(10.0, 10.0, +1)

    vp.set_origin_mode(OriginMode.TOP_LEFT)
    assert vp.pan == (0.0, 0.0)
    assert vp.origin == PixelPoint(0.0, 0.0)

    vp.pan_by(3.0, 4.0)
    vp.set_origin_mode(OriginMode.CENTERED)
    assert vp.pan == (0.0, 0.0)
    assert vp.origin == PixelPoint(400.0, 280.0)


def test_resize_recomputes_centered_origin_and_keeps_pan() -> None:
    vp = make_viewport()
    vp.pan_by(20.0, 10.0)
    vp.resize(1000, 600)
    assert vp.origin == PixelPoint(520.0, 310.0)


def test_visible_bounds() -> None:
    vp = Viewport(width=400, height=200, scale=20.0, origin_mode=OriginMode.CENTERED)
    assert vp.visible_bounds() == pytest.approx((-10.0, 10.0, -5.0, 5.0))
