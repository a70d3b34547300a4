from __future__ import annotations

import pytest

from rastervis.model.geometry import GridPoint
from rastervis.model.inputs import (
    SLOPE_INFINITE, CircleParams, LineParams, PointPicker, slope_readout,
)


def test_vertical_line_slope_is_infinity() -> None:
    assert slope_readout(LineParams(2, 3, 2, 7)) == SLOPE_INFINITE == "Infinity"


def test_zero_length_slope_is_zero() -> None:
    assert slope_readout(LineParams(4, 4, 4, 4)) == "0"


@pytest.mark.parametrize(
    "params, expected",
    [(LineParams(0, 0, 10, 6), "0.600"), (LineParams(0, 0, -3, 1), "-0.333"), (LineParams(1, 1, 5, 1), "0.000")],
)
def test_slope_three_decimals(params: LineParams, expected: str) -> None:
    assert slope_readout(params) == expected


def test_snapped_rounds_halves_up() -> None:
    assert GridPoint(2.5, -2.5).snapped() == GridPoint(3.0, -2.0)
    assert GridPoint(1.49, -0.51).snapped() == GridPoint(1.0, -1.0)


def test_picker_line_alternates_endpoints() -> None:
    picker = PointPicker()
    params = LineParams(0, 0, 1, 1)
    params = picker.pick_line(params, GridPoint(5, 6))
    assert params == LineParams(5, 6, 1, 1)
    assert picker.awaiting_second
    params = picker.pick_line(params, GridPoint(-2, 3))
    assert params == LineParams(5, 6, -2, 3)
    assert not picker.awaiting_second


def test_picker_circle_center_then_radius() -> None:
    picker = PointPicker()
    params = picker.pick_circle(CircleParams(0, 0, 1), GridPoint(1, 1))
    assert params == CircleParams(1, 1, 1)
    params = picker.pick_circle(params, GridPoint(4, 5))
    assert params.r == pytest.approx(5.0)
    assert params.center == GridPoint(1, 1)


def test_picker_cancel_restarts_at_first_point() -> None:
    picker = PointPicker()
    picker.pick_line(LineParams(), GridPoint(1, 1))
    picker.cancel()
    assert picker.pick_line(LineParams(0, 0, 9, 9), GridPoint(2, 2)) == LineParams(2, 2, 9, 9)
