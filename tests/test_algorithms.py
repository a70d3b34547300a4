from __future__ import annotations

import math

import pytest

from rastervis.model.algorithms._common import fmt, round_half_up
from rastervis.model.algorithms.bresenham_circle import bresenham_circle
from rastervis.model.algorithms.bresenham_line import bresenham_line
from rastervis.model.algorithms.dda import dda_line
from rastervis.model.geometry import GridPoint
from rastervis.model.inputs import CircleParams, LineParams

LINES = [
    LineParams(0, 0, 10, 6),
    LineParams(3, 7, -4, -2),
    LineParams(-5, 2, 5, 2),
    LineParams(1, -6, 1, 6),
    LineParams(0, 0, -8, 8),
]


def points_of(events) -> list[GridPoint]:
    return [pixel.point for event in events for pixel in event.plotted]


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(-0.4) == 0


def test_fmt() -> None:
    assert fmt(4.0) == "4"
    assert fmt(0.125) == "0.13"
    assert fmt(2.675) == "2.68"
    assert fmt(-0.125) == "-0.13"
    assert fmt(0.6) == "0.60"


@pytest.mark.parametrize("factory", [dda_line, bresenham_line])
@pytest.mark.parametrize("params", LINES)
def test_lines_hit_both_endpoints(factory, params: LineParams) -> None:
    points = points_of(factory(params))
    assert points[0] == GridPoint(params.x1, params.y1)
    assert points[-1] == GridPoint(params.x2, params.y2)
    assert len(points) == max(abs(params.x2 - params.x1), abs(params.y2 - params.y1)) + 1


@pytest.mark.parametrize("factory", [dda_line, bresenham_line])
@pytest.mark.parametrize("params", LINES)
def test_lines_are_connected(factory, params: LineParams) -> None:
    points = points_of(factory(params))
    for a, b in zip(points, points[1:]):
        assert max(abs(a.x - b.x), abs(a.y - b.y)) == 1


@pytest.mark.parametrize("factory", [dda_line, bresenham_line])
def test_zero_length_line_plots_one_pixel(factory) -> None:
    events = list(factory(LineParams(4, -2, 4, -2)))
    assert len(events) == 1
    assert points_of(events) == [GridPoint(4, -2)]


def test_dda_info_and_table() -> None:
    first = next(iter(dda_line(LineParams(0, 0, 10, 6))))
    assert first.info["steps"] == "10"
    assert first.info["slope"] == "0.600"
    assert first.table.headers == ("Step", "x", "y", "Plot")
    assert first.table.values == ("0", "0", "0", "(0, 0)")


def test_bresenham_line_decision_parameter() -> None:
    events = list(bresenham_line(LineParams(0, 0, 10, 6)))
    assert events[0].info["p"] == str(2 * 6 - 10)
    assert [e.table.values[0] for e in events] == [str(i) for i in range(11)]


def test_factories_validate_eagerly() -> None:
    with pytest.raises(ValueError):
        dda_line(LineParams(0, 0, float("inf"), 0))
    with pytest.raises(ValueError):
        bresenham_circle(CircleParams(0, 0, -1))


def test_circle_zero_radius_plots_center_once() -> None:
    events = list(bresenham_circle(CircleParams(3, 4, 0)))
    assert len(events) == 1
    assert points_of(events) == [GridPoint(3, 4)]


@pytest.mark.parametrize("r", [1, 5, 8, 13])
def test_circle_points_lie_near_radius(r: int) -> None:
    points = points_of(bresenham_circle(CircleParams(2, -1, r)))
    assert points
    for p in points:
        assert abs(math.hypot(p.x - 2, p.y + 1) - r) < 1


def test_circle_event_groups_symmetric_points() -> None:
    events = list(bresenham_circle(CircleParams(0, 0, 8)))
    first = events[0]
    assert {(p.point.x, p.point.y) for p in first.plotted} == {(0, 8), (8, 0), (0, -8), (-8, 0)}
    assert len(first.plotted) == 4
    assert all(len(e.plotted) <= 8 for e in events)
    assert first.table.headers == ("Step", "x", "y", "d")
    assert first.info["d"] == str(3 - 2 * 8)
