"""
Algorithm Inputs
================
Parameter sets for the two families of algorithms and the helpers built on them.

Classes:
    InputKind: Which parameter set an algorithm consumes.
    LineParams: Two endpoints.
    CircleParams: Center and radius.
    PointPicker: Turns successive canvas clicks into parameter updates.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Union

from rastervis import config
from rastervis.model.geometry import GridPoint

SLOPE_INFINITE = "Infinity"
SLOPE_NONE = "—"


class InputKind(StrEnum):
    LINE = "line"
    CIRCLE = "circle"


@dataclass(frozen=True)
class LineParams:
    x1: float = config.DEFAULT_LINE[0]
    y1: float = config.DEFAULT_LINE[1]
    x2: float = config.DEFAULT_LINE[2]
    y2: float = config.DEFAULT_LINE[3]

    @property
    def start(self) -> GridPoint:
        return GridPoint(self.x1, self.y1)

    @property
    def end(self) -> GridPoint:
        return GridPoint(self.x2, self.y2)


@dataclass(frozen=True)
class CircleParams:
    xc: float = config.DEFAULT_CIRCLE[0]
    yc: float = config.DEFAULT_CIRCLE[1]
    r: float = config.DEFAULT_CIRCLE[2]

    @property
    def center(self) -> GridPoint:
        return GridPoint(self.xc, self.yc)


AlgorithmParams = Union[LineParams, CircleParams]


def slope_readout(params: LineParams) -> str:
    """
    Slope of the segment for display.

    Returns:
        dy/dx with three decimals, "0" for a zero-length segment and
        "Infinity" for a vertical one.
    """
    dx = params.x2 - params.x1
    dy = params.y2 - params.y1
    if dx != 0:
        return f"{dy / dx:.3f}"
    return "0" if dy == 0 else SLOPE_INFINITE


class PointPicker:
    """
    Two-click input picking.

    Line: first click sets the start point, second click the end point.
    Circle: first click sets the center, second click sets the radius as the
    distance from the center.
    """
    def __init__(self) -> None:
        self._pending_second = False

    @property
    def awaiting_second(self) -> bool:
        return self._pending_second

    def cancel(self) -> None:
        self._pending_second = False

    def pick_line(self, params: LineParams, point: GridPoint) -> LineParams:
        if not self._pending_second:
            self._pending_second = True
            return replace(params, x1=point.x, y1=point.y)
        self._pending_second = False
        return replace(params, x2=point.x, y2=point.y)

    def pick_circle(self, params: CircleParams, point: GridPoint) -> CircleParams:
        if not self._pending_second:
            self._pending_second = True
            return replace(params, xc=point.x, yc=point.y)
        self._pending_second = False
        return replace(params, r=params.center.distance_to(point))
