from __future__ import annotations

from typing import Iterator

from rastervis.model.algorithms._common import require_finite, round_half_up
from rastervis.model.events import PlotEvent, PlottedPixel, TableRow
from rastervis.model.geometry import GridPoint
from rastervis.model.inputs import CircleParams, InputKind
from rastervis.model.sources import register_source

HEADERS = ("Step", "x", "y", "d")
COLOR = "#0a7a0a"


@register_source("bresenham_circle", label="Bresenham Circle", kind=InputKind.CIRCLE)
def bresenham_circle(params: CircleParams) -> Iterator[PlotEvent]:
    require_finite(xc=params.xc, yc=params.yc, r=params.r)
    if params.r < 0:
        raise ValueError(f"radius must be non-negative, got {params.r}")
    return _circle_events(params)


def _octants(xc: int, yc: int, x: int, y: int) -> tuple[PlottedPixel, ...]:
    """The eight symmetric points of (x, y), duplicates removed in order."""
    candidates = (
        (xc + x, yc + y), (xc + y, yc + x), (xc + y, yc - x), (xc + x, yc - y),
        (xc - x, yc - y), (xc - y, yc - x), (xc - y, yc + x), (xc - x, yc + y),
    )
    unique = list(dict.fromkeys(candidates))
    return tuple(PlottedPixel(GridPoint(float(px), float(py)), COLOR) for px, py in unique)


def _circle_events(params: CircleParams) -> Iterator[PlotEvent]:
    xc, yc = round_half_up(params.xc), round_half_up(params.yc)
    r = round_half_up(params.r)

    x, y = 0, r
    d = 3 - 2 * r
    step = 0
    while x <= y:
        yield PlotEvent(
            plotted=_octants(xc, yc, x, y),
            table=TableRow(HEADERS, (str(step), str(x), str(y), str(d))),
            info={"center": f"({xc}, {yc})", "r": str(r), "d": str(d)},
        )
        if d < 0:
            d += 4 * x + 6
        else:
            d += 4 * (x - y) + 10
            y -= 1
        x += 1
        step += 1
