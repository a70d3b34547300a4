from __future__ import annotations

from typing import Iterator

from rastervis.model.algorithms._common import fmt, require_finite, round_half_up
from rastervis.model.events import PlotEvent, TableRow, pixels
from rastervis.model.inputs import InputKind, LineParams, slope_readout
from rastervis.model.sources import register_source

HEADERS = ("Step", "x", "y", "Plot")


@register_source("dda", label="DDA Line", kind=InputKind.LINE)
def dda_line(params: LineParams) -> Iterator[PlotEvent]:
    require_finite(x1=params.x1, y1=params.y1, x2=params.x2, y2=params.y2)
    return _dda_events(params)


def _dda_events(params: LineParams) -> Iterator[PlotEvent]:
    dx = params.x2 - params.x1
    dy = params.y2 - params.y1
    steps = round_half_up(max(abs(dx), abs(dy)))
    x_inc = dx / steps if steps else 0.0
    y_inc = dy / steps if steps else 0.0

    x, y = params.x1, params.y1
    for i in range(steps + 1):
        px, py = round_half_up(x), round_half_up(y)
        yield PlotEvent(
            plotted=pixels((px, py)),
            table=TableRow(HEADERS, (str(i), fmt(x), fmt(y), f"({px}, {py})")),
            info={
                "dx": fmt(dx),
                "dy": fmt(dy),
                "steps": str(steps),
                "x_inc": f"{x_inc:.3f}",
                "y_inc": f"{y_inc:.3f}",
                "slope": slope_readout(params),
            },
        )
        x += x_inc
        y += y_inc
