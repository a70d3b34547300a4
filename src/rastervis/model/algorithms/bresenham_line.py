from __future__ import annotations

from typing import Iterator

from rastervis.model.algorithms._common import require_finite, round_half_up
from rastervis.model.events import PlotEvent, TableRow, pixels
from rastervis.model.inputs import InputKind, LineParams, slope_readout
from rastervis.model.sources import register_source

HEADERS = ("Step", "x", "y", "p")


@register_source("bresenham_line", label="Bresenham Line", kind=InputKind.LINE)
def bresenham_line(params: LineParams) -> Iterator[PlotEvent]:
    require_finite(x1=params.x1, y1=params.y1, x2=params.x2, y2=params.y2)
    return _bresenham_events(params)


def _bresenham_events(params: LineParams) -> Iterator[PlotEvent]:
    """Integer Bresenham over all octants; endpoints are rounded to pixels first."""
    x, y = round_half_up(params.x1), round_half_up(params.y1)
    x_end, y_end = round_half_up(params.x2), round_half_up(params.y2)

    dx = abs(x_end - x)
    dy = abs(y_end - y)
    sx = 1 if x < x_end else -1
    sy = 1 if y < y_end else -1
    x_major = dx >= dy

    # decision parameter along the major axis
    p = 2 * dy - dx if x_major else 2 * dx - dy
    info_base = {"dx": str(dx), "dy": str(dy), "slope": slope_readout(params)}

    n_steps = max(dx, dy)
    for step in range(n_steps + 1):
        yield PlotEvent(
            plotted=pixels((x, y)),
            table=TableRow(HEADERS, (str(step), str(x), str(y), str(p))),
            info={**info_base, "p": str(p)},
        )
        if step == n_steps:
            return
        if x_major:
            if p >= 0:
                y += sy
                p -= 2 * dx
            x += sx
            p += 2 * dy
        else:
            if p >= 0:
                x += sx
                p -= 2 * dy
            y += sy
            p += 2 * dx
