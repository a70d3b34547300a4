"""
Plot Events
One unit of algorithm progress: zero or more pixels plus optional table/info data.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from rastervis.model.geometry import GridPoint


@dataclass(frozen=True)
class PlottedPixel:
    point: GridPoint
    color: str = "black"


@dataclass(frozen=True)
class TableRow:
    """One row of the step log, with the headers it belongs under."""
    headers: tuple[str, ...]
    values: tuple[str, ...]


@dataclass(frozen=True)
class PlotEvent:
    """
    Pixels are kept in the order the algorithm decided them.

    Several pixels in one event are symmetric points produced together; only the
    last one anchors the direction arrow of the next event.
    """
    plotted: tuple[PlottedPixel, ...] = field(default_factory=tuple)
    table: TableRow | None = None
    info: Mapping[str, str] | None = None

    @property
    def last_pixel(self) -> GridPoint | None:
        return self.plotted[-1].point if self.plotted else None


def pixels(*points: tuple[float, float], color: str = "black") -> tuple[PlottedPixel, ...]:
    """Shorthand for building `PlotEvent.plotted` from (x, y) pairs."""
    return tuple(PlottedPixel(GridPoint(float(x), float(y)), color) for x, y in points)
