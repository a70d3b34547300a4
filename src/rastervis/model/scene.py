"""
Plotted Scene
Retained record of what playback has drawn, kept in grid space so it can be
repainted after any pan, zoom or resize.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from rastervis.model.events import PlottedPixel
from rastervis.model.geometry import GridPoint


class PlotSink(Protocol):
    """What the playback controller draws into."""
    def clear(self) -> None: ...
    def plot_pixel(self, pixel: PlottedPixel) -> None: ...
    def plot_arrow(self, start: GridPoint, end: GridPoint) -> None: ...


@dataclass
class Arrow:
    start: GridPoint
    end: GridPoint


@dataclass
class Scene:
    pixels: list[PlottedPixel] = field(default_factory=list)
    arrows: list[Arrow] = field(default_factory=list)

    def clear(self) -> None:
        self.pixels.clear()
        self.arrows.clear()

    def plot_pixel(self, pixel: PlottedPixel) -> None:
        self.pixels.append(pixel)

    def plot_arrow(self, start: GridPoint, end: GridPoint) -> None:
        self.arrows.append(Arrow(start, end))
