"""
Coordinate Primitives
=====================
Points in the two coordinate systems of the visualizer.

- Grid space: continuous, origin chosen by the user, Y grows upward.
- Pixel space: the drawing surface, origin at the top-left corner, Y grows downward.
"""
from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class GridPoint:
    """A continuous coordinate in grid units."""
    x: float
    y: float

    def snapped(self) -> GridPoint:
        """Return the nearest integer grid point (halves round up)."""
        return GridPoint(float(math.floor(self.x + 0.5)), float(math.floor(self.y + 0.5)))

    def distance_to(self, other: GridPoint) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class PixelPoint:
    """A coordinate on the drawing surface in device pixels."""
    x: float
    y: float
