"""
Viewport Transform
==================
Bidirectional mapping between grid space and pixel space.

Why is this file needed?
------------------------
1. Consistency: Every click, hover, tick label and plotted pixel goes through
   the same two functions (`to_grid` / `to_pixel`), so input and output can
   never disagree about where a grid point is.
2. Invariant: The origin is derived state (`base origin of the mode + pan`).
   It is recomputed inside every mutator, so no caller can observe a stale
   origin.

Classes:
    OriginMode: Where the logical (0, 0) sits on the canvas.
    Viewport: Scale, pan, origin mode and canvas size, plus the transform.
"""
from __future__ import annotations

from enum import StrEnum
import logging

from rastervis import config
from rastervis.model.geometry import GridPoint, PixelPoint

logger = logging.getLogger(__name__)


class OriginMode(StrEnum):
    TOP_LEFT = "top_left"
    CENTERED = "centered"


def clamp_scale(value: float) -> float:
    return max(config.SCALE_MIN, min(config.SCALE_MAX, float(value)))


class Viewport:
    """
    Pan/zoom state of the pixel grid.

    `scale` is in pixels per grid unit, `pan` is a pixel offset added to the
    base origin of the current `origin_mode`.
    """
    def __init__(
        self,
        width: int = config.CANVAS_MIN_WIDTH,
        height: int = config.CANVAS_HEIGHT,
        scale: float = config.DEFAULT_SCALE,
        origin_mode: OriginMode = OriginMode.CENTERED,
    ) -> None:
        self._width: int = max(1, int(width))
        self._height: int = max(1, int(height))
        self._scale: float = clamp_scale(scale)
        self._origin_mode: OriginMode = OriginMode(origin_mode)
        self._pan_x: float = 0.0
        self._pan_y: float = 0.0
        self._origin: PixelPoint = PixelPoint(0.0, 0.0)
        self._recompute_origin()

    # ------------------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------------------

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def origin_mode(self) -> OriginMode:
        return self._origin_mode

    @property
    def pan(self) -> tuple[float, float]:
        return self._pan_x, self._pan_y

    @property
    def origin(self) -> PixelPoint:
        """Pixel position of grid (0, 0)."""
        return self._origin

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def base_origin(self) -> PixelPoint:
        if self._origin_mode == OriginMode.TOP_LEFT:
            return PixelPoint(0.0, 0.0)
        return PixelPoint(self._width / 2, self._height / 2)

    def _recompute_origin(self) -> None:
        base = self.base_origin()
        self._origin = PixelPoint(base.x + self._pan_x, base.y + self._pan_y)

    # ------------------------------------------------------------------------------
    # Transform
    # ------------------------------------------------------------------------------

    def to_grid(self, px: float, py: float) -> GridPoint:
        """Pixel -> grid. No snapping is applied here."""
        return GridPoint(
            (px - self._origin.x) / self._scale,
            (self._origin.y - py) / self._scale,
        )

    def to_pixel(self, gx: float, gy: float) -> PixelPoint:
        """Grid -> pixel, the exact inverse of `to_grid`."""
        return PixelPoint(
            self._origin.x + gx * self._scale,
            self._origin.y - gy * self._scale,
        )

    def visible_bounds(self) -> tuple[float, float, float, float]:
        """
        Grid-space rectangle covered by the canvas.

        Returns:
            (x_min, x_max, y_min, y_max)
        """
        top_left = self.to_grid(0.0, 0.0)
        bottom_right = self.to_grid(float(self._width), float(self._height))
        return top_left.x, bottom_right.x, bottom_right.y, top_left.y

    # ------------------------------------------------------------------------------
    # Mutators (each one recomputes the origin)
    # ------------------------------------------------------------------------------

    def resize(self, width: int, height: int) -> None:
        self._width = max(1, int(width))
        self._height = max(1, int(height))
        self._recompute_origin()

    def set_origin_mode(self, mode: OriginMode) -> None:
        """Switch origin mode; the pan offset is discarded."""
        self._origin_mode = OriginMode(mode)
        self._pan_x = 0.0
        self._pan_y = 0.0
        self._recompute_origin()
        logger.debug(f"Origin mode set to {self._origin_mode}, origin={self._origin}")

    def set_scale(self, value: float) -> None:
        """Set the scale directly (zoom slider). The origin does not move."""
        self._scale = clamp_scale(value)
        self._recompute_origin()

    def pan_by(self, dx: float, dy: float) -> None:
        """Shift the grid by a pixel delta."""
        self._pan_x += dx
        self._pan_y += dy
        self._recompute_origin()

    def zoom_at_cursor(self, px: float, py: float, direction: int) -> None:
        """
        Zoom in (direction > 0) or out (direction < 0) by one step, keeping the
        grid point under the cursor at the same pixel.

        The pan correction is measured with the new scale and the old pan, and
        only then applied.
        """
        if direction == 0:
            return
        before = self.to_grid(px, py)
        step = config.ZOOM_STEP if direction > 0 else -config.ZOOM_STEP
        self._scale = clamp_scale(self._scale + step)
        self._recompute_origin()

        after = self.to_grid(px, py)
        self._pan_x += (after.x - before.x) * self._scale
        self._pan_y += (before.y - after.y) * self._scale
        self._recompute_origin()
