"""
Tick/Label Policy
Picks tick spacing from the zoom level and enumerates tick positions.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from rastervis.model.viewport import OriginMode

if TYPE_CHECKING:
    import numpy.typing as npt


def tick_step_units(scale: float) -> int:
    """
    Grid units between labelled ticks for a given scale (pixels per unit).

    Coarse at low zoom to avoid label clutter, every unit at high zoom.
    """
    if scale < 12:
        return 5
    if scale < 18:
        return 4
    if scale < 30:
        return 2
    return 1


def tick_values(lo: float, hi: float, step: int) -> npt.NDArray[np.int_]:
    """
    Integer tick positions from floor(lo) to ceil(hi) inclusive.

    Args:
        lo: Lower visible bound in grid units.
        hi: Upper visible bound in grid units.
        step: Spacing in grid units (> 0).

    Raises:
        ValueError: If step is not positive.
    """
    if step <= 0:
        raise ValueError(f"Tick step must be positive, got {step}.")
    start = math.floor(lo)
    stop = math.ceil(hi)
    return np.arange(start, stop + 1, step, dtype=np.int_)


def label_visible(value: int, axis: str, origin_mode: OriginMode, suppress_zero_y: bool = True) -> bool:
    """
    Whether a tick label is drawn.

    The y label at 0 overlaps the x axis labels in centered mode and is skipped
    there unless `suppress_zero_y` is off.
    """
    if axis == "y" and value == 0 and suppress_zero_y:
        return origin_mode == OriginMode.TOP_LEFT
    return True
