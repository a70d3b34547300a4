from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (screen convention)."""
    return math.floor(value + 0.5)


def require_finite(**values: float) -> None:
    """
    Raises:
        ValueError: If any value is not a finite real number.
    """
    for name, value in values.items():
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ValueError(f"'{name}' must be a finite number, got {value!r}")


def fmt(value: float) -> str:
    """Compact number formatting for the step table."""
    if float(value).is_integer():
        return str(int(value))
    return str(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
