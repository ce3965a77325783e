from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

_CENTS = Decimal("0.01")
_SECONDS_PER_HOUR = Decimal(3600)


def to_decimal(value: Any) -> Decimal:
    """Normalize numeric driver values (Decimal, float, int, None) to Decimal.

    Floats go through str() so 8.505 stays 8.505 instead of its binary
    approximation.
    """
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_hours(value: Any) -> float:
    """Round hours to 2 decimals, halves away from zero."""
    return float(to_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def seconds_to_hours(value: Any) -> Decimal:
    """Convert a summed duration in seconds to hours without intermediate rounding."""
    return to_decimal(value) / _SECONDS_PER_HOUR
