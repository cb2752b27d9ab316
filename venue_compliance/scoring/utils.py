"""
Decimal Utilities
venue_compliance/scoring/utils.py

Precision-safe rounding and clamping for the compliance scores.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def round_half_up(value: Number) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Python's round() uses banker's rounding (round(88.5) == 88); scores
    have always been rounded with .5 going up, so use ROUND_HALF_UP.
    """
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
