"""Half-up rounding shared by the nutrition calculations."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def round_tenth(value: float) -> float:
    """Round to one decimal place, ties toward positive infinity."""
    return math.floor(value * 10 + 0.5) / 10


def is_number(value: object) -> bool:
    """Return True for real numbers, excluding booleans."""
    return isinstance(value, int | float) and not isinstance(value, bool)
