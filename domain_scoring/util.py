"""Numeric helpers shared by the scorers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up.

    Unlike round(), 2.5 becomes 3.
    """
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))
