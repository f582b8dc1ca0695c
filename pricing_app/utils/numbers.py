"""Numeric helpers for unit counts."""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves rounding up.

    Python's round() uses banker's rounding (round(2.5) == 2); unit counts
    follow the commercial convention where 2.5 becomes 3.
    """
    return int(math.floor(value + 0.5))
