# ipt/utils.py
from __future__ import annotations

import math


def round_half_away(value: float, decimals: int = 0) -> float:
    """Round like round(v * 10^n) / 10^n with halves going away from zero.

    Python's round() is banker's rounding; every stage uses this instead so
    the published figures stay reproducible.
    """
    factor = 10.0 ** decimals
    scaled = math.floor(abs(float(value)) * factor + 0.5)
    return math.copysign(scaled, value) / factor if scaled else 0.0


def round_to_increment(value: float, increment: float) -> float:
    return round_half_away(value / increment) * increment
