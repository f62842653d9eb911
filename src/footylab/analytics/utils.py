"""Numeric helpers shared by the analytics calculators."""

from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going towards positive infinity."""

    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round2(value: float) -> float:
    return round_half_up(value, 2)


def percentage(part: float, total: float) -> float:
    """Return ``part / total`` as a percentage with two decimals, 0 for an empty total."""

    if total == 0:
        return 0.0
    return round2(part / total * 100)
