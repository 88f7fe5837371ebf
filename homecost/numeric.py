"""Numeric helpers shared by the calculators."""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half up for non-negative quantities (2.5 -> 3, unlike ``round``)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_half(value: float) -> float:
    """Round to the nearest 0.5 (schedule durations are in half weeks)."""
    return round_half_up(value * 2) / 2

