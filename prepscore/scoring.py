"""Numeric helpers shared by the answer and resume scorers."""
from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive scores (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, round_half_up(value)))


def ratio(matched: int, total: int) -> float:
    return matched / total if total else 0.0
