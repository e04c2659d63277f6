"""Shared utility functions for the Clawsseum."""
from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (42.5 -> 43, -2.5 -> -2).

    The built-in round() uses banker's rounding, which would shift stat and
    damage values by one on exact halves.
    """
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def format_amount(value: float) -> str:
    """Thousands-separated amount: 250000000 -> '250,000,000'."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def short_wallet(address: str) -> str:
    """Shorten a wallet address for display: 0x1234...abcd."""
    return f"{address[:6]}...{address[-4:]}"


def is_number(value) -> bool:
    """True for real numbers, excluding bools and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)
