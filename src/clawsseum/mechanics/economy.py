"""Wager economics — pure calculations, no I/O."""
from __future__ import annotations

import math

MIN_WAGER = 1000
WIN_MULTIPLIER = 1.9


def prize_pool(wager_amount: float, multiplier: float = WIN_MULTIPLIER) -> int:
    """What a winning challenger receives back: floor(wager * multiplier)."""
    return math.floor(wager_amount * multiplier)


def calculate_payout(wager_amount: float, challenger_won: bool, multiplier: float = WIN_MULTIPLIER) -> int:
    """CLAWD returned after the battle. A loss forfeits the whole stake."""
    if not challenger_won:
        return 0
    return prize_pool(wager_amount, multiplier)
