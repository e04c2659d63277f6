"""Tests for src/clawsseum/mechanics/economy.py."""
from __future__ import annotations

import pytest

from clawsseum.mechanics.economy import calculate_payout, prize_pool


class TestPrizePool:
    @pytest.mark.parametrize("wager, expected", [
        (5000, 9500),
        (1000, 1900),
        (1001, 1901),   # floor(1901.9)
        (1234.5, 2345),
    ])
    def test_floor_of_multiplier(self, wager, expected):
        assert prize_pool(wager) == expected

    def test_custom_multiplier(self):
        assert prize_pool(1000, 2.5) == 2500


class TestCalculatePayout:
    def test_win(self):
        assert calculate_payout(5000, True) == 9500

    def test_loss_forfeits(self):
        assert calculate_payout(5000, False) == 0
