"""Request checks shared by the offerings. Each returns a reason string, or None when fine."""
from __future__ import annotations

from typing import Any

from clawsseum.models.fighter import STAT_MAX, STAT_MIN
from clawsseum.utils import format_amount, is_number

HP_MIN = 1
HP_MAX = 500


def check_fighter_name(request: dict[str, Any]) -> str | None:
    name = request.get("fighter_name")
    if not isinstance(name, str) or not name.strip():
        return "fighter_name must be a non-empty string."
    return None


def check_stats(request: dict[str, Any], label: str = '"{key}" must be between {lo} and {hi}. Got: {val}') -> str | None:
    for key in ("attack", "defense", "speed"):
        val = request.get(key)
        if not is_number(val) or val < STAT_MIN or val > STAT_MAX:
            return label.format(key=key, lo=STAT_MIN, hi=STAT_MAX, val=val)
    return None


def check_optional_hp(request: dict[str, Any]) -> str | None:
    hp = request.get("hp")
    if hp is None:
        return None
    if not is_number(hp) or hp < HP_MIN or hp > HP_MAX:
        return f'"hp" must be a number between {HP_MIN} and {HP_MAX}. Got: {hp}'
    return None


def check_wallet(request: dict[str, Any], key: str = "wallet_address") -> str | None:
    wallet = request.get(key)
    if not isinstance(wallet, str) or not wallet.startswith("0x"):
        return f"{key} must be a valid Base wallet address (0x...)."
    return None


def check_vip_balance(request: dict[str, Any], threshold: int) -> str | None:
    balance = request.get("clawd_balance")
    if not is_number(balance) or balance < threshold:
        declared = balance if is_number(balance) else 0
        return (
            f"👑 VIP Access Denied. You need {format_amount(threshold)} CLAWD to enter. "
            f"You declared: {format_amount(declared)} CLAWD. Buy more CLAWD at app.virtuals.io!"
        )
    return None


def check_wager(request: dict[str, Any], min_wager: int) -> str | None:
    wager = request.get("wager_amount")
    if not is_number(wager) or wager < min_wager:
        return f"Minimum wager is {format_amount(min_wager)} CLAWD. Got: {wager}"
    return None


def first_failure(*reasons: str | None) -> str | None:
    for reason in reasons:
        if reason:
            return reason
    return None
