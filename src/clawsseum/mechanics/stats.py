"""Fighter preparation — strategy and VIP stat modifiers, no I/O."""
from __future__ import annotations

import math
from typing import Any, Callable

from clawsseum.models.fighter import BASE_HP, STAT_MAX, STAT_MIN, Fighter, Strategy
from clawsseum.utils import clamp, round_half_up

VIP_BONUS_STEP_BALANCE = 100_000_000
VIP_BONUS_PER_STEP = 0.10
VIP_BONUS_CAP = 0.25

# (attack multiplier, defense multiplier)
_STRATEGY_MULTIPLIERS: dict[str, tuple[float, float]] = {
    Strategy.AGGRESSIVE.value: (1.2, 0.85),
    Strategy.DEFENSIVE.value: (0.85, 1.2),
}

StatTransform = Callable[[Fighter], Fighter]


def clamp_stat(value: float) -> int:
    """Round half-up and clamp into [STAT_MIN, STAT_MAX]."""
    return clamp(round_half_up(value), STAT_MIN, STAT_MAX)


def apply_strategy(fighter: Fighter) -> Fighter:
    """Apply the fighter's strategy to attack/defense. Balanced or unknown tags change nothing."""
    multipliers = _STRATEGY_MULTIPLIERS.get(fighter.strategy)
    if multipliers is None:
        return fighter
    atk_mult, def_mult = multipliers
    return fighter.model_copy(update={
        "attack": clamp_stat(fighter.attack * atk_mult),
        "defense": clamp_stat(fighter.defense * def_mult),
    })


def vip_bonus(balance: float) -> float:
    """+10% per full 100M held, capped at +25%."""
    steps = math.floor(balance / VIP_BONUS_STEP_BALANCE)
    return min(VIP_BONUS_CAP, steps * VIP_BONUS_PER_STEP)


def apply_vip_bonus(fighter: Fighter, bonus: float) -> Fighter:
    return fighter.model_copy(update={
        "attack": clamp_stat(fighter.attack * (1 + bonus)),
        "defense": clamp_stat(fighter.defense * (1 + bonus)),
    })


def vip_transform(balance: float) -> StatTransform:
    """Build the pre-strategy stat transform for a VIP holder."""
    bonus = vip_bonus(balance)

    def _transform(fighter: Fighter) -> Fighter:
        return apply_vip_bonus(fighter, bonus)

    return _transform


def fighter_from_request(request: dict[str, Any]) -> Fighter:
    """Build the raw (unmodified) challenger from an already validated request."""
    hp = request.get("hp")
    special = request.get("special_skill")
    return Fighter(
        name=str(request["fighter_name"]).strip(),
        attack=clamp_stat(request["attack"]),
        defense=clamp_stat(request["defense"]),
        speed=clamp_stat(request["speed"]),
        hp=round_half_up(hp) if hp else BASE_HP,
        special_skill=str(special) if special else None,
        strategy=request.get("strategy") or Strategy.BALANCED.value,
    )


def prepare_challenger(
    request: dict[str, Any],
    stat_transform: StatTransform | None = None,
) -> Fighter:
    """Raw request -> battle-ready challenger.

    The variant transform (VIP bonus) runs before the strategy modifier.
    """
    fighter = fighter_from_request(request)
    if stat_transform is not None:
        fighter = stat_transform(fighter)
    return apply_strategy(fighter)
