"""Combat math — pure functions, no I/O.

Every random draw goes through ``rng``, anything exposing ``random() -> float``
in [0, 1). Defaults to the ``random`` module so a seeded global generator works too.
"""
from __future__ import annotations

import random
from typing import Protocol

from clawsseum.models.fighter import Fighter, Side
from clawsseum.utils import round_half_up

INITIATIVE_SPREAD = 10
DEFENSE_FACTOR = 0.4
VARIANCE = 0.2
SPECIAL_HP_THRESHOLD = 0.3
SPECIAL_MULTIPLIER = 2.2


class RandomSource(Protocol):
    def random(self) -> float: ...


def _source(rng: RandomSource | None) -> RandomSource:
    return rng if rng is not None else random


def initiative_roll(speed: int, rng: RandomSource | None = None) -> float:
    """Speed plus a continuous 0-10 bonus."""
    return speed + _source(rng).random() * INITIATIVE_SPREAD


def determine_first_mover(challenger_init: float, champion_init: float) -> Side:
    """Higher initiative acts first; ties go to the challenger."""
    return Side.CHALLENGER if challenger_init >= champion_init else Side.CHAMPION


def base_damage(attack: int, defense: int) -> float:
    return max(1, attack - defense * DEFENSE_FACTOR)


def damage_roll(attack: int, defense: int, rng: RandomSource | None = None) -> int:
    """Base damage with up to +/-20% variance. Never below 1."""
    base = base_damage(attack, defense)
    variance = base * VARIANCE * (_source(rng).random() * 2 - 1)
    return max(1, round_half_up(base + variance))


def special_ready(attacker: Fighter, attacker_hp: int, already_used: bool) -> bool:
    """The comeback special fires once, when the attacker is at or below 30% HP."""
    if already_used or not attacker.has_special:
        return False
    return attacker_hp / attacker.hp <= SPECIAL_HP_THRESHOLD


def special_damage(damage: int) -> int:
    return round_half_up(damage * SPECIAL_MULTIPLIER)


def hp_fraction(current: int, baseline: int) -> float:
    return current / baseline
