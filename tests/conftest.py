"""Shared fixtures for the Clawsseum test suite."""
from __future__ import annotations

import random
from typing import Any

import pytest

from clawsseum.models.fighter import Fighter

VIP_WALLET = "0x1234567890ABCDEF1234567890abcdef1234abcd"


class ScriptedRandom:
    """Random source that replays fixed draws, or repeats one value forever."""

    def __init__(self, values: list[float] | None = None, constant: float | None = None):
        self.values = list(values or [])
        self.constant = constant
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        if self.values:
            return self.values.pop(0)
        if self.constant is not None:
            return self.constant
        raise AssertionError("ScriptedRandom ran out of values")


@pytest.fixture
def flat_rng() -> ScriptedRandom:
    """Every draw is 0.5: initiative +5, zero damage variance."""
    return ScriptedRandom(constant=0.5)


@pytest.fixture
def seeded_rng():
    state = random.getstate()
    random.seed(42)
    yield
    random.setstate(state)


@pytest.fixture
def champion() -> Fighter:
    return Fighter(name="Clawsseum Champion", attack=75, defense=70, speed=80, hp=100, special_skill="Claw Storm")


@pytest.fixture
def average_request() -> dict[str, Any]:
    return {"fighter_name": "Crabby", "attack": 50, "defense": 50, "speed": 50}


@pytest.fixture
def strong_request() -> dict[str, Any]:
    return {
        "fighter_name": "Pinchy", "attack": 100, "defense": 100, "speed": 100,
        "special_skill": "Pincer Crush",
    }


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


@pytest.fixture
def vip_wallet() -> str:
    return VIP_WALLET
