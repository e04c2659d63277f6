"""Variant policy — what an offering changes around the shared engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from clawsseum.engine.battle import run_battle
from clawsseum.mechanics.combat_math import RandomSource
from clawsseum.mechanics.stats import StatTransform, prepare_challenger
from clawsseum.models.battle import BattleResult
from clawsseum.models.fighter import Fighter
from clawsseum.narration.narrators import Narrator

CHAMPION_NAME = "Clawsseum Champion"
CHAMPION_HP = 100
VIP_CHAMPION_HP = 120

PayoutRule = Callable[[BattleResult], int]


def build_champion(config: dict[str, Any] | None = None, vip: bool = False) -> Fighter:
    """The fixed home fighter. VIP battles face a sturdier champion."""
    cfg = config or {}
    hp = cfg.get("vip_hp", VIP_CHAMPION_HP) if vip else cfg.get("hp", CHAMPION_HP)
    return Fighter(
        name=cfg.get("name", CHAMPION_NAME),
        attack=cfg.get("attack", 75),
        defense=cfg.get("defense", 70),
        speed=cfg.get("speed", 80),
        hp=hp,
        special_skill=cfg.get("special_skill", "Claw Storm"),
    )


@dataclass
class VariantPolicy:
    champion: Fighter
    stat_transform: StatTransform | None = None
    payout_rule: PayoutRule | None = None

    def prepare(self, request: dict[str, Any]) -> Fighter:
        return prepare_challenger(request, self.stat_transform)

    def fight(
        self,
        request: dict[str, Any],
        rng: RandomSource | None = None,
        narrator: Narrator | None = None,
    ) -> BattleResult:
        return run_battle(self.prepare(request), self.champion, rng=rng, narrator=narrator)

    def payout(self, result: BattleResult) -> int:
        if self.payout_rule is None:
            return 0
        return self.payout_rule(result)
