"""Free arena battle against the standard champion."""
from __future__ import annotations

from typing import Any

from clawsseum.engine.policy import VariantPolicy, build_champion
from clawsseum.models.job import ValidationResult
from clawsseum.offerings.base import Offering
from clawsseum.offerings.validation import check_fighter_name, check_optional_hp, check_stats, first_failure


class ArenaBattle(Offering):
    description = "Free entry duel against the Clawsseum Champion."

    @property
    def offering_id(self) -> str:
        return "arena_battle"

    def validate_requirements(self, request: dict[str, Any]) -> ValidationResult:
        reason = first_failure(
            check_fighter_name(request),
            check_stats(request, label='Stat "{key}" must be a number between {lo} and {hi}. Got: {val}'),
            check_optional_hp(request),
        )
        return ValidationResult(valid=False, reason=reason) if reason else ValidationResult(valid=True)

    def request_payment(self, request: dict[str, Any]) -> str:
        champion = build_champion(self.config.get("champion"))
        return f"⚔️ Battle accepted! {request.get('fighter_name')} vs {champion.name} — preparing the arena..."

    def policy(self, request: dict[str, Any]) -> VariantPolicy:
        return VariantPolicy(champion=build_champion(self.config.get("champion")))
