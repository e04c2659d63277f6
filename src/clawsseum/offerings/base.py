"""Base interface for Clawsseum offerings (job types sold by the agent)."""
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from clawsseum.engine.policy import VariantPolicy
from clawsseum.errors import InvalidRequestError
from clawsseum.mechanics.combat_math import RandomSource
from clawsseum.models.battle import BattleResult
from clawsseum.models.job import FundsRequest, JobResult, PayableDetail, ValidationResult
from clawsseum.narration.narrators import Narrator


class Offering(ABC):
    """One entry point into the arena.

    Subclasses supply validation, the payment message, and their variant deltas
    (champion, stat transform, payout, extra deliverable fields). The battle
    itself always runs through the shared engine.
    """

    description: str = ""

    def __init__(self, config: dict[str, Any] | None = None):
        self.config = config or {}

    @property
    @abstractmethod
    def offering_id(self) -> str: ...

    @abstractmethod
    def validate_requirements(self, request: dict[str, Any]) -> ValidationResult: ...

    @abstractmethod
    def request_payment(self, request: dict[str, Any]) -> str: ...

    @abstractmethod
    def policy(self, request: dict[str, Any]) -> VariantPolicy: ...

    def request_additional_funds(self, request: dict[str, Any]) -> FundsRequest | None:
        """Escrow request sent to the buyer before execution. Most offerings need none."""
        return None

    def narrator(self, request: dict[str, Any]) -> Narrator:
        return Narrator()

    def extra_fields(self, request: dict[str, Any], result: BattleResult, policy: VariantPolicy) -> dict[str, Any]:
        return {}

    def payable_detail(
        self, request: dict[str, Any], result: BattleResult, policy: VariantPolicy,
    ) -> PayableDetail | None:
        return None

    def execute_job(self, request: dict[str, Any], rng: RandomSource | None = None) -> JobResult:
        check = self.validate_requirements(request)
        if not check.valid:
            raise InvalidRequestError(check.reason)

        policy = self.policy(request)
        result = policy.fight(request, rng=rng, narrator=self.narrator(request))

        deliverable = result.to_deliverable()
        extras = self.extra_fields(request, result, policy)
        if extras:
            # Keep battle_log last, after the variant fields.
            battle_log = deliverable.pop("battle_log")
            deliverable.update(extras)
            deliverable["battle_log"] = battle_log

        return JobResult(
            deliverable=json.dumps(deliverable, indent=2, ensure_ascii=False),
            payable_detail=self.payable_detail(request, result, policy),
        )
