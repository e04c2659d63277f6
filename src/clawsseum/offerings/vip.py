"""VIP battle — gated on a declared CLAWD balance, which buys an ATK/DEF bonus."""
from __future__ import annotations

from typing import Any

from clawsseum.engine.policy import VariantPolicy, build_champion
from clawsseum.mechanics.stats import vip_bonus, vip_transform
from clawsseum.models.battle import BattleResult
from clawsseum.models.job import ValidationResult
from clawsseum.narration.narrators import Narrator, VipNarrator, vip_title
from clawsseum.offerings.base import Offering
from clawsseum.offerings.validation import (
    check_fighter_name,
    check_optional_hp,
    check_stats,
    check_vip_balance,
    check_wallet,
    first_failure,
)
from clawsseum.utils import format_amount, round_half_up

VIP_THRESHOLD = 100_000_000


class VipBattle(Offering):
    description = "Free entry for 100M+ CLAWD holders, with a stat bonus."

    @property
    def offering_id(self) -> str:
        return "vip_battle"

    @property
    def threshold(self) -> int:
        return self.config.get("vip", {}).get("threshold", VIP_THRESHOLD)

    def validate_requirements(self, request: dict[str, Any]) -> ValidationResult:
        reason = first_failure(
            check_fighter_name(request),
            check_stats(request, label='"{key}" must be between {lo} and {hi}.'),
            check_optional_hp(request),
            check_vip_balance(request, self.threshold),
            check_wallet(request),
        )
        return ValidationResult(valid=False, reason=reason) if reason else ValidationResult(valid=True)

    def request_payment(self, request: dict[str, Any]) -> str:
        clawd = format_amount(request.get("clawd_balance", 0))
        return (
            f"👑 VIP ACCESS GRANTED — {request.get('fighter_name')} declared {clawd} CLAWD. "
            f"Welcome to the VIP Arena, legend! Battle is FREE for you."
        )

    def policy(self, request: dict[str, Any]) -> VariantPolicy:
        return VariantPolicy(
            champion=build_champion(self.config.get("champion"), vip=True),
            stat_transform=vip_transform(request["clawd_balance"]),
        )

    def narrator(self, request: dict[str, Any]) -> Narrator:
        balance = request["clawd_balance"]
        return VipNarrator(str(request["wallet_address"]), balance, vip_bonus(balance))

    def extra_fields(self, request: dict[str, Any], result: BattleResult, policy: VariantPolicy) -> dict[str, Any]:
        bonus = vip_bonus(request["clawd_balance"])
        return {
            "challenger_won": result.challenger_won,
            "vip_bonus_applied": f"+{round_half_up(bonus * 100)}%",
            "title_earned": vip_title(result.challenger_won),
        }
