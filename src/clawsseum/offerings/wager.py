"""Wager battle — the challenger stakes CLAWD and gets 1.9x back on a win."""
from __future__ import annotations

from typing import Any

from clawsseum.engine.policy import VariantPolicy, build_champion
from clawsseum.mechanics.economy import MIN_WAGER, WIN_MULTIPLIER, calculate_payout
from clawsseum.models.battle import BattleResult
from clawsseum.models.job import FundsRequest, PayableDetail, ValidationResult
from clawsseum.narration.narrators import Narrator, WagerNarrator
from clawsseum.offerings.base import Offering
from clawsseum.offerings.validation import (
    check_fighter_name,
    check_optional_hp,
    check_stats,
    check_wager,
    first_failure,
)
from clawsseum.utils import format_amount

CLAWD_TOKEN_ADDRESS = "0xA5c57BC3e7Fa624Ee28211e4E542823D9e2A355E"
CLAWSSEUM_WALLET = "0x8725f5479322e952f63b9611FED6ef36B61E4e02"


class WagerBattle(Offering):
    description = "Stake CLAWD on the duel; win 1.9x, lose the stake."

    @property
    def offering_id(self) -> str:
        return "wager_battle"

    @property
    def _wager_cfg(self) -> dict[str, Any]:
        return self.config.get("wager", {})

    @property
    def token_address(self) -> str:
        return self._wager_cfg.get("token_address", CLAWD_TOKEN_ADDRESS)

    @property
    def treasury_wallet(self) -> str:
        return self._wager_cfg.get("treasury_wallet", CLAWSSEUM_WALLET)

    @property
    def min_wager(self) -> int:
        return self._wager_cfg.get("min_wager", MIN_WAGER)

    @property
    def multiplier(self) -> float:
        return self._wager_cfg.get("win_multiplier", WIN_MULTIPLIER)

    def validate_requirements(self, request: dict[str, Any]) -> ValidationResult:
        reason = first_failure(
            check_fighter_name(request),
            check_stats(request),
            check_optional_hp(request),
            check_wager(request, self.min_wager),
        )
        return ValidationResult(valid=False, reason=reason) if reason else ValidationResult(valid=True)

    def request_payment(self, request: dict[str, Any]) -> str:
        wager = format_amount(request.get("wager_amount", 0))
        return (
            f"⚔️💰 Wager Battle accepted! {request.get('fighter_name')} risks {wager} CLAWD. "
            f"Transfer CLAWD to enter the arena!"
        )

    def request_additional_funds(self, request: dict[str, Any]) -> FundsRequest:
        wager = request["wager_amount"]
        return FundsRequest(
            content=(
                f"Transfer {format_amount(wager)} CLAWD as your battle wager. "
                f"WIN = get {self.multiplier}× back. LOSE = stake forfeited."
            ),
            amount=wager,
            token_address=self.token_address,
            recipient=self.treasury_wallet,
        )

    def policy(self, request: dict[str, Any]) -> VariantPolicy:
        wager = request["wager_amount"]
        return VariantPolicy(
            champion=build_champion(self.config.get("champion")),
            payout_rule=lambda result: calculate_payout(wager, result.challenger_won, self.multiplier),
        )

    def narrator(self, request: dict[str, Any]) -> Narrator:
        return WagerNarrator(request["wager_amount"], self.multiplier)

    def extra_fields(self, request: dict[str, Any], result: BattleResult, policy: VariantPolicy) -> dict[str, Any]:
        return {
            "challenger_won": result.challenger_won,
            "wager_amount": request["wager_amount"],
            "clawd_returned": policy.payout(result),
        }

    def payable_detail(
        self, request: dict[str, Any], result: BattleResult, policy: VariantPolicy,
    ) -> PayableDetail | None:
        payout = policy.payout(result)
        if not result.challenger_won or payout <= 0:
            return None
        return PayableDetail(
            amount=payout,
            token_address=self.token_address,
            recipient=self._recipient(request),
        )

    def _recipient(self, request: dict[str, Any]) -> str:
        buyer = request.get("buyer_wallet")
        return buyer if buyer is not None else self.treasury_wallet
