"""Offering registry — manages the arena's job types."""
from __future__ import annotations

from typing import Any

from clawsseum.errors import UnknownOfferingError
from clawsseum.offerings.base import Offering


class OfferingRegistry:
    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self.config = config or {}
        self._offerings: dict[str, Offering] = {}

    def register(self, offering: Offering) -> None:
        self._offerings[offering.offering_id] = offering

    def get_offering(self, offering_id: str) -> Offering | None:
        return self._offerings.get(offering_id)

    def require(self, offering_id: str) -> Offering:
        offering = self.get_offering(offering_id)
        if offering is None:
            raise UnknownOfferingError(offering_id)
        return offering

    def all_offerings(self) -> list[Offering]:
        return list(self._offerings.values())

    def register_defaults(self) -> None:
        from clawsseum.offerings.arena import ArenaBattle
        from clawsseum.offerings.vip import VipBattle
        from clawsseum.offerings.wager import WagerBattle

        self.register(ArenaBattle(self.config))
        self.register(VipBattle(self.config))
        self.register(WagerBattle(self.config))
