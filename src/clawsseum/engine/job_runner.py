"""Job runner — walks one request through validate, payment and execution."""
from __future__ import annotations

import logging
from typing import Any

from clawsseum.engine.offering_registry import OfferingRegistry
from clawsseum.mechanics.combat_math import RandomSource
from clawsseum.models.job import JobOutcome

logger = logging.getLogger(__name__)


class JobRunner:
    def __init__(self, registry: OfferingRegistry):
        self.registry = registry

    def run(self, offering_id: str, request: dict[str, Any], rng: RandomSource | None = None) -> JobOutcome:
        offering = self.registry.require(offering_id)

        check = offering.validate_requirements(request)
        if not check.valid:
            logger.info(f"Rejected {offering_id} request: {check.reason}")
            return JobOutcome(offering_id=offering_id, accepted=False, reason=check.reason)

        payment_message = offering.request_payment(request)
        funds_request = offering.request_additional_funds(request)
        try:
            result = offering.execute_job(request, rng=rng)
        except Exception:
            logger.exception(f"Error executing {offering_id} job")
            raise

        if result.payable_detail is not None:
            logger.info(
                f"{offering_id}: payout of {result.payable_detail.amount} due to {result.payable_detail.recipient}"
            )
        return JobOutcome(
            offering_id=offering_id,
            accepted=True,
            payment_message=payment_message,
            funds_request=funds_request,
            result=result,
        )
