from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ValidationResult:
    valid: bool
    reason: str = ""


@dataclass
class FundsRequest:
    content: str
    amount: float
    token_address: str
    recipient: str


@dataclass
class PayableDetail:
    amount: int
    token_address: str
    recipient: str

    def to_dict(self) -> dict[str, Any]:
        return {"amount": self.amount, "tokenAddress": self.token_address, "recipient": self.recipient}


@dataclass
class JobResult:
    deliverable: str
    payable_detail: PayableDetail | None = None


@dataclass
class JobOutcome:
    offering_id: str
    accepted: bool
    reason: str = ""
    payment_message: str = ""
    funds_request: FundsRequest | None = None
    result: JobResult | None = None
