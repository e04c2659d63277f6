"""Exception hierarchy for the Clawsseum."""
from __future__ import annotations


class ClawsseumError(Exception):
    """Base class for all Clawsseum errors."""


class UnknownOfferingError(ClawsseumError):
    def __init__(self, offering_id: str):
        super().__init__(f"Unknown offering: {offering_id}")
        self.offering_id = offering_id


class InvalidRequestError(ClawsseumError):
    """A job request reached execution without passing validation."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
