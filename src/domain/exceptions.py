"""
Domain exceptions - Semantic error types for the verification workflow.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class VerificationError(Exception):
    """Base class for verification domain errors."""

    pass


class ValidationError(VerificationError):
    """Required input is missing or out of range; the store was not touched."""

    pass


class DeliveryError(VerificationError):
    """Notifier failed to deliver a code. The stored code remains valid."""

    pass


class InvalidCodeError(VerificationError):
    """Redemption rejected: no code, wrong code, used code, or expired code."""

    def __init__(self, message: str = "Invalid verification code") -> None:
        super().__init__(message)
