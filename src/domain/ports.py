"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from datetime import datetime
from enum import Enum
from typing import Protocol

from .models import Order, Product, VerificationCode


class IssueResult(Enum):
    """
    Result of an issuance.

    Both values mean a code is stored and redeemable. DELIVERY_FAILED tells
    the caller the notifier did not confirm delivery.
    """

    SENT = "sent"
    DELIVERY_FAILED = "delivery_failed"


class CodeStore(Protocol):
    """Port interface for the email -> active code mapping."""

    def set(self, code: VerificationCode) -> None:
        """Store a code, replacing any prior code for the same email."""
        ...

    def get(self, email: str) -> VerificationCode | None:
        """Return the active code for email, or None."""
        ...

    def clear(self, email: str) -> None:
        """Drop the active code for email, if any."""
        ...

    def consume(self, email: str, code: str, issued_after: datetime) -> bool:
        """
        Atomically remove the stored code if it matches.

        The lookup, comparison and deletion happen as one critical section:
        of any number of concurrent calls with the right code, exactly one
        returns True.

        Args:
            email: Normalized email address
            code: Caller-supplied code (arbitrary string)
            issued_after: Codes issued at or before this instant are expired

        Returns:
            True if the code matched and was removed, False otherwise
        """
        ...


class OrderRepository(Protocol):
    """Port interface for the confirmed-orders list."""

    def add(self, order: Order) -> None:
        """Prepend an order (most recent first)."""
        ...

    def list_orders(self) -> list[Order]:
        """Return confirmed orders, most recent first."""
        ...


class Notifier(Protocol):
    """Port interface for out-of-band code delivery."""

    async def send_verification_code(self, name: str, email: str, code: str) -> None:
        """
        Deliver a verification code to its owner.

        Args:
            name: Recipient display name
            email: Recipient email address (normalized by domain layer)
            code: 6-digit verification code

        Raises:
            DeliveryError: If the code could not be delivered
        """
        ...


class CatalogueProvider(Protocol):
    """Port interface for the product listing."""

    def list_products(self) -> list[Product]: ...


class ImageProvider(Protocol):
    """Port interface for per-product illustrative images."""

    async def image_for(self, product_name: str) -> str:
        """Return an image URL (or data URL) for the product."""
        ...
