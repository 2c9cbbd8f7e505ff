"""
Domain models - Plain value types shared by ports, services and adapters.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class OrderStatus(str, Enum):
    """
    Lifecycle of an order on the barista view.

    Orders are created CONFIRMED. READY and DELIVERED exist for the barista
    view; nothing in the verification workflow moves an order past CONFIRMED.
    """

    CONFIRMED = "confirmed"
    READY = "ready"
    DELIVERED = "delivered"


@dataclass(frozen=True)
class VerificationCode:
    """An active code bound to one (normalized) email address."""

    email: str
    code: str
    issued_at: datetime


@dataclass(frozen=True)
class Order:
    """A confirmed order as shown on the barista view."""

    id: str
    customer_name: str
    total: Decimal
    status: OrderStatus = OrderStatus.CONFIRMED


@dataclass(frozen=True)
class SizeOption:
    size: str
    price: Decimal


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    description: str
    sizes: tuple[SizeOption, ...] = field(default_factory=tuple)
    image_url: str | None = None
