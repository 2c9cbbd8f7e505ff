"""
Domain layer - Pure business logic with zero framework imports.

This package contains the order-verification workflow of the storefront:
issuing single-use codes, redeeming them into confirmed orders, and the
catalogue glue around it. It defines its own port interfaces for
infrastructure abstraction.
"""

from .catalogue import CatalogueService
from .exceptions import DeliveryError, InvalidCodeError, ValidationError, VerificationError
from .models import Order, OrderStatus, Product, SizeOption, VerificationCode
from .ports import (
    CatalogueProvider,
    CodeStore,
    ImageProvider,
    IssueResult,
    Notifier,
    OrderRepository,
)
from .verification import CodeIssuer, CodeRedeemer

__all__ = [
    "CatalogueProvider",
    "CatalogueService",
    "CodeIssuer",
    "CodeRedeemer",
    "CodeStore",
    "DeliveryError",
    "ImageProvider",
    "InvalidCodeError",
    "IssueResult",
    "Notifier",
    "Order",
    "OrderRepository",
    "OrderStatus",
    "Product",
    "SizeOption",
    "ValidationError",
    "VerificationCode",
    "VerificationError",
]
