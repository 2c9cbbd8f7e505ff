"""
Verification domain services - issue and redeem one-time codes.

An order (or a login) is confirmed by proving control of an email address:

    issue(name, email)
        -> 6-digit code stored for email (replacing any prior code)
        -> code handed to the Notifier

    redeem(name, email, code, cart, total)
        -> stored code consumed atomically if it matches and is fresh
        -> Order returned; prepended to the order book when total > 0

Single-use enforcement lives in CodeStore.consume(): the comparison and the
deletion are one critical section, so two concurrent redemptions of the same
code cannot both succeed.
"""

import logging
import secrets
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from decimal import Decimal

from .exceptions import DeliveryError, InvalidCodeError, ValidationError
from .models import Order, OrderStatus, VerificationCode
from .ports import CodeStore, IssueResult, Notifier, OrderRepository

logger = logging.getLogger(__name__)

DEFAULT_CODE_TTL = timedelta(minutes=10)


def utcnow() -> datetime:
    return datetime.now(UTC)


def normalize_email(email: str) -> str:
    """
    Normalize email address for consistent storage and lookup.

    Applies: strip whitespace + lowercase
    """
    return email.strip().lower()


def generate_verification_code() -> str:
    """
    Generate a cryptographically secure 6-digit verification code.

    The range is 100000-999999 inclusive, so no zero padding is needed.
    """
    return str(100000 + secrets.randbelow(900000))


@dataclass
class CodeIssuer:
    """
    Domain service that issues verification codes.

    The code is stored before delivery is attempted and is never rolled
    back: a failed delivery still leaves a redeemable code.
    """

    store: CodeStore
    notifier: Notifier
    strict_delivery: bool = False
    clock: Callable[[], datetime] = field(default=utcnow)

    async def issue(self, name: str, email: str) -> IssueResult:
        """
        Issue a code for email and hand it to the notifier.

        Args:
            name: Customer display name (required)
            email: Customer email address (will be normalized)

        Returns:
            IssueResult.SENT, or IssueResult.DELIVERY_FAILED when the notifier
            failed and strict_delivery is off

        Raises:
            ValidationError: If name or email is blank (store untouched)
            DeliveryError: If the notifier failed and strict_delivery is on
        """
        if not name or not name.strip():
            raise ValidationError("Name is required")
        normalized_email = normalize_email(email or "")
        if not normalized_email:
            raise ValidationError("Email is required")

        code = generate_verification_code()
        self.store.set(
            VerificationCode(email=normalized_email, code=code, issued_at=self.clock())
        )

        try:
            await self.notifier.send_verification_code(name, normalized_email, code)
        except DeliveryError as e:
            logger.warning("Verification code for %s not delivered: %s", normalized_email, e)
            if self.strict_delivery:
                raise
            return IssueResult.DELIVERY_FAILED

        return IssueResult.SENT


@dataclass
class CodeRedeemer:
    """
    Domain service that redeems verification codes into orders.

    A total of zero is the login use of the workflow: the code is consumed
    and an Order value is returned, but nothing is added to the order book.
    """

    store: CodeStore
    orders: OrderRepository
    code_ttl: timedelta = DEFAULT_CODE_TTL
    clock: Callable[[], datetime] = field(default=utcnow)

    def redeem(
        self,
        name: str,
        email: str,
        code: str,
        cart: Mapping[str, int],
        total: Decimal | float | int,
    ) -> Order:
        """
        Redeem a code and confirm the pending cart.

        The cart is carried as an opaque snapshot; prices and product ids are
        not checked here.

        Args:
            name: Customer display name for the order
            email: Email the code was issued to (will be normalized)
            code: Caller-supplied code, compared exactly against the stored one
            cart: productId -> quantity
            total: Precomputed cart total

        Returns:
            The confirmed Order

        Raises:
            ValidationError: If total is negative or not finite (store untouched)
            InvalidCodeError: If no fresh matching code exists for email
        """
        amount = Decimal(str(total))
        if not amount.is_finite() or amount < 0:
            raise ValidationError("Total must be a finite, non-negative amount")

        issued_after = self.clock() - self.code_ttl
        if not self.store.consume(normalize_email(email or ""), code, issued_after):
            raise InvalidCodeError()

        order = Order(
            id=f"ord{uuid.uuid4().hex}",
            customer_name=name,
            total=amount,
            status=OrderStatus.CONFIRMED,
        )
        if amount > 0:
            self.orders.add(order)
            logger.info("Order %s confirmed: %d line(s), total %s", order.id, len(cart), amount)
        return order
