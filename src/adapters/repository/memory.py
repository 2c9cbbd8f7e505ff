"""
In-memory repository adapters - Implement CodeStore and OrderRepository.

Process-lifetime state only: a restart loses pending codes and orders.

Concurrency Design - Single-Use Codes:
--------------------------------------
Every operation on InMemoryCodeStore runs under one threading.Lock. The
redemption path goes through consume(), which looks up, compares and deletes
inside that single critical section. Splitting it into get() + clear() at the
call site would let two concurrent redemptions both observe a valid code.

Code comparison uses secrets.compare_digest() so response time does not
depend on how many leading digits of a guess are right.
"""

import logging
import secrets
import threading
from datetime import datetime

from src.domain.models import Order, VerificationCode

logger = logging.getLogger(__name__)


class InMemoryCodeStore:
    """
    Implements CodeStore protocol with a lock-guarded dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Holds at most one VerificationCode per email.
    """

    def __init__(self) -> None:
        self._codes: dict[str, VerificationCode] = {}
        self._lock = threading.Lock()

    def set(self, code: VerificationCode) -> None:
        with self._lock:
            self._codes[code.email] = code

    def get(self, email: str) -> VerificationCode | None:
        with self._lock:
            return self._codes.get(email)

    def clear(self, email: str) -> None:
        with self._lock:
            self._codes.pop(email, None)

    def consume(self, email: str, code: str, issued_after: datetime) -> bool:
        """
        Remove and accept the stored code if it matches and is fresh.

        A wrong guess leaves the stored code in place. An expired code is
        purged on sight, whatever was guessed.

        Args:
            email: Normalized email address
            code: Caller-supplied code
            issued_after: Expiry cutoff; codes issued at or before it are dead

        Returns:
            True if the code was consumed, False otherwise
        """
        with self._lock:
            stored = self._codes.get(email)
            if stored is None:
                return False

            if stored.issued_at <= issued_after:
                del self._codes[email]
                logger.info("Expired verification code purged for %s", email)
                return False

            if not secrets.compare_digest(stored.code.encode(), code.encode()):
                return False

            del self._codes[email]
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._codes)


class InMemoryOrderRepository:
    """
    Implements OrderRepository protocol with a lock-guarded list.

    Orders are only ever prepended; nothing updates or removes them.
    """

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._orders: list[Order] = list(orders or [])
        self._lock = threading.Lock()

    def add(self, order: Order) -> None:
        with self._lock:
            self._orders.insert(0, order)

    def list_orders(self) -> list[Order]:
        with self._lock:
            return list(self._orders)
