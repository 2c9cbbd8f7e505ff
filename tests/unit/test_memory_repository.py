"""
Unit tests for the in-memory repository adapters.

Tests verify:
- CodeStore set/get/clear semantics (one code per email)
- consume() as an atomic remove-if-match with expiry purge
- Order book prepend ordering and snapshot isolation
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from src.adapters.repository import InMemoryCodeStore, InMemoryOrderRepository
from src.domain.models import Order, VerificationCode

NOW = datetime(2025, 3, 1, 9, 30, tzinfo=UTC)
CUTOFF = NOW - timedelta(minutes=10)


def make_code(email: str = "ana@x.com", code: str = "482193", issued_at: datetime = NOW):
    return VerificationCode(email=email, code=code, issued_at=issued_at)


class TestCodeStoreBasics:
    """Tests for set/get/clear."""

    def test_get_missing_returns_none(self, code_store: InMemoryCodeStore) -> None:
        assert code_store.get("nobody@x.com") is None

    def test_set_then_get(self, code_store: InMemoryCodeStore) -> None:
        code = make_code()
        code_store.set(code)
        assert code_store.get("ana@x.com") == code

    def test_set_replaces_existing(self, code_store: InMemoryCodeStore) -> None:
        code_store.set(make_code(code="111111"))
        code_store.set(make_code(code="222222"))

        assert code_store.get("ana@x.com").code == "222222"
        assert len(code_store) == 1

    def test_clear_removes_code(self, code_store: InMemoryCodeStore) -> None:
        code_store.set(make_code())
        code_store.clear("ana@x.com")
        assert code_store.get("ana@x.com") is None

    def test_clear_missing_is_noop(self, code_store: InMemoryCodeStore) -> None:
        code_store.clear("nobody@x.com")
        assert len(code_store) == 0

    def test_fresh_instances_are_isolated(self) -> None:
        first = InMemoryCodeStore()
        second = InMemoryCodeStore()
        first.set(make_code())
        assert second.get("ana@x.com") is None


class TestConsume:
    """Tests for the atomic remove-if-match operation."""

    def test_matching_code_consumed(self, code_store: InMemoryCodeStore) -> None:
        code_store.set(make_code())

        assert code_store.consume("ana@x.com", "482193", CUTOFF) is True
        assert code_store.get("ana@x.com") is None

    def test_second_consume_fails(self, code_store: InMemoryCodeStore) -> None:
        code_store.set(make_code())

        assert code_store.consume("ana@x.com", "482193", CUTOFF) is True
        assert code_store.consume("ana@x.com", "482193", CUTOFF) is False

    @pytest.mark.parametrize("guess", ["000000", "48219", "4821930", " 482193", "", "ñ48219"])
    def test_mismatch_keeps_code(self, code_store: InMemoryCodeStore, guess: str) -> None:
        code_store.set(make_code())

        assert code_store.consume("ana@x.com", guess, CUTOFF) is False
        assert code_store.get("ana@x.com") is not None

    def test_missing_email_fails(self, code_store: InMemoryCodeStore) -> None:
        assert code_store.consume("ana@x.com", "482193", CUTOFF) is False

    def test_other_email_untouched(self, code_store: InMemoryCodeStore) -> None:
        code_store.set(make_code())
        code_store.set(make_code(email="bo@x.com", code="654321"))

        assert code_store.consume("ana@x.com", "482193", CUTOFF) is True
        assert code_store.get("bo@x.com").code == "654321"

    def test_expired_code_purged(self, code_store: InMemoryCodeStore) -> None:
        code_store.set(make_code(issued_at=CUTOFF))

        assert code_store.consume("ana@x.com", "482193", CUTOFF) is False
        assert code_store.get("ana@x.com") is None

    def test_expired_code_purged_even_on_wrong_guess(self, code_store: InMemoryCodeStore) -> None:
        code_store.set(make_code(issued_at=CUTOFF - timedelta(seconds=1)))

        assert code_store.consume("ana@x.com", "000000", CUTOFF) is False
        assert code_store.get("ana@x.com") is None


class TestOrderRepository:
    """Tests for the confirmed-orders list."""

    def make_order(self, order_id: str) -> Order:
        return Order(id=order_id, customer_name="Ana", total=Decimal("3.25"))

    def test_empty_by_default(self, orders: InMemoryOrderRepository) -> None:
        assert orders.list_orders() == []

    def test_add_prepends(self, orders: InMemoryOrderRepository) -> None:
        orders.add(self.make_order("a"))
        orders.add(self.make_order("b"))

        assert [o.id for o in orders.list_orders()] == ["b", "a"]

    def test_seeded_orders_kept_in_given_order(self) -> None:
        repo = InMemoryOrderRepository([self.make_order("x"), self.make_order("y")])
        repo.add(self.make_order("z"))

        assert [o.id for o in repo.list_orders()] == ["z", "x", "y"]

    def test_list_returns_copy(self, orders: InMemoryOrderRepository) -> None:
        orders.add(self.make_order("a"))
        snapshot = orders.list_orders()
        snapshot.clear()

        assert len(orders.list_orders()) == 1
