"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Fresh in-memory stores per test
- A controllable clock for expiry tests
- The anyio backend for async unit tests
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from src.adapters.repository import InMemoryCodeStore, InMemoryOrderRepository


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def anyio_backend() -> str:
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def code_store() -> InMemoryCodeStore:
    return InMemoryCodeStore()


@pytest.fixture
def orders() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2025, 3, 1, 9, 30, tzinfo=UTC))


@pytest.fixture
def notifier() -> AsyncMock:
    """Notifier double that accepts every delivery."""
    return AsyncMock()
