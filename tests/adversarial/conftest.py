"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition and code guessing tests.
"""

from unittest.mock import AsyncMock

import pytest

from src.adapters.repository import InMemoryCodeStore, InMemoryOrderRepository
from src.domain.verification import CodeIssuer, CodeRedeemer

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def issuer(code_store: InMemoryCodeStore) -> CodeIssuer:
    return CodeIssuer(store=code_store, notifier=AsyncMock())


@pytest.fixture
def redeemer(code_store: InMemoryCodeStore, orders: InMemoryOrderRepository) -> CodeRedeemer:
    return CodeRedeemer(store=code_store, orders=orders)
