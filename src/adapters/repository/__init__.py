"""Repository adapters - Process-lifetime in-memory implementations."""

from .memory import InMemoryCodeStore, InMemoryOrderRepository

__all__ = ["InMemoryCodeStore", "InMemoryOrderRepository"]
