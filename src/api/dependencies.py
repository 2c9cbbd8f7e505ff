"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from datetime import timedelta

from fastapi import Depends, Request

from src.adapters.catalogue import GenAIImageProvider, PlaceholderImageProvider
from src.adapters.repository import InMemoryCodeStore, InMemoryOrderRepository
from src.adapters.smtp.console import ConsoleNotifier
from src.adapters.smtp.fastmail import FastMailNotifier
from src.config.settings import Settings, get_settings
from src.domain.catalogue import CatalogueService
from src.domain.ports import ImageProvider, Notifier
from src.domain.verification import CodeIssuer, CodeRedeemer


def build_notifier(settings: Settings) -> Notifier:
    """
    Select the notifier adapter named by settings.notifier_backend.

    Raises:
        ValueError: For an unknown backend name
    """
    backend = settings.notifier_backend.strip().lower()
    if backend == "console":
        return ConsoleNotifier()
    if backend == "smtp":
        return FastMailNotifier.from_settings(settings)
    raise ValueError(f"Unknown notifier backend: {settings.notifier_backend!r}")


def build_image_provider(settings: Settings) -> ImageProvider:
    """
    Select the image adapter named by settings.image_backend.

    Raises:
        ValueError: For an unknown backend name, or genai without an API key
    """
    backend = settings.image_backend.strip().lower()
    if backend == "placeholder":
        return PlaceholderImageProvider(settings.placeholder_image_url)
    if backend == "genai":
        return GenAIImageProvider.from_settings(settings)
    raise ValueError(f"Unknown image backend: {settings.image_backend!r}")


def get_code_store(request: Request) -> InMemoryCodeStore:
    """
    Get the code store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.code_store


def get_order_repository(request: Request) -> InMemoryOrderRepository:
    """Get the confirmed-orders repository from app state."""
    return request.app.state.orders


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_catalogue_service(request: Request) -> CatalogueService:
    """Get the catalogue service (holds the generated image cache)."""
    return request.app.state.catalogue


def get_code_issuer(
    request: Request, settings: Settings = Depends(get_settings)
) -> CodeIssuer:
    """
    Create code issuer with injected dependencies.

    Wires together the shared code store and the notifier.
    """
    return CodeIssuer(
        store=get_code_store(request),
        notifier=get_notifier(request),
        strict_delivery=settings.strict_delivery,
    )


def get_code_redeemer(
    request: Request, settings: Settings = Depends(get_settings)
) -> CodeRedeemer:
    """
    Create code redeemer with injected dependencies.

    Shares the code store with the issuer and appends to the order book.
    """
    return CodeRedeemer(
        store=get_code_store(request),
        orders=get_order_repository(request),
        code_ttl=timedelta(seconds=settings.code_ttl_seconds),
    )
