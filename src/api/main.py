"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.adapters.catalogue import DEMO_ORDERS, StaticCatalogue
from src.adapters.repository import InMemoryCodeStore, InMemoryOrderRepository
from src.api.dependencies import build_image_provider, build_notifier
from src.api.v1 import router as v1_router
from src.config.settings import get_settings
from src.domain.catalogue import CatalogueService

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Barista pre-order API v1 - Verify an email and place orders",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the shared code store and the order book on startup
    - Selects the notifier backend
    - Builds the catalogue service with the selected image backend
    """
    settings = get_settings()

    logger.info("Starting application...")

    # Store process-lifetime state in app state for dependency injection
    app.state.code_store = InMemoryCodeStore()
    app.state.orders = InMemoryOrderRepository(
        list(DEMO_ORDERS) if settings.seed_demo_orders else None
    )
    app.state.notifier = build_notifier(settings)
    app.state.catalogue = CatalogueService(
        catalogue=StaticCatalogue(),
        images=build_image_provider(settings),
    )

    logger.info(f"Notifier backend: {settings.notifier_backend}")
    logger.info(f"Image backend: {settings.image_backend}")
    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    logger.info(f"Discarding {len(app.state.code_store)} pending verification code(s)")


app = FastAPI(
    title="barista-preorder",
    description="Barista Coffee pre-order API - Email verification codes and confirmed orders",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint. Returns 200 OK while the process is serving."""
    return {"status": "healthy"}
