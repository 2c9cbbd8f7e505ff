"""Catalogue adapters - Product listing and image providers."""

from .genai_images import GenAIImageProvider
from .images import PlaceholderImageProvider
from .static import DEMO_ORDERS, PRODUCTS, StaticCatalogue

__all__ = [
    "DEMO_ORDERS",
    "PRODUCTS",
    "GenAIImageProvider",
    "PlaceholderImageProvider",
    "StaticCatalogue",
]
