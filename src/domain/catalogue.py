"""
Catalogue domain service - product listing with lazily generated images.
"""

import asyncio
import logging
from dataclasses import dataclass, field, replace

from .models import Product
from .ports import CatalogueProvider, ImageProvider

logger = logging.getLogger(__name__)

NO_IMAGE_URL = "https://placehold.co/250x250/F7F4EF/2C2C2C?text=No+Image"


@dataclass
class CatalogueService:
    """
    Lists products, filling in missing images from the image provider.

    Images are generated concurrently, once per product id for the life of
    the service: overlapping listings await the same in-flight generation.
    A failing image provider degrades to NO_IMAGE_URL and the failure is
    forgotten, so the next listing tries again.
    """

    catalogue: CatalogueProvider
    images: ImageProvider
    _generated: dict[str, asyncio.Future[str]] = field(
        default_factory=dict, init=False, repr=False
    )

    async def list_products(self) -> list[Product]:
        products = self.catalogue.list_products()
        urls = await asyncio.gather(*(self._image_url(product) for product in products))
        return [
            replace(product, image_url=url) for product, url in zip(products, urls, strict=True)
        ]

    async def _image_url(self, product: Product) -> str:
        if product.image_url:
            return product.image_url

        pending = self._generated.get(product.id)
        if pending is None:
            pending = asyncio.ensure_future(self.images.image_for(product.name))
            self._generated[product.id] = pending

        try:
            # A cancelled listing must not cancel generation for other waiters
            return await asyncio.shield(pending)
        except Exception:
            if self._generated.get(product.id) is pending:
                del self._generated[product.id]
            logger.exception("Image generation failed for %s", product.name)
            return NO_IMAGE_URL
