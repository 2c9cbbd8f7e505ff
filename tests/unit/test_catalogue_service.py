"""
Unit tests for CatalogueService and the catalogue adapters.
"""

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from src.adapters.catalogue import PRODUCTS, PlaceholderImageProvider, StaticCatalogue
from src.domain.catalogue import NO_IMAGE_URL, CatalogueService

pytestmark = pytest.mark.anyio

TEMPLATE = "https://img.test/250?text={text}"


class TestStaticCatalogue:
    async def test_lists_menu(self) -> None:
        products = StaticCatalogue().list_products()
        assert [p.name for p in products][:2] == ["Espresso Simple", "Latte Vainilla"]
        assert len(products) == 6

    async def test_some_products_lack_images(self) -> None:
        assert any(p.image_url is None for p in PRODUCTS)
        assert any(p.image_url for p in PRODUCTS)


class TestPlaceholderImageProvider:
    async def test_url_encodes_product_name(self) -> None:
        provider = PlaceholderImageProvider(TEMPLATE)
        assert await provider.image_for("Latte Vainilla (Alt)") == (
            "https://img.test/250?text=Latte+Vainilla+%28Alt%29"
        )


class TestCatalogueService:
    async def test_every_product_gets_an_image(self) -> None:
        service = CatalogueService(StaticCatalogue(), PlaceholderImageProvider(TEMPLATE))

        products = await service.list_products()

        assert all(p.image_url for p in products)

    async def test_stored_images_kept(self) -> None:
        images = AsyncMock()
        images.image_for.return_value = "generated"
        service = CatalogueService(StaticCatalogue(), images)

        products = await service.list_products()

        by_id = {p.id: p for p in products}
        assert by_id["1"].image_url == PRODUCTS[0].image_url
        assert by_id["2"].image_url == "generated"

    async def test_generated_images_cached(self) -> None:
        images = AsyncMock()
        images.image_for.return_value = "generated"
        service = CatalogueService(StaticCatalogue(), images)

        await service.list_products()
        await service.list_products()

        missing = sum(1 for p in PRODUCTS if not p.image_url)
        assert images.image_for.await_count == missing

    async def test_provider_failure_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        images = AsyncMock()
        images.image_for.side_effect = RuntimeError("quota exceeded")
        service = CatalogueService(StaticCatalogue(), images)

        with caplog.at_level(logging.ERROR):
            products = await service.list_products()

        fallback = [p for p in products if p.image_url == NO_IMAGE_URL]
        assert len(fallback) == sum(1 for p in PRODUCTS if not p.image_url)
        assert "Image generation failed" in caplog.text

    async def test_failures_not_cached(self) -> None:
        images = AsyncMock()
        images.image_for.side_effect = [RuntimeError("down")] * 3 + ["ok"] * 3
        service = CatalogueService(StaticCatalogue(), images)

        await service.list_products()
        products = await service.list_products()

        assert all(p.image_url != NO_IMAGE_URL for p in products)

    async def test_overlapping_listings_share_generation(self) -> None:
        release = asyncio.Event()

        async def slow_image(name: str) -> str:
            await release.wait()
            return f"generated:{name}"

        images = AsyncMock()
        images.image_for.side_effect = slow_image
        service = CatalogueService(StaticCatalogue(), images)

        first = asyncio.create_task(service.list_products())
        second = asyncio.create_task(service.list_products())
        await asyncio.sleep(0)
        release.set()
        a, b = await asyncio.gather(first, second)

        missing = sum(1 for p in PRODUCTS if not p.image_url)
        assert images.image_for.call_count == missing
        assert a == b

    async def test_cancelled_listing_does_not_cancel_generation(self) -> None:
        release = asyncio.Event()

        async def slow_image(name: str) -> str:
            await release.wait()
            return "generated"

        images = AsyncMock()
        images.image_for.side_effect = slow_image
        service = CatalogueService(StaticCatalogue(), images)

        abandoned = asyncio.create_task(service.list_products())
        await asyncio.sleep(0)
        waiting = asyncio.create_task(service.list_products())
        await asyncio.sleep(0)
        abandoned.cancel()
        release.set()

        products = await waiting
        with pytest.raises(asyncio.CancelledError):
            await abandoned

        assert all(p.image_url != NO_IMAGE_URL for p in products)
