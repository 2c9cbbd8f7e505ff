"""
Static catalogue adapter - Implements CatalogueProvider protocol.

The shop's menu is small and fixed, so it lives in code.
"""

from decimal import Decimal

from src.domain.models import Order, OrderStatus, Product, SizeOption


def _sizes(*pairs: tuple[str, str]) -> tuple[SizeOption, ...]:
    return tuple(SizeOption(size=size, price=Decimal(price)) for size, price in pairs)


_UNSPLASH = "https://images.unsplash.com/{photo}?q=80&w=250&h=250&auto=format&fit=crop"

PRODUCTS: tuple[Product, ...] = (
    Product(
        id="1",
        name="Espresso Simple",
        description="Shot de café puro y fuerte.",
        sizes=_sizes(("4 oz", "1.50"), ("8 oz", "2.25")),
        image_url=_UNSPLASH.format(photo="photo-1509042239860-f550ce710b93"),
    ),
    Product(
        id="2",
        name="Latte Vainilla",
        description="Leche texturizada con sirope de vainilla.",
        sizes=_sizes(("8 oz", "3.25"), ("12 oz", "4.00")),
    ),
    Product(
        id="3",
        name="Latte Vainilla (Alt)",
        description="Shot de café puro y fuerte.",
        sizes=_sizes(("8 oz", "3.25"), ("12 oz", "4.00")),
        image_url=_UNSPLASH.format(photo="photo-1572442388796-11668a67d5b2"),
    ),
    Product(
        id="4",
        name="Cappuccino",
        description="Shot de café puro y vainilla.",
        sizes=_sizes(("8 oz", "3.00"), ("12 oz", "3.75")),
    ),
    Product(
        id="5",
        name="Cappuccino (Alt)",
        description="Espresso con leche espumada.",
        sizes=_sizes(("8 oz", "3.00"), ("12 oz", "3.75")),
        image_url=_UNSPLASH.format(photo="photo-1557006021-b95154529a13"),
    ),
    Product(
        id="6",
        name="Cappuccino Cacao",
        description="Espresso con leche espumada y cacao.",
        sizes=_sizes(("8 oz", "3.50"), ("12 oz", "4.25")),
    ),
)

# Orders shown on the barista view of a fresh demo deployment (most recent first)
DEMO_ORDERS: tuple[Order, ...] = (
    Order(id="ord1", customer_name="Employee", total=Decimal("13.00"), status=OrderStatus.CONFIRMED),
    Order(id="ord2", customer_name="Leuni", total=Decimal("6.50"), status=OrderStatus.CONFIRMED),
    Order(id="ord3", customer_name="Employee", total=Decimal("3.00"), status=OrderStatus.CONFIRMED),
    Order(id="ord4", customer_name="Employee", total=Decimal("3.50"), status=OrderStatus.CONFIRMED),
)


class StaticCatalogue:
    """Implements CatalogueProvider protocol over the PRODUCTS tuple."""

    def __init__(self, products: tuple[Product, ...] = PRODUCTS) -> None:
        self._products = products

    def list_products(self) -> list[Product]:
        return list(self._products)
