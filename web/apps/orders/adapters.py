"""In-process stub adapters for the orders domain ports.

The stub implements ``CatalogPort`` without any network calls. It is
intended for unit tests and local development where deterministic
behavior is useful and the catalog service is not running.
"""

from decimal import Decimal
from typing import Iterable, Optional
from .domain import CatalogPort, Product


DEFAULT_PRODUCTS = (
    Product(1, "Laptop", Decimal("999.99"), "High-performance laptop", 10),
    Product(2, "Mouse", Decimal("29.99"), "Wireless mouse", 50),
    Product(3, "Keyboard", Decimal("79.99"), "Mechanical keyboard", 30),
    Product(4, "Monitor", Decimal("249.99"), "27-inch 4K monitor", 15),
    Product(5, "Headphones", Decimal("149.99"), "Noise-cancelling headphones", 25),
)


class CatalogStub(CatalogPort):
    """Stub implementation of ``CatalogPort``.

    Serves a fixed set of products, by default the same listing the
    catalog service starts with. ``lookups`` records every id asked for,
    in call order.
    """

    def __init__(self, products: Iterable[Product] = DEFAULT_PRODUCTS):
        self._products = {p.id: p for p in products}
        self.lookups: list[int] = []

    def get_product(self, product_id: int) -> Optional[Product]:
        """Return the product with ``product_id`` or None when unknown."""
        self.lookups.append(product_id)
        return self._products.get(product_id)
