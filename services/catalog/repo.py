"""In-memory repository for the product catalog.

This module holds the static product listing served by the catalog service.
Records are seeded once when the repository is built (at application
startup) and are never mutated afterwards: there is no write path, and stock
figures are informational only (placing an order does not decrement them).
"""

from typing import Iterable, List, Optional
from pydantic import BaseModel, Field


class Product(BaseModel):
    """A product offered by the catalog.

    Attributes:
        id: Stable integer identifier, unique within the catalog.
        name: Human-readable product name.
        price: Unit price (non-negative).
        description: Short marketing description.
        stock: Units available (non-negative).
    """
    id: int
    name: str
    price: float = Field(ge=0)
    description: str
    stock: int = Field(ge=0)


SEED_PRODUCTS = [
    Product(id=1, name="Laptop", price=999.99, description="High-performance laptop", stock=10),
    Product(id=2, name="Mouse", price=29.99, description="Wireless mouse", stock=50),
    Product(id=3, name="Keyboard", price=79.99, description="Mechanical keyboard", stock=30),
    Product(id=4, name="Monitor", price=249.99, description="27-inch 4K monitor", stock=15),
    Product(id=5, name="Headphones", price=149.99, description="Noise-cancelling headphones", stock=25),
]


class CatalogRepo:
    """Read-only repository over a fixed list of products.

    Products keep the order in which they were declared.
    """

    def __init__(self, products: Iterable[Product] = SEED_PRODUCTS):
        self._products: List[Product] = list(products)
        self._by_id = {p.id: p for p in self._products}
        if len(self._by_id) != len(self._products):
            raise ValueError("DUPLICATE_PRODUCT_ID")

    def list(self) -> List[Product]:
        """Return every product in declaration order."""
        return list(self._products)

    def get(self, product_id: int) -> Optional[Product]:
        """Get a product by id.

        Args:
            product_id: Identifier to look up.

        Returns:
            Product | None: The matching record, or None when unknown.
        """
        return self._by_id.get(product_id)
