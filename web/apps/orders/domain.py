"""Domain models, ports and service for orders.

This module contains the dataclasses used as DTOs for products and orders,
the exception hierarchy raised while placing an order, the protocol
definitions (ports) for the catalog and the order store, and the domain
service that orchestrates order creation.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Tuple

CENTS = Decimal("0.01")


# ---- Enums ----
class OrderStatus(str, Enum):
    """Enumeration of the possible order statuses.

    Orders are only ever created as PENDING; there is no transition out
    of it."""

    PENDING = "pending"


# ---- Errors ----
class OrderError(Exception):
    """Base class for failures raised while creating an order.

    Attributes:
        code: Short machine-readable error code.
    """

    code = "ORDER_ERROR"


class InvalidRequest(OrderError):
    code = "INVALID_REQUEST"

    def __init__(self):
        super().__init__("Invalid request: userId and items array required")


class ProductNotFound(OrderError):
    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class InvalidQuantity(OrderError):
    code = "INVALID_QUANTITY"

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Invalid quantity for product {product_id}")


class InsufficientStock(OrderError):
    code = "INSUFFICIENT_STOCK"

    def __init__(self, product_name: str):
        self.product_name = product_name
        super().__init__(f"Insufficient stock for product {product_name}")


class UpstreamFailure(OrderError):
    """The catalog could not be queried or answered unexpectedly."""

    code = "UPSTREAM_FAILURE"


# ---- Entities / DTOs ----
@dataclass(frozen=True)
class Product:
    """Catalog product as seen by the orders domain.

    Attributes:
        id: Catalog identifier.
        name: Product name.
        price: Unit price as a Decimal.
        description: Product description.
        stock: Units available at lookup time.
    """

    id: int
    name: str
    price: Decimal
    description: str = ""
    stock: int = 0


@dataclass(frozen=True)
class OrderItem:
    """A requested line item: which product and how many units."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderLine:
    """A persisted line item.

    Name and unit price are copied from the product when the order is
    created, so later catalog changes do not alter existing orders.
    """

    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


@dataclass(frozen=True)
class Order:
    """An order as kept by the order store.

    Attributes:
        id: Store-assigned identifier, or None for a draft not yet stored.
        user_id: Buyer identifier.
        items: Persisted line items in request order, kept as a tuple.
        total: Sum of subtotals rounded to cents.
        status: Current OrderStatus.
        created_at: UTC creation timestamp.
    """

    id: Optional[int]
    user_id: str
    items: Tuple[OrderLine, ...]
    total: Decimal
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))


# ---- Ports (DIP) ----
class CatalogPort(Protocol):
    """Port describing the catalog lookup used by the domain."""

    def get_product(self, product_id: int) -> Optional[Product]:
        """Look up a product.

        Args:
            product_id: Catalog identifier.

        Returns:
            The product, or None when the catalog does not know the id.

        Raises:
            UpstreamFailure: When the catalog cannot be queried.
        """
        raise NotImplementedError()


class OrderStorePort(Protocol):
    """Port describing the order store used by the domain."""

    def create(self, draft: Order) -> Order:
        """Assign the next id to ``draft``, append it and return the stored order."""
        raise NotImplementedError()


# ---- Domain service ----
class OrderService:
    """Domain service responsible for creating orders.

    For each requested line item the service asks the catalog for the
    product, checks quantity and stock, and accumulates the total. The
    order reaches the store only when every item passed; the first failing
    item aborts the whole order.

    Stock is checked against the catalog at lookup time and is not
    reserved or decremented, so two concurrent orders may both pass the
    check for the last unit.
    """

    def __init__(self, catalog: CatalogPort, orders: OrderStorePort):
        """Initialize the service with required dependencies.

        Args:
            catalog: CatalogPort used to resolve products.
            orders: OrderStorePort used to persist created orders.
        """
        self.catalog = catalog
        self.orders = orders

    def create_order(self, user_id: str, items: Sequence[OrderItem]) -> Order:
        """Validate a cart and persist it as a new pending order.

        Args:
            user_id: Buyer identifier; must be non-empty.
            items: Requested line items; must be non-empty.

        Returns:
            The stored Order with its assigned id.

        Raises:
            InvalidRequest: If ``user_id`` or ``items`` is empty.
            ProductNotFound: If the catalog does not know a product.
            InvalidQuantity: If a quantity is zero or negative.
            InsufficientStock: If a product has fewer units than requested.
            UpstreamFailure: If the catalog lookup itself fails.
        """
        if not user_id or not items:
            raise InvalidRequest()

        lines: List[OrderLine] = []
        total = Decimal("0")
        for item in items:
            product = self.catalog.get_product(item.product_id)
            if product is None:
                raise ProductNotFound(item.product_id)
            if item.quantity <= 0:
                raise InvalidQuantity(item.product_id)
            if product.stock < item.quantity:
                raise InsufficientStock(product.name)

            subtotal = product.price * item.quantity
            total += subtotal
            lines.append(OrderLine(
                product_id=product.id,
                product_name=product.name,
                quantity=item.quantity,
                unit_price=product.price,
                subtotal=subtotal,
            ))

        draft = Order(
            id=None,
            user_id=user_id,
            items=tuple(lines),
            total=total.quantize(CENTS, rounding=ROUND_HALF_UP),
            status=OrderStatus.PENDING,
        )
        return self.orders.create(draft)
