"""Unit tests for the OrderService domain orchestration.

These tests validate order creation under different conditions: happy
path, totals, empty requests, unknown products, bad quantities and
insufficient stock. A stub catalog and a fresh in-memory store are used
so outcomes are deterministic and no network is involved.
"""

from decimal import Decimal

import pytest
from apps.orders.adapters import CatalogStub
from apps.orders.domain import (
    InsufficientStock,
    InvalidQuantity,
    InvalidRequest,
    Order,
    OrderItem,
    OrderLine,
    OrderService,
    OrderStatus,
    Product,
    ProductNotFound,
    UpstreamFailure,
)
from apps.orders.repository import OrderRepository


@pytest.fixture
def catalog():
    return CatalogStub()


@pytest.fixture
def store():
    return OrderRepository()


@pytest.fixture
def service(catalog, store):
    return OrderService(catalog, store)


def test_create_order_single_item_total(service, store):
    """Two laptops at 999.99 come to 1999.98."""
    order = service.create_order("user123", [OrderItem(1, 2)])
    assert order.id == 1
    assert order.total == Decimal("1999.98")
    assert order.status == OrderStatus.PENDING
    assert order.user_id == "user123"
    assert store.list() == [order]


def test_create_order_multiple_items_total(service):
    order = service.create_order("user123", [OrderItem(1, 1), OrderItem(2, 2)])
    assert order.total == Decimal("1059.97")
    assert [line.subtotal for line in order.items] == [Decimal("999.99"), Decimal("59.98")]


def test_total_equals_rounded_sum_of_subtotals(service):
    order = service.create_order("u", [OrderItem(3, 3), OrderItem(4, 1), OrderItem(5, 7)])
    expected = sum(line.unit_price * line.quantity for line in order.items)
    assert order.total == expected.quantize(Decimal("0.01"))


def test_lines_snapshot_product_name_and_price(service):
    order = service.create_order("u", [OrderItem(2, 3)])
    line = order.items[0]
    assert line.product_id == 2
    assert line.product_name == "Mouse"
    assert line.unit_price == Decimal("29.99")
    assert line.quantity == 3
    assert line.subtotal == Decimal("89.97")


def test_total_rounds_half_up_to_cents(store):
    catalog = CatalogStub([Product(7, "Bolt", Decimal("0.005"), "", 100)])
    order = OrderService(catalog, store).create_order("u", [OrderItem(7, 1)])
    assert order.total == Decimal("0.01")


@pytest.mark.parametrize("user_id,items", [
    ("", [OrderItem(1, 1)]),
    ("user123", []),
    (None, [OrderItem(1, 1)]),
])
def test_invalid_request_never_calls_catalog(catalog, service, store, user_id, items):
    with pytest.raises(InvalidRequest) as e:
        service.create_order(user_id, items)
    assert str(e.value) == "Invalid request: userId and items array required"
    assert catalog.lookups == []
    assert len(store) == 0


def test_unknown_product_aborts_whole_order(catalog, service, store):
    """A valid first item does not survive a later unknown product."""
    with pytest.raises(ProductNotFound) as e:
        service.create_order("u", [OrderItem(1, 1), OrderItem(999, 1)])
    assert str(e.value) == "Product 999 not found"
    assert catalog.lookups == [1, 999]
    assert len(store) == 0


@pytest.mark.parametrize("quantity", [0, -3])
def test_non_positive_quantity(service, store, quantity):
    with pytest.raises(InvalidQuantity) as e:
        service.create_order("u", [OrderItem(2, quantity)])
    assert str(e.value) == "Invalid quantity for product 2"
    assert len(store) == 0


def test_unknown_product_reported_before_bad_quantity(service):
    with pytest.raises(ProductNotFound):
        service.create_order("u", [OrderItem(42, 0)])


def test_insufficient_stock(service, store):
    with pytest.raises(InsufficientStock) as e:
        service.create_order("u", [OrderItem(1, 11)])
    assert str(e.value) == "Insufficient stock for product Laptop"
    assert len(store) == 0


def test_quantity_equal_to_stock_is_accepted(service):
    order = service.create_order("u", [OrderItem(1, 10)])
    assert order.items[0].quantity == 10


def test_first_failing_item_wins(service):
    with pytest.raises(InsufficientStock):
        service.create_order("u", [OrderItem(1, 50), OrderItem(999, 1)])


def test_stock_is_not_decremented(service):
    service.create_order("a", [OrderItem(1, 10)])
    order = service.create_order("b", [OrderItem(1, 10)])
    assert order.id == 2


def test_ids_increase_across_successful_orders(service):
    ids = [service.create_order("u", [OrderItem(2, 1)]).id for _ in range(3)]
    assert ids == [1, 2, 3]


def test_failed_order_does_not_consume_an_id(service):
    service.create_order("u", [OrderItem(2, 1)])
    with pytest.raises(ProductNotFound):
        service.create_order("u", [OrderItem(999, 1)])
    assert service.create_order("u", [OrderItem(2, 1)]).id == 2


def test_upstream_failure_propagates_and_store_unchanged(store):
    class BrokenCatalog:
        def get_product(self, product_id):
            raise UpstreamFailure("Catalog request failed: boom")

    with pytest.raises(UpstreamFailure):
        OrderService(BrokenCatalog(), store).create_order("u", [OrderItem(1, 1)])
    assert len(store) == 0


def test_stored_order_items_are_immutable(service):
    order = service.create_order("u", [OrderItem(2, 1)])
    assert isinstance(order.items, tuple)
    with pytest.raises(AttributeError):
        order.items.append(order.items[0])


def test_order_coerces_items_to_tuple():
    line = OrderLine(2, "Mouse", 1, Decimal("29.99"), Decimal("29.99"))
    lines = [line]
    order = Order(id=None, user_id="u", items=lines, total=Decimal("29.99"))
    lines.append(line)
    assert order.items == (line,)
