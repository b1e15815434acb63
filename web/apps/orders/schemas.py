"""Pydantic schemas for orders.

This module exposes the request validation schema used by the create
endpoint and the read schemas used to render orders. Field names are
snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .domain import Order


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderItemIn(CamelModel):
    """Input schema for a single order line item.

    Attributes:
        product_id: Catalog product id (``productId``).
        quantity: Units requested. Not range-checked here: a non-positive
            quantity is reported per product by the domain service, after
            the product lookup.
    """

    product_id: int
    quantity: int


class CreateOrderDTO(CamelModel):
    """Schema for creating an order.

    Attributes:
        user_id: Buyer identifier (``userId``), non-empty.
        items: Non-empty list of `OrderItemIn` items.
    """

    user_id: str = Field(min_length=1)
    items: List[OrderItemIn] = Field(min_length=1)


class OrderLineOut(CamelModel):
    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


class OrderReadDTO(CamelModel):
    """Read representation of a stored order."""

    id: int
    user_id: str
    items: List[OrderLineOut]
    total: Decimal
    status: str
    created_at: datetime

    @classmethod
    def from_domain(cls, order: Order) -> "OrderReadDTO":
        return cls(
            id=order.id,
            user_id=order.user_id,
            items=[
                OrderLineOut(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    subtotal=line.subtotal,
                )
                for line in order.items
            ],
            total=order.total,
            status=order.status.value,
            created_at=order.created_at,
        )

    def to_body(self) -> dict:
        """Dump with camelCase keys, keeping Decimals for the JSON renderer."""
        return self.model_dump(by_alias=True)
