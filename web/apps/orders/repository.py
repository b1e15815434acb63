"""Repository layer for storing orders.

This module contains the in-memory order store used by the application.
It keeps a thin interface so the domain layer is not coupled to how
orders are kept. Orders live only as long as the process: the store is
created by the orders app config when Django starts.
"""

import threading
from dataclasses import replace
from typing import List, Optional

from .domain import Order


class OrderRepository:
    """Append-only, in-memory store of orders.

    Ids come from a counter owned by the store, starting at 1. Allocating
    an id and appending the order happen under one lock so ids stay
    strictly increasing in insertion order when requests are served from
    several threads.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._orders: List[Order] = []
        self._next_id = 1

    def create(self, draft: Order) -> Order:
        """Persist a new order record.

        Args:
            draft: Domain ``Order`` without an id.

        Returns:
            Order: Copy of ``draft`` carrying its assigned id.
        """
        with self._lock:
            order = replace(draft, id=self._next_id)
            self._orders.append(order)
            self._next_id += 1
        return order

    def list(self, user_id: Optional[str] = None) -> List[Order]:
        """Return all orders, or only those placed by ``user_id``.

        Insertion order is preserved.
        """
        if user_id:
            return [o for o in self._orders if o.user_id == user_id]
        return list(self._orders)

    def get(self, order_id: int) -> Optional[Order]:
        """Get an order by id, or None when no order has that id."""
        for o in self._orders:
            if o.id == order_id:
                return o
        return None

    def __len__(self) -> int:
        return len(self._orders)
