"""HTTP views for the orders app.

This module contains DRF API views used by the orders service. Views are
kept intentionally small: they validate requests (via Pydantic), map to
domain DTOs, delegate to the domain service, and return an HTTP response.

The views obtain a configured ``OrderService`` from
``providers.get_order_service()``, which wires either the HTTP catalog
client (``HttpCatalogClient``) or the in-process ``CatalogStub`` depending
on runtime settings. This allows tests and local development to swap
implementations without changing view logic.

Error bodies use a single ``error`` key holding a human-readable message.
"""
import logging

from pydantic import ValidationError
from rest_framework import status
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from . import providers
from .domain import (
    InsufficientStock,
    InvalidQuantity,
    InvalidRequest,
    OrderError,
    OrderItem,
    ProductNotFound,
)
from .schemas import CreateOrderDTO, OrderReadDTO

logger = logging.getLogger("orders")

ERROR_STATUS = {
    InvalidRequest: status.HTTP_400_BAD_REQUEST,
    InvalidQuantity: status.HTTP_400_BAD_REQUEST,
    InsufficientStock: status.HTTP_400_BAD_REQUEST,
    ProductNotFound: status.HTTP_404_NOT_FOUND,
}


class OrdersCollectionView(APIView):
    """List orders or create one.

    GET returns every stored order, optionally filtered by the ``userId``
    query parameter. POST validates the cart through the domain service,
    which looks every product up in the catalog, and returns the created
    order.
    """
    throttle_classes = [ScopedRateThrottle]

    def get_throttles(self):
        # DRF evaluates throttles in initial(), before get/post
        self.throttle_scope = "orders_list" if self.request.method == "GET" else "orders_create"
        return [throttle() for throttle in self.throttle_classes]

    def get(self, request):
        user_id = request.query_params.get("userId")
        orders = providers.get_order_repository().list(user_id=user_id)
        logger.info("orders listed", extra={"count": len(orders), "user_id": user_id})
        return Response([OrderReadDTO.from_domain(o).to_body() for o in orders], status=status.HTTP_200_OK)

    def post(self, request):
        """Create a new order.

        Args:
            request (Request): DRF request with a JSON body
                ``{"userId": ..., "items": [{"productId": ..., "quantity": ...}]}``.

        Returns:
            Response: One of the following responses.
            - 201 with the created order.
            - 400 when the body is missing, malformed, or has no user/items.
            - 400 when a quantity is not positive or stock is insufficient.
            - 404 when a product does not exist in the catalog.
            - 500 with ``details`` when the catalog lookup fails unexpectedly.
        """
        # 1) Pydantic validation
        try:
            dto = CreateOrderDTO.model_validate(request.data)
        except (ParseError, UnsupportedMediaType, ValidationError) as e:
            logger.info("order rejected", extra={"code": InvalidRequest.code, "reason": str(e)})
            return Response({"error": str(InvalidRequest())}, status=status.HTTP_400_BAD_REQUEST)

        # 2) Domain
        items = [OrderItem(product_id=i.product_id, quantity=i.quantity) for i in dto.items]
        service = providers.get_order_service()
        try:
            order = service.create_order(dto.user_id, items)
        except OrderError as e:
            status_code = ERROR_STATUS.get(type(e))
            if status_code is None:
                return self._failed(e)
            logger.info("order rejected", extra={"code": e.code, "user_id": dto.user_id, "reason": str(e)})
            return Response({"error": str(e)}, status=status_code)
        except Exception as e:
            return self._failed(e)

        # 3) Response
        logger.info(
            "order created",
            extra={"order_id": order.id, "user_id": order.user_id, "total": str(order.total)},
        )
        return Response(OrderReadDTO.from_domain(order).to_body(), status=status.HTTP_201_CREATED)

    def _failed(self, exc: Exception) -> Response:
        logger.error("order creation failed", extra={"reason": str(exc)}, exc_info=exc)
        return Response(
            {"error": "Failed to create order", "details": str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class RetrieveOrderView(APIView):
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "orders_detail"

    def get(self, request, oid: str):
        try:
            order = providers.get_order_repository().get(int(oid))
        except ValueError:
            order = None
        if order is None:
            logger.info("order not found", extra={"order_id": oid})
            return Response({"error": "Order not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(OrderReadDTO.from_domain(order).to_body(), status=status.HTTP_200_OK)
