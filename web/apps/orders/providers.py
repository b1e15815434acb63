"""Service provider helpers for wiring OrderService with ports.

This module exposes a small factory function `get_order_service` that
returns a configured `OrderService` instance. It uses the HTTP catalog
client when `settings.USE_HTTP_ADAPTERS` is enabled, and the in-process
catalog stub otherwise (tests and local development). The order store is
always the one owned by the orders app config.
"""

from django.apps import apps
from django.conf import settings
from .domain import OrderService
from .adapters import CatalogStub
from .http_adapters import HttpCatalogClient
from .repository import OrderRepository


def get_order_repository() -> OrderRepository:
    """Return the process-wide order store created at app startup."""
    return apps.get_app_config("orders").repository


def get_order_service() -> OrderService:
    """Return a configured OrderService instance.

    Returns:
        OrderService: A service instance with appropriate ports.
    """
    if getattr(settings, "USE_HTTP_ADAPTERS", True):
        catalog = HttpCatalogClient()
    else:
        catalog = CatalogStub()
    return OrderService(catalog=catalog, orders=get_order_repository())
