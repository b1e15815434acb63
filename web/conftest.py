import pytest
from django.apps import apps as django_apps

from apps.orders.repository import OrderRepository


@pytest.fixture(autouse=True)
def use_stubs_for_tests(settings):
    settings.USE_HTTP_ADAPTERS = False


@pytest.fixture(autouse=True)
def order_store():
    """Give every test an empty order store."""
    config = django_apps.get_app_config("orders")
    config.repository = OrderRepository()
    return config.repository
