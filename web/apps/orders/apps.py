from django.apps import AppConfig


class OrdersConfig(AppConfig):
    name = "apps.orders"
    label = "orders"

    def ready(self):
        # the store lives as long as the process
        from .repository import OrderRepository
        self.repository = OrderRepository()
