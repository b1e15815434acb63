from django.urls import path
from .api import health_view, service_info_view

urlpatterns = [
    path("", service_info_view, name="service-info"),
    path("health", health_view, name="health"),
]
