from django.urls import re_path
from .views import OrdersCollectionView, RetrieveOrderView
app_name = "orders"

# trailing slash optional on both routes
urlpatterns = [
    re_path(r"^orders/?$", OrdersCollectionView.as_view(), name="orders-collection"),  # GET list / POST create
    re_path(r"^orders/(?P<oid>[^/]+)/?$", RetrieveOrderView.as_view(), name="orders-detail"),
]
