"""HTTP adapter client for the catalog service.

This module implements the ``CatalogPort`` over HTTP using ``httpx``.
Each lookup is a single blocking GET to ``/products/<id>``:

- Request correlation: propagates ``X-Request-ID`` from the ContextVar set
  by the gateway middleware.
- No retries and no circuit breaking: a failed call fails the order.
- Transport errors, unexpected statuses and malformed payloads surface as
  ``UpstreamFailure``; a 404 means the product does not exist.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

import httpx
from django.conf import settings
from django.utils.module_loading import import_string

from .domain import CatalogPort, Product, UpstreamFailure

REQUEST_ID_CTX = import_string("gateway.middleware.REQUEST_ID_CTX")


def _request_headers(extra: Optional[dict] = None) -> dict:
    """Build base headers including X-Request-ID and any extras.

    Args:
        extra: Optional dict of additional headers to include.

    Returns:
        dict: Final headers dictionary for the outgoing request.
    """
    headers: dict[str, str] = {}
    rid = REQUEST_ID_CTX.get()
    if rid and rid != "-":
        headers["X-Request-ID"] = rid
    if extra:
        headers.update(extra)
    return headers


def _to_product(data: dict) -> Product:
    """Map a catalog JSON payload into a domain ``Product``.

    Prices go through ``str`` so ``999.99`` becomes ``Decimal("999.99")``
    and not its binary float expansion.
    """
    return Product(
        id=int(data["id"]),
        name=str(data["name"]),
        price=Decimal(str(data["price"])),
        description=str(data.get("description", "")),
        stock=int(data["stock"]),
    )


class HttpCatalogClient(CatalogPort):
    """HTTP client for the catalog service."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or settings.CATALOG_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.HTTP_TIMEOUT_SECS

    def get_product(self, product_id: int) -> Optional[Product]:
        """Fetch a product from the catalog service.

        Business mappings:
        - 200 → the decoded ``Product``
        - 404 → None (unknown product)

        Args:
            product_id: Catalog identifier.

        Returns:
            Product | None: The product, or None when the catalog answers 404.

        Raises:
            UpstreamFailure: On transport errors, any other non-2xx status,
                or a payload that cannot be decoded into a product.
        """
        url = f"{self.base_url}/products/{product_id}"
        try:
            with httpx.Client(timeout=self.timeout) as client:
                resp = client.get(url, headers=_request_headers() or None)
        except httpx.RequestError as e:
            raise UpstreamFailure(f"Catalog request failed: {e}") from e

        if resp.status_code == 404:
            return None
        if resp.status_code != 200:
            raise UpstreamFailure(f"Catalog responded with status {resp.status_code}")

        try:
            return _to_product(resp.json())
        except (KeyError, TypeError, ValueError, InvalidOperation) as e:
            raise UpstreamFailure(f"Malformed catalog response: {e}") from e
