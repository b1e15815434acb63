"""API tests for the catalog service.

The application lifespan is entered through ``TestClient`` used as a
context manager so the catalog repository is built exactly as at startup.
"""
import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "healthy", "service": "product-service"}


def test_service_info_lists_endpoints(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["service"] == "product-service"
    assert body["status"] == "running"
    assert "getProductById" in body["endpoints"]


def test_list_products_in_declaration_order(client):
    r = client.get("/products")
    assert r.status_code == 200
    products = r.json()
    assert [p["id"] for p in products] == [1, 2, 3, 4, 5]
    assert products[0] == {
        "id": 1,
        "name": "Laptop",
        "price": 999.99,
        "description": "High-performance laptop",
        "stock": 10,
    }


def test_get_product_by_id(client):
    r = client.get("/products/2")
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "Mouse"
    assert body["price"] == 29.99
    assert body["stock"] == 50


def test_get_unknown_product_returns_404(client):
    r = client.get("/products/999")
    assert r.status_code == 404
    assert r.json() == {"error": "Product not found"}


def test_get_non_numeric_product_id_returns_404(client):
    r = client.get("/products/abc")
    assert r.status_code == 404
    assert r.json()["error"] == "Product not found"


def test_request_id_is_echoed(client):
    r = client.get("/health", headers={"X-Request-ID": "rid-123"})
    assert r.headers["X-Request-ID"] == "rid-123"


def test_request_id_generated_when_missing(client):
    r = client.get("/products")
    assert r.headers.get("X-Request-ID")
