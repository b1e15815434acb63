"""Catalog service API built with FastAPI.

This module exposes endpoints to check service health, list the products
on offer, and fetch a single product by id. The product listing lives in
``repo.CatalogRepo``, which is built once in the application lifespan and
kept on ``app.state``.
"""

import uuid
import logging
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pythonjsonlogger import jsonlogger

from repo import CatalogRepo, Product

SERVICE_NAME = "product-service"
VERSION = "1.0.0"

# logger JSON
logger = logging.getLogger("catalog")
if not logger.handlers:
    h = logging.StreamHandler()
    h.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s %(request_id)s"))
    logger.addHandler(h)
    logger.setLevel(logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.catalog = CatalogRepo()
    logger.info("catalog loaded", extra={"request_id": "-", "products": len(app.state.catalog.list())})
    yield


app = FastAPI(title="Catalog Service", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def _catalog(request: Request) -> CatalogRepo:
    return request.app.state.catalog


@app.get("/")
def service_info():
    """Describe the service and the endpoints it exposes."""
    return {
        "service": SERVICE_NAME,
        "status": "running",
        "version": VERSION,
        "endpoints": {
            "health": "/health",
            "getAllProducts": "GET /products",
            "getProductById": "GET /products/:id",
        },
    }


@app.get("/health")
def health():
    """Liveness/health probe endpoint.

    Returns:
        dict: A small JSON payload indicating service health.
    """
    return {"status": "healthy", "service": SERVICE_NAME}


@app.get("/products", response_model=List[Product])
def list_products(request: Request):
    """Return every product in declaration order."""
    products = _catalog(request).list()
    logger.info(
        "products listed",
        extra={"request_id": request.state.request_id, "count": len(products)},
    )
    return products


@app.get("/products/{product_id}", response_model=Product, responses={404: {"description": "Product not found"}})
def get_product(product_id: str, request: Request):
    """Fetch a single product.

    The id is taken as a raw path segment so that non-numeric ids answer
    with the same 404 as unknown ones instead of a validation error.

    Args:
        product_id: Path segment holding the product id.

    Returns:
        Product: The matching product, or a 404 JSON response with
        ``{"error": "Product not found"}``.
    """
    rid = request.state.request_id
    try:
        pid = int(product_id)
    except ValueError:
        pid = None

    product = _catalog(request).get(pid) if pid is not None else None
    if product is None:
        logger.info("product not found", extra={"request_id": rid, "product_id": product_id})
        return JSONResponse(status_code=404, content={"error": "Product not found"})

    logger.info("product returned", extra={"request_id": rid, "product_id": pid, "product_name": product.name})
    return product


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = rid
    try:
        response = await call_next(request)
    finally:
        logger.info("request handled", extra={"request_id": rid, "path": request.url.path, "method": request.method})
    response.headers["X-Request-ID"] = rid
    return response
