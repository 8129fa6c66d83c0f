"""Product API router. Images travel as base64 strings."""

from fastapi import APIRouter

from src.orders_api.api.http.deps import get_product_service
from src.orders_api.api.http.routers._versioned import add_versioned_routes
from src.orders_api.entities.service.product import (
    ProductCreate,
    ProductRead,
    ProductUpdate,
)

router = add_versioned_routes(
    APIRouter(prefix="/api/product", tags=["product"]),
    label="Product",
    plural="Products",
    get_service=get_product_service,
    create_model=ProductCreate,
    update_model=ProductUpdate,
    read_model=ProductRead,
    lookups=("name",),
)
