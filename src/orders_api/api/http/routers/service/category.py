"""Category API router."""

from fastapi import APIRouter

from src.orders_api.api.http.deps import get_category_service
from src.orders_api.api.http.routers._versioned import add_versioned_routes
from src.orders_api.entities.service.category import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
)

router = add_versioned_routes(
    APIRouter(prefix="/api/category", tags=["category"]),
    label="Category",
    plural="Categories",
    get_service=get_category_service,
    create_model=CategoryCreate,
    update_model=CategoryUpdate,
    read_model=CategoryRead,
    lookups=("name",),
)
