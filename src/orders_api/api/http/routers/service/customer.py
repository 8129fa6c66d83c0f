"""Customer API router. Responses never include password hashes."""

from fastapi import APIRouter

from src.orders_api.api.http.deps import get_customer_service
from src.orders_api.api.http.routers._versioned import add_versioned_routes
from src.orders_api.entities.service.customer import (
    CustomerCreate,
    CustomerRead,
    CustomerUpdate,
)

router = add_versioned_routes(
    APIRouter(prefix="/api/customer", tags=["customer"]),
    label="Customer",
    plural="Customers",
    get_service=get_customer_service,
    create_model=CustomerCreate,
    update_model=CustomerUpdate,
    read_model=CustomerRead,
    lookups=("identification", "email"),
)
