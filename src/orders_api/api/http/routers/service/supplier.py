"""Supplier API router."""

from fastapi import APIRouter

from src.orders_api.api.http.deps import get_supplier_service
from src.orders_api.api.http.routers._versioned import add_versioned_routes
from src.orders_api.entities.service.supplier import (
    SupplierCreate,
    SupplierRead,
    SupplierUpdate,
)

router = add_versioned_routes(
    APIRouter(prefix="/api/supplier", tags=["supplier"]),
    label="Supplier",
    plural="Suppliers",
    get_service=get_supplier_service,
    create_model=SupplierCreate,
    update_model=SupplierUpdate,
    read_model=SupplierRead,
    lookups=("name",),
)
