"""Entity: Supplier."""

from pydantic import BaseModel, Field

from src.orders_api.entities.core._base import VersionedEntity


class Supplier(VersionedEntity):
    """Supplier as stored."""

    name: str


class SupplierCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    created_by: int | None = None


class SupplierUpdate(BaseModel):
    key: int
    name: str = Field(min_length=1, max_length=100)
    modified_by: int
    row_version: int


class SupplierRead(Supplier):
    """Supplier response body."""
