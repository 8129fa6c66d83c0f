"""Entity: Category."""

from pydantic import BaseModel, Field

from src.orders_api.entities.core._base import VersionedEntity


class Category(VersionedEntity):
    """Category as stored, used as the snapshot for updates."""

    name: str


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    created_by: int | None = None


class CategoryUpdate(BaseModel):
    key: int
    name: str = Field(min_length=1, max_length=100)
    modified_by: int | None = None
    row_version: int


class CategoryRead(Category):
    """Category response body."""
