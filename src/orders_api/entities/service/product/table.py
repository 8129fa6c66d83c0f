"""Product database table model."""

from decimal import Decimal

import sqlalchemy as sa
from sqlmodel import Field

from src.orders_api.entities.core._base import VersionedTable


class ProductTable(VersionedTable, table=True):
    """Database persistence model for products.

    Suppliers and categories cannot be deleted while products reference them.
    """

    __tablename__ = "products"

    image: bytes = Field(sa_type=sa.LargeBinary)
    name: str = Field(max_length=100, unique=True, index=True)
    detail: str = Field(max_length=500)
    price: Decimal = Field(max_digits=8, decimal_places=2)
    available_quantity: int = Field(default=0)
    supplied_by: int = Field(foreign_key="suppliers.key", ondelete="RESTRICT", index=True)
    categorized_by: int = Field(foreign_key="categories.key", ondelete="RESTRICT", index=True)
