"""Supplier database table model."""

from sqlmodel import Field

from src.orders_api.entities.core._base import VersionedTable


class SupplierTable(VersionedTable, table=True):
    """Database persistence model for suppliers."""

    __tablename__ = "suppliers"

    name: str = Field(max_length=100, unique=True, index=True)
