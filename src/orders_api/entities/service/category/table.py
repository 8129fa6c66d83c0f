"""Category database table model."""

from sqlmodel import Field

from src.orders_api.entities.core._base import VersionedTable


class CategoryTable(VersionedTable, table=True):
    """Database persistence model for categories."""

    __tablename__ = "categories"

    name: str = Field(max_length=100, unique=True, index=True)
