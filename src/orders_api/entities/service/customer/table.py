"""Customer database table model."""

from sqlmodel import Field

from src.orders_api.entities.core._base import VersionedTable


class CustomerTable(VersionedTable, table=True):
    """Database persistence model for customers."""

    __tablename__ = "customers"

    identification: str = Field(max_length=15, unique=True, index=True)
    name: str = Field(max_length=100)
    email: str = Field(max_length=100, unique=True, index=True)
    phone: str = Field(max_length=20)
    address: str = Field(max_length=255)
    password_hash: str = Field(max_length=256)
