"""User database table model."""

from sqlmodel import Field

from src.orders_api.entities.core._base import VersionedTable


class UserTable(VersionedTable, table=True):
    """Database persistence model for users.

    ``created_by`` and ``modified_by`` point back at this table.
    """

    __tablename__ = "users"

    identification: str = Field(max_length=15, unique=True, index=True)
    name: str = Field(max_length=100)
    email: str = Field(max_length=100, unique=True, index=True)
    phone: str = Field(max_length=20)
    address: str = Field(max_length=255)
    password_hash: str = Field(max_length=256)
    role: str = Field(max_length=100)
