"""Entity: Customer."""

from pydantic import BaseModel

from src.orders_api.entities.core._base import VersionedEntity
from src.orders_api.entities.core.user.entity import (
    Address,
    Email,
    Identification,
    Password,
    PersonName,
    Phone,
)


class Customer(VersionedEntity):
    """Customer as stored, including the password hash."""

    identification: str
    name: str
    email: str
    phone: str
    address: str
    password_hash: str


class CustomerRegister(BaseModel):
    """Self-service sign-up request."""

    identification: Identification
    name: PersonName
    email: Email
    phone: Phone
    address: Address
    password: Password


class CustomerCreate(CustomerRegister):
    created_by: int | None = None


class CustomerUpdate(BaseModel):
    key: int
    identification: Identification
    name: PersonName
    email: Email
    phone: Phone
    address: Address
    password: Password
    modified_by: int | None = None
    row_version: int


class CustomerRead(VersionedEntity):
    identification: str
    name: str
    email: str
    phone: str
    address: str


class CustomerLogin(BaseModel):
    email: Email
    password: Password
