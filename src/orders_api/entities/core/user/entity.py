"""User domain entity and its request/response models."""

from typing import Annotated

from pydantic import BaseModel, EmailStr, Field, TypeAdapter, ValidationError

from src.orders_api.entities.core._base import VersionedEntity

Identification = Annotated[str, Field(min_length=9, max_length=15)]
PersonName = Annotated[str, Field(min_length=1, max_length=100)]
Email = Annotated[EmailStr, Field(max_length=100)]
Phone = Annotated[str, Field(min_length=8, max_length=20)]
Address = Annotated[str, Field(min_length=1, max_length=255)]
Password = Annotated[str, Field(min_length=1, max_length=256)]
Role = Annotated[str, Field(min_length=1, max_length=100)]

_email_adapter = TypeAdapter(Email)


def normalize_email(value: str) -> str | None:
    """Return the stored form of an email address, or None if it is not one."""
    try:
        return _email_adapter.validate_python(value)
    except ValidationError:
        return None


class User(VersionedEntity):
    """User as stored, including the password hash.

    Never returned to clients directly; see ``UserRead``.
    """

    identification: str
    name: str
    email: str
    phone: str
    address: str
    password_hash: str
    role: str


class UserCreate(BaseModel):
    identification: Identification
    name: PersonName
    email: Email
    phone: Phone
    address: Address
    password: Password
    role: Role
    created_by: int | None = None


class UserUpdate(BaseModel):
    key: int
    identification: Identification
    name: PersonName
    email: Email
    phone: Phone
    address: Address
    password: Password
    role: Role
    modified_by: int | None = None
    row_version: int


class UserRead(VersionedEntity):
    identification: str
    name: str
    email: str
    phone: str
    address: str
    role: str


class UserLogin(BaseModel):
    email: Email
    password: Password
