"""Entity: Product."""

import base64
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field, WithJsonSchema, field_serializer

from src.orders_api.entities.core._base import VersionedEntity

Price = Annotated[
    Decimal,
    Field(ge=Decimal("0.01"), le=Decimal("999999.99"), max_digits=8, decimal_places=2),
]


def _decode_image(value: object) -> object:
    if not isinstance(value, str | bytes):
        return value
    try:
        return base64.b64decode(value, validate=True)
    except ValueError as e:
        raise ValueError("image must be valid base64") from e


# Decoded on input only; model_dump keeps the raw bytes.
Image = Annotated[
    bytes,
    BeforeValidator(_decode_image),
    WithJsonSchema({"type": "string", "format": "base64"}),
]


class Product(VersionedEntity):
    """Product as stored. ``image`` holds the raw bytes."""

    image: bytes
    name: str
    detail: str
    price: Decimal
    available_quantity: int
    supplied_by: int
    categorized_by: int


class ProductCreate(BaseModel):
    """Product creation request. ``image`` arrives base64 encoded."""

    image: Image
    name: str = Field(min_length=1, max_length=100)
    detail: str = Field(min_length=1, max_length=500)
    price: Price
    available_quantity: int = Field(ge=0)
    supplied_by: int
    categorized_by: int
    created_by: int | None = None


class ProductUpdate(BaseModel):
    key: int
    image: Image
    name: str = Field(min_length=1, max_length=100)
    detail: str = Field(min_length=1, max_length=500)
    price: Price
    available_quantity: int = Field(ge=0)
    supplied_by: int
    categorized_by: int
    modified_by: int
    row_version: int


class ProductRead(Product):
    """Product response body with the image re-encoded as base64."""

    @field_serializer("image", when_used="json")
    def _encode_image(self, image: bytes) -> str:
        return base64.b64encode(image).decode("ascii")
