"""Category, supplier and product services."""

from typing import TypeVar

from src.orders_api.core.services.versioning.service import VersionedEntityService
from src.orders_api.core.services.versioning.uniqueness import UniquenessRule
from src.orders_api.entities.core._base import VersionedEntity
from src.orders_api.entities.service.category import Category
from src.orders_api.entities.service.product import Product
from src.orders_api.entities.service.supplier import Supplier

NamedT = TypeVar("NamedT", bound=VersionedEntity)


class _NamedEntityService(VersionedEntityService[NamedT]):
    """Entities whose ``name`` must be unique."""

    def uniqueness_rules(self) -> list[UniquenessRule]:
        return [
            UniquenessRule(
                field="name",
                lookup=self._repository.get_by_name,
                create_message=f"{self.label} name is already in use.",
                update_message=f"{self.label} name is already in use by another {self._noun}.",
            )
        ]

    async def get_by_name(self, name: str) -> NamedT | None:
        return await self._repository.get_by_name(name)


class CategoryService(_NamedEntityService[Category]):
    label = "Category"
    mutable_fields = ("name",)


class SupplierService(_NamedEntityService[Supplier]):
    label = "Supplier"
    mutable_fields = ("name",)


class ProductService(_NamedEntityService[Product]):
    """Products compare every field, the image byte for byte."""

    label = "Product"
    mutable_fields = (
        "image",
        "name",
        "detail",
        "price",
        "available_quantity",
        "supplied_by",
        "categorized_by",
    )
