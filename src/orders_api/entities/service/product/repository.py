from src.orders_api.entities.core._base import VersionedRepository

from .entity import Product
from .table import ProductTable


class ProductRepository(VersionedRepository[Product, ProductTable]):
    """Data-access layer for products."""

    entity_type = Product
    table_type = ProductTable

    async def get_by_name(self, name: str) -> Product | None:
        return await self.get_by_field("name", name)
