from src.orders_api.entities.core._base import VersionedRepository

from .entity import Category
from .table import CategoryTable


class CategoryRepository(VersionedRepository[Category, CategoryTable]):
    """Data-access layer for categories."""

    entity_type = Category
    table_type = CategoryTable

    async def get_by_name(self, name: str) -> Category | None:
        return await self.get_by_field("name", name)
