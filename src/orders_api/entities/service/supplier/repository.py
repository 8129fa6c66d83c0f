from src.orders_api.entities.core._base import VersionedRepository

from .entity import Supplier
from .table import SupplierTable


class SupplierRepository(VersionedRepository[Supplier, SupplierTable]):
    """Data-access layer for suppliers."""

    entity_type = Supplier
    table_type = SupplierTable

    async def get_by_name(self, name: str) -> Supplier | None:
        return await self.get_by_field("name", name)
