from src.orders_api.entities.core._base import VersionedRepository
from src.orders_api.entities.core.user.entity import normalize_email

from .entity import Customer
from .table import CustomerTable


class CustomerRepository(VersionedRepository[Customer, CustomerTable]):
    """Data-access layer for customers."""

    entity_type = Customer
    table_type = CustomerTable

    async def get_by_identification(self, identification: str) -> Customer | None:
        return await self.get_by_field("identification", identification)

    async def get_by_email(self, email: str) -> Customer | None:
        normalized = normalize_email(email)
        if normalized is None:
            return None
        return await self.get_by_field("email", normalized)
