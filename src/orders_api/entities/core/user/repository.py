from src.orders_api.entities.core._base import VersionedRepository

from .entity import User, normalize_email
from .table import UserTable


class UserRepository(VersionedRepository[User, UserTable]):
    """Data-access layer for users."""

    entity_type = User
    table_type = UserTable

    async def get_by_identification(self, identification: str) -> User | None:
        return await self.get_by_field("identification", identification)

    async def get_by_email(self, email: str) -> User | None:
        normalized = normalize_email(email)
        if normalized is None:
            return None
        return await self.get_by_field("email", normalized)
