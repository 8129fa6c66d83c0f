"""Shared building blocks for versioned entities.

Every persisted entity carries the same audit columns and a ``row_version``
counter used as its optimistic-concurrency token. The repository below owns
the increment of that counter: a successful ``update_if_version_matches``
bumps it by exactly one inside the same statement that writes the new values.
"""

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from datetime import datetime
from enum import StrEnum
from typing import Any, ClassVar, Generic, TypeVar

import sqlalchemy as sa
from loguru import logger
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Field, SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.orders_api.core.errors import UnexpectedStoreError
from src.orders_api.core.services.database.db_utils import classify_integrity_error


class VersionedEntity(BaseModel):
    """Point-in-time snapshot of a persisted record."""

    key: int = PydanticField(description="Store generated identifier")
    creation_date: datetime
    modification_date: datetime | None = None
    created_by: int | None = None
    modified_by: int | None = None
    row_version: int = 0


class VersionedTable(SQLModel, table=False):
    """Audit and concurrency columns shared by every table."""

    key: int | None = Field(default=None, primary_key=True)
    creation_date: datetime | None = Field(
        default=None,
        nullable=False,
        sa_type=sa.DateTime(timezone=True),
        sa_column_kwargs={"server_default": sa.func.now()},
    )
    modification_date: datetime | None = Field(
        default=None, sa_type=sa.DateTime(timezone=True)
    )
    created_by: int | None = Field(
        default=None, foreign_key="users.key", ondelete="SET NULL"
    )
    modified_by: int | None = Field(
        default=None, foreign_key="users.key", ondelete="SET NULL"
    )
    row_version: int = Field(
        default=0, nullable=False, sa_column_kwargs={"server_default": "0"}
    )


class UpdateOutcome(StrEnum):
    UPDATED = "updated"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


EntityT = TypeVar("EntityT", bound=VersionedEntity)
TableT = TypeVar("TableT", bound=VersionedTable)


class VersionedRepository(Generic[EntityT, TableT]):
    """Data-access layer shared by every versioned entity.

    Reads return detached pydantic snapshots, never live ORM rows, so callers
    compare versions against what the store holds at that moment. Every write
    commits on its own.
    """

    entity_type: ClassVar[type[VersionedEntity]]
    table_type: ClassVar[type[VersionedTable]]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def table_name(self) -> str:
        return self.table_type.__tablename__

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)

    @asynccontextmanager
    async def _store_call(self, operation: str, commit: bool = False) -> AsyncIterator[None]:
        try:
            yield
            if commit:
                await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            raise classify_integrity_error(e, self.table_name) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error("{} on {} failed: {}", operation, self.table_name, e)
            raise UnexpectedStoreError(operation, str(e)) from e

    async def get(self, key: int) -> EntityT | None:
        async with self._store_call("get"):
            row = await self._session.get(self.table_type, key, populate_existing=True)
        if row is None:
            return None
        return self._to_entity(row)

    async def get_by_field(self, field: str, value: Any) -> EntityT | None:
        column = getattr(self.table_type, field)
        statement = (
            select(self.table_type)
            .where(column == value)
            .execution_options(populate_existing=True)
        )
        async with self._store_call("get_by_field"):
            row = (await self._session.exec(statement)).first()
        if row is None:
            return None
        return self._to_entity(row)

    async def list_all(self) -> list[EntityT]:
        statement = select(self.table_type).order_by(self.table_type.key)
        async with self._store_call("list_all"):
            rows = (await self._session.exec(statement)).all()
        return [self._to_entity(row) for row in rows]

    async def insert(self, values: Mapping[str, Any]) -> EntityT:
        """Insert a new record with ``row_version`` 0 and return it fully materialized."""
        row = self.table_type(**values)
        row.row_version = 0
        self._session.add(row)
        async with self._store_call("insert", commit=True):
            await self._session.flush()
        await self._session.refresh(row)
        return self._to_entity(row)

    async def update_if_version_matches(
        self, key: int, expected_version: int, values: Mapping[str, Any]
    ) -> UpdateOutcome:
        """Atomically write ``values`` if the stored version equals ``expected_version``.

        The version is incremented by the same statement. When no row matches,
        the key is re-read to tell a vanished record from a stale version.
        """
        table = self.table_type
        statement = (
            update(table)
            .where(table.key == key, table.row_version == expected_version)
            .values(**values, row_version=table.row_version + 1)
            .execution_options(synchronize_session=False)
        )
        async with self._store_call("update", commit=True):
            result = await self._session.exec(statement)

        if result.rowcount == 1:
            logger.debug("{} {} updated from version {}", self.table_name, key, expected_version)
            return UpdateOutcome.UPDATED
        if await self.get(key) is None:
            return UpdateOutcome.NOT_FOUND
        return UpdateOutcome.CONFLICT

    async def delete(self, key: int) -> bool:
        """Remove the record; returns False when nothing had that key."""
        statement = delete(self.table_type).where(self.table_type.key == key)
        async with self._store_call("delete", commit=True):
            result = await self._session.exec(statement)
        return result.rowcount == 1
