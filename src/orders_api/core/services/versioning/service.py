"""The create/update/delete protocol shared by every versioned entity.

Updates run in a fixed order: the path key must match the body key, the
stored record is loaded as a snapshot, uniqueness rules are checked, the
caller's ``row_version`` is compared with the snapshot, and only when some
updatable field differs is a compare-and-write issued. The store increments
``row_version`` as part of that write. Nothing is retried or merged.
"""

from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger
from pydantic import BaseModel

from src.orders_api.core.errors import (
    ReferentialIntegrityViolation,
    UniqueConstraintViolation,
)
from src.orders_api.core.services.versioning.results import (
    OperationResult,
    OperationStatus,
)
from src.orders_api.core.services.versioning.uniqueness import (
    UniquenessRule,
    UniquenessValidator,
)
from src.orders_api.entities.core._base import (
    UpdateOutcome,
    VersionedEntity,
    VersionedRepository,
)

EntityT = TypeVar("EntityT", bound=VersionedEntity)


class VersionedEntityService(Generic[EntityT]):
    """Generic service parameterized by field list and uniqueness rules.

    Subclasses set ``label`` and ``mutable_fields`` and may override
    ``uniqueness_rules``, ``has_changes`` and the two ``*_row_values`` hooks.
    """

    label: ClassVar[str]
    mutable_fields: ClassVar[tuple[str, ...]]

    def __init__(self, repository: VersionedRepository):
        self._repository = repository
        self._validator = UniquenessValidator(self.uniqueness_rules())

    def uniqueness_rules(self) -> list[UniquenessRule]:
        return []

    @property
    def _noun(self) -> str:
        return self.label.lower()

    async def get(self, key: int) -> EntityT | None:
        return await self._repository.get(key)

    async def list_all(self) -> list[EntityT]:
        return await self._repository.list_all()

    def has_changes(self, snapshot: EntityT, values: dict[str, Any]) -> bool:
        """Whether any updatable field in ``values`` differs from the snapshot."""
        return any(getattr(snapshot, name) != values[name] for name in self.mutable_fields)

    def create_row_values(self, values: dict[str, Any]) -> dict[str, Any]:
        return values

    def update_row_values(self, snapshot: EntityT, values: dict[str, Any]) -> dict[str, Any]:
        writes = {name: values[name] for name in self.mutable_fields}
        writes["modified_by"] = values.get("modified_by")
        return writes

    async def _unique_race_message(self, key: int | None, values: dict[str, Any]) -> str:
        if key is None:
            check = await self._validator.validate_new(values)
        else:
            check = await self._validator.validate_update(key, values)
        return check.message or f"{self.label} violates a uniqueness rule."

    def _reference_failure(self) -> OperationResult[EntityT]:
        return OperationResult.failure(
            OperationStatus.REFERENTIAL_INTEGRITY_VIOLATION,
            f"{self.label} references a record that does not exist.",
        )

    async def create(self, command: BaseModel) -> OperationResult[EntityT]:
        values = command.model_dump()

        check = await self._validator.validate_new(values)
        if not check.success:
            return OperationResult.failure(OperationStatus.BUSINESS_RULE_VIOLATION, check.message)

        try:
            record = await self._repository.insert(self.create_row_values(values))
        except ReferentialIntegrityViolation:
            return self._reference_failure()
        except UniqueConstraintViolation:
            return OperationResult.failure(
                OperationStatus.BUSINESS_RULE_VIOLATION,
                await self._unique_race_message(None, values),
            )

        logger.info("{} {} created", self.label, record.key)
        return OperationResult.ok(record)

    async def update(self, key: int, command: BaseModel) -> OperationResult[EntityT]:
        if command.key != key:
            return OperationResult.failure(OperationStatus.INVALID, f"{self.label} key mismatch.")

        snapshot = await self._repository.get(key)
        if snapshot is None:
            return OperationResult.failure(
                OperationStatus.NOT_FOUND, f"{self.label} with key {key} not found."
            )

        values = command.model_dump(exclude={"key", "row_version"})
        check = await self._validator.validate_update(key, values)
        if not check.success:
            return OperationResult.failure(OperationStatus.BUSINESS_RULE_VIOLATION, check.message)

        conflict = OperationResult.failure(
            OperationStatus.CONFLICT,
            f"The {self._noun} was modified by another user. Please reload and try again.",
        )
        if snapshot.row_version != command.row_version:
            logger.info(
                "{} {} version mismatch: stored {}, supplied {}",
                self.label,
                key,
                snapshot.row_version,
                command.row_version,
            )
            return conflict

        if not self.has_changes(snapshot, values):
            return OperationResult.unchanged(snapshot)

        writes = self.update_row_values(snapshot, values)
        writes["modification_date"] = datetime.now(UTC)
        try:
            outcome = await self._repository.update_if_version_matches(
                key, command.row_version, writes
            )
        except ReferentialIntegrityViolation:
            return self._reference_failure()
        except UniqueConstraintViolation:
            return OperationResult.failure(
                OperationStatus.BUSINESS_RULE_VIOLATION,
                await self._unique_race_message(key, values),
            )

        if outcome is UpdateOutcome.NOT_FOUND:
            return OperationResult.failure(
                OperationStatus.NOT_FOUND, f"{self.label} with key {key} not found."
            )
        if outcome is UpdateOutcome.CONFLICT:
            return conflict

        logger.info("{} {} updated to version {}", self.label, key, command.row_version + 1)
        return OperationResult.ok(await self._repository.get(key))

    async def delete(self, key: int) -> OperationResult[None]:
        """Hard delete without a version check."""
        if await self._repository.get(key) is None:
            return OperationResult.failure(
                OperationStatus.NOT_FOUND, f"{self.label} with key {key} not found."
            )

        try:
            deleted = await self._repository.delete(key)
        except ReferentialIntegrityViolation:
            return OperationResult.failure(
                OperationStatus.REFERENTIAL_INTEGRITY_VIOLATION,
                f"{self.label} cannot be deleted because other records reference it.",
            )

        if not deleted:
            return OperationResult.failure(
                OperationStatus.NOT_FOUND, f"{self.label} with key {key} not found."
            )
        logger.info("{} {} deleted", self.label, key)
        return OperationResult.ok()
