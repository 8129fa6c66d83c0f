"""Uniqueness business rules checked before creates and updates."""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from src.orders_api.entities.core._base import VersionedEntity

Lookup = Callable[[Any], Awaitable[VersionedEntity | None]]


@dataclass(frozen=True)
class ValidationResult:
    success: bool
    message: str | None = None

    @classmethod
    def passed(cls) -> "ValidationResult":
        return cls(True)


@dataclass(frozen=True)
class UniquenessRule:
    """One uniquely constrained field.

    Attributes:
        field: Attribute name on the candidate and on stored records.
        lookup: Coroutine returning the stored record holding a value, if any.
        create_message: Reported when a new record collides.
        update_message: Reported when an update collides with another record.
    """

    field: str
    lookup: Lookup
    create_message: str
    update_message: str


class UniquenessValidator:
    """Checks rules in declared order and stops at the first collision.

    A collision is a normal negative result, never an exception. The validator
    only reads from the store.
    """

    def __init__(self, rules: Sequence[UniquenessRule]):
        self._rules = tuple(rules)

    async def validate_new(self, candidate: Mapping[str, Any]) -> ValidationResult:
        for rule in self._rules:
            if await rule.lookup(candidate[rule.field]) is not None:
                return ValidationResult(False, rule.create_message)
        return ValidationResult.passed()

    async def validate_update(self, key: int, candidate: Mapping[str, Any]) -> ValidationResult:
        for rule in self._rules:
            existing = await rule.lookup(candidate[rule.field])
            if existing is not None and existing.key != key:
                return ValidationResult(False, rule.update_message)
        return ValidationResult.passed()
