"""Outcome values returned by create, update and delete operations."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class OperationStatus(StrEnum):
    OK = "ok"
    UNCHANGED = "unchanged"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    BUSINESS_RULE_VIOLATION = "business_rule_violation"
    REFERENTIAL_INTEGRITY_VIOLATION = "referential_integrity_violation"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Result from a service operation.

    ``UNCHANGED`` is a success: the request matched what was stored and
    nothing was written.
    """

    status: OperationStatus
    value: T | None = None
    message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status in (OperationStatus.OK, OperationStatus.UNCHANGED)

    @classmethod
    def ok(cls, value: T | None = None) -> "OperationResult[T]":
        return cls(OperationStatus.OK, value=value)

    @classmethod
    def unchanged(cls, value: T | None = None) -> "OperationResult[T]":
        return cls(OperationStatus.UNCHANGED, value=value)

    @classmethod
    def failure(cls, status: OperationStatus, message: str) -> "OperationResult[T]":
        return cls(status, message=message)
