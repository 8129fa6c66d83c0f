"""Versioned entity protocol: results, uniqueness rules and the generic service."""

from .results import OperationResult, OperationStatus
from .service import VersionedEntityService
from .uniqueness import UniquenessRule, UniquenessValidator, ValidationResult

__all__ = [
    "OperationResult",
    "OperationStatus",
    "UniquenessRule",
    "UniquenessValidator",
    "ValidationResult",
    "VersionedEntityService",
]
