"""Exceptions raised for store-level failures.

Expected business outcomes (not found, version conflicts, uniqueness rules)
are reported through ``OperationResult`` values, not through these classes.
"""


class OrdersApiError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ReferentialIntegrityViolation(OrdersApiError):
    """Raised when a write or delete breaks a foreign key constraint"""

    def __init__(self, table: str, message: str | None = None):
        details = {"table": table}
        msg = message or f"Foreign key constraint failed on {table}"
        super().__init__(msg, details)


class UniqueConstraintViolation(OrdersApiError):
    """Raised when a write collides with a unique index"""

    def __init__(self, table: str, message: str | None = None):
        details = {"table": table}
        msg = message or f"Unique constraint failed on {table}"
        super().__init__(msg, details)


class UnexpectedStoreError(OrdersApiError):
    """Raised when the database fails in a way the application cannot classify"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
