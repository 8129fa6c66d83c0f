"""Entity package: Customer."""

from .entity import (
    Customer,
    CustomerCreate,
    CustomerLogin,
    CustomerRead,
    CustomerRegister,
    CustomerUpdate,
)
from .repository import CustomerRepository
from .table import CustomerTable

__all__ = [
    "Customer",
    "CustomerCreate",
    "CustomerLogin",
    "CustomerRead",
    "CustomerRegister",
    "CustomerUpdate",
    "CustomerRepository",
    "CustomerTable",
]
