"""Entity package: Supplier."""

from .entity import Supplier, SupplierCreate, SupplierRead, SupplierUpdate
from .repository import SupplierRepository
from .table import SupplierTable

__all__ = [
    "Supplier",
    "SupplierCreate",
    "SupplierRead",
    "SupplierUpdate",
    "SupplierRepository",
    "SupplierTable",
]
