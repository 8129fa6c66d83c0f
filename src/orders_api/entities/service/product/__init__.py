"""Entity package: Product."""

from .entity import Product, ProductCreate, ProductRead, ProductUpdate
from .repository import ProductRepository
from .table import ProductTable

__all__ = [
    "Product",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "ProductRepository",
    "ProductTable",
]
