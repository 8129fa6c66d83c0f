"""FastAPI dependency implementations."""

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from src.orders_api.api.http.app_data import ApplicationDependencies
from src.orders_api.core.services import DbSessionService, PasswordService
from src.orders_api.core.services.accounts import CustomerService, UserService
from src.orders_api.core.services.catalog import (
    CategoryService,
    ProductService,
    SupplierService,
)
from src.orders_api.core.services.jwt import JwtGeneratorService
from src.orders_api.entities.core.user import UserRepository
from src.orders_api.entities.service.category import CategoryRepository
from src.orders_api.entities.service.customer import CustomerRepository
from src.orders_api.entities.service.product import ProductRepository
from src.orders_api.entities.service.supplier import SupplierRepository
from src.orders_api.runtime.context import get_config


def _app_deps(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    return _app_deps(request).database_service


def get_password_service(request: Request) -> PasswordService:
    """Get the password hashing service instance."""
    return _app_deps(request).password_service


def get_jwt_generation_service(request: Request) -> JwtGeneratorService:
    """Get the JWT generation service instance."""
    return _app_deps(request).jwt_generation_service


async def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> AsyncIterator[AsyncSession]:
    """Yield a request-scoped database session.

    Repositories commit or roll back their own writes, so the session only
    needs closing here.
    """
    session = database_service.get_session()
    try:
        yield session
    finally:
        await session.close()


def get_user_service(
    session: AsyncSession = Depends(get_db_session),
    password_service: PasswordService = Depends(get_password_service),
) -> UserService:
    return UserService(
        UserRepository(session),
        password_service,
        rehash_on_login=get_config().password.rehash_on_login,
    )


def get_customer_service(
    session: AsyncSession = Depends(get_db_session),
    password_service: PasswordService = Depends(get_password_service),
) -> CustomerService:
    return CustomerService(
        CustomerRepository(session),
        password_service,
        rehash_on_login=get_config().password.rehash_on_login,
    )


def get_category_service(session: AsyncSession = Depends(get_db_session)) -> CategoryService:
    return CategoryService(CategoryRepository(session))


def get_supplier_service(session: AsyncSession = Depends(get_db_session)) -> SupplierService:
    return SupplierService(SupplierRepository(session))


def get_product_service(session: AsyncSession = Depends(get_db_session)) -> ProductService:
    return ProductService(ProductRepository(session))
