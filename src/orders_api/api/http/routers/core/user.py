"""User API router. Responses never include password hashes."""

from fastapi import APIRouter

from src.orders_api.api.http.deps import get_user_service
from src.orders_api.api.http.routers._versioned import add_versioned_routes
from src.orders_api.entities.core.user import UserCreate, UserRead, UserUpdate

router = add_versioned_routes(
    APIRouter(prefix="/api/user", tags=["user"]),
    label="User",
    plural="Users",
    get_service=get_user_service,
    create_model=UserCreate,
    update_model=UserUpdate,
    read_model=UserRead,
    lookups=("identification", "email"),
)
