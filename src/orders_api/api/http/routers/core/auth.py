"""Login and registration endpoints issuing signed tokens."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel

from src.orders_api.api.http.deps import (
    get_customer_service,
    get_jwt_generation_service,
    get_user_service,
)
from src.orders_api.api.http.routers._versioned import key_route_name, raise_for_result
from src.orders_api.core.services.accounts import CustomerService, UserService
from src.orders_api.core.services.jwt import JwtGeneratorService
from src.orders_api.entities.core.user import UserLogin
from src.orders_api.entities.service.customer import (
    CustomerCreate,
    CustomerLogin,
    CustomerRegister,
)

INVALID_CREDENTIALS = "Invalid credentials."


class TokenResponse(BaseModel):
    token: str


user_auth_router = APIRouter(prefix="/api/user-auth", tags=["auth"])
customer_auth_router = APIRouter(prefix="/api/customer-auth", tags=["auth"])


@user_auth_router.post("/login", response_model=TokenResponse)
async def user_login(
    credentials: UserLogin,
    users: UserService = Depends(get_user_service),
    jwt_service: JwtGeneratorService = Depends(get_jwt_generation_service),
) -> TokenResponse:
    user = await users.authenticate(credentials.email, credentials.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)
    return TokenResponse(token=jwt_service.generate_user_token(user))


@customer_auth_router.post("/login", response_model=TokenResponse)
async def customer_login(
    credentials: CustomerLogin,
    customers: CustomerService = Depends(get_customer_service),
    jwt_service: JwtGeneratorService = Depends(get_jwt_generation_service),
) -> TokenResponse:
    customer = await customers.authenticate(credentials.email, credentials.password)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)
    return TokenResponse(token=jwt_service.generate_customer_token(customer))


@customer_auth_router.post(
    "/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED
)
async def customer_register(
    registration: CustomerRegister,
    request: Request,
    response: Response,
    customers: CustomerService = Depends(get_customer_service),
    jwt_service: JwtGeneratorService = Depends(get_jwt_generation_service),
) -> TokenResponse:
    """Create a customer account and sign the customer in."""
    result = await customers.create(CustomerCreate(**registration.model_dump()))
    raise_for_result(result)

    customer = result.value
    response.headers["Location"] = str(
        request.url_for(key_route_name("Customer"), key=customer.key)
    )
    return TokenResponse(token=jwt_service.generate_customer_token(customer))
