"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.orders_api.api.http.app_data import ApplicationDependencies
from src.orders_api.api.http.routers.core.auth import (
    customer_auth_router,
    user_auth_router,
)
from src.orders_api.api.http.routers.core.user import router as user_router
from src.orders_api.api.http.routers.health import router as health_router
from src.orders_api.api.http.routers.service.category import router as category_router
from src.orders_api.api.http.routers.service.customer import router as customer_router
from src.orders_api.api.http.routers.service.product import router as product_router
from src.orders_api.api.http.routers.service.supplier import router as supplier_router
from src.orders_api.api.utils.app_startup import configure_logging
from src.orders_api.core.errors import UnexpectedStoreError
from src.orders_api.core.services import DbSessionService, PasswordService
from src.orders_api.core.services.jwt import JwtGeneratorService
from src.orders_api.runtime.context import get_config

DATABASE_ERROR_DETAIL = "A database error occurred. Please try again later."


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response


async def log_requests(request: Request, call_next):
    """Bind request context to every log line and turn stray errors into 500s."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.bind(
            status_code=response.status_code,
            duration_ms=round(duration_ms, 1),
        ).info("request.end")
        response.headers.setdefault("X-Request-ID", request_id)
        return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def store_exception_handler(request: Request, exc: UnexpectedStoreError):
    logger.bind(error_details=exc.details).error("Database failure: {}", exc.message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": DATABASE_ERROR_DETAIL},
    )


def build_dependencies() -> ApplicationDependencies:
    return ApplicationDependencies(
        database_service=DbSessionService(),
        password_service=PasswordService(),
        jwt_generation_service=JwtGeneratorService(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    if getattr(app.state, "app_dependencies", None) is None:
        app.state.app_dependencies = build_dependencies()
    try:
        yield
    finally:
        logger.info("Shutting down application")
        await app.state.app_dependencies.database_service.dispose()


def create_app(dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Build the application.

    Args:
        dependencies: Pre-built services. When omitted they are created on
            startup from the active configuration.
    """
    config = get_config()
    production = config.app.environment == "production"

    app = FastAPI(
        title="Orders API",
        lifespan=lifespan,
        docs_url=None if production else "/docs",
        redoc_url=None if production else "/redoc",
    )
    app.state.app_dependencies = dependencies

    if production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(UnexpectedStoreError, store_exception_handler)

    app.include_router(health_router)
    app.include_router(user_auth_router)
    app.include_router(customer_auth_router)
    app.include_router(user_router)
    app.include_router(customer_router)
    app.include_router(category_router)
    app.include_router(supplier_router)
    app.include_router(product_router)

    return app


app = create_app()

__all__ = ["app", "create_app"]
