"""Database engine and session factory used across the application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from loguru import logger
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from src.orders_api.runtime.config.config_data import ConfigData
from src.orders_api.runtime.context import get_config


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ships with foreign key enforcement switched off per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DbSessionService:
    def __init__(self, config: ConfigData | None = None):
        """Initialize the shared async database engine and session factory."""

        logger.info("Setting up database engine and session factory")
        main_config = config or get_config()
        db_config = main_config.database
        self._config = main_config

        logger.info("Configuring database engine for environment: {}", main_config.app.environment)
        engine_kwargs: dict = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(main_config),
        }

        if db_config.is_sqlite:
            if ":memory:" in db_config.url:
                # Every session must see the same in-memory database.
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )

        self._engine: AsyncEngine = create_async_engine(db_config.connection_string, **engine_kwargs)

        if db_config.is_sqlite:
            event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        if main_config.app.environment == "production":
            logger.bind(
                pool_size=db_config.pool_size,
                max_overflow=db_config.max_overflow,
                pool_timeout=db_config.pool_timeout,
                pool_recycle=db_config.pool_recycle,
            ).info("Database engine initialized")

    def _get_connect_args(self, config: ConfigData) -> dict:
        """Get database-specific connection arguments."""
        connect_args: dict = {}

        if config.database.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,
                    "timeout": 20,  # lock timeout
                }
            )

            if config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        elif "postgresql" in config.database.url:
            connect_args.update(
                {
                    "command_timeout": config.database.command_timeout,
                    "server_settings": {
                        "application_name": f"orders_api_{config.app.environment}",
                        "jit": "off",
                    },
                }
            )

        return connect_args

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def get_session(self) -> AsyncSession:
        """Return a new SQLModel async session bound to the shared engine."""
        return AsyncSession(
            self._engine,
            expire_on_commit=False,  # snapshots are read after commit
            autoflush=True,
        )

    @asynccontextmanager
    async def session_scope(self) -> AsyncIterator[AsyncSession]:
        """Async context manager handing out a session and closing it afterwards.

        Repositories commit their own writes; anything left uncommitted when the
        block raises is rolled back here.
        """
        session = self.get_session()
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logger.bind(error_type=type(e).__name__).error("Database transaction failed: {}", e)
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            async with self._engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(error_type=type(e).__name__).error("Database health check failed: {}", e)
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()
        logger.info("Database engine disposed")
