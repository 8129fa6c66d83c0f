"""Schema management for the application database."""

from loguru import logger
from sqlmodel import SQLModel

from src.orders_api.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, db_session_service: DbSessionService):
        self._engine = db_session_service.engine

    async def create_all(self) -> None:
        """Create all database tables."""
        import src.orders_api.entities  # noqa: F401  registers every table

        async with self._engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized with tables.")

    async def drop_all(self) -> None:
        """Drop all database tables."""
        import src.orders_api.entities  # noqa: F401

        async with self._engine.begin() as connection:
            await connection.run_sync(SQLModel.metadata.drop_all)
        logger.warning("Database tables dropped.")
