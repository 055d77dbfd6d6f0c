"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlmodel.ext.asyncio.session import AsyncSession

from formforge.core.logging_config import get_logger
from formforge.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLModel session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Alembic migrations own the schema in production, so tables are only
    created from ORM metadata when ``DATABASE_AUTO_CREATE`` is enabled.
    """
    if not settings.database_auto_create:
        logger.debug("DATABASE_AUTO_CREATE disabled; leaving schema to Alembic")
        return
    await create_all(engine)
    logger.info("Database tables created from ORM metadata")
