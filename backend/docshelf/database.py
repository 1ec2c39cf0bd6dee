"""SQLAlchemy async engine, session factory and declarative base."""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from docshelf.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for the duration of a request"""
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """Create any missing tables."""
    # Register every model on Base.metadata before creating tables
    import docshelf.models  # noqa: F401

    logger.info("Creating missing database tables")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose of the engine's connection pool."""
    logger.info("Disposing database engine")
    await engine.dispose()
