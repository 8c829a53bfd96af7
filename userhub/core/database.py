"""
Userhub - Database
Async SQLAlchemy engine, session factory and FastAPI session dependency
"""

from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from loguru import logger

from userhub.core.config import settings


class Base(DeclarativeBase):
    """Base class for all ORM models"""
    pass


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one database session per request"""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db() -> None:
    """Create tables for all registered models"""
    # Model modules must be imported so their tables land on Base.metadata
    import userhub.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("✅ Database schema ready")


async def close_db() -> None:
    """Dispose the engine connection pool"""
    await engine.dispose()
