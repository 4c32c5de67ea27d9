"""
Async SQLAlchemy session factory.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from config.settings import config
from database.models import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> AsyncEngine:
    """Create the process-wide engine; SQLite has no connection pool to size."""
    kwargs: Dict[str, Any] = {"echo": False}
    if not database_url.startswith("sqlite"):
        kwargs.update(
            pool_size=config.database_pool_size,
            max_overflow=config.database_max_overflow,
            pool_recycle=3600,
        )
    return create_async_engine(database_url, **kwargs)


engine = build_engine(config.database_url)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency function — use in FastAPI `Depends(get_db_session)`."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_tables(bind: AsyncEngine | None = None) -> None:
    """Create any missing tables (no migrations are managed here)."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")
