"""
Shared fixtures: an in-memory SQLite database and an HTTP client bound to it.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from auth.password import PasswordHasher
from database.models import Base
from database.session import get_db_session
from main import create_app


@pytest_asyncio.fixture
async def engine():
    """
    In-memory database on a single shared connection.

    Every session reuses that one connection, so concurrent requests
    interleave inside one transaction. Duplicate-signup races are covered
    at the repository level (separate sessions, sequential) instead.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def app(session_factory):
    app = create_app()

    async def _test_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _test_db_session
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
