"""
Tests for UserRepository against an in-memory SQLite database.
"""

import pytest
from sqlalchemy import func, select

from auth.errors import DuplicateEmailError
from auth.repository import UserRepository
from database.models import User


async def _count_users(session) -> int:
    result = await session.execute(select(func.count()).select_from(User))
    return result.scalar_one()


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_insert_populates_generated_fields(self, session):
        repo = UserRepository(session)
        user = await repo.insert(name="Ann", email="ann@x.com", password_hash="h")
        assert isinstance(user.id, int)
        assert user.role == "user"
        assert user.created_at is not None

    @pytest.mark.asyncio
    async def test_exists_and_find(self, session):
        repo = UserRepository(session)
        assert await repo.exists_by_email("ann@x.com") is False
        assert await repo.find_by_email("ann@x.com") is None

        await repo.insert(name="Ann", email="ann@x.com", password_hash="h", role="admin")

        assert await repo.exists_by_email("ann@x.com") is True
        found = await repo.find_by_email("ann@x.com")
        assert found.name == "Ann"
        assert found.role == "admin"
        assert found.password_hash == "h"

    @pytest.mark.asyncio
    async def test_email_lookup_is_case_sensitive(self, session):
        repo = UserRepository(session)
        await repo.insert(name="Ann", email="ann@x.com", password_hash="h")
        assert await repo.find_by_email("ANN@x.com") is None

    @pytest.mark.asyncio
    async def test_duplicate_insert_hits_unique_constraint(self, session_factory):
        async with session_factory() as session:
            await UserRepository(session).insert(name="Ann", email="ann@x.com", password_hash="h")
            await session.commit()

        # Simulates a concurrent signup that slipped past the existence check.
        async with session_factory() as session:
            with pytest.raises(DuplicateEmailError):
                await UserRepository(session).insert(name="Ann 2", email="ann@x.com", password_hash="h2")
            await session.commit()

        async with session_factory() as session:
            assert await _count_users(session) == 1
            found = await UserRepository(session).find_by_email("ann@x.com")
            assert found.name == "Ann"
