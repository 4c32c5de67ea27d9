"""
User persistence — the only code that reads or writes the ``users`` table.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import DuplicateEmailError
from database.models import User

logger = logging.getLogger(__name__)


def _is_email_conflict(exc: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed: users.email"
    # PostgreSQL: 'duplicate key value violates unique constraint "users_email_key"'
    detail = str(exc.orig).lower()
    return "email" in detail and ("unique" in detail or "duplicate" in detail)


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def exists_by_email(self, email: str) -> bool:
        result = await self.session.execute(
            select(exists().where(User.email == email))
        )
        return bool(result.scalar())

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def insert(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: str = "user",
    ) -> User:
        """
        Insert a new user and flush so ``id`` / ``created_at`` are populated.

        A unique-key violation on ``email`` rolls the transaction back and
        raises ``DuplicateEmailError``; this also covers two concurrent
        signups that both passed ``exists_by_email``.
        """
        user = User(name=name, email=email, password_hash=password_hash, role=role)
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            if _is_email_conflict(exc):
                logger.warning("Insert rejected, email already taken: %s", email)
                raise DuplicateEmailError() from exc
            raise
        return user
