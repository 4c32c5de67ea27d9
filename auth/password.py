"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from __future__ import annotations

import logging

import bcrypt

from auth.errors import HashingError

logger = logging.getLogger(__name__)


class PasswordHasher:
    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password with bcrypt (auto-salted, ``rounds`` work factor)."""
        try:
            return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()
        except (ValueError, TypeError) as exc:
            logger.error("Error hashing password: %s", exc)
            raise HashingError("Error hashing password") from exc

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Constant-time comparison against a bcrypt hash.

        A mismatch returns ``False``; a malformed hash raises ``HashingError``.
        """
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except (ValueError, TypeError) as exc:
            logger.error("Error comparing password: %s", exc)
            raise HashingError("Error comparing password") from exc
