"""
Auth service — signup and login semantics on top of the repository and
the password hasher.

Each call is stateless given its inputs. Failures are logged and re-raised
unchanged so the handler can still tell a duplicate email from a hashing
failure.
"""

from __future__ import annotations

import logging
from typing import Optional

from auth.errors import DuplicateEmailError, InvalidCredentialsError
from auth.password import PasswordHasher
from auth.repository import UserRepository
from auth.schemas import MAX_PASSWORD_BYTES, PublicUser, Role


class AuthService:
    def __init__(
        self,
        repository: UserRepository,
        hasher: PasswordHasher,
        logger: Optional[logging.Logger] = None,
    ):
        self.repository = repository
        self.hasher = hasher
        self.logger = logger or logging.getLogger(__name__)

    async def signup(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: str = Role.USER.value,
    ) -> PublicUser:
        """Create a user; raises ``DuplicateEmailError`` if the email is taken."""
        try:
            if await self.repository.exists_by_email(email):
                raise DuplicateEmailError()

            password_hash = self.hasher.hash(password)
            user = await self.repository.insert(
                name=name,
                email=email,
                password_hash=password_hash,
                role=role,
            )
            self.logger.info("New user created with email: %s", user.email)
            return PublicUser.model_validate(user)
        except Exception as exc:
            self.logger.error("Error creating user: %s", exc)
            raise

    async def authenticate(self, *, email: str, password: str) -> PublicUser:
        """
        Check an email/password pair.

        An unknown email and a wrong password raise the same
        ``InvalidCredentialsError`` so callers cannot probe for accounts.
        """
        try:
            # No stored hash can match a password bcrypt would refuse.
            if len(password.encode()) > MAX_PASSWORD_BYTES:
                raise InvalidCredentialsError()

            user = await self.repository.find_by_email(email)
            if user is None:
                raise InvalidCredentialsError()

            if not self.hasher.verify(password, user.password_hash):
                raise InvalidCredentialsError()

            self.logger.info("User authenticated with email: %s", user.email)
            return PublicUser.model_validate(user)
        except Exception as exc:
            self.logger.error("Error authenticating user: %s", exc)
            raise
