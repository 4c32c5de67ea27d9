"""
Typed failures raised by the auth layer.

Validation problems are not exceptions — see ``auth.validation``.
"""

from __future__ import annotations


class AuthError(Exception):
    """Base class for all auth failures."""

    default_message = "Authentication error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class DuplicateEmailError(AuthError):
    default_message = "User with this email already exists"


class InvalidCredentialsError(AuthError):
    """Raised for both an unknown email and a wrong password."""

    default_message = "Invalid email or password"


class HashingError(AuthError):
    default_message = "Error hashing password"


class InvalidTokenError(AuthError):
    default_message = "Invalid or expired token"
