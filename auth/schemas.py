"""
Pydantic schemas for the auth endpoints.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# bcrypt rejects anything past 72 bytes.
MAX_PASSWORD_BYTES = 72
MAX_EMAIL_LENGTH = 255


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


# ── Request schemas ────────────────────────────────────────────────────


class SignupRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    role: Role = Role.USER

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        return _strip(value)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value: Any) -> Any:
        value = _strip(value)
        if isinstance(value, str) and len(value) > MAX_EMAIL_LENGTH:
            raise ValueError(f"Email must be at most {MAX_EMAIL_LENGTH} characters")
        return value

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value: Any) -> Any:
        return _strip(value)


# ── Response schemas ───────────────────────────────────────────────────


class PublicUser(BaseModel):
    """A user as it may leave the service: never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: Role
    created_at: Optional[datetime] = None

    def summary(self) -> dict:
        """The ``{id, name, email, role}`` payload returned to clients."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
        }
