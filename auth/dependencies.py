"""
FastAPI dependencies for authentication.

The password hasher and token signer are built once by the app factory
and kept on ``app.state``; the repository and service are built per
request around the request's DB session.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncGenerator, Dict

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.cookies import get_token_cookie
from auth.errors import InvalidTokenError
from auth.jwt import TokenSigner
from auth.password import PasswordHasher
from auth.repository import UserRepository
from auth.service import AuthService
from database.session import get_db_session

_service_logger = logging.getLogger("auth.service")


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_signer(request: Request) -> TokenSigner:
    return request.app.state.token_signer


async def get_auth_service(
    session: AsyncSession = Depends(db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(UserRepository(session), hasher, logger=_service_logger)


async def get_current_claims(
    request: Request,
    signer: TokenSigner = Depends(get_token_signer),
) -> Dict[str, Any]:
    """
    Read the session cookie and return its verified claims.

    Raises ``InvalidTokenError`` when the cookie is missing or invalid.
    """
    token = get_token_cookie(request)
    if not token:
        raise InvalidTokenError("Missing session token")
    return signer.verify(token)
