"""
Auth API routes — signup, login, logout, me.

Route prefix: /api/v1/auth
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from auth.cookies import clear_token_cookie, set_token_cookie
from auth.dependencies import get_auth_service, get_current_claims, get_token_signer
from auth.errors import DuplicateEmailError, InvalidCredentialsError
from auth.jwt import TokenSigner
from auth.schemas import PublicUser
from auth.service import AuthService
from auth.validation import GENERIC_VALIDATION_MESSAGE, format_validation_error, validate_login, validate_signup

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


async def _read_json(request: Request) -> Any:
    """Return the parsed body, or ``None`` when it is empty or not JSON."""
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return None


def _validation_failed(details: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": GENERIC_VALIDATION_MESSAGE, "details": details},
    )


def _issue_session(response: JSONResponse, signer: TokenSigner, user: PublicUser) -> None:
    token = signer.sign({"id": user.id, "email": user.email, "role": user.role.value})
    set_token_cookie(response, token)


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    request: Request,
    service: AuthService = Depends(get_auth_service),
    signer: TokenSigner = Depends(get_token_signer),
) -> JSONResponse:
    """Register a new user and start a session."""
    validation = validate_signup(await _read_json(request))
    if not validation.success:
        return _validation_failed(format_validation_error(validation.error))

    data = validation.data
    try:
        user = await service.signup(
            name=data.name,
            email=data.email,
            password=data.password,
            role=data.role.value,
        )
    except DuplicateEmailError:
        logger.error("Signup rejected, email already exists: %s", data.email)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"message": "Email already exist"},
        )
    except Exception as exc:
        logger.error("Error in signup handler: %s", exc)
        raise

    response = JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"message": "User signed up successfully", "user": user.summary()},
    )
    _issue_session(response, signer, user)
    logger.info(
        "User signed up successfully with name: %s, email: %s, role: %s",
        user.name, user.email, user.role.value,
    )
    return response


@router.post("/login")
async def login(
    request: Request,
    service: AuthService = Depends(get_auth_service),
    signer: TokenSigner = Depends(get_token_signer),
) -> JSONResponse:
    """Login with email + password."""
    validation = validate_login(await _read_json(request))
    if not validation.success:
        return _validation_failed(format_validation_error(validation.error))

    data = validation.data
    try:
        user = await service.authenticate(email=data.email, password=data.password)
    except InvalidCredentialsError as exc:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": exc.message},
        )
    except Exception as exc:
        logger.error("Error in login handler: %s", exc)
        raise

    response = JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"message": "User signed in successfully", "user": user.summary()},
    )
    _issue_session(response, signer, user)
    logger.info("User signed in with email: %s", user.email)
    return response


@router.post("/logout")
async def logout() -> JSONResponse:
    """Drop the session cookie. Tokens are not revoked server-side."""
    response = JSONResponse(content={"message": "User signed out successfully"})
    clear_token_cookie(response)
    return response


@router.get("/me")
async def me(claims: Dict[str, Any] = Depends(get_current_claims)) -> Dict[str, Any]:
    """Return the identity asserted by the session cookie."""
    return {"id": claims.get("id"), "email": claims.get("email"), "role": claims.get("role")}
