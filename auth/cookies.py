"""
Session cookie transport.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Request, Response

from config.settings import config

TOKEN_COOKIE = "token"


def set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=token,
        max_age=config.cookie_max_age_seconds,
        path="/",
        httponly=True,
        secure=config.cookie_secure,
        samesite="strict",
    )


def clear_token_cookie(response: Response) -> None:
    response.delete_cookie(
        key=TOKEN_COOKIE,
        path="/",
        httponly=True,
        secure=config.cookie_secure,
        samesite="strict",
    )


def get_token_cookie(request: Request) -> Optional[str]:
    return request.cookies.get(TOKEN_COOKIE)
