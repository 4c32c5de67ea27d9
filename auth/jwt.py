"""
JWT-style token creation and verification.

Tokens are base64-encoded JSON payloads signed with HMAC-SHA256.
Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Any, Dict

from auth.errors import InvalidTokenError


class TokenSigner:
    def __init__(self, secret: str, expiry_seconds: int):
        self._secret = secret.encode()
        self.expiry_seconds = expiry_seconds

    def _signature(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def sign(self, claims: Dict[str, Any]) -> str:
        """Create a signed token carrying ``claims`` plus an ``exp`` expiry."""
        payload = dict(claims)
        payload["exp"] = int(time.time()) + self.expiry_seconds
        raw = json.dumps(payload, sort_keys=True).encode()
        return urlsafe_b64encode(raw).decode() + "." + self._signature(raw)

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Verify ``token`` and return its claims (``exp`` included).

        Raises ``InvalidTokenError`` on a malformed, tampered or expired token.
        """
        parts = token.split(".", 1)
        if len(parts) != 2:
            raise InvalidTokenError("Invalid token format")
        try:
            raw = urlsafe_b64decode(parts[0])
        except (binascii.Error, ValueError) as exc:
            raise InvalidTokenError("Invalid token format") from exc
        if not hmac.compare_digest(parts[1], self._signature(raw)):
            raise InvalidTokenError("Invalid token signature")
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            raise InvalidTokenError("Invalid token payload") from exc
        if not isinstance(payload, dict) or payload.get("exp", 0) < time.time():
            raise InvalidTokenError("Token expired")
        return payload
