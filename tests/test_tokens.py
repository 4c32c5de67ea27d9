"""
Tests for the HMAC session token signer.
"""

import pytest

from auth.errors import InvalidTokenError
from auth.jwt import TokenSigner


class TestTokenSigner:
    def setup_method(self):
        self.signer = TokenSigner("test-secret", expiry_seconds=60)

    def test_sign_and_verify(self):
        token = self.signer.sign({"id": 1, "email": "ann@x.com", "role": "user"})
        claims = self.signer.verify(token)
        assert claims["id"] == 1
        assert claims["email"] == "ann@x.com"
        assert claims["role"] == "user"
        assert "exp" in claims

    def test_tampered_signature(self):
        token = self.signer.sign({"id": 1})
        payload, sig = token.split(".", 1)
        with pytest.raises(InvalidTokenError, match="signature"):
            self.signer.verify(payload + "." + sig[::-1])

    def test_other_secret_rejected(self):
        token = TokenSigner("other-secret", 60).sign({"id": 1})
        with pytest.raises(InvalidTokenError):
            self.signer.verify(token)

    def test_expired(self):
        token = TokenSigner("test-secret", expiry_seconds=-10).sign({"id": 1})
        with pytest.raises(InvalidTokenError, match="expired"):
            self.signer.verify(token)

    @pytest.mark.parametrize("token", ["", "no-dot", "!!!.abc"])
    def test_malformed(self, token):
        with pytest.raises(InvalidTokenError):
            self.signer.verify(token)
