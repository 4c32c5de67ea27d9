"""
Tests for the bcrypt password hasher.
"""

from unittest.mock import patch

import pytest

from auth.errors import HashingError
from auth.password import PasswordHasher


class TestPasswordHasher:
    def test_hash_is_not_plaintext(self, hasher):
        digest = hasher.hash("secret123")
        assert digest != "secret123"
        assert digest.startswith("$2")

    def test_hash_is_salted(self, hasher):
        assert hasher.hash("secret123") != hasher.hash("secret123")

    def test_work_factor_is_applied(self):
        digest = PasswordHasher(rounds=5).hash("secret123")
        assert digest.split("$")[2] == "05"

    @pytest.mark.parametrize("password", ["secret123", "pässwörd", "x" * 72])
    def test_round_trip(self, hasher, password):
        assert hasher.verify(password, hasher.hash(password)) is True

    def test_wrong_password_is_false_not_error(self, hasher):
        digest = hasher.hash("secret123")
        assert hasher.verify("secret124", digest) is False
        assert hasher.verify("", digest) is False

    def test_malformed_digest_raises(self, hasher):
        with pytest.raises(HashingError, match="Error comparing password"):
            hasher.verify("secret123", "not-a-bcrypt-hash")

    def test_primitive_failure_raises(self, hasher):
        with patch("auth.password.bcrypt.hashpw", side_effect=ValueError("boom")):
            with pytest.raises(HashingError, match="Error hashing password") as exc_info:
                hasher.hash("secret123")
        assert isinstance(exc_info.value.__cause__, ValueError)
