"""
Tests for password hashing, token signing and the identity guard.

No database needed: the guard is a pure function of the token and the
signing secret.
"""
from datetime import timedelta

import pytest

import core.security as security
from core.auth import Identity, identity_from_token
from core.exceptions import ForbiddenError


class TestPasswordHashing:

    def test_hash_verifies_with_correct_password(self):
        hashed = security.get_password_hash("correct horse")
        assert security.verify_password("correct horse", hashed)

    def test_hash_rejects_wrong_password(self):
        hashed = security.get_password_hash("correct horse")
        assert not security.verify_password("battery staple", hashed)

    def test_hash_is_salted(self):
        """Same password, different hashes."""
        assert security.get_password_hash("pw") != security.get_password_hash("pw")

    def test_hash_never_contains_plaintext(self):
        assert "plaintext-pw" not in security.get_password_hash("plaintext-pw")

    def test_bcrypt_limit_counts_utf8_bytes(self):
        assert not security.password_exceeds_bcrypt_limit("a" * 72)
        assert security.password_exceeds_bcrypt_limit("a" * 73)
        assert security.password_exceeds_bcrypt_limit("é" * 37)  # 74 bytes


class TestTokens:

    def test_token_verifies_immediately(self):
        token = security.create_user_token(7, "alice")
        payload = security.decode_access_token(token)

        assert payload is not None
        assert payload["sub"] == "7"
        assert payload["username"] == "alice"

    def test_token_expires_after_seven_days(self):
        assert security.ACCESS_TOKEN_EXPIRE_MINUTES == 7 * 24 * 60

    def test_expired_token_fails(self):
        token = security.create_access_token(
            {"sub": "7", "username": "alice"},
            expires_delta=timedelta(minutes=-1),
        )
        assert security.decode_access_token(token) is None

    def test_token_fails_after_secret_rotation(self):
        token = security.create_user_token(7, "alice")
        rotated = "a-completely-different-secret-key-of-32+chars"
        assert security.decode_access_token(token, secret_key=rotated) is None

    def test_tampered_signature_fails(self):
        token = security.create_user_token(7, "alice")
        header, body, sig = token.split(".")
        tampered = ".".join([header, body, sig[:-1] + ("A" if sig[-1] != "A" else "B")])
        assert security.decode_access_token(tampered) is None

    def test_garbage_token_fails(self):
        assert security.decode_access_token("not-a-jwt") is None


class TestIdentityFromToken:

    def test_valid_token_yields_identity(self):
        token = security.create_user_token(42, "carol")
        assert identity_from_token(token) == Identity(user_id=42, username="carol")

    def test_invalid_token_is_forbidden(self):
        with pytest.raises(ForbiddenError) as exc_info:
            identity_from_token("not-a-jwt")
        assert exc_info.value.status_code == 403

    def test_non_numeric_subject_is_forbidden(self):
        token = security.create_access_token({"sub": "abc", "username": "carol"})
        with pytest.raises(ForbiddenError):
            identity_from_token(token)

    def test_missing_username_is_forbidden(self):
        token = security.create_access_token({"sub": "42"})
        with pytest.raises(ForbiddenError):
            identity_from_token(token)
