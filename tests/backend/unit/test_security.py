"""
Unit tests for core.security module.
Tests password hashing, JWT token creation/validation.
"""
import datetime as dt

import jwt
import pytest

from hotel_api.config import settings
from hotel_api.core.errors import InvalidToken
from hotel_api.core.security import (
    Identity,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def test_hash_password_returns_different_hash_each_time(self):
        """Password hashing should produce different hashes (salt included)."""
        password = "TestPassword123"
        assert hash_password(password) != hash_password(password)

    def test_hash_password_is_not_plain_text(self):
        password = "TestPassword123"
        hashed = hash_password(password)
        assert isinstance(hashed, str)
        assert hashed != password
        assert hashed.startswith("$argon2")

    def test_verify_password_correct_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("TestPassword123", hashed) is True

    def test_verify_password_incorrect_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("WrongPassword456", hashed) is False

    def test_verify_password_unrecognized_digest_is_mismatch(self):
        """A digest passlib cannot identify is a mismatch, not an error."""
        assert verify_password("anything", "not-a-real-hash") is False


class TestJWTTokens:
    """Tests for JWT token creation and validation."""

    def test_round_trip_identity(self):
        token = create_access_token("user-123", False)
        assert decode_access_token(token) == Identity(user_id="user-123", is_admin=False)

    def test_admin_flag_is_carried(self):
        token = create_access_token("admin-1", True)
        assert decode_access_token(token).is_admin is True

    def test_token_expiration_time(self):
        """Token expiration should match configured TTL."""
        token = create_access_token("user-exp", False)
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_alg])
        diff_minutes = (payload["exp"] - payload["iat"]) / 60
        assert abs(diff_minutes - settings.access_token_expire_minutes) < 1

    def test_garbage_token_is_invalid(self):
        with pytest.raises(InvalidToken):
            decode_access_token("invalid.token.here")

    def test_wrong_secret_is_invalid(self):
        token = jwt.encode(
            {"sub": "u1", "isAdmin": True, "exp": dt.datetime.now(dt.timezone.utc) + dt.timedelta(minutes=5)},
            "some-other-secret",
            algorithm="HS256",
        )
        with pytest.raises(InvalidToken):
            decode_access_token(token)

    def test_expired_token_is_invalid(self):
        past = dt.datetime.now(dt.timezone.utc) - dt.timedelta(minutes=5)
        token = jwt.encode(
            {"sub": "u1", "isAdmin": False, "iat": past - dt.timedelta(minutes=1), "exp": past},
            settings.jwt_secret,
            algorithm=settings.jwt_alg,
        )
        with pytest.raises(InvalidToken):
            decode_access_token(token)

    def test_payload_without_admin_flag_is_invalid(self):
        token = jwt.encode(
            {"sub": "u1", "exp": dt.datetime.now(dt.timezone.utc) + dt.timedelta(minutes=5)},
            settings.jwt_secret,
            algorithm=settings.jwt_alg,
        )
        with pytest.raises(InvalidToken):
            decode_access_token(token)
