# hotel_api/core/security.py
"""
Security module for authentication and authorization.
Handles password hashing, JWT token creation/validation, and the decoded
identity that is passed to route handlers.
"""
import datetime as dt
from dataclasses import dataclass

import jwt  # PyJWT
from passlib.context import CryptContext

from hotel_api.config import settings
from hotel_api.core.errors import InvalidToken

# Password hashing context
# Argon2 only; the salt is generated per call and embedded in the digest
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)


@dataclass(frozen=True)
class Identity:
    """Caller identity decoded from a verified access token."""

    user_id: str
    is_admin: bool = False


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    The comparison is constant-time. A digest that passlib cannot identify
    counts as a mismatch rather than an error.

    Returns:
        True if password matches, False otherwise
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False


def create_access_token(user_id: str, is_admin: bool) -> str:
    """
    Create a JWT access token for user authentication.

    The admin flag travels inside the token so admin gating needs no
    database lookup.

    Token payload includes:
        - sub: Subject (user ID)
        - isAdmin: Admin flag
        - iat: Issued at timestamp
        - exp: Expiration timestamp
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": user_id,
        "isAdmin": bool(is_admin),
        "iat": now,
        "exp": now + dt.timedelta(minutes=settings.access_token_expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_alg)


def decode_access_token(token: str) -> Identity:
    """
    Decode and validate a JWT access token.

    Raises:
        InvalidToken: bad signature, malformed token or payload, or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_alg],
            options={"require": ["sub", "exp"]},
        )
    except jwt.PyJWTError as exc:
        raise InvalidToken(str(exc)) from exc

    user_id = payload.get("sub")
    is_admin = payload.get("isAdmin")
    if not isinstance(user_id, str) or not user_id or not isinstance(is_admin, bool):
        raise InvalidToken("malformed payload")
    return Identity(user_id=user_id, is_admin=is_admin)
