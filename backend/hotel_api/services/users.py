"""
User service

Registration, credential checks and owner/admin profile management.
"""
import logging
from typing import List, Optional

from tortoise.exceptions import IntegrityError

from hotel_api.core.errors import BadCredentials, Conflict, NotFound
from hotel_api.core.security import hash_password, verify_password
from hotel_api.models.user import User
from hotel_api.schemas.user import UserUpdateIn
from hotel_api.services.ids import parse_id

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"


def user_to_dict(u: User) -> dict:
    """Public representation of a user; the password hash never leaves the service."""
    return {
        "id": str(u.id),
        "username": u.username,
        "email": u.email,
        "isAdmin": u.is_admin,
        "createdAt": u.created_at.isoformat() if u.created_at else None,
        "updatedAt": u.updated_at.isoformat() if u.updated_at else None,
    }


async def _ensure_unique(username: Optional[str], email: Optional[str], exclude_id=None) -> None:
    if username is not None:
        qs = User.filter(username=username)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        if await qs.exists():
            raise Conflict("Username already exists")
    if email is not None:
        qs = User.filter(email=email)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        if await qs.exists():
            raise Conflict("Email already registered")


def _conflict_from(exc: IntegrityError) -> Conflict:
    # A concurrent write got past _ensure_unique; the unique index decides
    if "email" in str(exc).lower():
        return Conflict("Email already registered")
    return Conflict("Username already exists")


async def register_user(username: str, email: str, password: str) -> User:
    """
    Create a regular (non-admin) user.

    Raises:
        Conflict: username or email already taken
    """
    await _ensure_unique(username, email)
    try:
        u = await User.create(
            username=username,
            email=email,
            password_hash=hash_password(password),
            is_admin=False,
        )
    except IntegrityError as exc:
        raise _conflict_from(exc) from exc
    logger.info("[users] registered id=%s username=%s", u.id, u.username)
    return u


async def authenticate(username: str, password: str) -> User:
    """
    Check credentials and return the matching user.

    Raises:
        NotFound: unknown username (404)
        BadCredentials: wrong password (400)
    """
    u = await User.get_or_none(username=username)
    if not u:
        raise NotFound(USER_NOT_FOUND)
    if not verify_password(password, u.password_hash):
        raise BadCredentials()
    return u


async def get_user(user_id: str) -> User:
    uid = parse_id(user_id)
    u = await User.get_or_none(id=uid) if uid else None
    if not u:
        raise NotFound(USER_NOT_FOUND)
    return u


async def update_user(user_id: str, body: UserUpdateIn) -> User:
    """
    Apply a partial profile update. The password is re-hashed; the admin flag is untouched.
    """
    u = await get_user(user_id)
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    await _ensure_unique(changes.get("username"), changes.get("email"), exclude_id=u.id)

    if "username" in changes:
        u.username = changes["username"]
    if "email" in changes:
        u.email = changes["email"]
    if "password" in changes:
        u.password_hash = hash_password(changes["password"])
    try:
        await u.save()
    except IntegrityError as exc:
        raise _conflict_from(exc) from exc
    logger.info("[users] updated id=%s fields=%s", u.id, sorted(changes))
    return u


async def delete_user(user_id: str) -> None:
    u = await get_user(user_id)
    await u.delete()
    logger.info("[users] deleted id=%s", user_id)


async def list_users(offset: int = 0, limit: int = 100) -> List[User]:
    return await User.all().order_by("-created_at").offset(offset).limit(limit)
