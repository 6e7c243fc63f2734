# hotel_api/api/deps.py
from fastapi import Depends, Header, Request

from hotel_api.config import settings
from hotel_api.core.errors import Forbidden, InvalidToken, Unauthenticated
from hotel_api.core.security import Identity, decode_access_token
from hotel_api.services.ids import parse_id


def _extract_token(request: Request, authorization: str | None) -> str | None:
    # 1) HttpOnly cookie wins when both are sent
    token = request.cookies.get(settings.auth_cookie_name)
    # 2) Authorization: Bearer xxx
    if not token and authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    return token or None


async def get_identity(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Identity:
    """
    FastAPI dependency returning the caller identity from the access token.

    The token is read from the ``access_token`` cookie, or else from an
    ``Authorization: Bearer`` header. Validity is decided by signature and
    expiry alone; the user record is not looked up.

    Raises:
        Unauthenticated (401): no token, or token invalid/expired
    """
    token = _extract_token(request, authorization)
    if not token:
        raise Unauthenticated()
    try:
        return decode_access_token(token)
    except InvalidToken:
        raise Unauthenticated()


async def require_admin(identity: Identity = Depends(get_identity)) -> Identity:
    """
    FastAPI dependency for admin-only routes.

    Raises:
        Forbidden (403): authenticated, but not an admin
    """
    if not identity.is_admin:
        raise Forbidden("Admin authentication required")
    return identity


async def require_self_or_admin(user_id: str, identity: Identity = Depends(get_identity)) -> Identity:
    """
    FastAPI dependency for ``/users/{user_id}`` routes: the owner or an admin may proceed.

    Raises:
        Forbidden (403): authenticated as somebody else without admin rights
    """
    target = parse_id(user_id)
    is_owner = target is not None and target == parse_id(identity.user_id)
    if not is_owner and not identity.is_admin:
        raise Forbidden("You are not authorized")
    return identity
