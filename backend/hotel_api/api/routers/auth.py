from fastapi import APIRouter, Depends, Response

from hotel_api.api.deps import get_identity
from hotel_api.config import settings
from hotel_api.core.security import Identity, create_access_token
from hotel_api.schemas.auth import LoginRequest, RegisterIn
from hotel_api.services import users as user_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register")
async def register(body: RegisterIn):
    """
    Register a new user account.

    Creates a regular (non-admin) account; the password is hashed before
    storage. Username and email must be unique.

    Returns:
        dict: Created user summary (id, username, email, isAdmin)

    Raises:
        Conflict (400): username or email already taken
    """
    u = await user_service.register_user(body.username, body.email, body.password)
    return user_service.user_to_dict(u)


@router.post("/login")
async def login(payload: LoginRequest, response: Response):
    """
    Authenticate user and issue an access token.

    The token is set as an HttpOnly cookie and also returned in the body for
    clients that prefer the Authorization header.

    Returns:
        dict: Response containing:
            - details: User summary
            - isAdmin: bool
            - accessToken: JWT token string

    Raises:
        NotFound (404): unknown username
        BadCredentials (400): wrong password
    """
    user = await user_service.authenticate(payload.username, payload.password)
    token = create_access_token(str(user.id), user.is_admin)
    response.set_cookie(
        settings.auth_cookie_name,
        token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        max_age=settings.access_token_expire_minutes * 60,
    )
    return {"details": user_service.user_to_dict(user), "isAdmin": user.is_admin, "accessToken": token}


@router.get("/me")
async def me(identity: Identity = Depends(get_identity)):
    """
    Get the authenticated user's profile.

    Raises:
        Unauthenticated (401): no valid token
        NotFound (404): token outlived its user
    """
    u = await user_service.get_user(identity.user_id)
    return user_service.user_to_dict(u)


@router.post("/logout")
async def logout(response: Response):
    """
    Clear the access token cookie.

    The JWT itself stays valid until it expires; there is no revocation list.
    """
    response.delete_cookie(settings.auth_cookie_name)
    return {"success": True}
