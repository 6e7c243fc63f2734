from fastapi import APIRouter, Depends, Query

from hotel_api.api.deps import require_admin, require_self_or_admin
from hotel_api.schemas.user import UserUpdateIn
from hotel_api.services import users as user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", dependencies=[Depends(require_admin)])
async def list_users(
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """List users, newest first (admin only)."""
    rows = await user_service.list_users(offset=offset, limit=limit)
    return [user_service.user_to_dict(u) for u in rows]


@router.get("/{user_id}", dependencies=[Depends(require_self_or_admin)])
async def get_user(user_id: str):
    u = await user_service.get_user(user_id)
    return user_service.user_to_dict(u)


@router.put("/{user_id}", dependencies=[Depends(require_self_or_admin)])
async def update_user(user_id: str, body: UserUpdateIn):
    """
    Update username, email or password of a user (owner or admin).

    Raises:
        NotFound (404): user not found
        Conflict (400): new username/email already taken
    """
    u = await user_service.update_user(user_id, body)
    return user_service.user_to_dict(u)


@router.delete("/{user_id}", dependencies=[Depends(require_self_or_admin)])
async def delete_user(user_id: str):
    await user_service.delete_user(user_id)
    return {"message": "User has been deleted."}
