from fastapi import APIRouter, Depends

from hotel_api.api.deps import require_admin
from hotel_api.schemas.room import AvailabilityIn, RoomCreateIn, RoomUpdateIn
from hotel_api.services import rooms as room_service

router = APIRouter(prefix="/rooms", tags=["rooms"])


# ===== Admin =====
@router.post("/{hotel_id}", dependencies=[Depends(require_admin)])
async def create_room(hotel_id: str, body: RoomCreateIn):
    """
    Create a room under a hotel (admin only).

    Raises:
        ValidationFailed (400): malformed room fields, with one violation per field
        NotFound (404): "Hotel not found"
    """
    r = await room_service.create_room(hotel_id, body)
    return await room_service.serialize_room(r)


@router.put("/availability/{room_number_id}", dependencies=[Depends(require_admin)])
async def update_room_availability(room_number_id: str, body: AvailabilityIn):
    n = await room_service.update_room_availability(room_number_id, body.dates)
    return {
        "message": "Room status has been updated.",
        "roomNumber": room_service.room_number_to_dict(n),
    }


@router.put("/{room_id}", dependencies=[Depends(require_admin)])
async def update_room(room_id: str, body: RoomUpdateIn):
    r = await room_service.update_room(room_id, body)
    return await room_service.serialize_room(r)


@router.delete("/{room_id}/{hotel_id}", dependencies=[Depends(require_admin)])
async def delete_room(room_id: str, hotel_id: str):
    await room_service.delete_room(room_id, hotel_id)
    return {"message": "Room has been deleted."}


# ===== Public =====
@router.get("/{room_id}")
async def get_room(room_id: str):
    r = await room_service.get_room(room_id)
    return await room_service.serialize_room(r)


@router.get("")
async def list_rooms():
    rows = await room_service.list_rooms()
    return await room_service.serialize_rooms(rows)
