from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from hotel_api.api.deps import require_admin
from hotel_api.core.errors import ValidationFailed
from hotel_api.schemas.hotel import HotelCreateIn, HotelUpdateIn
from hotel_api.services import hotels as hotel_service
from hotel_api.services import rooms as room_service

router = APIRouter(prefix="/hotels", tags=["hotels"])


# ===== Admin =====
@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin)])
async def create_hotel(body: HotelCreateIn):
    h = await hotel_service.create_hotel(body)
    return await hotel_service.serialize_hotel(h)


@router.put("/{hotel_id}", dependencies=[Depends(require_admin)])
async def update_hotel(hotel_id: str, body: HotelUpdateIn):
    """
    Partially update a hotel (admin only).

    Raises:
        NotFound (404): "Hotel not found"
        Forbidden (403): caller is not an admin
    """
    h = await hotel_service.update_hotel(hotel_id, body)
    return await hotel_service.serialize_hotel(h)


@router.delete("/{hotel_id}", dependencies=[Depends(require_admin)])
async def delete_hotel(hotel_id: str):
    await hotel_service.delete_hotel(hotel_id)
    return {"message": "Hotel has been deleted."}


# ===== Public =====
@router.get("/find/{hotel_id}")
async def get_hotel(hotel_id: str):
    h = await hotel_service.get_hotel(hotel_id)
    return await hotel_service.serialize_hotel(h)


@router.get("")
async def list_hotels(
    city: Optional[str] = None,
    type: Optional[str] = None,
    min: Optional[float] = Query(None, ge=0),
    max: Optional[float] = Query(None, ge=0),
    featured: Optional[bool] = None,
    limit: Optional[int] = Query(None, ge=1, le=500),
):
    """
    List hotels, optionally filtered.

    Args:
        city / type: case-insensitive exact match
        min / max: inclusive bounds on cheapestPrice
        featured: only featured (or non-featured) hotels
        limit: maximum number of hotels
    """
    rows = await hotel_service.list_hotels(
        city=city, type=type, min_price=min, max_price=max, featured=featured, limit=limit,
    )
    return await hotel_service.serialize_hotels(rows)


@router.get("/countByCity")
async def count_by_city(cities: str = ""):
    """
    Count hotels per city.

    Args:
        cities: comma separated city names, e.g. ``?cities=berlin,madrid``

    Returns:
        list[int]: one count per requested city, in the same order

    Raises:
        ValidationFailed (400): a blank entry such as ``?cities=A,,B``
    """
    if not cities.strip():
        return []
    names = [c.strip() for c in cities.split(",")]
    if not all(names):
        raise ValidationFailed([{"field": "cities", "message": "City names may not be blank"}])
    return await hotel_service.count_by_city(names)


@router.get("/countByType")
async def count_by_type():
    return await hotel_service.count_by_type()


@router.get("/room/{hotel_id}")
async def get_hotel_rooms(hotel_id: str):
    rooms = await room_service.get_hotel_rooms(hotel_id)
    return await room_service.serialize_rooms(rooms)
