"""
Room service

Rooms belong to a hotel through ``Room.hotel``. Operations that touch both
sides of that relation (create, delete) and the availability
read-modify-write run in a single transaction, so a caller never sees a
room without its membership or the other way round.
"""
import datetime as dt
import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from tortoise.transactions import in_transaction

from hotel_api.core.errors import AppError, NotFound, ValidationFailed
from hotel_api.models.hotel import Hotel
from hotel_api.models.room import Room, RoomNumber
from hotel_api.schemas.room import ROOM_FIELD_MAP, RoomCreateIn, RoomUpdateIn
from hotel_api.services.hotels import HOTEL_NOT_FOUND, get_hotel
from hotel_api.services.ids import parse_id

logger = logging.getLogger(__name__)

ROOM_NOT_FOUND = "Room not found"
ROOM_NUMBER_NOT_FOUND = "Room number not found"


def merge_unavailable_dates(existing: Iterable[str], dates: Iterable[dt.date]) -> List[str]:
    """
    Append ``dates`` to ``existing`` as ISO strings, skipping exact duplicates.

    Order of first occurrence is kept.
    """
    merged = list(existing or [])
    seen = set(merged)
    for d in dates:
        iso = d.isoformat()
        if iso not in seen:
            seen.add(iso)
            merged.append(iso)
    return merged


def room_number_to_dict(n: RoomNumber) -> dict:
    return {
        "id": str(n.id),
        "number": n.number,
        "unavailableDates": list(n.unavailable_dates or []),
    }


def room_to_dict(r: Room, numbers: List[RoomNumber]) -> dict:
    return {
        "id": str(r.id),
        "hotelId": str(r.hotel_id) if r.hotel_id else None,
        "title": r.title,
        "desc": r.desc,
        "price": r.price,
        "maxPeople": r.max_people,
        "roomNumbers": [room_number_to_dict(n) for n in numbers],
    }


async def serialize_rooms(rooms: List[Room]) -> List[dict]:
    numbers: Dict[str, List[RoomNumber]] = defaultdict(list)
    if rooms:
        rows = await RoomNumber.filter(room_id__in=[r.id for r in rooms]).order_by("position")
        for n in rows:
            numbers[str(n.room_id)].append(n)
    return [room_to_dict(r, numbers.get(str(r.id), [])) for r in rooms]


async def serialize_room(r: Room) -> dict:
    return (await serialize_rooms([r]))[0]


async def get_room(room_id: str) -> Room:
    rid = parse_id(room_id)
    r = await Room.get_or_none(id=rid) if rid else None
    if not r:
        raise NotFound(ROOM_NOT_FOUND)
    return r


async def list_rooms() -> List[Room]:
    return await Room.all().order_by("created_at")


async def get_hotel_rooms(hotel_id: str) -> List[Room]:
    """Rooms of a hotel in creation order."""
    h = await get_hotel(hotel_id)
    return await Room.filter(hotel_id=h.id).order_by("seq")


async def create_room(hotel_id: str, body: RoomCreateIn) -> Room:
    """
    Create a room with its room numbers and register it with the hotel.

    Raises:
        NotFound: unknown hotel
    """
    hid = parse_id(hotel_id)
    if not hid:
        raise NotFound(HOTEL_NOT_FOUND)
    try:
        async with in_transaction() as conn:
            hotel = await Hotel.get_or_none(id=hid, using_db=conn)
            if not hotel:
                raise NotFound(HOTEL_NOT_FOUND)

            last = await Room.filter(hotel_id=hotel.id).using_db(conn).order_by("-seq").first()
            room = await Room.create(
                hotel=hotel,
                seq=(last.seq + 1) if last else 1,
                title=body.title,
                desc=body.desc,
                price=body.price,
                max_people=body.maxPeople,
                using_db=conn,
            )
            if body.roomNumbers:
                await RoomNumber.bulk_create(
                    [
                        RoomNumber(room_id=room.id, position=i, number=n.number, unavailable_dates=[])
                        for i, n in enumerate(body.roomNumbers)
                    ],
                    using_db=conn,
                )
    except AppError:
        raise
    except Exception:
        logger.exception("[rooms] create failed, rolled back: hotel=%s", hotel_id)
        raise
    logger.info("[rooms] created id=%s hotel=%s numbers=%d", room.id, hotel.id, len(body.roomNumbers))
    return room


async def update_room(room_id: str, body: RoomUpdateIn) -> Room:
    r = await get_room(room_id)
    changes = body.model_dump(exclude_unset=True)

    violations = [
        {"field": k, "message": "Field may not be null"}
        for k, v in changes.items()
        if v is None and k != "desc"
    ]
    if violations:
        raise ValidationFailed(violations)
    # null clears the description
    if "desc" in changes and changes["desc"] is None:
        changes["desc"] = ""

    for key, value in changes.items():
        setattr(r, ROOM_FIELD_MAP[key], value)
    if changes:
        await r.save()
    logger.info("[rooms] updated id=%s fields=%s", r.id, sorted(changes))
    return r


async def update_room_availability(room_number_id: str, dates: List[dt.date]) -> RoomNumber:
    """
    Mark ``dates`` as unavailable for one physical room.

    Dates already present are not added twice. The row is locked for the
    read-modify-write where the database supports it.
    """
    nid = parse_id(room_number_id)
    if not nid:
        raise NotFound(ROOM_NUMBER_NOT_FOUND)
    async with in_transaction() as conn:
        n = await RoomNumber.filter(id=nid).using_db(conn).select_for_update().first()
        if not n:
            raise NotFound(ROOM_NUMBER_NOT_FOUND)
        n.unavailable_dates = merge_unavailable_dates(n.unavailable_dates, dates)
        await n.save(using_db=conn, update_fields=["unavailable_dates"])
    logger.info("[rooms] availability id=%s unavailable=%d", n.id, len(n.unavailable_dates))
    return n


async def delete_room(room_id: str, hotel_id: str) -> None:
    """
    Delete a room and drop it from its hotel.

    Raises:
        NotFound: unknown hotel, or room missing / not a member of that hotel
    """
    hid, rid = parse_id(hotel_id), parse_id(room_id)
    try:
        async with in_transaction() as conn:
            hotel = await Hotel.get_or_none(id=hid, using_db=conn) if hid else None
            if not hotel:
                raise NotFound(HOTEL_NOT_FOUND)
            room = await Room.filter(id=rid, hotel_id=hotel.id).using_db(conn).first() if rid else None
            if not room:
                raise NotFound(ROOM_NOT_FOUND)
            await RoomNumber.filter(room_id=room.id).using_db(conn).delete()
            await room.delete(using_db=conn)
    except AppError:
        raise
    except Exception:
        logger.exception("[rooms] delete failed, rolled back: room=%s hotel=%s", room_id, hotel_id)
        raise
    logger.info("[rooms] deleted id=%s hotel=%s", room_id, hotel_id)
