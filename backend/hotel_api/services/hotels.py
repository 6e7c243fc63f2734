"""
Hotel service

CRUD over hotels plus the two aggregate queries used by the home page
(count by city, count by lodging type).
"""
import logging
from collections import defaultdict
from typing import Dict, List, Optional

from tortoise.functions import Count
from tortoise.transactions import in_transaction

from hotel_api.core.errors import NotFound, ValidationFailed
from hotel_api.models.hotel import CANONICAL_TYPES, Hotel
from hotel_api.models.room import Room
from hotel_api.schemas.hotel import HOTEL_FIELD_MAP, HotelCreateIn, HotelUpdateIn
from hotel_api.services.ids import parse_id

logger = logging.getLogger(__name__)

HOTEL_NOT_FOUND = "Hotel not found"

# Fields that may be cleared with an explicit null in an update
NULLABLE_FIELDS = {"rating"}


def hotel_to_dict(h: Hotel, room_ids: List[str]) -> dict:
    return {
        "id": str(h.id),
        "name": h.name,
        "type": h.type,
        "city": h.city,
        "address": h.address,
        "distance": h.distance,
        "photos": list(h.photos or []),
        "title": h.title,
        "desc": h.desc,
        "rating": h.rating,
        "rooms": room_ids,
        "cheapestPrice": h.cheapest_price,
        "featured": h.featured,
    }


async def _room_ids_by_hotel(hotel_ids: list) -> Dict[str, List[str]]:
    """Member room ids per hotel, in creation order."""
    if not hotel_ids:
        return {}
    rows = await Room.filter(hotel_id__in=hotel_ids).order_by("seq").values_list("hotel_id", "id")
    out: Dict[str, List[str]] = defaultdict(list)
    for hotel_id, room_id in rows:
        out[str(hotel_id)].append(str(room_id))
    return out


async def serialize_hotel(h: Hotel) -> dict:
    members = await _room_ids_by_hotel([h.id])
    return hotel_to_dict(h, members.get(str(h.id), []))


async def serialize_hotels(hotels: List[Hotel]) -> List[dict]:
    members = await _room_ids_by_hotel([h.id for h in hotels])
    return [hotel_to_dict(h, members.get(str(h.id), [])) for h in hotels]


async def get_hotel(hotel_id: str) -> Hotel:
    hid = parse_id(hotel_id)
    h = await Hotel.get_or_none(id=hid) if hid else None
    if not h:
        raise NotFound(HOTEL_NOT_FOUND)
    return h


async def create_hotel(body: HotelCreateIn) -> Hotel:
    data = body.model_dump()
    h = await Hotel.create(**{HOTEL_FIELD_MAP[k]: v for k, v in data.items()})
    logger.info("[hotels] created id=%s name=%s", h.id, h.name)
    return h


async def update_hotel(hotel_id: str, body: HotelUpdateIn) -> Hotel:
    """
    Apply the fields present in the request body.

    Raises:
        NotFound: unknown hotel
        ValidationFailed: explicit null for a required field
    """
    h = await get_hotel(hotel_id)
    changes = body.model_dump(exclude_unset=True)

    violations = [
        {"field": k, "message": "Field may not be null"}
        for k, v in changes.items()
        if v is None and k not in NULLABLE_FIELDS
    ]
    if violations:
        raise ValidationFailed(violations)

    for key, value in changes.items():
        setattr(h, HOTEL_FIELD_MAP[key], value)
    if changes:
        await h.save()
    logger.info("[hotels] updated id=%s fields=%s", h.id, sorted(changes))
    return h


async def delete_hotel(hotel_id: str) -> None:
    """Delete a hotel; its rooms stay in the rooms collection, detached."""
    h = await get_hotel(hotel_id)
    async with in_transaction() as conn:
        await Room.filter(hotel_id=h.id).using_db(conn).update(hotel_id=None)
        await h.delete(using_db=conn)
    logger.info("[hotels] deleted id=%s", hotel_id)


async def list_hotels(
    city: Optional[str] = None,
    type: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    featured: Optional[bool] = None,
    limit: Optional[int] = None,
) -> List[Hotel]:
    """
    All hotels matching the given filters; no filters returns every hotel.
    Price bounds are inclusive and apply to cheapestPrice.
    """
    qs = Hotel.all()
    if city:
        qs = qs.filter(city__iexact=city)
    if type:
        qs = qs.filter(type__iexact=type)
    if min_price is not None:
        qs = qs.filter(cheapest_price__gte=min_price)
    if max_price is not None:
        qs = qs.filter(cheapest_price__lte=max_price)
    if featured is not None:
        qs = qs.filter(featured=featured)
    qs = qs.order_by("created_at")
    if limit:
        qs = qs.limit(limit)
    return await qs


async def count_by_city(cities: List[str]) -> List[int]:
    """One count per requested city, in request order, 0 for unknown cities."""
    if not cities:
        return []
    rows = (
        await Hotel.filter(city__in=list(set(cities)))
        .annotate(count=Count("id"))
        .group_by("city")
        .values("city", "count")
    )
    counts = {row["city"]: row["count"] for row in rows}
    return [counts.get(city, 0) for city in cities]


async def count_by_type() -> List[dict]:
    """Counts for each canonical lodging type; types are matched case-insensitively."""
    rows = await Hotel.annotate(count=Count("id")).group_by("type").values("type", "count")
    counts: Dict[str, int] = defaultdict(int)
    for row in rows:
        counts[(row["type"] or "").lower()] += row["count"]
    return [{"type": t, "count": counts.get(t, 0)} for t in CANONICAL_TYPES]
