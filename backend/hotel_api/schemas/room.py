"""
Pydantic schemas for room endpoints.
"""
import datetime as dt
from typing import Optional, List
from pydantic import BaseModel, Field

__all__ = ["RoomNumberIn", "RoomCreateIn", "RoomUpdateIn", "AvailabilityIn", "ROOM_FIELD_MAP"]

# API field name -> Room model attribute
ROOM_FIELD_MAP = {
    "title": "title",
    "desc": "desc",
    "price": "price",
    "maxPeople": "max_people",
}


class RoomNumberIn(BaseModel):
    number: int  # Physical room number, e.g. 101


class RoomCreateIn(BaseModel):
    """
    Request model for creating a room under a hotel.
    """
    title: str = Field(min_length=1, max_length=256)
    desc: str = ""
    price: float = Field(gt=0)
    maxPeople: int = Field(ge=1)
    roomNumbers: List[RoomNumberIn] = Field(default_factory=list)


class RoomUpdateIn(BaseModel):
    """
    Request model for a partial room update.
    Room numbers are managed through the availability endpoint, not here.
    """
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    desc: Optional[str] = None
    price: Optional[float] = Field(default=None, gt=0)
    maxPeople: Optional[int] = Field(default=None, ge=1)


class AvailabilityIn(BaseModel):
    """Dates (YYYY-MM-DD) to mark a room number as unavailable."""
    dates: List[dt.date] = Field(min_length=1)
