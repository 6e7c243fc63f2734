"""
Pydantic schemas for hotel endpoints.
"""
from typing import Optional, List
from pydantic import BaseModel, Field

__all__ = ["HotelCreateIn", "HotelUpdateIn", "HOTEL_FIELD_MAP"]

# API field name -> Hotel model attribute
HOTEL_FIELD_MAP = {
    "name": "name",
    "type": "type",
    "city": "city",
    "address": "address",
    "distance": "distance",
    "photos": "photos",
    "title": "title",
    "desc": "desc",
    "rating": "rating",
    "cheapestPrice": "cheapest_price",
    "featured": "featured",
}


class HotelCreateIn(BaseModel):
    """
    Request model for creating a hotel.
    A client-sent ``rooms`` list is ignored; rooms join a hotel through the rooms endpoints.
    """
    name: str = Field(min_length=1, max_length=256)
    type: str = Field(min_length=1, max_length=32)
    city: str = Field(min_length=1, max_length=128)
    address: str = Field(min_length=1, max_length=512)
    distance: str = Field(default="", max_length=128)
    photos: List[str] = Field(default_factory=list)
    title: str = Field(min_length=1, max_length=256)
    desc: str = Field(min_length=1)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    cheapestPrice: float = Field(ge=0)
    featured: bool = False


class HotelUpdateIn(BaseModel):
    """
    Request model for a partial hotel update.
    Only fields present in the request body are applied.
    """
    name: Optional[str] = Field(default=None, min_length=1, max_length=256)
    type: Optional[str] = Field(default=None, min_length=1, max_length=32)
    city: Optional[str] = Field(default=None, min_length=1, max_length=128)
    address: Optional[str] = Field(default=None, min_length=1, max_length=512)
    distance: Optional[str] = Field(default=None, max_length=128)
    photos: Optional[List[str]] = None
    title: Optional[str] = Field(default=None, min_length=1, max_length=256)
    desc: Optional[str] = Field(default=None, min_length=1)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    cheapestPrice: Optional[float] = Field(default=None, ge=0)
    featured: Optional[bool] = None
