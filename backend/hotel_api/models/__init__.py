# hotel_api/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: User account and authentication model
- Hotel: Hotel listing model
- Room: Room type model (belongs to Hotel)
- RoomNumber: Physical room with its booked dates (belongs to Room)
"""
from .user import User
from .hotel import Hotel, CANONICAL_TYPES
from .room import Room, RoomNumber
