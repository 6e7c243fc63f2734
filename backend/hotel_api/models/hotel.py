# hotel_api/models/hotel.py
"""
Database model for hotels.
A hotel tracks which rooms belong to it through the reverse ``rooms`` relation;
it does not own their lifecycle.
"""
import uuid
from tortoise import fields, models

# Fixed set of lodging types reported by the count-by-type query
CANONICAL_TYPES = ("hotel", "apartment", "resort", "villa", "cabin")


class Hotel(models.Model):
    """
    Hotel database model.

    Relationships:
    - Has many Rooms (one-to-many, via related_name="rooms" in Room model);
      deleting a hotel detaches its rooms instead of deleting them
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    name = fields.CharField(max_length=256)
    type = fields.CharField(max_length=32, index=True)  # Lodging type, usually one of CANONICAL_TYPES
    city = fields.CharField(max_length=128, index=True)
    address = fields.CharField(max_length=512)
    distance = fields.CharField(max_length=128, default="")  # Free text, e.g. "500m from center"
    photos = fields.JSONField(default=list)  # List of photo URLs
    title = fields.CharField(max_length=256)
    desc = fields.TextField()
    rating = fields.FloatField(null=True)  # 0..5, optional
    cheapest_price = fields.FloatField()
    featured = fields.BooleanField(default=False)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "hotels"
