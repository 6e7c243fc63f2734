# hotel_api/models/room.py
import uuid
from tortoise import fields, models


class Room(models.Model):
    """
    A room type offered by a hotel (e.g. "King Room"), with its physical room numbers.

    - hotel: parent hotel; set to NULL when the hotel is deleted
    - seq: position of the room within its hotel, keeps creation order
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    hotel = fields.ForeignKeyField(
        "models.Hotel",
        related_name="rooms",
        null=True,
        on_delete=fields.SET_NULL,
    )
    seq = fields.IntField(default=0)
    title = fields.CharField(max_length=256)
    desc = fields.TextField(default="")
    price = fields.FloatField()
    max_people = fields.IntField()
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "rooms"


class RoomNumber(models.Model):
    """
    A bookable physical room (e.g. number 101) of a Room.

    - unavailable_dates: ISO dates (YYYY-MM-DD) already booked, no duplicates
    - position: order within the room's roomNumbers list
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    room = fields.ForeignKeyField("models.Room", related_name="room_numbers", on_delete=fields.CASCADE)
    position = fields.IntField(default=0)
    number = fields.IntField()
    unavailable_dates = fields.JSONField(default=list)

    class Meta:
        table = "room_numbers"
