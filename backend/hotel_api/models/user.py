# hotel_api/models/user.py
"""
Database model for users.
Represents an account with its credentials and admin flag.
"""
import uuid
from tortoise import fields, models


class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as an argon2 hash, never in plain text
    - Username and email are unique across all users
    - is_admin is only set by the bootstrap or directly in the database
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    username = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # User login name (must be unique, indexed for fast lookups)
    email = fields.CharField(max_length=256, unique=True)  # User email address (must be unique)
    password_hash = fields.CharField(max_length=255)  # Hashed password (argon2)
    is_admin = fields.BooleanField(default=False)  # Admin flag: may manage hotels/rooms and list users
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created
    updated_at = fields.DatetimeField(auto_now=True)  # Timestamp of the last profile change

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
