# hotel_api/core/db.py
"""
Database configuration and initialization module.
Handles Tortoise ORM setup, database connection, and migration configuration.
"""
from tortoise import Tortoise

from hotel_api.config import settings

DB_URL = settings.database_url

# Tortoise ORM configuration dictionary
# This configuration is also used by Aerich for database migrations
TORTOISE_ORM = {
    "connections": {"default": DB_URL},
    "apps": {
        "models": {
            "models": [
                "hotel_api.models.user",    # User model
                "hotel_api.models.hotel",   # Hotel model
                "hotel_api.models.room",    # Room and RoomNumber models
                "aerich.models",            # Required: Let Aerich manage migration tables
            ],
            "default_connection": "default",
        },
    },
}


async def init_db(generate_schemas: bool = False):
    """
    Initialize Tortoise ORM database connection.

    Schemas are managed by Aerich migrations; ``generate_schemas=True`` is
    only meant for local SQLite runs and tests.
    """
    await Tortoise.init(config=TORTOISE_ORM)
    if generate_schemas:
        await Tortoise.generate_schemas()


async def close_db():
    """Close all database connections."""
    await Tortoise.close_connections()
