# hotel_api/core/bootstrap.py
"""
Bootstrap module for application initialization.
Creates a default admin on first startup, since registration never grants admin.
"""
import os
import logging
from hotel_api.models.user import User
from hotel_api.core.security import hash_password

logger = logging.getLogger("uvicorn.error")


async def ensure_default_admin() -> None:
    """
    If no admin exists in the database, create a default admin based on environment variables.
    Only takes effect under the following conditions:
      - Currently no user with is_admin=True
      - And ADMIN_PASSWORD is set (to avoid using default weak password)
    Environment variables:
      ADMIN_USERNAME (default: "admin")
      ADMIN_EMAIL    (default: "admin@example.com")
      ADMIN_PASSWORD (required, otherwise won't create)
    """
    if await User.filter(is_admin=True).exists():
        return

    admin_password = os.getenv("ADMIN_PASSWORD")
    if not admin_password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return

    admin_username = os.getenv("ADMIN_USERNAME", "admin")
    admin_email = os.getenv("ADMIN_EMAIL", "admin@example.com")

    # Username may already belong to a regular account
    base_username = admin_username
    suffix = 1
    while await User.filter(username=admin_username).exists():
        suffix += 1
        admin_username = f"{base_username}{suffix}"

    # Email is unique as well
    if await User.filter(email=admin_email).exists():
        local, _, domain = admin_email.partition("@")
        admin_email = f"{local}+{admin_username}@{domain}" if domain else f"{admin_email}.{admin_username}"

    u = await User.create(
        username=admin_username,
        email=admin_email,
        password_hash=hash_password(admin_password),
        is_admin=True,
    )
    logger.warning("[bootstrap] Created default admin -> username=%s email=%s id=%s",
                   u.username, u.email, u.id)
