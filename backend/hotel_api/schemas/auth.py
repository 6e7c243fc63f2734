"""
Pydantic schemas for authentication endpoints.
Defines request models for registration and login.
"""
from pydantic import BaseModel, Field

__all__ = ["RegisterIn", "LoginRequest"]


class RegisterIn(BaseModel):
    """
    Request model for user registration.
    Any admin flag sent by the client is ignored.
    """
    username: str = Field(min_length=1, max_length=256)  # Must be unique
    email: str = Field(min_length=3, max_length=256)  # Must be unique
    password: str = Field(min_length=1)  # Plain text, hashed server-side


class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    username: str  # User login name
    password: str  # User password (plain text, verified against the stored hash)
