"""
Pydantic schemas for user management endpoints.
"""
from typing import Optional
from pydantic import BaseModel, Field

__all__ = ["UserUpdateIn"]


class UserUpdateIn(BaseModel):
    """
    Request model for updating a user (owner or admin).
    All fields are optional - only provided fields will be updated.
    The admin flag is not part of this model and cannot be changed here.
    """
    username: Optional[str] = Field(default=None, min_length=1, max_length=256)  # Must stay unique
    email: Optional[str] = Field(default=None, min_length=3, max_length=256)  # Must stay unique
    password: Optional[str] = Field(default=None, min_length=1)  # Re-hashed before storage
