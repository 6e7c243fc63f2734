# hotel_api/core/errors.py
"""
Application error taxonomy.

Every error a handler or service raises on purpose is an ``AppError``. The
exception handlers in ``hotel_api.main`` render them as
``{"success": false, "status": <code>, "message": <text>}``.
"""
from typing import Optional


class AppError(Exception):
    """Base class for errors that map to a JSON error response."""

    status_code: int = 500
    default_message: str = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"success": False, "status": self.status_code, "message": self.message}


class Unauthenticated(AppError):
    status_code = 401
    default_message = "You are not authenticated"


class Forbidden(AppError):
    status_code = 403
    default_message = "Admin authentication required"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class Conflict(AppError):
    status_code = 400
    default_message = "Resource already exists"


class BadCredentials(AppError):
    status_code = 400
    default_message = "Wrong password or username"


class ValidationFailed(AppError):
    """
    Request payload violates one or more field constraints.

    ``violations`` is a list of ``{"field": ..., "message": ...}`` dicts, one
    per broken constraint.
    """

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, violations: list[dict], message: Optional[str] = None):
        super().__init__(message)
        self.violations = violations

    def to_dict(self) -> dict:
        body = super().to_dict()
        body["violations"] = self.violations
        return body


class InvalidToken(Exception):
    """Raised by the token service; the auth dependency turns it into Unauthenticated."""
