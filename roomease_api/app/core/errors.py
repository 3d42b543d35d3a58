"""
Exception types raised by services and stores.

Every error carries the HTTP status code and the client‑facing message
it maps to.  The handlers registered in ``main.py`` turn them into
``{"error": message}`` JSON responses, so services never build HTTP
responses themselves.
"""

from typing import Optional


class RoomEaseError(Exception):
    """Base exception for the RoomEase API."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(RoomEaseError):
    """A required field is missing or malformed."""

    status_code = 400
    default_message = "Invalid request"


class AuthError(RoomEaseError):
    """Missing credentials (401) or a rejected token (403)."""

    status_code = 401
    default_message = "Authentication required"


class NotFoundError(RoomEaseError):
    """A referenced entity does not exist."""

    status_code = 404
    default_message = "Not found"


class ConflictError(RoomEaseError):
    """Uniqueness violation, e.g. an email that is already registered."""

    status_code = 400
    default_message = "Already exists"


class InternalError(RoomEaseError):
    """Unexpected failure."""


class StoreError(InternalError):
    """The backing store could not complete an operation."""

    default_message = "Data store unavailable"
