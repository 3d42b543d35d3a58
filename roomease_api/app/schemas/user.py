"""
Pydantic models for user data.

``UserCreate`` and ``UserLogin`` describe request bodies.  Their
fields are optional at the schema level so that missing fields are
reported by the service with the API's own 400 message rather than a
generic schema error.  ``UserInDB`` is the stored record and is never
returned over HTTP; ``UserRead`` is its public projection.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


DEFAULT_ROLE = "student"


class UserCreate(BaseModel):
    """Schema for registering a user."""

    email: Optional[str] = Field(None, example="student@example.com")
    password: Optional[str] = Field(None, example="strongpassword")
    name: Optional[str] = Field(None, example="Alex Chen")
    role: Optional[str] = Field(None, example=DEFAULT_ROLE)


class UserLogin(BaseModel):
    email: Optional[str] = Field(None, example="student@example.com")
    password: Optional[str] = Field(None, example="strongpassword")


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    email: str
    name: str
    role: str = DEFAULT_ROLE

    model_config = {
        "from_attributes": True,
    }


class UserInDB(UserRead):
    password_hash: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }

    def public(self) -> UserRead:
        return UserRead(id=self.id, email=self.email, name=self.name, role=self.role)


class Identity(BaseModel):
    """Caller identity carried by a validated access token."""

    id: str
    email: str
    role: str = DEFAULT_ROLE


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserRead
