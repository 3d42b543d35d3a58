"""
Pydantic models for bookings.

A booking references a listing and the user who created it.  The user
is always taken from the caller's access token: ``BookingCreate``
ignores unknown fields, so a ``userId`` sent in the request body has
no effect.  Dates are opaque strings; no availability checks are made.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class BookingCreate(BaseModel):
    """Schema for creating a booking."""

    property_id: Optional[str] = Field(None, alias="propertyId", example="p1")
    check_in: Optional[str] = Field(None, alias="checkIn", example="2025-02-01")
    check_out: Optional[str] = Field(None, alias="checkOut", example="2025-06-30")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


class BookingRead(BaseModel):
    id: str
    property_id: str = Field(..., alias="propertyId")
    user_id: str = Field(..., alias="userId")
    check_in: Optional[str] = Field(None, alias="checkIn")
    check_out: Optional[str] = Field(None, alias="checkOut")
    status: BookingStatus = BookingStatus.PENDING
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class BookingCreated(BaseModel):
    message: str
    booking: BookingRead
