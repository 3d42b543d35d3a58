"""
Booking endpoints for API v1.

Both routes require a bearer token.  The booking owner is the identity
from the token, never a value from the request body.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from roomease_api.app.api.deps import get_booking_service
from roomease_api.app.core.security import get_current_user
from roomease_api.app.schemas.booking import BookingCreate, BookingCreated, BookingRead
from roomease_api.app.schemas.user import Identity
from roomease_api.app.services.booking_service import BookingService


router = APIRouter()


@router.post("", response_model=BookingCreated, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking: BookingCreate,
    current_user: Identity = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
) -> BookingCreated:
    """Create a pending booking for the caller.

    Returns 404 if the property does not exist.
    """
    created = await service.create_booking(
        booking.property_id,
        booking.check_in,
        booking.check_out,
        current_user,
    )
    return BookingCreated(message="Booking created successfully", booking=created)


@router.get("", response_model=List[BookingRead])
async def list_my_bookings(
    current_user: Identity = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
) -> List[BookingRead]:
    """Return the caller's bookings, newest first."""
    return await service.list_bookings(current_user)
