"""
Business logic for bookings.

``BookingService`` checks that the requested listing exists, then
appends a ``pending`` booking owned by the authenticated caller.  The
owner is always the identity from the access token; nothing in the
request body can change it.  Check‑in and check‑out dates are stored
as given: availability and overlapping stays are not checked.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from ..core.errors import NotFoundError, ValidationError
from ..schemas.booking import BookingRead, BookingStatus
from ..schemas.user import Identity
from ..stores.base import BookingStore, ListingStore


logger = logging.getLogger(__name__)


def new_booking_id() -> str:
    return f"booking_{uuid.uuid4().hex}"


class BookingService:
    """Service for creating and listing a caller's bookings."""

    def __init__(self, listings: ListingStore, bookings: BookingStore) -> None:
        self.listings = listings
        self.bookings = bookings

    async def create_booking(
        self,
        property_id: Optional[str],
        check_in: Optional[str],
        check_out: Optional[str],
        caller: Identity,
    ) -> BookingRead:
        """Create a booking for ``caller`` on an existing listing.

        Raises ``ValidationError`` if no property id is given and
        ``NotFoundError`` if the listing does not exist.  Store failures
        propagate as ``StoreError``.
        """
        if not property_id or not property_id.strip():
            raise ValidationError("propertyId is required")
        if self.listings.get(property_id) is None:
            raise NotFoundError("Property not found")

        booking = BookingRead(
            id=new_booking_id(),
            property_id=property_id,
            user_id=caller.id,
            check_in=check_in,
            check_out=check_out,
            status=BookingStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )
        stored = self.bookings.add(booking)
        logger.info("User %s booked property %s (%s)", caller.id, property_id, stored.id)
        return stored

    async def list_bookings(self, caller: Identity) -> List[BookingRead]:
        """Return the caller's own bookings, newest first."""
        return self.bookings.list_for_user(caller.id)
