"""
In‑memory store implementations.

Listings are loaded once from a JSON file; users and bookings live only
for the lifetime of the process.  A lock guards every mutation so the
"check uniqueness, then insert" sequence cannot interleave between
concurrent requests.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError as SchemaError

from ..core.errors import ConflictError, StoreError
from ..schemas.booking import BookingRead
from ..schemas.property import PropertyRead
from ..schemas.user import UserInDB
from .base import BookingStore, ListingStore, UserStore, email_key


logger = logging.getLogger(__name__)


def load_listings(path: str) -> List[PropertyRead]:
    """Read listings from a JSON file.

    The file may contain either a list of listing objects or an object
    with a ``properties`` list.  Any unreadable or invalid file raises
    ``StoreError``.
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise StoreError(f"Could not read listing data from {path}") from exc
    records: Any = raw.get("properties", []) if isinstance(raw, dict) else raw
    if not isinstance(records, list):
        raise StoreError(f"Listing data in {path} must be a list")
    try:
        return [PropertyRead.model_validate(record) for record in records]
    except SchemaError as exc:
        raise StoreError(f"Invalid listing data in {path}") from exc


class InMemoryListingStore(ListingStore):

    def __init__(self, listings: Iterable[PropertyRead] = ()) -> None:
        self._lock = threading.Lock()
        self._listings: Dict[str, PropertyRead] = {}
        for listing in listings:
            self.add(listing)

    @classmethod
    def from_json(cls, path: str) -> "InMemoryListingStore":
        store = cls(load_listings(path))
        logger.info("Loaded %d listings from %s", store.count(), path)
        return store

    def list(self) -> List[PropertyRead]:
        return list(self._listings.values())

    def get(self, listing_id: str) -> Optional[PropertyRead]:
        return self._listings.get(listing_id)

    def count(self) -> int:
        return len(self._listings)

    def add(self, listing: PropertyRead) -> PropertyRead:
        with self._lock:
            if listing.id in self._listings:
                raise ConflictError(f"Property {listing.id} already exists")
            self._listings[listing.id] = listing
        return listing


class InMemoryUserStore(UserStore):

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: Dict[str, UserInDB] = {}
        # email_key(email) -> user id
        self._by_email: Dict[str, str] = {}

    def get(self, user_id: str) -> Optional[UserInDB]:
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[UserInDB]:
        user_id = self._by_email.get(email_key(email))
        return self._users.get(user_id) if user_id else None

    def add(self, user: UserInDB) -> UserInDB:
        key = email_key(user.email)
        with self._lock:
            if key in self._by_email:
                raise ConflictError("User already exists")
            self._users[user.id] = user
            self._by_email[key] = user.id
        return user

    def count(self) -> int:
        return len(self._users)


class InMemoryBookingStore(BookingStore):

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bookings: List[BookingRead] = []

    def add(self, booking: BookingRead) -> BookingRead:
        with self._lock:
            self._bookings.append(booking)
        return booking

    def list_for_user(self, user_id: str) -> List[BookingRead]:
        owned = [b for b in self._bookings if b.user_id == user_id]
        return sorted(owned, key=lambda b: b.created_at, reverse=True)

    def count(self) -> int:
        return len(self._bookings)
