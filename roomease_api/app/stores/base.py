"""
Storage interfaces used by the services.

Services depend on these abstract classes only, so the in‑memory and
SQLite backends can be swapped without touching query, statistics or
booking logic.  Implementations raise ``StoreError`` when the backing
storage fails and ``ConflictError`` when a uniqueness rule is violated.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..schemas.booking import BookingRead
from ..schemas.property import PropertyRead
from ..schemas.user import UserInDB


def email_key(email: str) -> str:
    """Lookup key under which emails are unique, ignoring case."""
    return email.lower()


class ListingStore(ABC):
    """Read access to the listing collection plus admin inserts."""

    @abstractmethod
    def list(self) -> List[PropertyRead]:
        """Return every listing in storage order."""

    @abstractmethod
    def get(self, listing_id: str) -> Optional[PropertyRead]:
        ...

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def add(self, listing: PropertyRead) -> PropertyRead:
        """Insert a listing.  Raises ``ConflictError`` for a duplicate id."""


class UserStore(ABC):

    @abstractmethod
    def get(self, user_id: str) -> Optional[UserInDB]:
        ...

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[UserInDB]:
        """Look a user up by email, ignoring case."""

    @abstractmethod
    def add(self, user: UserInDB) -> UserInDB:
        """Insert a user.  Raises ``ConflictError`` if the email is taken."""

    @abstractmethod
    def count(self) -> int:
        ...


class BookingStore(ABC):

    @abstractmethod
    def add(self, booking: BookingRead) -> BookingRead:
        ...

    @abstractmethod
    def list_for_user(self, user_id: str) -> List[BookingRead]:
        """Return the bookings owned by ``user_id``, newest first."""

    @abstractmethod
    def count(self) -> int:
        ...
