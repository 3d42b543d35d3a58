"""
Listing, user and booking storage backends.

``build_stores`` selects the backend named by ``settings.storage_backend``
and returns the three stores as a ``Stores`` bundle, which the
application keeps on ``app.state`` and hands to the services.
"""

import logging
from dataclasses import dataclass

from ..core.config import Settings
from ..core.db import get_database_path, init_db
from .base import BookingStore, ListingStore, UserStore
from .memory import InMemoryBookingStore, InMemoryListingStore, InMemoryUserStore
from .sqlite import SqliteBookingStore, SqliteListingStore, SqliteUserStore


logger = logging.getLogger(__name__)

BACKENDS = ("memory", "sqlite")


@dataclass
class Stores:
    listings: ListingStore
    users: UserStore
    bookings: BookingStore
    # Human readable backend name reported by ``/`` and ``/health``.
    backend: str = "memory"


def build_stores(settings: Settings) -> Stores:
    """Create the stores for the configured backend.

    The SQLite backend applies pending migrations before returning.
    An unknown backend name raises ``ValueError``.
    """
    backend = settings.storage_backend.lower()
    if backend == "sqlite":
        db_path = get_database_path(settings.database_url)
        version = init_db(db_path)
        logger.info("Using SQLite store at %s (schema version %s)", db_path, version)
        return Stores(
            listings=SqliteListingStore(db_path),
            users=SqliteUserStore(db_path),
            bookings=SqliteBookingStore(db_path),
            backend="sqlite",
        )
    if backend == "memory":
        return Stores(
            listings=InMemoryListingStore.from_json(settings.data_file),
            users=InMemoryUserStore(),
            bookings=InMemoryBookingStore(),
            backend="memory",
        )
    raise ValueError(f"Unknown storage backend {settings.storage_backend!r}; expected one of {BACKENDS}")


__all__ = [
    "BookingStore",
    "ListingStore",
    "Stores",
    "UserStore",
    "build_stores",
]
