"""
SQLite store implementations.

Each operation opens its own connection through ``core.db`` so no
connection is shared between requests.  ``sqlite3`` errors are wrapped
in ``StoreError``; UNIQUE violations become ``ConflictError``.  Listing
counts are answered with ``COUNT(*)`` rather than by loading rows.
"""

import json
import logging
import sqlite3
from datetime import datetime
from typing import List, Optional

from ..core.db import get_cursor
from ..core.errors import ConflictError, StoreError
from ..schemas.booking import BookingRead
from ..schemas.property import Location, PropertyRead
from ..schemas.user import UserInDB
from .base import BookingStore, ListingStore, UserStore, email_key


logger = logging.getLogger(__name__)

PROPERTY_COLUMNS = (
    "id, title, description, type, price, city, suburb, country, amenities, rating, created_at"
)


def _number(value: float):
    # REAL columns come back as float; keep whole prices integral.
    return int(value) if float(value).is_integer() else value


def _row_to_property(row: sqlite3.Row) -> PropertyRead:
    return PropertyRead(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        type=row["type"],
        price=_number(row["price"]),
        location=Location(city=row["city"], suburb=row["suburb"], country=row["country"]),
        amenities=json.loads(row["amenities"] or "[]"),
        rating=row["rating"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


def _row_to_user(row: sqlite3.Row) -> UserInDB:
    return UserInDB(
        id=row["id"],
        email=row["email"],
        name=row["name"],
        role=row["role"],
        password_hash=row["password"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


def _row_to_booking(row: sqlite3.Row) -> BookingRead:
    return BookingRead(
        id=row["id"],
        property_id=row["property_id"],
        user_id=row["user_id"],
        check_in=row["check_in"],
        check_out=row["check_out"],
        status=row["status"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


class SqliteListingStore(ListingStore):

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def list(self) -> List[PropertyRead]:
        try:
            with get_cursor(self.db_path) as cursor:
                rows = cursor.execute(
                    f"SELECT {PROPERTY_COLUMNS} FROM properties ORDER BY rowid"
                ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError("Failed to fetch properties") from exc
        return [_row_to_property(row) for row in rows]

    def get(self, listing_id: str) -> Optional[PropertyRead]:
        try:
            with get_cursor(self.db_path) as cursor:
                row = cursor.execute(
                    f"SELECT {PROPERTY_COLUMNS} FROM properties WHERE id = ?",
                    (listing_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError("Failed to fetch property") from exc
        return _row_to_property(row) if row else None

    def count(self) -> int:
        try:
            with get_cursor(self.db_path) as cursor:
                return cursor.execute("SELECT COUNT(*) FROM properties").fetchone()[0]
        except sqlite3.Error as exc:
            raise StoreError("Failed to count properties") from exc

    def add(self, listing: PropertyRead) -> PropertyRead:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    f"INSERT INTO properties ({PROPERTY_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                    (
                        listing.id,
                        listing.title,
                        listing.description,
                        listing.type,
                        listing.price,
                        listing.location.city,
                        listing.location.suburb,
                        listing.location.country,
                        json.dumps(listing.amenities),
                        listing.rating,
                        listing.created_at.isoformat(),
                    ),
                )
        except sqlite3.IntegrityError as exc:
            raise ConflictError(f"Property {listing.id} already exists") from exc
        except sqlite3.Error as exc:
            raise StoreError("Failed to insert property") from exc
        return listing


class SqliteUserStore(UserStore):

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def _fetch_one(self, where: str, value: str) -> Optional[UserInDB]:
        try:
            with get_cursor(self.db_path) as cursor:
                row = cursor.execute(
                    f"SELECT id, email, password, name, role, created_at FROM users WHERE {where} = ?",
                    (value,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError("Failed to fetch user") from exc
        return _row_to_user(row) if row else None

    def get(self, user_id: str) -> Optional[UserInDB]:
        return self._fetch_one("id", user_id)

    def get_by_email(self, email: str) -> Optional[UserInDB]:
        return self._fetch_one("email_key", email_key(email))

    def add(self, user: UserInDB) -> UserInDB:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    """
                    INSERT INTO users (id, email, email_key, password, name, role, created_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        user.id,
                        user.email,
                        email_key(user.email),
                        user.password_hash,
                        user.name,
                        user.role,
                        user.created_at.isoformat(),
                    ),
                )
        except sqlite3.IntegrityError as exc:
            raise ConflictError("User already exists") from exc
        except sqlite3.Error as exc:
            raise StoreError("Failed to create user") from exc
        return user

    def count(self) -> int:
        try:
            with get_cursor(self.db_path) as cursor:
                return cursor.execute("SELECT COUNT(*) FROM users").fetchone()[0]
        except sqlite3.Error as exc:
            raise StoreError("Failed to count users") from exc


class SqliteBookingStore(BookingStore):

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def add(self, booking: BookingRead) -> BookingRead:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    """
                    INSERT INTO bookings (id, property_id, user_id, check_in, check_out, status, created_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        booking.id,
                        booking.property_id,
                        booking.user_id,
                        booking.check_in,
                        booking.check_out,
                        booking.status.value,
                        booking.created_at.isoformat(),
                    ),
                )
                row = cursor.execute(
                    "SELECT * FROM bookings WHERE id = ?", (booking.id,)
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError("Failed to create booking") from exc
        return _row_to_booking(row)

    def list_for_user(self, user_id: str) -> List[BookingRead]:
        try:
            with get_cursor(self.db_path) as cursor:
                rows = cursor.execute(
                    "SELECT * FROM bookings WHERE user_id = ? ORDER BY created_at DESC",
                    (user_id,),
                ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError("Failed to fetch bookings") from exc
        return [_row_to_booking(row) for row in rows]

    def count(self) -> int:
        try:
            with get_cursor(self.db_path) as cursor:
                return cursor.execute("SELECT COUNT(*) FROM bookings").fetchone()[0]
        except sqlite3.Error as exc:
            raise StoreError("Failed to count bookings") from exc
