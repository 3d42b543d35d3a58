#!/usr/bin/env python3
"""
Load listings from a JSON file into the RoomEase SQLite database.

The database is created and migrated if needed.  Listings whose id is
already present are skipped, so the script can be re-run safely after
adding new entries to the JSON file.

Usage:
    python seed_db.py --db ./roomease.db --data ./roomease_api/data/properties.json
"""

import argparse
import os
import sqlite3
import sys

from roomease_api.app.core.config import DEFAULT_DATA_FILE, settings
from roomease_api.app.core.db import get_database_path, init_db
from roomease_api.app.core.errors import ConflictError, StoreError
from roomease_api.app.stores.memory import load_listings
from roomease_api.app.stores.sqlite import SqliteListingStore


def seed(db_path: str, data_file: str) -> tuple[int, int]:
    """Insert listings from ``data_file``.  Returns ``(inserted, skipped)``."""
    init_db(db_path)
    store = SqliteListingStore(db_path)
    inserted = skipped = 0
    for listing in load_listings(data_file):
        try:
            store.add(listing)
            inserted += 1
        except ConflictError:
            skipped += 1
    return inserted, skipped


def main():
    ap = argparse.ArgumentParser(description="Seed RoomEase listings into SQLite.")
    ap.add_argument("--db", default=settings.database_url, help="Path to SQLite DB file (default: DATABASE_URL)")
    ap.add_argument("--data", default=DEFAULT_DATA_FILE, help="JSON file with listings")
    args = ap.parse_args()

    if not os.path.exists(args.data):
        print(f"[!] Data file not found: {args.data}", file=sys.stderr)
        sys.exit(1)

    db_path = get_database_path(args.db)
    try:
        inserted, skipped = seed(db_path, args.data)
    except (StoreError, sqlite3.Error) as exc:
        print(f"[!] {exc}", file=sys.stderr)
        sys.exit(2)
    print(f"[+] {inserted} listings inserted, {skipped} already present ({db_path})")


if __name__ == "__main__":
    main()
