"""
Service layer for listing statistics.

The summary is derived from the full listing collection: number of
listings, distinct cities, the rounded average price and a count per
listing type.  An empty collection yields zeros and empty containers.
"""

from __future__ import annotations

import math
import re
from typing import Dict, List, Sequence

from ..schemas.property import PropertyRead
from ..schemas.stats import StatsRead
from ..stores.base import ListingStore


_WHITESPACE = re.compile(r"\s+")


def normalize_type(value: str) -> str:
    """``"Private Room"`` -> ``"private_room"``, ``"Studio"`` -> ``"studio"``."""
    return _WHITESPACE.sub("_", value.strip()).lower()


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_stats(listings: Sequence[PropertyRead]) -> StatsRead:
    cities: Dict[str, None] = {}
    property_types: Dict[str, int] = {}
    for listing in listings:
        cities.setdefault(listing.location.city, None)
        key = normalize_type(listing.type)
        property_types[key] = property_types.get(key, 0) + 1

    average = sum(p.price for p in listings) / len(listings) if listings else 0
    cities_list: List[str] = list(cities)
    return StatsRead(
        total_properties=len(listings),
        cities=len(cities_list),
        cities_list=cities_list,
        average_price=round_half_up(average),
        property_types=property_types,
    )


class StatisticsService:
    """Service providing the public statistics summary."""

    def __init__(self, listings: ListingStore) -> None:
        self.listings = listings

    async def overview(self) -> StatsRead:
        return compute_stats(self.listings.list())
