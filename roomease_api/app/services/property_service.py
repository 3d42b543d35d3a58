"""
Business logic for property listings.

``query_listings`` filters, sorts and paginates a listing sequence in
Python.  It is a pure function over the collection returned by the
listing store, so every backend produces identical results.  Query
parameters arrive as raw strings and are parsed leniently: a value
that cannot be parsed disables its filter (or falls back to the
default page/limit) instead of failing the request.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.errors import NotFoundError
from ..schemas.property import PropertyPage, PropertyRead
from ..stores.base import ListingStore


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20

SORT_PRICE_ASC = "price_asc"
SORT_PRICE_DESC = "price_desc"
SORT_RATING = "rating"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``value``.

    ``"150"`` and ``"150abc"`` give 150, ``"99.9"`` gives 99.  ``None``,
    blank and non‑numeric input give ``None``, as do digit runs too long
    for ``int()`` to convert.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Like ``parse_int`` but falls back to ``default`` unless the result is > 0."""
    parsed = parse_int(value)
    return parsed if parsed is not None and parsed > 0 else default


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class PropertyQuery:
    """Parsed listing search parameters."""

    city: Optional[str] = None
    type: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    sort: Optional[str] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(
        cls,
        city: Optional[str] = None,
        type: Optional[str] = None,
        min_price: Optional[str] = None,
        max_price: Optional[str] = None,
        sort: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> "PropertyQuery":
        return cls(
            city=_blank_to_none(city),
            type=_blank_to_none(type),
            min_price=parse_int(min_price),
            max_price=parse_int(max_price),
            sort=_blank_to_none(sort),
            page=parse_positive_int(page, DEFAULT_PAGE),
            limit=parse_positive_int(limit, DEFAULT_LIMIT),
        )

    def matches(self, listing: PropertyRead) -> bool:
        """Return True if ``listing`` satisfies every active filter."""
        if self.city is not None and listing.location.city.casefold() != self.city.casefold():
            return False
        if self.type is not None and listing.type.casefold() != self.type.casefold():
            return False
        if self.min_price is not None and listing.price < self.min_price:
            return False
        if self.max_price is not None and listing.price > self.max_price:
            return False
        return True


def sort_listings(listings: Sequence[PropertyRead], sort: Optional[str]) -> List[PropertyRead]:
    """Order listings by a single key.

    ``sorted`` is stable, including with ``reverse=True``, so listings
    with equal keys keep their storage order.
    """
    if sort == SORT_PRICE_ASC:
        return sorted(listings, key=lambda p: p.price)
    if sort == SORT_PRICE_DESC:
        return sorted(listings, key=lambda p: p.price, reverse=True)
    if sort == SORT_RATING:
        # Rated listings first, highest rating first; unrated ones last.
        return sorted(listings, key=lambda p: (p.rating is None, -(p.rating or 0.0)))
    return sorted(listings, key=lambda p: p.created_at, reverse=True)


def query_listings(listings: Sequence[PropertyRead], query: PropertyQuery) -> PropertyPage:
    """Filter, sort and paginate ``listings``.

    ``total`` counts every listing that passed the filters, independent
    of the requested page.  Pages past the end are empty.
    """
    filtered = [listing for listing in listings if query.matches(listing)]
    ordered = sort_listings(filtered, query.sort)
    total = len(ordered)
    start = (query.page - 1) * query.limit
    return PropertyPage(
        total=total,
        page=query.page,
        limit=query.limit,
        total_pages=math.ceil(total / query.limit),
        items=ordered[start:start + query.limit],
    )


class PropertyService:
    """Read‑only access to listings backed by a ``ListingStore``."""

    def __init__(self, listings: ListingStore) -> None:
        self.listings = listings

    async def list_properties(self, query: PropertyQuery) -> PropertyPage:
        logger = logging.getLogger(__name__)
        page = query_listings(self.listings.list(), query)
        logger.debug("Property search %s matched %d listings", query, page.total)
        return page

    async def get_property(self, property_id: str) -> PropertyRead:
        listing = self.listings.get(property_id)
        if listing is None:
            raise NotFoundError("Property not found")
        return listing
