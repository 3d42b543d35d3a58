"""
Pydantic models for property listings.

A listing is created when the seed data is loaded (or inserted by an
administrator via ``seed_db.py``) and is never modified afterwards.
``PropertyPage`` is the envelope returned by the listing search.
"""

from datetime import datetime, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, Field, NonNegativeFloat, NonNegativeInt, field_validator


class PropertyType:
    """Well‑known listing types.  Other values are accepted as is."""

    PRIVATE_ROOM = "PrivateRoom"
    SHARED_ROOM = "SharedRoom"
    STUDIO = "Studio"


class Location(BaseModel):
    city: str = Field(..., example="Sydney")
    suburb: Optional[str] = Field(None, example="Ultimo")
    country: Optional[str] = Field(None, example="Australia")


class PropertyRead(BaseModel):
    """Schema for a listing as stored and returned by the API."""

    id: str = Field(..., example="p1")
    title: str = Field(..., example="Sunny private room near UTS")
    description: Optional[str] = None
    type: str = Field(..., example=PropertyType.PRIVATE_ROOM)
    price: Union[NonNegativeInt, NonNegativeFloat] = Field(..., example=280)
    location: Location
    amenities: List[str] = Field(default_factory=list)
    rating: Optional[float] = Field(None, ge=0, le=5, example=4.6)
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    @field_validator("amenities")
    @classmethod
    def _dedupe_amenities(cls, value: List[str]) -> List[str]:
        # Amenities behave as a set; keep first occurrence order.
        return list(dict.fromkeys(value))

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive and aware timestamps cannot be compared when sorting.
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class PropertyPage(BaseModel):
    """One page of a filtered and sorted listing search."""

    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")
    items: List[PropertyRead]

    model_config = {
        "populate_by_name": True,
    }
