"""
Property listing endpoints for API v1.

Search parameters are declared as plain strings so that malformed
values (``minPrice=abc``, ``page=-3``) reach the query parser, which
ignores them or falls back to defaults, instead of being rejected by
request validation.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from roomease_api.app.api.deps import get_property_service
from roomease_api.app.schemas.property import PropertyPage, PropertyRead
from roomease_api.app.services.property_service import PropertyQuery, PropertyService


router = APIRouter()


@router.get("", response_model=PropertyPage)
async def list_properties(
    city: Optional[str] = Query(None, description="City, case-insensitive exact match"),
    type: Optional[str] = Query(None, description="Listing type, e.g. PrivateRoom"),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    sort: Optional[str] = Query(None, description="price_asc, price_desc or rating; newest first otherwise"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: PropertyService = Depends(get_property_service),
) -> PropertyPage:
    """Search listings with optional filters, sorting and pagination."""
    query = PropertyQuery.from_params(
        city=city,
        type=type,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
        page=page,
        limit=limit,
    )
    return await service.list_properties(query)


@router.get("/{property_id}", response_model=PropertyRead)
async def get_property(
    property_id: str = Path(..., description="ID of the listing"),
    service: PropertyService = Depends(get_property_service),
) -> PropertyRead:
    """Return a single listing or 404 if it does not exist."""
    return await service.get_property(property_id)
