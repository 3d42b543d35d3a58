"""Statistics endpoint for API v1."""

from fastapi import APIRouter, Depends

from roomease_api.app.api.deps import get_statistics_service
from roomease_api.app.schemas.stats import StatsRead
from roomease_api.app.services.statistics_service import StatisticsService


router = APIRouter()


@router.get("", response_model=StatsRead)
async def get_stats(service: StatisticsService = Depends(get_statistics_service)) -> StatsRead:
    """Summary of the listing collection: cities, average price, counts per type."""
    return await service.overview()
