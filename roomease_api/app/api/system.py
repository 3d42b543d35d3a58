"""
Service descriptor and health check.

These routes are mounted at the application root, outside ``/api``.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from roomease_api.app.api.deps import get_settings, get_stores
from roomease_api.app.core.config import Settings
from roomease_api.app.core.errors import StoreError
from roomease_api.app.stores import Stores


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health(request: Request, stores: Stores = Depends(get_stores)):
    """Report store connectivity, listing count and process uptime.

    A failing store gives 500 with ``status: "error"``.
    """
    try:
        count = stores.listings.count()
    except StoreError:
        logger.exception("Health check failed")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": "Database connection failed"},
        )
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": stores.backend,
        "properties": count,
        "uptime": round(time.monotonic() - request.app.state.started_at, 3),
    }


@router.get("/")
async def root(
    settings: Settings = Depends(get_settings),
    stores: Stores = Depends(get_stores),
) -> Dict[str, Any]:
    return {
        "message": f"Welcome to {settings.project_name}",
        "version": settings.api_version,
        "database": stores.backend,
        "endpoints": {
            "health": "/health",
            "properties": "/api/properties",
            "stats": "/api/stats",
            "auth": "/api/auth/login",
            "bookings": "/api/bookings",
        },
    }
