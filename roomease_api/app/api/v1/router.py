"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import auth, bookings, properties, stats

router = APIRouter()

router.include_router(properties.router, prefix="/properties", tags=["properties"])
router.include_router(stats.router, prefix="/stats", tags=["stats"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
