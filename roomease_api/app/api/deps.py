"""
FastAPI dependencies shared by the endpoint modules.

Services are cheap to construct, so one is built per request from the
``Stores`` bundle on ``app.state``.  Tests swap backends by passing
their own stores to ``create_app``.
"""

from fastapi import Depends, Request

from ..core.config import Settings
from ..services.booking_service import BookingService
from ..services.property_service import PropertyService
from ..services.statistics_service import StatisticsService
from ..services.user_service import UserService
from ..stores import Stores


def get_stores(request: Request) -> Stores:
    return request.app.state.stores


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_property_service(stores: Stores = Depends(get_stores)) -> PropertyService:
    return PropertyService(stores.listings)


def get_statistics_service(stores: Stores = Depends(get_stores)) -> StatisticsService:
    return StatisticsService(stores.listings)


def get_booking_service(stores: Stores = Depends(get_stores)) -> BookingService:
    return BookingService(stores.listings, stores.bookings)


def get_user_service(stores: Stores = Depends(get_stores)) -> UserService:
    return UserService(stores.users)
