"""Shared pytest fixtures and configuration."""

import os
from typing import Any, Dict, List

import pytest

# Set test environment variables before the application package is imported.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("STORAGE_BACKEND", "memory")

from fastapi.testclient import TestClient  # noqa: E402

from roomease_api.app.core.config import Settings  # noqa: E402
from roomease_api.app.core.db import init_db  # noqa: E402
from roomease_api.app.main import create_app  # noqa: E402
from roomease_api.app.schemas.property import PropertyRead  # noqa: E402
from roomease_api.app.stores import Stores  # noqa: E402
from roomease_api.app.stores.memory import (  # noqa: E402
    InMemoryBookingStore,
    InMemoryListingStore,
    InMemoryUserStore,
)
from roomease_api.app.stores.sqlite import (  # noqa: E402
    SqliteBookingStore,
    SqliteListingStore,
    SqliteUserStore,
)


def make_listing(
    id: str,
    city: str = "Sydney",
    price: Any = 200,
    type: str = "PrivateRoom",
    rating: Any = 4.0,
    created_at: str = "2024-01-01T00:00:00Z",
    **extra: Any,
) -> PropertyRead:
    """Build a listing with sensible defaults for the fields a test does not care about."""
    data: Dict[str, Any] = {
        "id": id,
        "title": f"Listing {id}",
        "description": "Test listing",
        "type": type,
        "price": price,
        "location": {"city": city, "suburb": "Centre", "country": "Australia"},
        "amenities": ["wifi"],
        "rating": rating,
        "createdAt": created_at,
    }
    data.update(extra)
    return PropertyRead.model_validate(data)


@pytest.fixture
def scenario_listings() -> List[PropertyRead]:
    """p1/p2 in Sydney, p3 in Melbourne."""
    return [
        make_listing("p1", city="Sydney", price=200, created_at="2024-01-01T00:00:00Z"),
        make_listing("p2", city="Sydney", price=300, created_at="2024-02-01T00:00:00Z"),
        make_listing("p3", city="Melbourne", price=150, created_at="2024-03-01T00:00:00Z"),
    ]


@pytest.fixture
def catalogue() -> List[PropertyRead]:
    """A mixed collection with ties, unrated listings and several types."""
    return [
        make_listing("a", city="Sydney", price=320, type="PrivateRoom", rating=4.6, created_at="2024-11-02T09:00:00Z"),
        make_listing("b", city="sydney", price=210, type="SharedRoom", rating=4.1, created_at="2024-10-18T14:00:00Z"),
        make_listing("c", city="Sydney", price=450, type="Studio", rating=None, created_at="2024-12-01T08:30:00Z"),
        make_listing("d", city="Melbourne", price=280, type="PrivateRoom", rating=4.6, created_at="2024-09-27T11:45:00Z"),
        make_listing("e", city="Melbourne", price=165, type="SharedRoom", rating=None, created_at="2024-11-20T16:10:00Z"),
        make_listing("f", city="Melbourne", price=520, type="Studio", rating=4.7, created_at="2025-01-05T10:00:00Z"),
        make_listing("g", city="Brisbane", price=280, type="privateroom", rating=3.2, created_at="2024-10-03T12:20:00Z"),
        make_listing("h", city="Brisbane", price=610, type="Apartment", rating=4.5, created_at="2024-12-14T15:40:00Z"),
    ]


@pytest.fixture
def memory_stores(scenario_listings) -> Stores:
    return Stores(
        listings=InMemoryListingStore(scenario_listings),
        users=InMemoryUserStore(),
        bookings=InMemoryBookingStore(),
        backend="memory",
    )


@pytest.fixture
def db_path(tmp_path) -> str:
    path = str(tmp_path / "roomease-test.db")
    init_db(path)
    return path


@pytest.fixture
def sqlite_stores(db_path, scenario_listings) -> Stores:
    listings = SqliteListingStore(db_path)
    for listing in scenario_listings:
        listings.add(listing)
    return Stores(
        listings=listings,
        users=SqliteUserStore(db_path),
        bookings=SqliteBookingStore(db_path),
        backend="sqlite",
    )


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="test",
        secret_key="test-secret",
        storage_backend="memory",
        frontend_url="http://localhost:5173",
    )


@pytest.fixture
def client(test_settings, memory_stores) -> TestClient:
    return TestClient(create_app(test_settings, memory_stores))


def register(client: TestClient, email: str, name: str = "Student", password: str = "s3cret-pass") -> Dict[str, Any]:
    """Register a user through the API and return the response body."""
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
