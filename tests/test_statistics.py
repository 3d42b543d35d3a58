"""Tests for the listing statistics summary."""

import pytest

from conftest import make_listing
from roomease_api.app.services.statistics_service import (
    StatisticsService,
    compute_stats,
    normalize_type,
    round_half_up,
)
from roomease_api.app.stores.memory import InMemoryListingStore


@pytest.mark.unit
def test_empty_collection_has_zero_average():
    stats = compute_stats([])
    assert stats.total_properties == 0
    assert stats.cities == 0
    assert stats.cities_list == []
    assert stats.average_price == 0
    assert stats.property_types == {}


@pytest.mark.unit
def test_summary_of_scenario(scenario_listings):
    stats = compute_stats(scenario_listings)
    assert stats.total_properties == 3
    assert stats.cities == 2
    assert stats.cities_list == ["Sydney", "Melbourne"]
    assert stats.average_price == 217  # 650 / 3 = 216.67
    assert stats.property_types == {"privateroom": 3}


@pytest.mark.unit
def test_average_rounds_half_up():
    listings = [make_listing("a", price=100), make_listing("b", price=101)]
    assert compute_stats(listings).average_price == 101
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


@pytest.mark.unit
def test_unknown_types_are_counted(catalogue):
    extra = catalogue + [make_listing("z", type="Granny  Flat")]
    types = compute_stats(extra).property_types
    assert types == {
        "privateroom": 3,
        "sharedroom": 2,
        "studio": 2,
        "apartment": 1,
        "granny_flat": 1,
    }
    assert sum(types.values()) == len(extra)


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [("Private Room", "private_room"), ("Studio", "studio"), (" Shared\tRoom ", "shared_room")],
)
def test_normalize_type(raw, expected):
    assert normalize_type(raw) == expected


@pytest.mark.unit
def test_cities_are_distinct_in_first_seen_order():
    listings = [
        make_listing("1", city="Perth"),
        make_listing("2", city="Sydney"),
        make_listing("3", city="Perth"),
    ]
    stats = compute_stats(listings)
    assert stats.cities_list == ["Perth", "Sydney"]
    assert stats.cities == 2


@pytest.mark.unit
async def test_service_reads_from_store(scenario_listings):
    service = StatisticsService(InMemoryListingStore(scenario_listings))
    stats = await service.overview()
    assert stats.total_properties == 3
    dumped = stats.model_dump(by_alias=True)
    assert set(dumped) == {"totalProperties", "cities", "citiesList", "averagePrice", "propertyTypes"}
