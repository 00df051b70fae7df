"""Tests for catalog-to-itinerary snapshot builders."""

import pytest

from tripdesk.app.itinerary.snapshots import (
    DEFAULT_START_TIME,
    accommodation_snapshot,
    activity_snapshot,
    merge_transportation,
    transportation_snapshot,
)
from tripdesk.app.models.catalog import Activity, Flight, Hotel
from tripdesk.app.models.common import TransportType


@pytest.fixture
def catalog_activity() -> Activity:
    return Activity(
        id=4,
        name="Meiji Shrine Visit",
        destination_id=2,
        description="Shinto shrine in a forest.",
        price=0,
        duration="1h 30m",
    )


@pytest.fixture
def catalog_flight() -> Flight:
    return Flight(
        id=1,
        airline="Sky Airways",
        flight_number="SA123",
        departure_city="New York",
        arrival_city="Paris",
        departure_time="2023-06-15T08:00:00Z",
        arrival_time="2023-06-15T20:00:00Z",
        price=650,
        duration="8h 0m",
    )


def test_activity_snapshot_defaults_start_time(catalog_activity: Activity) -> None:
    entry = activity_snapshot(catalog_activity)

    assert entry.id == 4
    assert entry.name == "Meiji Shrine Visit"
    assert entry.price == 0
    assert entry.image_url is None
    assert entry.start_time == DEFAULT_START_TIME == "09:00"


def test_activity_snapshot_custom_start_time(catalog_activity: Activity) -> None:
    assert activity_snapshot(catalog_activity, start_time="18:00").start_time == "18:00"


def test_accommodation_snapshot_copies_nightly_price() -> None:
    hotel = Hotel(
        id=2,
        name="Imperial Tokyo",
        city="Tokyo",
        address="1-1-1 Uchisaiwaicho",
        image_url="https://example.com/h.jpg",
        price=320,
        rating=4.9,
    )

    entry = accommodation_snapshot(hotel)

    assert (entry.hotel_id, entry.name, entry.price) == (2, "Imperial Tokyo", 320)


def test_transportation_snapshot_from_flight(catalog_flight: Flight) -> None:
    entry = transportation_snapshot(catalog_flight)

    assert entry.type == TransportType.flight
    assert entry.from_ == "New York"
    assert entry.to == "Paris"
    assert entry.flight_id == 1
    assert entry.flight_number == "SA123"
    assert entry.model_dump(by_alias=True)["from"] == "New York"


def test_merge_transportation_overrides_fields(catalog_flight: Flight) -> None:
    entry = transportation_snapshot(catalog_flight)

    merged = merge_transportation(entry, price=700, to="Lyon")

    assert merged.price == 700
    assert merged.to == "Lyon"
    assert merged.from_ == "New York"
    assert entry.price == 650


def test_merge_transportation_rejects_unknown_fields(catalog_flight: Flight) -> None:
    with pytest.raises(ValueError, match="Unknown transportation fields"):
        merge_transportation(transportation_snapshot(catalog_flight), seat="12A")
