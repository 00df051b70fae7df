"""Snapshot builders copying catalog records into itinerary entries."""

from typing import Any

from tripdesk.app.models.catalog import Activity, Flight, Hotel
from tripdesk.app.models.common import TransportType
from tripdesk.app.models.itinerary import (
    AccommodationEntry,
    ActivityEntry,
    TransportationEntry,
)

DEFAULT_START_TIME = "09:00"


def activity_snapshot(activity: Activity, start_time: str | None = DEFAULT_START_TIME) -> ActivityEntry:
    """Copy a catalog activity into an itinerary entry."""
    return ActivityEntry(
        id=activity.id,
        name=activity.name,
        description=activity.description,
        image_url=activity.image_url,
        price=activity.price,
        duration=activity.duration,
        start_time=start_time,
    )


def accommodation_snapshot(hotel: Hotel) -> AccommodationEntry:
    """Copy a catalog hotel into an accommodation entry."""
    return AccommodationEntry(hotel_id=hotel.id, name=hotel.name, price=hotel.price)


def transportation_snapshot(flight: Flight) -> TransportationEntry:
    """Copy a catalog flight into a flight transportation entry."""
    return TransportationEntry(
        type=TransportType.flight,
        from_=flight.departure_city,
        to=flight.arrival_city,
        price=flight.price,
        flight_number=flight.flight_number,
        flight_id=flight.id,
        departure_time=flight.departure_time,
        arrival_time=flight.arrival_time,
    )


def merge_transportation(current: TransportationEntry, **overrides: Any) -> TransportationEntry:
    """Return current with the given fields overridden.

    Used for partial edits (from/to/price/flight number) before calling
    set_transportation, which always replaces the whole slot.

    Raises:
        ValueError: If an override names a field TransportationEntry lacks
    """
    unknown = set(overrides) - set(TransportationEntry.model_fields)
    if unknown:
        raise ValueError(f"Unknown transportation fields: {sorted(unknown)}")

    data = current.model_dump()
    data.update(overrides)
    return TransportationEntry.model_validate(data)
