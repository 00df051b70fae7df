"""Models package - re-exports for convenience."""

from tripdesk.app.models.catalog import (
    Activity,
    ActivityCreate,
    Destination,
    DestinationCreate,
    Flight,
    FlightCreate,
    Hotel,
    HotelCreate,
)
from tripdesk.app.models.common import CamelModel, StoreBackend, TransportType
from tripdesk.app.models.itinerary import (
    AccommodationEntry,
    ActivityEntry,
    CostBreakdown,
    DateRange,
    DayPlan,
    Itinerary,
    ItineraryUpdate,
    StoredItinerary,
    TransportationEntry,
)

__all__ = [
    # Common
    "CamelModel",
    "StoreBackend",
    "TransportType",
    # Catalog
    "Destination",
    "DestinationCreate",
    "Flight",
    "FlightCreate",
    "Hotel",
    "HotelCreate",
    "Activity",
    "ActivityCreate",
    # Itinerary
    "ActivityEntry",
    "AccommodationEntry",
    "TransportationEntry",
    "DayPlan",
    "DateRange",
    "CostBreakdown",
    "Itinerary",
    "StoredItinerary",
    "ItineraryUpdate",
]
