"""Repository protocol interfaces for data access."""

from typing import Protocol

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
from tripdesk.app.models.itinerary import Itinerary, ItineraryUpdate, StoredItinerary


class PersistenceError(Exception):
    """Itinerary store failed to read or write."""

    pass


class CatalogRepository(Protocol):
    """Repository for catalog lookups (destinations, flights, hotels, activities)."""

    def list_destinations(self) -> list[Destination]:
        """List all destinations."""
        ...

    def get_destination(self, destination_id: int) -> Destination | None:
        """Get destination by ID."""
        ...

    def create_destination(self, data: DestinationCreate) -> Destination:
        """Create a destination with a store-assigned ID."""
        ...

    def list_flights(
        self, departure_city: str | None = None, arrival_city: str | None = None
    ) -> list[Flight]:
        """List flights, optionally filtered by city.

        Args:
            departure_city: Case-insensitive departure city match
            arrival_city: Case-insensitive arrival city match

        Returns:
            Matching flights
        """
        ...

    def get_flight(self, flight_id: int) -> Flight | None:
        """Get flight by ID."""
        ...

    def create_flight(self, data: FlightCreate) -> Flight:
        """Create a flight with a store-assigned ID."""
        ...

    def list_hotels(self, city: str | None = None) -> list[Hotel]:
        """List hotels, optionally filtered by case-insensitive city."""
        ...

    def get_hotel(self, hotel_id: int) -> Hotel | None:
        """Get hotel by ID."""
        ...

    def create_hotel(self, data: HotelCreate) -> Hotel:
        """Create a hotel with a store-assigned ID."""
        ...

    def list_activities(self, destination_id: int | None = None) -> list[Activity]:
        """List activities, optionally for one destination."""
        ...

    def get_activity(self, activity_id: int) -> Activity | None:
        """Get activity by ID."""
        ...

    def create_activity(self, data: ActivityCreate) -> Activity:
        """Create an activity with a store-assigned ID."""
        ...


class ItineraryRepository(Protocol):
    """Repository for saved itineraries.

    Implementations raise PersistenceError when the backing store fails.
    """

    backend: str

    def create_itinerary(self, itinerary: Itinerary) -> StoredItinerary:
        """Save a new itinerary.

        Args:
            itinerary: Fully formed itinerary value

        Returns:
            Stored itinerary with assigned ID
        """
        ...

    def list_itineraries(self, user_id: int | None = None) -> list[StoredItinerary]:
        """List saved itineraries.

        Args:
            user_id: Optional owner filter

        Returns:
            Itineraries in creation order
        """
        ...

    def get_itinerary(self, itinerary_id: int) -> StoredItinerary | None:
        """Get itinerary by ID.

        Returns:
            Itinerary or None if not found
        """
        ...

    def update_itinerary(self, itinerary_id: int, changes: ItineraryUpdate) -> StoredItinerary | None:
        """Merge the provided fields into an existing itinerary.

        Args:
            itinerary_id: Itinerary ID
            changes: Partial update; unset fields are left untouched

        Returns:
            Updated itinerary or None if not found
        """
        ...

    def delete_itinerary(self, itinerary_id: int) -> bool:
        """Delete itinerary by ID.

        Returns:
            True if it existed
        """
        ...
