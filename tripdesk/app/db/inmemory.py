"""In-memory implementations of repository interfaces.

Both repositories are shared across FastAPI's worker threads, so every read
and write of their dicts and ID allocators happens under the instance lock.
"""

import threading

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


class IdAllocator:
    """Sequential ID source for one entity kind.

    Owned by a single repository and advanced only through allocate(),
    always under that repository's lock.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def allocate(self) -> int:
        """Return the next ID."""
        allocated = self._next
        self._next += 1
        return allocated


def merge_itinerary_update(stored: StoredItinerary, changes: ItineraryUpdate) -> StoredItinerary:
    """Shallow-merge the fields set on changes into stored."""
    update = {
        field: getattr(changes, field)
        for field in changes.model_fields_set
        if getattr(changes, field) is not None
    }
    return stored.model_copy(update=update, deep=True)


class InMemoryCatalogRepository:
    """Thread-safe in-memory implementation of CatalogRepository."""

    def __init__(self) -> None:
        self._destinations: dict[int, Destination] = {}
        self._flights: dict[int, Flight] = {}
        self._hotels: dict[int, Hotel] = {}
        self._activities: dict[int, Activity] = {}

        self._destination_ids = IdAllocator()
        self._flight_ids = IdAllocator()
        self._hotel_ids = IdAllocator()
        self._activity_ids = IdAllocator()
        self._lock = threading.Lock()

    def list_destinations(self) -> list[Destination]:
        """List all destinations."""
        with self._lock:
            return list(self._destinations.values())

    def get_destination(self, destination_id: int) -> Destination | None:
        """Get destination by ID."""
        with self._lock:
            return self._destinations.get(destination_id)

    def create_destination(self, data: DestinationCreate) -> Destination:
        """Create a destination."""
        with self._lock:
            destination = Destination(id=self._destination_ids.allocate(), **data.model_dump())
            self._destinations[destination.id] = destination
        return destination

    def list_flights(
        self, departure_city: str | None = None, arrival_city: str | None = None
    ) -> list[Flight]:
        """List flights filtered by departure/arrival city."""
        with self._lock:
            flights = list(self._flights.values())

        if departure_city:
            flights = [f for f in flights if f.departure_city.lower() == departure_city.lower()]

        if arrival_city:
            flights = [f for f in flights if f.arrival_city.lower() == arrival_city.lower()]

        return flights

    def get_flight(self, flight_id: int) -> Flight | None:
        """Get flight by ID."""
        with self._lock:
            return self._flights.get(flight_id)

    def create_flight(self, data: FlightCreate) -> Flight:
        """Create a flight."""
        with self._lock:
            flight = Flight(id=self._flight_ids.allocate(), **data.model_dump())
            self._flights[flight.id] = flight
        return flight

    def list_hotels(self, city: str | None = None) -> list[Hotel]:
        """List hotels filtered by city."""
        with self._lock:
            hotels = list(self._hotels.values())

        if city:
            hotels = [h for h in hotels if h.city.lower() == city.lower()]

        return hotels

    def get_hotel(self, hotel_id: int) -> Hotel | None:
        """Get hotel by ID."""
        with self._lock:
            return self._hotels.get(hotel_id)

    def create_hotel(self, data: HotelCreate) -> Hotel:
        """Create a hotel."""
        with self._lock:
            hotel = Hotel(id=self._hotel_ids.allocate(), **data.model_dump())
            self._hotels[hotel.id] = hotel
        return hotel

    def list_activities(self, destination_id: int | None = None) -> list[Activity]:
        """List activities filtered by destination."""
        with self._lock:
            activities = list(self._activities.values())

        if destination_id is not None:
            activities = [a for a in activities if a.destination_id == destination_id]

        return activities

    def get_activity(self, activity_id: int) -> Activity | None:
        """Get activity by ID."""
        with self._lock:
            return self._activities.get(activity_id)

    def create_activity(self, data: ActivityCreate) -> Activity:
        """Create an activity."""
        with self._lock:
            activity = Activity(id=self._activity_ids.allocate(), **data.model_dump())
            self._activities[activity.id] = activity
        return activity


class InMemoryItineraryRepository:
    """Thread-safe in-memory implementation of ItineraryRepository."""

    backend = "memory"

    def __init__(self) -> None:
        self._itineraries: dict[int, StoredItinerary] = {}
        self._ids = IdAllocator()
        self._lock = threading.Lock()

    def create_itinerary(self, itinerary: Itinerary) -> StoredItinerary:
        """Save a new itinerary."""
        with self._lock:
            stored = StoredItinerary(id=self._ids.allocate(), **itinerary.model_dump())
            self._itineraries[stored.id] = stored
            return stored.model_copy(deep=True)

    def list_itineraries(self, user_id: int | None = None) -> list[StoredItinerary]:
        """List saved itineraries."""
        with self._lock:
            return [
                itinerary.model_copy(deep=True)
                for itinerary in self._itineraries.values()
                if user_id is None or itinerary.user_id == user_id
            ]

    def get_itinerary(self, itinerary_id: int) -> StoredItinerary | None:
        """Get itinerary by ID."""
        with self._lock:
            stored = self._itineraries.get(itinerary_id)

            if stored is None:
                return None

            return stored.model_copy(deep=True)

    def update_itinerary(
        self, itinerary_id: int, changes: ItineraryUpdate
    ) -> StoredItinerary | None:
        """Merge changes into an existing itinerary."""
        with self._lock:
            stored = self._itineraries.get(itinerary_id)

            if stored is None:
                return None

            updated = merge_itinerary_update(stored, changes)
            self._itineraries[itinerary_id] = updated
            return updated.model_copy(deep=True)

    def delete_itinerary(self, itinerary_id: int) -> bool:
        """Delete itinerary by ID."""
        with self._lock:
            return self._itineraries.pop(itinerary_id, None) is not None
