"""Async catalog lookups with latest-wins superseding.

Catalog searches run off the event loop and may overlap with itinerary
edits. A search never touches itinerary state; the caller applies a chosen
result through a separate mutation. When several searches for the same
purpose overlap (e.g. the user retypes a city), only the newest one
delivers its result.

The HTTP routes use AsyncCatalogLookup per request. LatestLookupGate is for
clients that keep an editing session open across several lookups, such as
ItineraryBuilder callers; it holds no state of its own beyond generations.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from tripdesk.app.db.repositories import CatalogRepository
from tripdesk.app.models.catalog import Activity, Destination, Flight, Hotel
from tripdesk.app.utils.metrics import PrometheusItineraryMetrics

T = TypeVar("T")


class LookupSuperseded(Exception):
    """A newer lookup for the same purpose started before this one finished."""

    def __init__(self, purpose: str) -> None:
        super().__init__(f"Lookup superseded: {purpose}")
        self.purpose = purpose


class LatestLookupGate:
    """Deliver only the latest lookup result per purpose."""

    def __init__(self) -> None:
        self._generations: dict[str, int] = {}

    def latest_generation(self, purpose: str) -> int:
        """Generation number of the most recently started lookup."""
        return self._generations.get(purpose, 0)

    async def run(self, purpose: str, lookup: Callable[[], Awaitable[T]]) -> T:
        """Run a lookup, discarding its result if a newer one has started.

        Args:
            purpose: Key grouping lookups that supersede each other
            lookup: Zero-argument coroutine factory performing the query

        Returns:
            Lookup result

        Raises:
            LookupSuperseded: If a newer lookup for purpose started meanwhile
        """
        generation = self.latest_generation(purpose) + 1
        self._generations[purpose] = generation

        result = await lookup()

        if self._generations[purpose] != generation:
            raise LookupSuperseded(purpose)

        return result


class AsyncCatalogLookup:
    """Run catalog repository queries in a worker thread."""

    def __init__(self, repo: CatalogRepository) -> None:
        self._repo = repo
        self._metrics = PrometheusItineraryMetrics()

    async def _call(self, kind: str, fn: Callable[..., T], *args: Any) -> T:
        started = time.perf_counter()
        try:
            return await asyncio.to_thread(fn, *args)
        finally:
            self._metrics.record_lookup_latency(kind, (time.perf_counter() - started) * 1000)

    async def list_destinations(self) -> list[Destination]:
        return await self._call("destination", self._repo.list_destinations)

    async def get_destination(self, destination_id: int) -> Destination | None:
        return await self._call("destination", self._repo.get_destination, destination_id)

    async def search_flights(
        self, departure_city: str | None = None, arrival_city: str | None = None
    ) -> list[Flight]:
        return await self._call("flight", self._repo.list_flights, departure_city, arrival_city)

    async def get_flight(self, flight_id: int) -> Flight | None:
        return await self._call("flight", self._repo.get_flight, flight_id)

    async def search_hotels(self, city: str | None = None) -> list[Hotel]:
        return await self._call("hotel", self._repo.list_hotels, city)

    async def get_hotel(self, hotel_id: int) -> Hotel | None:
        return await self._call("hotel", self._repo.get_hotel, hotel_id)

    async def list_activities(self, destination_id: int | None = None) -> list[Activity]:
        return await self._call("activity", self._repo.list_activities, destination_id)

    async def get_activity(self, activity_id: int) -> Activity | None:
        return await self._call("activity", self._repo.get_activity, activity_id)
