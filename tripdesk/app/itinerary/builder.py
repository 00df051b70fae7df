"""Single-session itinerary editor.

Holds the trip name, dates, day plans and total cost for one user session,
applies each edit through the pure mutation functions and recomputes the
total after every one of them.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from tripdesk.app.db.repositories import ItineraryRepository, PersistenceError
from tripdesk.app.itinerary import mutations
from tripdesk.app.itinerary.cost import compute_cost_breakdown, compute_total_cost
from tripdesk.app.itinerary.derive import derive_day_plans
from tripdesk.app.itinerary.mutations import ActivityLocation
from tripdesk.app.itinerary.slots import SlotValue
from tripdesk.app.models.itinerary import (
    AccommodationEntry,
    ActivityEntry,
    CostBreakdown,
    DateRange,
    DayPlan,
    Itinerary,
    StoredItinerary,
    TransportationEntry,
)
from tripdesk.app.utils.logging import StructuredMutationLogger
from tripdesk.app.utils.metrics import PrometheusItineraryMetrics


class MissingDatesError(Exception):
    """Itinerary cannot be saved without both start and end dates."""

    pass


@dataclass
class SaveOutcome:
    """Result of handing an itinerary to persistence."""

    itinerary: StoredItinerary | None
    error: PersistenceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ItineraryBuilder:
    """Mutable editing session over an itinerary's day plans."""

    def __init__(
        self,
        name: str = "My Trip",
        start: date | None = None,
        end: date | None = None,
        user_id: int | None = None,
    ) -> None:
        self.name = name
        self.user_id = user_id
        self.start: date | None = None
        self.end: date | None = None
        self.days: list[DayPlan] = []
        self.total_cost = 0.0
        self._log = StructuredMutationLogger()
        self._metrics = PrometheusItineraryMetrics()

        self.set_dates(start, end)

    @classmethod
    def load(cls, stored: Itinerary) -> "ItineraryBuilder":
        """Reopen a saved itinerary for editing."""
        builder = cls(name=stored.name, user_id=stored.user_id)
        builder.start = stored.start_date
        builder.end = stored.end_date
        builder._apply([day.model_copy(deep=True) for day in stored.days])
        return builder

    def _apply(self, days: list[DayPlan]) -> None:
        self.days = days
        self.total_cost = compute_total_cost(days)

    def set_dates(self, start: date | None, end: date | None) -> None:
        """Record new dates and rebuild the day skeleton.

        The skeleton is only rebuilt when both dates are present. An inverted
        range (end < start) is ignored entirely: dates and days stay as they
        were, so day i is always dated start + i.
        """
        if start is not None and end is not None and end < start:
            self._log.log_mutation("set_dates", "noop", reason="inverted_range")
            self._metrics.inc_mutation("set_dates", "noop")
            return

        self.start = start
        self.end = end

        if start is None or end is None:
            return

        self._apply(derive_day_plans(DateRange(start=start, end=end), self.days))

    def add_activity(self, day_index: int, activity: ActivityEntry) -> None:
        self._apply(mutations.add_activity(self.days, day_index, activity))

    def remove_activity(self, day_index: int, activity_index: int) -> None:
        self._apply(mutations.remove_activity(self.days, day_index, activity_index))

    def update_activity(self, day_index: int, activity_index: int, **fields: Any) -> None:
        self._apply(mutations.update_activity(self.days, day_index, activity_index, **fields))

    def relocate_activity(
        self, source: ActivityLocation, destination: ActivityLocation | None
    ) -> None:
        self._apply(mutations.relocate_activity(self.days, source, destination))

    def set_accommodation(self, day_index: int, value: SlotValue[AccommodationEntry]) -> None:
        self._apply(mutations.set_accommodation(self.days, day_index, value))

    def set_transportation(self, day_index: int, value: SlotValue[TransportationEntry]) -> None:
        self._apply(mutations.set_transportation(self.days, day_index, value))

    def set_notes(self, day_index: int, text: str) -> None:
        self._apply(mutations.set_notes(self.days, day_index, text))

    def reset_day(self, day_index: int) -> None:
        self._apply(mutations.reset_day(self.days, day_index))

    def reset_all(self) -> None:
        self._apply(mutations.reset_all(self.days))

    def cost_breakdown(self) -> CostBreakdown:
        return compute_cost_breakdown(self.days)

    def to_itinerary(self) -> Itinerary:
        """Snapshot the session as an itinerary value.

        Raises:
            MissingDatesError: If start or end date is unset
        """
        if self.start is None or self.end is None:
            raise MissingDatesError("Please select both start and end dates for your trip")

        return Itinerary(
            name=self.name,
            start_date=self.start,
            end_date=self.end,
            total_cost=self.total_cost,
            days=[day.model_copy(deep=True) for day in self.days],
            user_id=self.user_id,
        )

    def save(self, repository: ItineraryRepository) -> SaveOutcome:
        """Hand the itinerary to persistence.

        A failed save is returned, not raised, and leaves the session
        untouched so it can be edited and saved again. No retry.

        Raises:
            MissingDatesError: If start or end date is unset
        """
        itinerary = self.to_itinerary()

        try:
            stored = repository.create_itinerary(itinerary)
        except PersistenceError as e:
            self._log.log_save(repository.backend, "error", error_reason=str(e))
            self._metrics.inc_save(repository.backend, "error")
            return SaveOutcome(itinerary=None, error=e)

        self._log.log_save(repository.backend, "success", itinerary_id=stored.id)
        self._metrics.inc_save(repository.backend, "success")
        return SaveOutcome(itinerary=stored)
