"""Itinerary models - day plans, bookable snapshots and the persisted itinerary record."""

from datetime import date

from pydantic import Field, model_validator

from tripdesk.app.models.common import CamelModel, TransportType


class ActivityEntry(CamelModel):
    """Activity snapshot copied from the catalog at insertion time."""

    id: int
    name: str
    description: str
    image_url: str | None = None
    price: float = Field(..., ge=0)
    duration: str
    start_time: str | None = Field(None, description="Time of day, e.g. '09:00'")


class AccommodationEntry(CamelModel):
    """Accommodation snapshot; price is charged once per day it is attached."""

    hotel_id: int
    name: str
    price: float = Field(..., ge=0)


class TransportationEntry(CamelModel):
    """Transportation snapshot for a single day."""

    type: TransportType
    from_: str = Field("", alias="from")
    to: str = ""
    price: float = Field(0, ge=0)
    flight_number: str | None = None
    flight_id: int | None = None
    departure_time: str | None = None
    arrival_time: str | None = None


class DayPlan(CamelModel):
    """One calendar day of a trip."""

    date: date
    activities: list[ActivityEntry] = Field(default_factory=list)
    notes: str = ""
    accommodation: AccommodationEntry | None = None
    transportation: TransportationEntry | None = None


class DateRange(CamelModel):
    """Inclusive trip date range.

    Ordering (end >= start) is checked at the request boundary; the
    day-plan deriver treats an inverted range as a no-op.
    """

    start: date
    end: date

    @property
    def is_inverted(self) -> bool:
        return self.end < self.start

    @property
    def day_count(self) -> int:
        return (self.end - self.start).days + 1


class CostBreakdown(CamelModel):
    """Cost breakdown by category."""

    activities: float
    accommodation: float
    transportation: float
    total: float


class Itinerary(CamelModel):
    """Named, dated trip plan handed to persistence on save."""

    name: str
    start_date: date
    end_date: date
    total_cost: float
    days: list[DayPlan]
    user_id: int | None = None

    @model_validator(mode="after")
    def validate_end_after_start(self) -> "Itinerary":
        """Ensure end >= start."""
        if self.end_date < self.start_date:
            raise ValueError("endDate must be >= startDate")
        return self


class StoredItinerary(Itinerary):
    """Itinerary with its store-assigned identity."""

    id: int


class ItineraryUpdate(CamelModel):
    """Partial itinerary update; only provided fields are merged."""

    name: str | None = None
    user_id: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    total_cost: float | None = None
    days: list[DayPlan] | None = None

    @model_validator(mode="after")
    def validate_end_after_start(self) -> "ItineraryUpdate":
        """Ensure end >= start when both dates are provided."""
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("endDate must be >= startDate")
        return self
