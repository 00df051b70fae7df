"""Stateless planner endpoints - derive day plans, apply one edit, price a trip.

The client holds the working day plans and sends them with every request;
each response carries the new day plans and the recomputed total.
"""

from datetime import date
from typing import Annotated, Literal, Union

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import Field, model_validator

from tripdesk.app.api.deps import get_catalog_repository
from tripdesk.app.catalog.lookup import AsyncCatalogLookup
from tripdesk.app.db.repositories import CatalogRepository
from tripdesk.app.itinerary import mutations
from tripdesk.app.itinerary.cost import compute_cost_breakdown, compute_total_cost
from tripdesk.app.itinerary.derive import derive_day_plans
from tripdesk.app.itinerary.mutations import ActivityLocation
from tripdesk.app.itinerary.slots import slot_from_optional
from tripdesk.app.itinerary.snapshots import (
    DEFAULT_START_TIME,
    accommodation_snapshot,
    activity_snapshot,
    transportation_snapshot,
)
from tripdesk.app.models.common import CamelModel
from tripdesk.app.models.itinerary import (
    AccommodationEntry,
    ActivityEntry,
    CostBreakdown,
    DateRange,
    DayPlan,
    TransportationEntry,
)

router = APIRouter(prefix="/planner")

Catalog = Annotated[CatalogRepository, Depends(get_catalog_repository)]

# Activity fields a patch may set back to null.
_CLEARABLE = {"start_time", "image_url"}


class DeriveDaysRequest(CamelModel):
    """Request body for POST /planner/days."""

    start_date: date
    end_date: date
    days: list[DayPlan] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_end_after_start(self) -> "DeriveDaysRequest":
        """Ensure end >= start."""
        if self.end_date < self.start_date:
            raise ValueError("endDate must be >= startDate")
        return self


class DayPlansResponse(CamelModel):
    """Day plans with their derived total."""

    days: list[DayPlan]
    total_cost: float


class DragLocation(CamelModel):
    """One end of a drag gesture: day index and position within the day."""

    day_index: int = Field(..., ge=0)
    index: int = Field(..., ge=0)


class ActivityPatch(CamelModel):
    """Editable activity fields."""

    start_time: str | None = None
    name: str | None = None
    description: str | None = None
    image_url: str | None = None
    price: float | None = Field(None, ge=0)
    duration: str | None = None


class AddActivityOp(CamelModel):
    op: Literal["add_activity"]
    day_index: int
    activity: ActivityEntry


class RemoveActivityOp(CamelModel):
    op: Literal["remove_activity"]
    day_index: int
    activity_index: int


class UpdateActivityOp(CamelModel):
    op: Literal["update_activity"]
    day_index: int
    activity_index: int
    changes: ActivityPatch


class RelocateActivityOp(CamelModel):
    """Drag-and-drop result; a missing destination means the drag was cancelled."""

    op: Literal["relocate_activity"]
    source: DragLocation
    destination: DragLocation | None = None


class SetAccommodationOp(CamelModel):
    """Set or, with accommodation null, clear a day's accommodation."""

    op: Literal["set_accommodation"]
    day_index: int
    accommodation: AccommodationEntry | None = None


class SetTransportationOp(CamelModel):
    """Set or, with transportation null, clear a day's transportation."""

    op: Literal["set_transportation"]
    day_index: int
    transportation: TransportationEntry | None = None


class SetNotesOp(CamelModel):
    op: Literal["set_notes"]
    day_index: int
    notes: str


class ResetDayOp(CamelModel):
    op: Literal["reset_day"]
    day_index: int


class ResetAllOp(CamelModel):
    op: Literal["reset_all"]


class AddCatalogActivityOp(CamelModel):
    """Add a catalog activity by ID; the server copies the snapshot."""

    op: Literal["add_catalog_activity"]
    day_index: int
    activity_id: int
    start_time: str | None = None


class BookHotelOp(CamelModel):
    """Attach a catalog hotel to a day by ID."""

    op: Literal["book_hotel"]
    day_index: int
    hotel_id: int


class BookFlightOp(CamelModel):
    """Attach a catalog flight to a day by ID."""

    op: Literal["book_flight"]
    day_index: int
    flight_id: int


CatalogOperation = Union[AddCatalogActivityOp, BookHotelOp, BookFlightOp]

Operation = Annotated[
    Union[
        AddCatalogActivityOp,
        BookHotelOp,
        BookFlightOp,
        AddActivityOp,
        RemoveActivityOp,
        UpdateActivityOp,
        RelocateActivityOp,
        SetAccommodationOp,
        SetTransportationOp,
        SetNotesOp,
        ResetDayOp,
        ResetAllOp,
    ],
    Field(discriminator="op"),
]


class ApplyRequest(CamelModel):
    """Request body for POST /planner/apply."""

    days: list[DayPlan]
    operation: Operation


class CostRequest(CamelModel):
    """Request body for POST /planner/cost."""

    days: list[DayPlan]


def _patch_fields(patch: ActivityPatch) -> dict:
    """Fields the client sent; null clears start_time and image_url and is ignored elsewhere."""
    return {
        field: value
        for field, value in patch.model_dump(exclude_unset=True).items()
        if value is not None or field in _CLEARABLE
    }


def _catalog_not_found(kind: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{kind} not found")


async def resolve_catalog_operation(
    operation: CatalogOperation, lookup: AsyncCatalogLookup
) -> Operation:
    """Turn an ID-based catalog operation into a snapshot-carrying one.

    Raises:
        HTTPException: 404 if the referenced catalog record does not exist
    """
    match operation:
        case AddCatalogActivityOp():
            activity = await lookup.get_activity(operation.activity_id)
            if activity is None:
                raise _catalog_not_found("Activity")
            return AddActivityOp(
                op="add_activity",
                day_index=operation.day_index,
                activity=activity_snapshot(activity, operation.start_time or DEFAULT_START_TIME),
            )
        case BookHotelOp():
            hotel = await lookup.get_hotel(operation.hotel_id)
            if hotel is None:
                raise _catalog_not_found("Hotel")
            return SetAccommodationOp(
                op="set_accommodation",
                day_index=operation.day_index,
                accommodation=accommodation_snapshot(hotel),
            )
        case BookFlightOp():
            flight = await lookup.get_flight(operation.flight_id)
            if flight is None:
                raise _catalog_not_found("Flight")
            return SetTransportationOp(
                op="set_transportation",
                day_index=operation.day_index,
                transportation=transportation_snapshot(flight),
            )

    raise ValueError(f"Unsupported catalog operation: {operation!r}")


def apply_operation(days: list[DayPlan], operation: Operation) -> list[DayPlan]:
    """Translate a request operation into the matching mutation.

    Catalog ID operations must go through resolve_catalog_operation first.
    """
    match operation:
        case AddActivityOp():
            return mutations.add_activity(days, operation.day_index, operation.activity)
        case RemoveActivityOp():
            return mutations.remove_activity(days, operation.day_index, operation.activity_index)
        case UpdateActivityOp():
            return mutations.update_activity(
                days,
                operation.day_index,
                operation.activity_index,
                **_patch_fields(operation.changes),
            )
        case RelocateActivityOp():
            destination = (
                ActivityLocation(operation.destination.day_index, operation.destination.index)
                if operation.destination is not None
                else None
            )
            return mutations.relocate_activity(
                days,
                ActivityLocation(operation.source.day_index, operation.source.index),
                destination,
            )
        case SetAccommodationOp():
            return mutations.set_accommodation(
                days, operation.day_index, slot_from_optional(operation.accommodation)
            )
        case SetTransportationOp():
            return mutations.set_transportation(
                days, operation.day_index, slot_from_optional(operation.transportation)
            )
        case SetNotesOp():
            return mutations.set_notes(days, operation.day_index, operation.notes)
        case ResetDayOp():
            return mutations.reset_day(days, operation.day_index)
        case ResetAllOp():
            return mutations.reset_all(days)

    raise ValueError(f"Unsupported operation: {operation!r}")


@router.post("/days", response_model=DayPlansResponse)
async def derive_days(request: DeriveDaysRequest) -> DayPlansResponse:
    """Rebuild the day skeleton for a date range, carrying content by position."""
    days = derive_day_plans(DateRange(start=request.start_date, end=request.end_date), request.days)
    return DayPlansResponse(days=days, total_cost=compute_total_cost(days))


@router.post("/apply", response_model=DayPlansResponse)
async def apply(request: ApplyRequest, repo: Catalog) -> DayPlansResponse:
    """Apply one edit and return the new day plans with their total.

    Catalog ID operations are resolved to snapshots before the edit; the
    snapshot is fixed from then on.
    """
    operation = request.operation
    if isinstance(operation, (AddCatalogActivityOp, BookHotelOp, BookFlightOp)):
        operation = await resolve_catalog_operation(operation, AsyncCatalogLookup(repo))

    days = apply_operation(request.days, operation)
    return DayPlansResponse(days=days, total_cost=compute_total_cost(days))


@router.post("/cost", response_model=CostBreakdown)
async def cost(request: CostRequest) -> CostBreakdown:
    """Price a set of day plans by category."""
    return compute_cost_breakdown(request.days)
