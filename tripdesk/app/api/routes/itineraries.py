"""Saved itinerary endpoints - create, list, read, update, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from tripdesk.app.api.deps import get_itinerary_repository
from tripdesk.app.db.repositories import ItineraryRepository, PersistenceError
from tripdesk.app.itinerary.cost import compute_total_cost
from tripdesk.app.models.itinerary import Itinerary, ItineraryUpdate, StoredItinerary
from tripdesk.app.utils.logging import StructuredMutationLogger
from tripdesk.app.utils.metrics import PrometheusItineraryMetrics

router = APIRouter(prefix="/itineraries")

Store = Annotated[ItineraryRepository, Depends(get_itinerary_repository)]

_save_log = StructuredMutationLogger()
_metrics = PrometheusItineraryMetrics()


def _unavailable(e: PersistenceError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Itinerary not found")


def _with_derived_total(changes: ItineraryUpdate) -> ItineraryUpdate:
    """Drop any client-supplied total and derive it from days when days change."""
    fields = {f: getattr(changes, f) for f in changes.model_fields_set if f != "total_cost"}

    if changes.days is not None:
        fields["total_cost"] = compute_total_cost(changes.days)

    return ItineraryUpdate(**fields)


@router.get("", response_model=list[StoredItinerary])
def list_itineraries(
    store: Store,
    user_id: Annotated[int | None, Query(alias="userId")] = None,
) -> list[StoredItinerary]:
    """List saved itineraries, optionally for one owner."""
    try:
        return store.list_itineraries(user_id)
    except PersistenceError as e:
        raise _unavailable(e) from e


@router.get("/{itinerary_id}", response_model=StoredItinerary)
def get_itinerary(itinerary_id: int, store: Store) -> StoredItinerary:
    """Get a saved itinerary by ID."""
    try:
        itinerary = store.get_itinerary(itinerary_id)
    except PersistenceError as e:
        raise _unavailable(e) from e

    if itinerary is None:
        raise _not_found()
    return itinerary


@router.post("", response_model=StoredItinerary, status_code=status.HTTP_201_CREATED)
def create_itinerary(itinerary: Itinerary, store: Store) -> StoredItinerary:
    """Save an itinerary.

    totalCost is derived from days; a client-supplied value is replaced.
    """
    itinerary = itinerary.model_copy(update={"total_cost": compute_total_cost(itinerary.days)})

    try:
        stored = store.create_itinerary(itinerary)
    except PersistenceError as e:
        _save_log.log_save(store.backend, "error", error_reason=str(e))
        _metrics.inc_save(store.backend, "error")
        raise _unavailable(e) from e

    _save_log.log_save(store.backend, "success", itinerary_id=stored.id)
    _metrics.inc_save(store.backend, "success")
    return stored


@router.put("/{itinerary_id}", response_model=StoredItinerary)
def update_itinerary(
    itinerary_id: int, changes: ItineraryUpdate, store: Store
) -> StoredItinerary:
    """Merge the provided fields into a saved itinerary.

    A change to only one date is checked against the stored other date.
    """
    try:
        if changes.start_date is not None or changes.end_date is not None:
            current = store.get_itinerary(itinerary_id)
            if current is None:
                raise _not_found()

            start = changes.start_date or current.start_date
            end = changes.end_date or current.end_date
            if end < start:
                raise HTTPException(
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    detail="endDate must be >= startDate",
                )

        updated = store.update_itinerary(itinerary_id, _with_derived_total(changes))
    except PersistenceError as e:
        raise _unavailable(e) from e

    if updated is None:
        raise _not_found()
    return updated


@router.delete("/{itinerary_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_itinerary(itinerary_id: int, store: Store) -> Response:
    """Delete a saved itinerary."""
    try:
        deleted = store.delete_itinerary(itinerary_id)
    except PersistenceError as e:
        raise _unavailable(e) from e

    if not deleted:
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
