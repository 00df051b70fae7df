"""SQL implementations of repository interfaces."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tripdesk.app.db import models as orm
from tripdesk.app.db.queries import (
    query_activities,
    query_flights,
    query_hotels,
    query_itineraries,
)
from tripdesk.app.db.repositories import PersistenceError
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

logger = logging.getLogger(__name__)


def _row_dict(row: orm.Base) -> dict[str, Any]:
    """Column values of an ORM row keyed by attribute name."""
    return {column.key: getattr(row, column.key) for column in row.__table__.columns}


class SqlCatalogRepository:
    """SQL implementation of CatalogRepository."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_destinations(self) -> list[Destination]:
        """List all destinations."""
        rows = self._session.query(orm.Destination).order_by(orm.Destination.id).all()
        return [Destination.model_validate(_row_dict(row)) for row in rows]

    def get_destination(self, destination_id: int) -> Destination | None:
        """Get destination by ID."""
        row = self._session.get(orm.Destination, destination_id)
        return Destination.model_validate(_row_dict(row)) if row else None

    def create_destination(self, data: DestinationCreate) -> Destination:
        """Create a destination."""
        row = orm.Destination(**data.model_dump())
        self._session.add(row)
        self._session.commit()
        return Destination.model_validate(_row_dict(row))

    def list_flights(
        self, departure_city: str | None = None, arrival_city: str | None = None
    ) -> list[Flight]:
        """List flights filtered by departure/arrival city."""
        rows = query_flights(self._session, departure_city, arrival_city).all()
        return [Flight.model_validate(_row_dict(row)) for row in rows]

    def get_flight(self, flight_id: int) -> Flight | None:
        """Get flight by ID."""
        row = self._session.get(orm.Flight, flight_id)
        return Flight.model_validate(_row_dict(row)) if row else None

    def create_flight(self, data: FlightCreate) -> Flight:
        """Create a flight."""
        row = orm.Flight(**data.model_dump())
        self._session.add(row)
        self._session.commit()
        return Flight.model_validate(_row_dict(row))

    def list_hotels(self, city: str | None = None) -> list[Hotel]:
        """List hotels filtered by city."""
        rows = query_hotels(self._session, city).all()
        return [Hotel.model_validate(_row_dict(row)) for row in rows]

    def get_hotel(self, hotel_id: int) -> Hotel | None:
        """Get hotel by ID."""
        row = self._session.get(orm.Hotel, hotel_id)
        return Hotel.model_validate(_row_dict(row)) if row else None

    def create_hotel(self, data: HotelCreate) -> Hotel:
        """Create a hotel."""
        row = orm.Hotel(**data.model_dump())
        self._session.add(row)
        self._session.commit()
        return Hotel.model_validate(_row_dict(row))

    def list_activities(self, destination_id: int | None = None) -> list[Activity]:
        """List activities filtered by destination."""
        rows = query_activities(self._session, destination_id).all()
        return [Activity.model_validate(_row_dict(row)) for row in rows]

    def get_activity(self, activity_id: int) -> Activity | None:
        """Get activity by ID."""
        row = self._session.get(orm.Activity, activity_id)
        return Activity.model_validate(_row_dict(row)) if row else None

    def create_activity(self, data: ActivityCreate) -> Activity:
        """Create an activity."""
        row = orm.Activity(**data.model_dump())
        self._session.add(row)
        self._session.commit()
        return Activity.model_validate(_row_dict(row))


class SqlItineraryRepository:
    """SQL implementation of ItineraryRepository."""

    backend = "sql"

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_stored(self, row: orm.Itinerary) -> StoredItinerary:
        return StoredItinerary.model_validate(_row_dict(row))

    def _fail(self, action: str, exc: SQLAlchemyError) -> PersistenceError:
        self._session.rollback()
        logger.warning(
            f"Itinerary {action} failed",
            extra={"structured": {"action": action, "error_reason": type(exc).__name__}},
        )
        return PersistenceError(f"Failed to {action} itinerary: {exc}")

    def create_itinerary(self, itinerary: Itinerary) -> StoredItinerary:
        """Save a new itinerary."""
        row = orm.Itinerary(
            name=itinerary.name,
            user_id=itinerary.user_id,
            start_date=itinerary.start_date,
            end_date=itinerary.end_date,
            total_cost=itinerary.total_cost,
            days=[day.model_dump(mode="json", by_alias=True) for day in itinerary.days],
        )

        try:
            self._session.add(row)
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail("create", e) from e

        return self._to_stored(row)

    def list_itineraries(self, user_id: int | None = None) -> list[StoredItinerary]:
        """List saved itineraries."""
        try:
            rows = query_itineraries(self._session, user_id).all()
        except SQLAlchemyError as e:
            raise self._fail("list", e) from e

        return [self._to_stored(row) for row in rows]

    def get_itinerary(self, itinerary_id: int) -> StoredItinerary | None:
        """Get itinerary by ID."""
        try:
            row = self._session.get(orm.Itinerary, itinerary_id)
        except SQLAlchemyError as e:
            raise self._fail("get", e) from e

        if row is None:
            return None

        return self._to_stored(row)

    def update_itinerary(
        self, itinerary_id: int, changes: ItineraryUpdate
    ) -> StoredItinerary | None:
        """Merge changes into an existing itinerary."""
        try:
            row = self._session.get(orm.Itinerary, itinerary_id)

            if row is None:
                return None

            for field in changes.model_fields_set:
                value = getattr(changes, field)
                if value is None:
                    continue
                if field == "days":
                    value = [day.model_dump(mode="json", by_alias=True) for day in value]
                setattr(row, field, value)

            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail("update", e) from e

        return self._to_stored(row)

    def delete_itinerary(self, itinerary_id: int) -> bool:
        """Delete itinerary by ID."""
        try:
            row = self._session.get(orm.Itinerary, itinerary_id)

            if row is None:
                return False

            self._session.delete(row)
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e

        return True
