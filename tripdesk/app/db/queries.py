"""Catalog filter query helpers."""

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from tripdesk.app.db.models import Activity, Flight, Hotel, Itinerary


def query_flights(
    session: Session, departure_city: str | None = None, arrival_city: str | None = None
) -> Query:
    """Query flight table with case-insensitive city filters.

    Args:
        session: SQLAlchemy session
        departure_city: Optional departure city
        arrival_city: Optional arrival city

    Returns:
        Query ordered by ID
    """
    query = session.query(Flight)

    if departure_city:
        query = query.filter(func.lower(Flight.departure_city) == departure_city.lower())

    if arrival_city:
        query = query.filter(func.lower(Flight.arrival_city) == arrival_city.lower())

    return query.order_by(Flight.id)


def query_hotels(session: Session, city: str | None = None) -> Query:
    """Query hotel table with a case-insensitive city filter."""
    query = session.query(Hotel)

    if city:
        query = query.filter(func.lower(Hotel.city) == city.lower())

    return query.order_by(Hotel.id)


def query_activities(session: Session, destination_id: int | None = None) -> Query:
    """Query activity table, optionally scoped to one destination."""
    query = session.query(Activity)

    if destination_id is not None:
        query = query.filter(Activity.destination_id == destination_id)

    return query.order_by(Activity.id)


def query_itineraries(session: Session, user_id: int | None = None) -> Query:
    """Query itinerary table, optionally scoped to one owner."""
    query = session.query(Itinerary)

    if user_id is not None:
        query = query.filter(Itinerary.user_id == user_id)

    return query.order_by(Itinerary.id)
