"""Catalog endpoints - destinations, flights, hotels and activities."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tripdesk.app.api.deps import get_catalog_repository
from tripdesk.app.catalog.lookup import AsyncCatalogLookup
from tripdesk.app.db.repositories import CatalogRepository
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

router = APIRouter()

Catalog = Annotated[CatalogRepository, Depends(get_catalog_repository)]


def _not_found(kind: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{kind} not found")


@router.get("/destinations", response_model=list[Destination])
async def list_destinations(repo: Catalog) -> list[Destination]:
    """List all destinations."""
    return await AsyncCatalogLookup(repo).list_destinations()


@router.get("/destinations/{destination_id}", response_model=Destination)
async def get_destination(destination_id: int, repo: Catalog) -> Destination:
    """Get a destination by ID."""
    destination = await AsyncCatalogLookup(repo).get_destination(destination_id)
    if destination is None:
        raise _not_found("Destination")
    return destination


@router.post("/destinations", response_model=Destination, status_code=status.HTTP_201_CREATED)
def create_destination(data: DestinationCreate, repo: Catalog) -> Destination:
    """Create a destination."""
    return repo.create_destination(data)


@router.get("/flights", response_model=list[Flight])
async def list_flights(
    repo: Catalog,
    departure_city: Annotated[str | None, Query(alias="from")] = None,
    arrival_city: Annotated[str | None, Query(alias="to")] = None,
) -> list[Flight]:
    """Search flights by departure (from) and arrival (to) city."""
    return await AsyncCatalogLookup(repo).search_flights(departure_city, arrival_city)


@router.get("/flights/{flight_id}", response_model=Flight)
async def get_flight(flight_id: int, repo: Catalog) -> Flight:
    """Get a flight by ID."""
    flight = await AsyncCatalogLookup(repo).get_flight(flight_id)
    if flight is None:
        raise _not_found("Flight")
    return flight


@router.post("/flights", response_model=Flight, status_code=status.HTTP_201_CREATED)
def create_flight(data: FlightCreate, repo: Catalog) -> Flight:
    """Create a flight."""
    return repo.create_flight(data)


@router.get("/hotels", response_model=list[Hotel])
async def list_hotels(
    repo: Catalog,
    city: Annotated[str | None, Query()] = None,
) -> list[Hotel]:
    """Search hotels by city."""
    return await AsyncCatalogLookup(repo).search_hotels(city)


@router.get("/hotels/{hotel_id}", response_model=Hotel)
async def get_hotel(hotel_id: int, repo: Catalog) -> Hotel:
    """Get a hotel by ID."""
    hotel = await AsyncCatalogLookup(repo).get_hotel(hotel_id)
    if hotel is None:
        raise _not_found("Hotel")
    return hotel


@router.post("/hotels", response_model=Hotel, status_code=status.HTTP_201_CREATED)
def create_hotel(data: HotelCreate, repo: Catalog) -> Hotel:
    """Create a hotel."""
    return repo.create_hotel(data)


@router.get("/activities", response_model=list[Activity])
async def list_activities(
    repo: Catalog,
    destination_id: Annotated[int | None, Query(alias="destinationId")] = None,
) -> list[Activity]:
    """List activities, optionally for one destination."""
    return await AsyncCatalogLookup(repo).list_activities(destination_id)


@router.get("/activities/{activity_id}", response_model=Activity)
async def get_activity(activity_id: int, repo: Catalog) -> Activity:
    """Get an activity by ID."""
    activity = await AsyncCatalogLookup(repo).get_activity(activity_id)
    if activity is None:
        raise _not_found("Activity")
    return activity


@router.post("/activities", response_model=Activity, status_code=status.HTTP_201_CREATED)
def create_activity(data: ActivityCreate, repo: Catalog) -> Activity:
    """Create an activity."""
    return repo.create_activity(data)
