"""Catalog models - destinations, flights, hotels and activities available for selection."""

from pydantic import Field

from tripdesk.app.models.common import CamelModel


class DestinationCreate(CamelModel):
    """Destination fields supplied on creation."""

    name: str
    country: str
    description: str
    image_url: str
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Destination(DestinationCreate):
    """Destination record."""

    id: int


class FlightCreate(CamelModel):
    """Flight fields supplied on creation."""

    airline: str
    flight_number: str
    departure_city: str
    arrival_city: str
    departure_time: str
    arrival_time: str
    price: float = Field(..., ge=0)
    duration: str


class Flight(FlightCreate):
    """Flight record."""

    id: int


class HotelCreate(CamelModel):
    """Hotel fields supplied on creation."""

    name: str
    city: str
    address: str
    image_url: str
    price: float = Field(..., ge=0, description="Per-night price")
    rating: float
    amenities: list[str] = Field(default_factory=list)


class Hotel(HotelCreate):
    """Hotel record."""

    id: int


class ActivityCreate(CamelModel):
    """Activity fields supplied on creation."""

    name: str
    destination_id: int
    description: str
    image_url: str | None = None
    price: float = Field(..., ge=0)
    duration: str


class Activity(ActivityCreate):
    """Activity record."""

    id: int
