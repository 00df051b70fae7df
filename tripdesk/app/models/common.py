"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the wire.

    Python callers use snake_case field names; JSON payloads and stored
    records use camelCase (startDate, imageUrl, hotelId, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransportType(str, Enum):
    """Transportation mode for a day's single transportation slot."""

    flight = "flight"
    train = "train"
    bus = "bus"
    car = "car"
    taxi = "taxi"


class StoreBackend(str, Enum):
    """Storage backend for catalog and itinerary repositories."""

    memory = "memory"
    sql = "sql"
    file = "file"
