"""Shared pytest fixtures for all test suites."""

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from tripdesk.app.api.deps import get_memory_catalog, get_memory_itineraries
from tripdesk.app.db.engine import create_session_factory
from tripdesk.app.db.models import Base
from tripdesk.app.models.common import TransportType
from tripdesk.app.models.itinerary import (
    AccommodationEntry,
    ActivityEntry,
    DayPlan,
    TransportationEntry,
)


@pytest.fixture
def sqlite_engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Generator[Session, None, None]:
    """Session bound to the in-memory SQLite engine."""
    with create_session_factory(sqlite_engine)() as session:
        yield session


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client over fresh process-wide in-memory stores."""
    from tripdesk.app.main import app

    get_memory_catalog.cache_clear()
    get_memory_itineraries.cache_clear()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    get_memory_catalog.cache_clear()
    get_memory_itineraries.cache_clear()


def _activity(activity_id: int, price: float, name: str) -> ActivityEntry:
    return ActivityEntry(
        id=activity_id,
        name=name,
        description=f"{name} description",
        price=price,
        duration="2h 0m",
        start_time="09:00",
    )


@pytest.fixture
def eiffel() -> ActivityEntry:
    return _activity(1, 25, "Eiffel Tower Tour")


@pytest.fixture
def louvre() -> ActivityEntry:
    return _activity(2, 15, "Louvre Museum Visit")


@pytest.fixture
def cruise() -> ActivityEntry:
    return _activity(3, 20, "Seine River Cruise")


@pytest.fixture
def hotel_stay() -> AccommodationEntry:
    return AccommodationEntry(hotel_id=1, name="Grand Plaza Hotel", price=250)


@pytest.fixture
def flight_leg() -> TransportationEntry:
    return TransportationEntry(
        type=TransportType.flight,
        from_="New York",
        to="Paris",
        price=650,
        flight_number="SA123",
        flight_id=1,
    )


@pytest.fixture
def three_days() -> list[DayPlan]:
    """Empty day plans for 2024-06-01 through 2024-06-03."""
    return [DayPlan(date=date(2024, 6, d)) for d in (1, 2, 3)]
