"""Catalog seeding from the bundled fixture file."""

import json
from dataclasses import dataclass
from pathlib import Path

from tripdesk.app.db.repositories import CatalogRepository
from tripdesk.app.models.catalog import (
    ActivityCreate,
    DestinationCreate,
    FlightCreate,
    HotelCreate,
)

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@dataclass
class CatalogSeed:
    """Catalog records parsed from a fixture file."""

    destinations: list[DestinationCreate]
    flights: list[FlightCreate]
    hotels: list[HotelCreate]
    activities: list[ActivityCreate]


def load_catalog_fixture(path: Path | None = None) -> CatalogSeed:
    """Load catalog fixtures.

    Args:
        path: Fixture file; defaults to the bundled catalog.json

    Returns:
        Parsed catalog records
    """
    fixtures_path = path or FIXTURES_DIR / "catalog.json"
    with open(fixtures_path, encoding="utf-8") as f:
        data = json.load(f)

    return CatalogSeed(
        destinations=[DestinationCreate.model_validate(d) for d in data.get("destinations", [])],
        flights=[FlightCreate.model_validate(f) for f in data.get("flights", [])],
        hotels=[HotelCreate.model_validate(h) for h in data.get("hotels", [])],
        activities=[ActivityCreate.model_validate(a) for a in data.get("activities", [])],
    )


def seed_catalog(repo: CatalogRepository, seed: CatalogSeed | None = None) -> CatalogSeed:
    """Insert every fixture record into the repository.

    Destinations go first; activity destinationId values in the fixture
    refer to destination IDs in insertion order starting at 1.
    """
    seed = seed or load_catalog_fixture()

    for destination in seed.destinations:
        repo.create_destination(destination)
    for flight in seed.flights:
        repo.create_flight(flight)
    for hotel in seed.hotels:
        repo.create_hotel(hotel)
    for activity in seed.activities:
        repo.create_activity(activity)

    return seed


def seed_sql_catalog() -> None:
    """Create tables and seed the configured SQL database.

    Idempotent: skipped when destinations already exist.
    """
    from tripdesk.app.db.engine import create_session_factory, get_engine
    from tripdesk.app.db.models import Base
    from tripdesk.app.db.sql_repositories import SqlCatalogRepository

    engine = get_engine()
    Base.metadata.create_all(engine)

    with create_session_factory(engine)() as session:
        repo = SqlCatalogRepository(session)

        if repo.list_destinations():
            print("Catalog already seeded")
            return

        seed = seed_catalog(repo)
        print(
            f"Seeded {len(seed.destinations)} destinations, {len(seed.flights)} flights, "
            f"{len(seed.hotels)} hotels, {len(seed.activities)} activities"
        )


if __name__ == "__main__":
    seed_sql_catalog()
