"""Repository dependencies selected by configured storage backend."""

from collections.abc import Generator
from functools import lru_cache

from tripdesk.app.config import get_settings
from tripdesk.app.db.engine import create_session_factory, get_engine
from tripdesk.app.db.file_repository import JsonFileItineraryRepository
from tripdesk.app.db.inmemory import InMemoryCatalogRepository, InMemoryItineraryRepository
from tripdesk.app.db.repositories import CatalogRepository, ItineraryRepository
from tripdesk.app.db.seed import load_catalog_fixture, seed_catalog
from tripdesk.app.db.sql_repositories import SqlCatalogRepository, SqlItineraryRepository
from tripdesk.app.models.common import StoreBackend


@lru_cache
def get_memory_catalog() -> InMemoryCatalogRepository:
    """Process-wide in-memory catalog, seeded from fixtures when enabled."""
    settings = get_settings()
    repo = InMemoryCatalogRepository()

    if settings.seed_catalog:
        seed_catalog(repo, load_catalog_fixture(settings.catalog_fixture_path))

    return repo


@lru_cache
def get_memory_itineraries() -> InMemoryItineraryRepository:
    """Process-wide in-memory itinerary store."""
    return InMemoryItineraryRepository()


def get_catalog_repository() -> Generator[CatalogRepository, None, None]:
    """FastAPI dependency yielding the configured catalog repository."""
    settings = get_settings()

    if settings.catalog_store == StoreBackend.sql:
        with create_session_factory(get_engine())() as session:
            yield SqlCatalogRepository(session)
    else:
        yield get_memory_catalog()


def get_itinerary_repository() -> Generator[ItineraryRepository, None, None]:
    """FastAPI dependency yielding the configured itinerary repository."""
    settings = get_settings()

    if settings.itinerary_store == StoreBackend.sql:
        with create_session_factory(get_engine())() as session:
            yield SqlItineraryRepository(session)
    elif settings.itinerary_store == StoreBackend.file:
        yield JsonFileItineraryRepository(settings.itinerary_file_path)
    else:
        yield get_memory_itineraries()
