"""Typed settings configuration - single source of truth."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from tripdesk.app.models.common import StoreBackend


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./tripdesk.sqlite3"

    # Storage backends
    catalog_store: StoreBackend = StoreBackend.memory
    itinerary_store: StoreBackend = StoreBackend.memory
    itinerary_file_path: Path = Path("data") / "itineraries.json"

    # Catalog
    seed_catalog: bool = True
    catalog_fixture_path: Path | None = None

    # HTTP
    api_prefix: str = "/api"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
