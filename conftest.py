"""Global pytest configuration."""

import os

# Storage defaults for tests before any imports
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("CATALOG_STORE", "memory")
os.environ.setdefault("ITINERARY_STORE", "memory")
os.environ.setdefault("SEED_CATALOG", "true")
