"""Health check endpoints."""

import json
from typing import Any

from fastapi import APIRouter, Response
from sqlalchemy import text

from tripdesk.app.config import Settings, get_settings
from tripdesk.app.db.engine import create_session_factory, get_engine
from tripdesk.app.models.common import StoreBackend

router = APIRouter()


def check_db(settings: Settings) -> tuple[bool, str]:
    """Check database connectivity.

    Returns:
        (is_ok, status_message)
    """
    try:
        with create_session_factory(get_engine())() as session:
            session.execute(text("SELECT 1"))

        return (True, "ok")
    except Exception as e:
        return (False, f"error: {type(e).__name__}")


def check_file_store(settings: Settings) -> tuple[bool, str]:
    """Check that the itinerary file, if present, is a readable file.

    Returns:
        (is_ok, status_message)
    """
    path = settings.itinerary_file_path

    if not path.exists():
        return (True, "empty")
    if not path.is_file():
        return (False, "error: not a file")
    return (True, "ok")


def check_store(settings: Settings, backend: StoreBackend) -> tuple[bool, str]:
    """Check one configured storage backend."""
    if backend == StoreBackend.sql:
        return check_db(settings)
    if backend == StoreBackend.file:
        return check_file_store(settings)
    return (True, "memory")


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
def healthz() -> dict[str, Any] | Response:
    """Readiness check of the configured catalog and itinerary stores.

    Returns:
        200 with component status if both stores are reachable
        503 otherwise
    """
    settings = get_settings()

    catalog_ok, catalog_status = check_store(settings, settings.catalog_store)
    itineraries_ok, itineraries_status = check_store(settings, settings.itinerary_store)

    all_ok = catalog_ok and itineraries_ok

    response_body = {
        "status": "ok" if all_ok else "degraded",
        "components": {
            "catalog": catalog_status,
            "itineraries": itineraries_status,
        },
    }

    if not all_ok:
        return Response(
            content=json.dumps(response_body),
            status_code=503,
            media_type="application/json",
        )

    return response_body
