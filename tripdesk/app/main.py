"""FastAPI application."""

from fastapi import FastAPI

from tripdesk.app.api.routes.catalog import router as catalog_router
from tripdesk.app.api.routes.health import router as health_router
from tripdesk.app.api.routes.itineraries import router as itineraries_router
from tripdesk.app.api.routes.metrics import router as metrics_router
from tripdesk.app.api.routes.planner import router as planner_router
from tripdesk.app.config import get_settings
from tripdesk.app.utils.logging import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title="Tripdesk API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(catalog_router, prefix=settings.api_prefix, tags=["catalog"])
app.include_router(itineraries_router, prefix=settings.api_prefix, tags=["itineraries"])
app.include_router(planner_router, prefix=settings.api_prefix, tags=["planner"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Tripdesk API", "version": "0.1.0"}
