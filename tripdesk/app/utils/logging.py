"""Structured logging for itinerary mutations and persistence."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once at application start."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


class StructuredMutationLogger:
    """Structured logger for itinerary edits and saves."""

    def log_mutation(
        self,
        operation: str,
        outcome: str,
        day_index: int | None = None,
        **fields: Any,
    ) -> None:
        """Log a single mutation with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "outcome": outcome,
        }

        if day_index is not None:
            log_data["day_index"] = day_index
        log_data.update(fields)

        logger.debug(f"Itinerary mutation: {operation} - {outcome}", extra={"structured": log_data})

    def log_save(
        self,
        backend: str,
        outcome: str,
        itinerary_id: int | None = None,
        error_reason: str | None = None,
    ) -> None:
        """Log an itinerary save attempt with structured data."""
        log_data: dict[str, Any] = {
            "backend": backend,
            "outcome": outcome,
        }

        if itinerary_id is not None:
            log_data["itinerary_id"] = itinerary_id
        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Itinerary save: {backend} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
