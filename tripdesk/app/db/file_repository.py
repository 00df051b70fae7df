"""Local JSON-file implementation of ItineraryRepository."""

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from tripdesk.app.db.inmemory import merge_itinerary_update
from tripdesk.app.db.repositories import PersistenceError
from tripdesk.app.models.itinerary import Itinerary, ItineraryUpdate, StoredItinerary

logger = logging.getLogger(__name__)

_itinerary_list = TypeAdapter(list[StoredItinerary])


class JsonFileItineraryRepository:
    """Saved itineraries kept in one JSON document on local disk.

    The whole list is read on every call and rewritten atomically on every
    change (temp file + os.replace).
    """

    backend = "file"

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def _load(self) -> list[StoredItinerary]:
        if not self._path.exists():
            return []

        try:
            raw = self._path.read_text(encoding="utf-8")
            return _itinerary_list.validate_json(raw) if raw.strip() else []
        except (OSError, ValidationError) as e:
            logger.warning(
                "Failed to read itinerary file",
                extra={"structured": {"path": str(self._path), "error_reason": type(e).__name__}},
            )
            raise PersistenceError(f"Failed to read {self._path}: {e}") from e

    def _dump(self, itineraries: list[StoredItinerary]) -> None:
        payload = json.dumps(
            _itinerary_list.dump_python(itineraries, mode="json", by_alias=True),
            indent=2,
        )

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self._path)
        except OSError as e:
            logger.warning(
                "Failed to write itinerary file",
                extra={"structured": {"path": str(self._path), "error_reason": type(e).__name__}},
            )
            raise PersistenceError(f"Failed to write {self._path}: {e}") from e

    def create_itinerary(self, itinerary: Itinerary) -> StoredItinerary:
        """Save a new itinerary."""
        itineraries = self._load()
        next_id = max((i.id for i in itineraries), default=0) + 1

        stored = StoredItinerary(id=next_id, **itinerary.model_dump())
        itineraries.append(stored)
        self._dump(itineraries)
        return stored

    def list_itineraries(self, user_id: int | None = None) -> list[StoredItinerary]:
        """List saved itineraries."""
        return [i for i in self._load() if user_id is None or i.user_id == user_id]

    def get_itinerary(self, itinerary_id: int) -> StoredItinerary | None:
        """Get itinerary by ID."""
        for itinerary in self._load():
            if itinerary.id == itinerary_id:
                return itinerary
        return None

    def update_itinerary(
        self, itinerary_id: int, changes: ItineraryUpdate
    ) -> StoredItinerary | None:
        """Merge changes into an existing itinerary."""
        itineraries = self._load()

        for position, itinerary in enumerate(itineraries):
            if itinerary.id == itinerary_id:
                updated = merge_itinerary_update(itinerary, changes)
                itineraries[position] = updated
                self._dump(itineraries)
                return updated

        return None

    def delete_itinerary(self, itinerary_id: int) -> bool:
        """Delete itinerary by ID."""
        itineraries = self._load()
        remaining = [i for i in itineraries if i.id != itinerary_id]

        if len(remaining) == len(itineraries):
            return False

        self._dump(remaining)
        return True
