"""Itinerary mutations over a day-plan sequence.

Every operation is a pure transformation: it takes the current day plans and
returns a new list, leaving the input untouched (unchanged days are shared).
Indices that do not address an existing day or activity make the operation a
no-op; nothing here raises for stale indices.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from tripdesk.app.itinerary.slots import SlotValue, slot_to_optional
from tripdesk.app.models.itinerary import (
    AccommodationEntry,
    ActivityEntry,
    DayPlan,
    TransportationEntry,
)
from tripdesk.app.utils.logging import StructuredMutationLogger
from tripdesk.app.utils.metrics import PrometheusItineraryMetrics

_log = StructuredMutationLogger()
_metrics = PrometheusItineraryMetrics()


@dataclass(frozen=True)
class ActivityLocation:
    """Position of an activity: day index and index within that day."""

    day_index: int
    index: int


def _record(operation: str, applied: bool, day_index: int | None = None, **fields: Any) -> None:
    outcome = "applied" if applied else "noop"
    _log.log_mutation(operation, outcome, day_index=day_index, **fields)
    _metrics.inc_mutation(operation, outcome)


def _has_day(days: Sequence[DayPlan], day_index: int) -> bool:
    return 0 <= day_index < len(days)


def _replace_day(days: Sequence[DayPlan], day_index: int, day: DayPlan) -> list[DayPlan]:
    new_days = list(days)
    new_days[day_index] = day
    return new_days


def add_activity(days: Sequence[DayPlan], day_index: int, activity: ActivityEntry) -> list[DayPlan]:
    """Append an activity to a day. Duplicates are allowed."""
    if not _has_day(days, day_index):
        _record("add_activity", False, day_index)
        return list(days)

    day = days[day_index]
    updated = day.model_copy(update={"activities": [*day.activities, activity]})
    _record("add_activity", True, day_index, activity_id=activity.id)
    return _replace_day(days, day_index, updated)


def remove_activity(days: Sequence[DayPlan], day_index: int, activity_index: int) -> list[DayPlan]:
    """Delete the activity at activity_index, shifting later entries left."""
    if not _has_day(days, day_index) or not 0 <= activity_index < len(days[day_index].activities):
        _record("remove_activity", False, day_index, activity_index=activity_index)
        return list(days)

    day = days[day_index]
    activities = list(day.activities)
    del activities[activity_index]
    _record("remove_activity", True, day_index, activity_index=activity_index)
    return _replace_day(days, day_index, day.model_copy(update={"activities": activities}))


def update_activity(
    days: Sequence[DayPlan], day_index: int, activity_index: int, **fields: Any
) -> list[DayPlan]:
    """Merge fields (typically start_time) into an existing activity entry.

    Raises:
        ValueError: If a field name is not an ActivityEntry field
    """
    unknown = set(fields) - set(ActivityEntry.model_fields)
    if unknown:
        raise ValueError(f"Unknown activity fields: {sorted(unknown)}")

    if not _has_day(days, day_index) or not 0 <= activity_index < len(days[day_index].activities):
        _record("update_activity", False, day_index, activity_index=activity_index)
        return list(days)

    day = days[day_index]
    activities = list(day.activities)
    merged = activities[activity_index].model_dump()
    merged.update(fields)
    activities[activity_index] = ActivityEntry.model_validate(merged)

    _record("update_activity", True, day_index, activity_index=activity_index, fields=sorted(fields))
    return _replace_day(days, day_index, day.model_copy(update={"activities": activities}))


def relocate_activity(
    days: Sequence[DayPlan],
    source: ActivityLocation,
    destination: ActivityLocation | None,
) -> list[DayPlan]:
    """Move one activity, within a day or across days (drag and drop).

    Args:
        days: Current day plans
        source: Where the activity is now
        destination: Where it should go; None means the drag was cancelled

    Returns:
        New day plans. Within one day this is a list move: the entry is
        removed first and destination.index addresses the shortened list.
        Across days both the source and destination day are replaced.
    """
    if destination is None:
        _record("relocate_activity", False, source.day_index, reason="cancelled")
        return list(days)

    if (
        not _has_day(days, source.day_index)
        or not _has_day(days, destination.day_index)
        or not 0 <= source.index < len(days[source.day_index].activities)
        or destination.index < 0
    ):
        _record("relocate_activity", False, source.day_index, reason="out_of_range")
        return list(days)

    source_day = days[source.day_index]
    source_activities = list(source_day.activities)
    moved = source_activities.pop(source.index)

    if source.day_index == destination.day_index:
        source_activities.insert(destination.index, moved)
        _record("relocate_activity", True, source.day_index, dest_day_index=destination.day_index)
        return _replace_day(
            days, source.day_index, source_day.model_copy(update={"activities": source_activities})
        )

    dest_day = days[destination.day_index]
    dest_activities = list(dest_day.activities)
    dest_activities.insert(destination.index, moved)

    new_days = list(days)
    new_days[source.day_index] = source_day.model_copy(update={"activities": source_activities})
    new_days[destination.day_index] = dest_day.model_copy(update={"activities": dest_activities})

    _record("relocate_activity", True, source.day_index, dest_day_index=destination.day_index)
    return new_days


def set_accommodation(
    days: Sequence[DayPlan], day_index: int, value: SlotValue[AccommodationEntry]
) -> list[DayPlan]:
    """Replace (Present) or clear (Absent) a day's accommodation."""
    if not _has_day(days, day_index):
        _record("set_accommodation", False, day_index)
        return list(days)

    accommodation = slot_to_optional(value)
    _record("set_accommodation", True, day_index, cleared=accommodation is None)
    return _replace_day(
        days, day_index, days[day_index].model_copy(update={"accommodation": accommodation})
    )


def set_transportation(
    days: Sequence[DayPlan], day_index: int, value: SlotValue[TransportationEntry]
) -> list[DayPlan]:
    """Replace (Present) or clear (Absent) a day's transportation.

    The whole slot is replaced; merge partial edits with
    merge_transportation before calling.
    """
    if not _has_day(days, day_index):
        _record("set_transportation", False, day_index)
        return list(days)

    transportation = slot_to_optional(value)
    _record("set_transportation", True, day_index, cleared=transportation is None)
    return _replace_day(
        days, day_index, days[day_index].model_copy(update={"transportation": transportation})
    )


def set_notes(days: Sequence[DayPlan], day_index: int, text: str) -> list[DayPlan]:
    """Replace a day's notes verbatim."""
    if not _has_day(days, day_index):
        _record("set_notes", False, day_index)
        return list(days)

    _record("set_notes", True, day_index)
    return _replace_day(days, day_index, days[day_index].model_copy(update={"notes": text}))


def _cleared(day: DayPlan) -> DayPlan:
    return DayPlan(date=day.date)


def reset_day(days: Sequence[DayPlan], day_index: int) -> list[DayPlan]:
    """Clear one day's activities, notes, accommodation and transportation."""
    if not _has_day(days, day_index):
        _record("reset_day", False, day_index)
        return list(days)

    _record("reset_day", True, day_index)
    return _replace_day(days, day_index, _cleared(days[day_index]))


def reset_all(days: Sequence[DayPlan]) -> list[DayPlan]:
    """Clear every day, keeping the dates."""
    _record("reset_all", True, day_count=len(days))
    return [_cleared(day) for day in days]
