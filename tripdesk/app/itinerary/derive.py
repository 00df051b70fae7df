"""Day-plan skeleton derivation from a trip date range."""

import logging
from collections.abc import Sequence
from datetime import date, timedelta

from tripdesk.app.models.itinerary import DateRange, DayPlan

logger = logging.getLogger(__name__)


def days_between(end: date, start: date) -> int:
    """Whole calendar days from start to end (negative when end precedes start)."""
    return (end - start).days


def derive_day_plans(date_range: DateRange, previous_days: Sequence[DayPlan]) -> list[DayPlan]:
    """Build one DayPlan per calendar day of the range.

    This is a pure function; previous_days is never mutated.

    Args:
        date_range: Inclusive start/end dates
        previous_days: Current day plans, possibly empty

    Returns:
        New day-plan sequence dated start + i. Content (activities, notes,
        accommodation, transportation) is carried forward by position: slot i
        takes whatever previous_days[i] held, regardless of its date. Slots
        past the end of previous_days start empty. An inverted range returns
        the previous sequence unchanged.

    Cost is not recomputed here; callers follow up with compute_total_cost.
    """
    if date_range.end < date_range.start:
        logger.debug(
            "Ignoring inverted date range",
            extra={"structured": {"start": str(date_range.start), "end": str(date_range.end)}},
        )
        return list(previous_days)

    day_count = days_between(date_range.end, date_range.start) + 1

    new_days: list[DayPlan] = []
    for i in range(day_count):
        current_date = date_range.start + timedelta(days=i)

        if i < len(previous_days):
            existing = previous_days[i]
            new_days.append(
                DayPlan(
                    date=current_date,
                    activities=[a.model_copy() for a in existing.activities],
                    notes=existing.notes,
                    accommodation=existing.accommodation,
                    transportation=existing.transportation,
                )
            )
        else:
            new_days.append(DayPlan(date=current_date))

    return new_days
