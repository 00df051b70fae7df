"""Tests for day-plan skeleton derivation."""

from datetime import date, timedelta

import pytest

from tripdesk.app.itinerary.derive import days_between, derive_day_plans
from tripdesk.app.models.itinerary import ActivityEntry, DateRange, DayPlan


def _range(start: date, days: int) -> DateRange:
    return DateRange(start=start, end=start + timedelta(days=days - 1))


def test_three_day_range_produces_dated_empty_days() -> None:
    """2024-06-01..03 yields three empty days dated in order."""
    days = derive_day_plans(DateRange(start=date(2024, 6, 1), end=date(2024, 6, 3)), [])

    assert [d.date for d in days] == [date(2024, 6, 1), date(2024, 6, 2), date(2024, 6, 3)]
    for day in days:
        assert day.activities == []
        assert day.notes == ""
        assert day.accommodation is None
        assert day.transportation is None


@pytest.mark.parametrize("length", [1, 2, 7, 31])
def test_day_count_matches_inclusive_range(length: int) -> None:
    """One DayPlan per calendar day, dated start + index."""
    start = date(2024, 2, 27)
    days = derive_day_plans(_range(start, length), [])

    assert len(days) == length
    assert all(day.date == start + timedelta(days=i) for i, day in enumerate(days))


def test_range_crossing_leap_day() -> None:
    days = derive_day_plans(DateRange(start=date(2024, 2, 28), end=date(2024, 3, 1)), [])

    assert [d.date for d in days] == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


def test_inverted_range_returns_previous_days_unchanged(three_days: list[DayPlan]) -> None:
    result = derive_day_plans(DateRange(start=date(2024, 6, 5), end=date(2024, 6, 1)), three_days)

    assert result == three_days


def test_content_carries_forward_by_position(
    three_days: list[DayPlan], eiffel: ActivityEntry, louvre: ActivityEntry
) -> None:
    """Shifting the start date re-dates days but keeps content by index."""
    three_days[0] = three_days[0].model_copy(update={"activities": [eiffel], "notes": "arrive"})
    three_days[1] = three_days[1].model_copy(update={"activities": [louvre]})

    result = derive_day_plans(DateRange(start=date(2024, 7, 10), end=date(2024, 7, 12)), three_days)

    assert result[0].date == date(2024, 7, 10)
    assert result[0].activities == [eiffel]
    assert result[0].notes == "arrive"
    assert result[1].activities == [louvre]
    assert result[2].activities == []


def test_shrink_then_grow_loses_trailing_content(
    eiffel: ActivityEntry, louvre: ActivityEntry, cruise: ActivityEntry
) -> None:
    """Content beyond the shrink point is dropped, not restored on regrowth."""
    start = date(2024, 6, 1)
    days = derive_day_plans(_range(start, 5), [])
    days[0] = days[0].model_copy(update={"activities": [eiffel]})
    days[2] = days[2].model_copy(update={"activities": [louvre, cruise]})

    shrunk = derive_day_plans(_range(start, 2), days)
    regrown = derive_day_plans(_range(start, 5), shrunk)

    assert len(shrunk) == 2
    assert len(regrown) == 5
    assert regrown[0].activities == [eiffel]
    assert regrown[2].activities == []


def test_does_not_mutate_previous_days(three_days: list[DayPlan], eiffel: ActivityEntry) -> None:
    three_days[0] = three_days[0].model_copy(update={"activities": [eiffel]})
    snapshot = [d.model_copy(deep=True) for d in three_days]

    derive_day_plans(DateRange(start=date(2024, 6, 1), end=date(2024, 6, 1)), three_days)

    assert three_days == snapshot


def test_days_between_is_signed() -> None:
    assert days_between(date(2024, 6, 3), date(2024, 6, 1)) == 2
    assert days_between(date(2024, 6, 1), date(2024, 6, 3)) == -2
