"""Tests for total cost derivation."""

from datetime import date

from tripdesk.app.itinerary.cost import compute_cost_breakdown, compute_total_cost, day_cost
from tripdesk.app.itinerary.derive import derive_day_plans
from tripdesk.app.itinerary.mutations import (
    ActivityLocation,
    add_activity,
    relocate_activity,
    set_accommodation,
)
from tripdesk.app.itinerary.slots import Present
from tripdesk.app.models.itinerary import (
    AccommodationEntry,
    ActivityEntry,
    DateRange,
    DayPlan,
    TransportationEntry,
)


def test_empty_itinerary_costs_nothing() -> None:
    assert compute_total_cost([]) == 0


def test_day_cost_sums_all_categories(
    eiffel: ActivityEntry,
    louvre: ActivityEntry,
    hotel_stay: AccommodationEntry,
    flight_leg: TransportationEntry,
) -> None:
    day = DayPlan(
        date=date(2024, 6, 1),
        activities=[eiffel, louvre],
        accommodation=hotel_stay,
        transportation=flight_leg,
    )

    assert day_cost(day) == 25 + 15 + 250 + 650


def test_fractional_prices_are_not_rounded() -> None:
    activity = ActivityEntry(id=9, name="Tea", description="", price=0.1, duration="1h")
    days = [DayPlan(date=date(2024, 6, 1), activities=[activity, activity])]

    assert compute_total_cost(days) == 0.1 + 0.1


def test_breakdown_total_matches_total_cost(
    three_days: list[DayPlan],
    eiffel: ActivityEntry,
    hotel_stay: AccommodationEntry,
) -> None:
    days = add_activity(three_days, 0, eiffel)
    days = set_accommodation(days, 1, Present(hotel_stay))
    days = set_accommodation(days, 2, Present(hotel_stay))

    breakdown = compute_cost_breakdown(days)

    assert breakdown.activities == 25
    assert breakdown.accommodation == 500
    assert breakdown.transportation == 0
    assert breakdown.total == compute_total_cost(days)


def test_build_price_and_relocate_walkthrough() -> None:
    """Three-day trip: add, book, move; total follows each step."""
    days = derive_day_plans(DateRange(start=date(2024, 6, 1), end=date(2024, 6, 3)), [])
    assert [d.date for d in days] == [date(2024, 6, 1), date(2024, 6, 2), date(2024, 6, 3)]

    activity = ActivityEntry(id=1, name="Walk", description="", price=25, duration="1h")
    days = add_activity(days, 0, activity)
    assert compute_total_cost(days) == 25

    hotel = AccommodationEntry(hotel_id=1, name="Hotel", price=100)
    days = set_accommodation(days, 0, Present(hotel))
    assert compute_total_cost(days) == 125

    days = relocate_activity(days, ActivityLocation(0, 0), ActivityLocation(1, 0))
    assert days[0].activities == []
    assert days[0].accommodation == hotel
    assert len(days[1].activities) == 1
    assert compute_total_cost(days) == 125
