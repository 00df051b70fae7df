"""Total trip cost derived from day plans."""

from collections.abc import Sequence

from tripdesk.app.models.itinerary import CostBreakdown, DayPlan


def day_cost(day: DayPlan) -> float:
    """Activities plus accommodation plus transportation for one day."""
    cost = 0.0

    for activity in day.activities:
        cost += activity.price

    if day.accommodation is not None:
        cost += day.accommodation.price

    if day.transportation is not None:
        cost += day.transportation.price

    return cost


def compute_total_cost(days: Sequence[DayPlan]) -> float:
    """Full fold over every day; never maintained incrementally.

    No rounding is applied; display precision is a presentation concern.
    """
    total = 0.0
    for day in days:
        total += day_cost(day)
    return total


def compute_cost_breakdown(days: Sequence[DayPlan]) -> CostBreakdown:
    """Per-category totals; total equals compute_total_cost(days)."""
    activities = 0.0
    accommodation = 0.0
    transportation = 0.0

    for day in days:
        for activity in day.activities:
            activities += activity.price
        if day.accommodation is not None:
            accommodation += day.accommodation.price
        if day.transportation is not None:
            transportation += day.transportation.price

    return CostBreakdown(
        activities=activities,
        accommodation=accommodation,
        transportation=transportation,
        total=compute_total_cost(days),
    )
