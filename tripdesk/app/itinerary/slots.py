"""Present/Absent values for a day's singleton slots (accommodation, transportation)."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Present(Generic[T]):
    """Slot holds a value."""

    value: T


@dataclass(frozen=True)
class Absent:
    """Slot is cleared."""


ABSENT = Absent()

SlotValue = Union[Present[T], Absent]


def slot_from_optional(value: T | None) -> "SlotValue[T]":
    """Map an optional wire value onto the slot sum type (None clears)."""
    if value is None:
        return ABSENT
    return Present(value)


def slot_to_optional(slot: "SlotValue[T]") -> T | None:
    """Unwrap a slot into the optional field stored on a DayPlan."""
    if isinstance(slot, Present):
        return slot.value
    return None
