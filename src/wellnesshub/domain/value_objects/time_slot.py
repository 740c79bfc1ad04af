"""
Time slot value object.

Times are plain 24-hour ``HH:MM`` strings; because the format is fixed
width, lexicographic comparison equals chronological comparison.
"""

import re
from dataclasses import dataclass
from typing import Any, List

from ..errors import InvalidProfileDataError

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def is_valid_time(value: Any) -> bool:
    return isinstance(value, str) and bool(TIME_PATTERN.match(value))


def to_minutes(value: str) -> int:
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def from_minutes(total: int) -> str:
    return f"{total // 60:02d}:{total % 60:02d}"


@dataclass
class TimeSlot:
    """A bookable slot in a practitioner's weekly template."""

    start: str
    end: str
    is_booked: bool = False

    def __post_init__(self) -> None:
        for field_name in ("start", "end"):
            value = getattr(self, field_name)
            if not is_valid_time(value):
                raise InvalidProfileDataError(
                    field_name,
                    "Invalid time format. Use HH:MM 24-hour format",
                    value,
                )
        if not self.start < self.end:
            raise InvalidProfileDataError(
                "end",
                f"Slot end ({self.end}) must be after start ({self.start})",
                {"start": self.start, "end": self.end},
            )

    def matches(self, start: str, end: str) -> bool:
        return self.start == start and self.end == end

    @property
    def key(self) -> tuple:
        return (self.start, self.end)


def hourly_slots(day_start: str, day_end: str, slot_minutes: int = 60) -> List[TimeSlot]:
    """Consecutive free slots covering ``[day_start, day_end)``."""
    slots: List[TimeSlot] = []
    cursor = to_minutes(day_start)
    limit = to_minutes(day_end)
    while cursor + slot_minutes <= limit:
        slots.append(TimeSlot(start=from_minutes(cursor), end=from_minutes(cursor + slot_minutes)))
        cursor += slot_minutes
    return slots
