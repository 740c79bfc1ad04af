"""Weekly availability template of a practitioner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..enums import Weekday
from ..errors import DayNotEnabledError, InvalidProfileDataError
from ..value_objects.time_slot import TimeSlot


def _ensure_unique_slots(slots: List[TimeSlot]) -> None:
    seen = set()
    for slot in slots:
        if slot.key in seen:
            raise InvalidProfileDataError(
                "timeSlots",
                f"Duplicate time slot {slot.start}-{slot.end}",
                {"start": slot.start, "end": slot.end},
            )
        seen.add(slot.key)


@dataclass
class AvailableDay:
    """One enabled weekday and its ordered slot list."""

    day: Weekday
    time_slots: List[TimeSlot] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.day = Weekday(self.day)
        _ensure_unique_slots(self.time_slots)

    def find_slot(self, start: str, end: str) -> Optional[TimeSlot]:
        for slot in self.time_slots:
            if slot.matches(start, end):
                return slot
        return None


@dataclass
class AvailabilityTemplate:
    """Ordered list of enabled weekdays; at most one entry per weekday."""

    days: List[AvailableDay] = field(default_factory=list)

    def __post_init__(self) -> None:
        seen = set()
        for entry in self.days:
            if entry.day in seen:
                raise InvalidProfileDataError(
                    "availableDays",
                    f"Day '{entry.day.value}' listed more than once",
                    entry.day.value,
                )
            seen.add(entry.day)

    def find_day(self, day: Weekday) -> Optional[AvailableDay]:
        for entry in self.days:
            if entry.day == day:
                return entry
        return None

    def find_slot(self, day: Weekday, start: str, end: str) -> Optional[TimeSlot]:
        entry = self.find_day(day)
        return entry.find_slot(start, end) if entry else None

    def set_day_slots(self, day: Weekday, slots: List[TimeSlot]) -> AvailableDay:
        """Replace the slots of an enabled day; the day is never created here."""
        entry = self.find_day(day)
        if entry is None:
            raise DayNotEnabledError(day.value)
        _ensure_unique_slots(slots)
        entry.time_slots = list(slots)
        return entry

    def enable_day(self, day: Weekday, slots: List[TimeSlot]) -> AvailableDay:
        """Add a weekday entry; an already-enabled day is left untouched."""
        entry = self.find_day(day)
        if entry is not None:
            return entry
        entry = AvailableDay(day=day, time_slots=list(slots))
        self.days.append(entry)
        return entry

    def disable_day(self, day: Weekday) -> bool:
        """Remove a weekday entry together with its booked flags."""
        before = len(self.days)
        self.days = [entry for entry in self.days if entry.day != day]
        return len(self.days) != before

    @property
    def enabled_days(self) -> List[Weekday]:
        return [entry.day for entry in self.days]
