"""Time slot and weekly availability schemas."""

from typing import List

from pydantic import Field

from ...domain.entities.availability import AvailabilityTemplate, AvailableDay
from ...domain.enums import Weekday
from ...domain.value_objects.time_slot import TIME_PATTERN, TimeSlot
from .common import CamelModel

HHMM = TIME_PATTERN.pattern


class TimeRangeSchema(CamelModel):
    start: str = Field(..., pattern=HHMM, description="Start time (HH:MM)")
    end: str = Field(..., pattern=HHMM, description="End time (HH:MM)")


class TimeSlotSchema(TimeRangeSchema):
    is_booked: bool = False

    def to_domain(self) -> TimeSlot:
        return TimeSlot(start=self.start, end=self.end, is_booked=self.is_booked)

    @classmethod
    def from_domain(cls, slot: TimeSlot) -> "TimeSlotSchema":
        return cls(start=slot.start, end=slot.end, is_booked=slot.is_booked)


class AvailableDaySchema(CamelModel):
    day: Weekday
    time_slots: List[TimeSlotSchema] = Field(default_factory=list)

    def to_domain(self) -> AvailableDay:
        return AvailableDay(day=self.day, time_slots=[s.to_domain() for s in self.time_slots])

    @classmethod
    def from_domain(cls, entry: AvailableDay) -> "AvailableDaySchema":
        return cls(day=entry.day, time_slots=[TimeSlotSchema.from_domain(s) for s in entry.time_slots])


class AvailabilitySchema(CamelModel):
    available_days: List[AvailableDaySchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, template: AvailabilityTemplate) -> "AvailabilitySchema":
        return cls(available_days=[AvailableDaySchema.from_domain(d) for d in template.days])


def template_from_schema(days: List[AvailableDaySchema]) -> AvailabilityTemplate:
    return AvailabilityTemplate(days=[d.to_domain() for d in days])
