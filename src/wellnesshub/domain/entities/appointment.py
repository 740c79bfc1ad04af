"""Appointment domain entity and its status lifecycle."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, FrozenSet, Optional

from ..enums import AppointmentStatus, ConsultationType, Weekday
from ..errors import InvalidProfileDataError, InvalidStatusTransitionError
from ..value_objects.time_slot import TimeSlot

MAX_NOTES_LENGTH = 500

ALLOWED_TRANSITIONS: Dict[AppointmentStatus, FrozenSet[AppointmentStatus]] = {
    AppointmentStatus.PENDING: frozenset({AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED}),
    AppointmentStatus.CONFIRMED: frozenset({AppointmentStatus.CANCELLED}),
    AppointmentStatus.CANCELLED: frozenset(),
}


@dataclass
class Appointment:
    """A consumer's booking of one practitioner slot on one calendar date."""

    practitioner_id: str
    consumer_id: str
    date: date
    time_slot: TimeSlot
    consultation_type: ConsultationType
    notes: Optional[str] = None
    status: AppointmentStatus = AppointmentStatus.PENDING
    appointment_id: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self.consultation_type = ConsultationType(self.consultation_type)
        self.status = AppointmentStatus(self.status)
        if self.notes and len(self.notes) > MAX_NOTES_LENGTH:
            raise InvalidProfileDataError(
                "notes",
                f"Notes too long (max {MAX_NOTES_LENGTH} characters), got {len(self.notes)}",
                self.notes[:50],
            )
        # the appointment keeps a copy of the slot bounds, never the booked flag
        self.time_slot = TimeSlot(start=self.time_slot.start, end=self.time_slot.end)

    @property
    def weekday(self) -> Weekday:
        return Weekday.from_date(self.date)

    @property
    def is_active(self) -> bool:
        return self.status != AppointmentStatus.CANCELLED

    def transition_to(self, status: AppointmentStatus) -> bool:
        """Apply a status change; returns False when the status is unchanged."""
        status = AppointmentStatus(status)
        if status == self.status:
            return False
        if status not in ALLOWED_TRANSITIONS[self.status]:
            raise InvalidStatusTransitionError(self.status.value, status.value)
        self.status = status
        self.updated_at = datetime.utcnow()
        return True
