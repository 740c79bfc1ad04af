"""Appointment request/response schemas."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from ...application.dto.booking_dto import ConsumerAppointmentView, PractitionerAppointmentView
from ...core.utils.datetime_utils import to_calendar_date
from ...domain.entities.appointment import Appointment
from ...domain.enums import AppointmentStatus, ConsultationType
from .availability import TimeRangeSchema
from .common import CamelModel


class BookAppointmentRequestSchema(CamelModel):
    practitioner_id: str = Field(..., min_length=1)
    date: date
    time_slot: TimeRangeSchema
    consultation_type: ConsultationType
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        if v is None or v == "":
            raise ValueError("date is required")
        try:
            return to_calendar_date(v)
        except ValueError:
            raise ValueError("Invalid date format. Use YYYY-MM-DD or ISO 8601")


class UpdateAppointmentStatusSchema(CamelModel):
    appointment_id: str = Field(..., min_length=1)
    status: Literal["confirmed", "cancelled"]


class AppointmentSchema(CamelModel):
    id: str
    practitioner_id: str
    consumer_id: str
    date: date
    time_slot: TimeRangeSchema
    consultation_type: ConsultationType
    notes: Optional[str] = None
    status: AppointmentStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, appointment: Appointment) -> "AppointmentSchema":
        return cls(
            id=appointment.appointment_id,
            practitioner_id=appointment.practitioner_id,
            consumer_id=appointment.consumer_id,
            date=appointment.date,
            time_slot=TimeRangeSchema(start=appointment.time_slot.start, end=appointment.time_slot.end),
            consultation_type=appointment.consultation_type,
            notes=appointment.notes,
            status=appointment.status,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )


class PractitionerAppointmentSchema(AppointmentSchema):
    user_name: str = ""
    user_email: str = ""

    @classmethod
    def from_view(cls, view: PractitionerAppointmentView) -> "PractitionerAppointmentSchema":
        base = AppointmentSchema.from_domain(view.appointment)
        return cls(**base.model_dump(), user_name=view.consumer_name, user_email=view.consumer_email)


class ConsumerAppointmentSchema(AppointmentSchema):
    practitioner_name: str = ""
    professional_title: str = ""

    @classmethod
    def from_view(cls, view: ConsumerAppointmentView) -> "ConsumerAppointmentSchema":
        base = AppointmentSchema.from_domain(view.appointment)
        return cls(
            **base.model_dump(),
            practitioner_name=view.practitioner_name,
            professional_title=view.professional_title,
        )
