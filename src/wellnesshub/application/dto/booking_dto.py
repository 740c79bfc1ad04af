"""Booking and appointment DTOs."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...domain.entities.appointment import Appointment
from ...domain.enums import AppointmentStatus, ConsultationType


@dataclass
class BookAppointmentRequest:
    """Request DTO for booking a practitioner slot."""

    consumer_id: str
    practitioner_id: str
    date: date
    start: str
    end: str
    consultation_type: ConsultationType
    notes: Optional[str] = None


@dataclass
class UpdateAppointmentStatusRequest:
    practitioner_id: str
    appointment_id: str
    status: AppointmentStatus


@dataclass
class PractitionerAppointmentView:
    """Appointment as seen by the practitioner, joined with the consumer."""

    appointment: Appointment
    consumer_name: str = ""
    consumer_email: str = ""


@dataclass
class ConsumerAppointmentView:
    """Appointment as seen by the consumer, joined with the practitioner."""

    appointment: Appointment
    practitioner_name: str = ""
    professional_title: str = ""
