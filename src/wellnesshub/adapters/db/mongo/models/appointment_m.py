"""MongoDB Beanie model for Appointment documents."""

from datetime import datetime
from typing import Optional

from beanie import Document
from pydantic import BaseModel, Field
from pymongo import ASCENDING, DESCENDING, IndexModel


class AppointmentSlotMongo(BaseModel):
    start: str
    end: str


class AppointmentMongo(Document):
    """MongoDB model for Appointment entity; ``date`` is stored as UTC midnight."""

    appointment_id: str = Field(..., description="Appointment ID", unique=True)
    practitioner_id: str = Field(..., description="Practitioner account ID")
    consumer_id: str = Field(..., description="Consumer account ID")
    date: datetime = Field(..., description="Calendar date of the appointment")
    time_slot: AppointmentSlotMongo
    consultation_type: str
    notes: Optional[str] = None
    status: str = Field(default="pending", description="pending/confirmed/cancelled")
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "appointments"
        indexes = [
            IndexModel([("appointment_id", ASCENDING)], unique=True),
            IndexModel([("practitioner_id", ASCENDING), ("date", ASCENDING)]),
            IndexModel([("consumer_id", ASCENDING), ("date", DESCENDING)]),
        ]
