"""Enumerations shared by the domain, persistence and API layers."""

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Account role carried by the session token."""

    USER = "user"
    PRACTITIONER = "practitioner"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Role"]:
        """Parse a token role; ``consumer`` is accepted as an alias of ``user``."""
        if not value:
            return None
        normalized = str(value).strip().lower()
        if normalized == "consumer":
            return cls.USER
        try:
            return cls(normalized)
        except ValueError:
            return None


class Weekday(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def from_date(cls, value) -> "Weekday":
        """Weekday of a calendar date (``date.weekday()`` is 0 for Monday)."""
        return list(cls)[value.weekday()]


class ConsultationMethod(str, Enum):
    ONLINE = "Online"
    IN_PERSON = "In-Person"
    PHONE = "Phone"


class ConsultationType(str, Enum):
    ONLINE = "online"
    IN_PERSON = "in-person"
    PHONE = "phone"


class AppointmentStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"
    PREFER_NOT_TO_SAY = "Prefer not to say"
