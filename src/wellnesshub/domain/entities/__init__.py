"""
Domain entities package.
"""

from .account import (
    Account,
    Certification,
    ConsultationDetails,
    ConsumerProfile,
    ContactInformation,
    PractitionerProfile,
    Qualification,
)
from .appointment import Appointment
from .availability import AvailabilityTemplate, AvailableDay
from .blog_post import BlogPost

__all__ = [
    "Account",
    "Appointment",
    "AvailabilityTemplate",
    "AvailableDay",
    "BlogPost",
    "Certification",
    "ConsultationDetails",
    "ConsumerProfile",
    "ContactInformation",
    "PractitionerProfile",
    "Qualification",
]
