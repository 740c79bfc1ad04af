"""
Appointment repository interface.
"""

from typing import List, Optional

from wellnesshub.domain.entities.appointment import Appointment
from wellnesshub.domain.enums import AppointmentStatus


class AppointmentRepository:
    """Repository interface for managing appointments."""

    async def save(self, appointment: Appointment) -> Appointment:
        """Persist an appointment, assigning an ID when it has none."""
        raise NotImplementedError

    async def find_by_id(self, appointment_id: str) -> Optional[Appointment]:
        """Find an appointment by ID."""
        raise NotImplementedError

    async def find_by_practitioner(self, practitioner_id: str) -> List[Appointment]:
        """Appointments of a practitioner, ascending by date."""
        raise NotImplementedError

    async def find_by_consumer(self, consumer_id: str) -> List[Appointment]:
        """Appointments of a consumer, descending by date."""
        raise NotImplementedError

    async def update_status(
        self, appointment_id: str, status: AppointmentStatus, expected_status: AppointmentStatus
    ) -> Optional[Appointment]:
        """
        Set the status field only, and only while the stored status still
        equals expected_status. Returns None when nothing matched.
        """
        raise NotImplementedError
