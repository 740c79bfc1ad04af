"""Update Appointment Status use case (practitioner side)."""

import logging

from ...domain.entities.appointment import Appointment
from ...domain.enums import AppointmentStatus
from ...domain.errors import AppointmentNotFoundError
from ...observability.tracing import trace_operation
from ..dto.booking_dto import UpdateAppointmentStatusRequest
from ..ports.repositories.account_repo import AccountRepository
from ..ports.repositories.appointment_repo import AppointmentRepository

logger = logging.getLogger(__name__)


class UpdateAppointmentStatusUseCase:
    """Confirm or cancel an appointment owned by the calling practitioner."""

    def __init__(self, account_repository: AccountRepository, appointment_repository: AppointmentRepository):
        self._account_repository = account_repository
        self._appointment_repository = appointment_repository

    async def execute(self, request: UpdateAppointmentStatusRequest) -> Appointment:
        with trace_operation(
            "booking.update_appointment_status",
            {"appointment_id": request.appointment_id, "status": request.status.value},
        ):
            # Retry against the fresh status whenever a concurrent change wins the write
            while True:
                appointment = await self._appointment_repository.find_by_id(request.appointment_id)
                # Another practitioner's appointment is indistinguishable from a missing one
                if appointment is None or appointment.practitioner_id != request.practitioner_id:
                    raise AppointmentNotFoundError(request.appointment_id)

                previous = appointment.status
                if not appointment.transition_to(request.status):
                    return appointment

                updated = await self._appointment_repository.update_status(
                    appointment.appointment_id, appointment.status, previous
                )
                if updated is not None:
                    break
                logger.info(f"Appointment {appointment.appointment_id} changed concurrently, re-reading")

            if updated.status == AppointmentStatus.CANCELLED:
                released = await self._account_repository.release_slot(
                    updated.practitioner_id,
                    updated.weekday,
                    updated.time_slot.start,
                    updated.time_slot.end,
                )
                if not released:
                    logger.warning(
                        f"Cancelled appointment {updated.appointment_id} had no booked slot to release "
                        f"({updated.weekday.value} {updated.time_slot.start}-{updated.time_slot.end})"
                    )

            logger.info(f"Appointment {updated.appointment_id} status set to {updated.status.value}")
            return updated
