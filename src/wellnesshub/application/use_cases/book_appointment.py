"""Book Appointment use case: claim a practitioner slot for a consumer."""

import logging
import uuid

from ...domain.entities.appointment import Appointment
from ...domain.enums import Weekday
from ...domain.errors import AccountNotFoundError, DayNotAvailableError, SlotNotAvailableError
from ...domain.value_objects.time_slot import TimeSlot
from ...observability.tracing import trace_operation
from ..dto.booking_dto import BookAppointmentRequest
from ..ports.repositories.account_repo import AccountRepository
from ..ports.repositories.appointment_repo import AppointmentRepository

logger = logging.getLogger(__name__)


class BookAppointmentUseCase:
    """Use case for booking one slot of a practitioner's weekly template."""

    def __init__(self, account_repository: AccountRepository, appointment_repository: AppointmentRepository):
        self._account_repository = account_repository
        self._appointment_repository = appointment_repository

    async def execute(self, request: BookAppointmentRequest) -> Appointment:
        """
        Execute the booking.

        The template lookups below only produce the precise error message;
        the slot itself is taken by ``try_claim_slot``, which succeeds for
        exactly one of several concurrent callers.
        """
        with trace_operation(
            "booking.book_appointment",
            {
                "practitioner_id": request.practitioner_id,
                "consumer_id": request.consumer_id,
                "date": request.date.isoformat(),
            },
        ):
            consumer = await self._account_repository.find_by_id(request.consumer_id)
            if consumer is None:
                raise AccountNotFoundError(request.consumer_id)

            practitioner = await self._account_repository.find_by_id(request.practitioner_id)
            if practitioner is None or not practitioner.is_practitioner:
                raise AccountNotFoundError(request.practitioner_id, "practitioner")

            weekday = Weekday.from_date(request.date)
            template = practitioner.practitioner_profile_or_default().availability
            day_entry = template.find_day(weekday)
            if day_entry is None:
                logger.warning(
                    f"Booking refused: practitioner {request.practitioner_id} not available on {weekday.value}"
                )
                raise DayNotAvailableError(weekday.value)

            slot = day_entry.find_slot(request.start, request.end)
            if slot is None or slot.is_booked:
                logger.warning(
                    f"Booking refused: slot {weekday.value} {request.start}-{request.end} "
                    f"of practitioner {request.practitioner_id} is not free"
                )
                raise SlotNotAvailableError(weekday.value, request.start, request.end)

            # Build (and validate) the appointment before touching storage
            appointment = Appointment(
                appointment_id=uuid.uuid4().hex,
                practitioner_id=practitioner.account_id,
                consumer_id=consumer.account_id,
                date=request.date,
                time_slot=TimeSlot(start=request.start, end=request.end),
                consultation_type=request.consultation_type,
                notes=request.notes,
            )

            claimed = await self._account_repository.try_claim_slot(
                practitioner.account_id, weekday, request.start, request.end
            )
            if not claimed:
                logger.warning(
                    f"Booking refused: slot {weekday.value} {request.start}-{request.end} "
                    f"of practitioner {request.practitioner_id} was claimed concurrently"
                )
                raise SlotNotAvailableError(weekday.value, request.start, request.end)

            try:
                saved = await self._appointment_repository.save(appointment)
            except Exception:
                logger.error(
                    f"Failed to persist appointment {appointment.appointment_id}; releasing slot",
                    exc_info=True,
                )
                await self._account_repository.release_slot(
                    practitioner.account_id, weekday, request.start, request.end
                )
                raise

            logger.info(
                f"Appointment {saved.appointment_id} booked: practitioner={saved.practitioner_id} "
                f"consumer={saved.consumer_id} date={saved.date.isoformat()} "
                f"slot={saved.time_slot.start}-{saved.time_slot.end}"
            )
            return saved
