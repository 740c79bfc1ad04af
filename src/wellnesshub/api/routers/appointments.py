"""
Booking endpoint (consumer side).
"""

from fastapi import APIRouter, Depends, Request, status

from ...application.dto.booking_dto import BookAppointmentRequest
from ...application.use_cases.book_appointment import BookAppointmentUseCase
from ...core.auth import Principal
from ..deps import enforce_rate_limit, get_book_appointment_use_case, require_consumer
from ..schemas.appointments import AppointmentSchema, BookAppointmentRequestSchema
from ..schemas.common import ApiResponse
from ..utils.responses import ok

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.post(
    "",
    response_model=ApiResponse[AppointmentSchema],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(enforce_rate_limit)],
)
async def book_appointment(
    payload: BookAppointmentRequestSchema,
    request: Request,
    principal: Principal = Depends(require_consumer),
    use_case: BookAppointmentUseCase = Depends(get_book_appointment_use_case),
):
    """
    Book one slot of a practitioner's weekly template.

    Fails with 400 when the practitioner does not work on the weekday of
    ``date`` or the slot is missing or already booked, and with 404 when
    either account is unknown.
    """
    appointment = await use_case.execute(
        BookAppointmentRequest(
            consumer_id=principal.user_id,
            practitioner_id=payload.practitioner_id,
            date=payload.date,
            start=payload.time_slot.start,
            end=payload.time_slot.end,
            consultation_type=payload.consultation_type,
            notes=payload.notes,
        )
    )
    return ok(request, data=AppointmentSchema.from_domain(appointment), message="Appointment created successfully")
