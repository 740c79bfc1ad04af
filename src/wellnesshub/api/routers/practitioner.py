"""
Practitioner endpoints: own appointments, profile and weekly availability.
"""

from typing import List

from fastapi import APIRouter, Depends, Request

from ...application.dto.booking_dto import UpdateAppointmentStatusRequest
from ...application.use_cases.list_appointments import ListPractitionerAppointmentsUseCase
from ...application.use_cases.manage_availability import SetDaySlotsUseCase, ToggleDayEnabledUseCase
from ...application.use_cases.practitioner_profile import (
    GetPractitionerProfileUseCase,
    UpdatePractitionerProfileUseCase,
)
from ...application.use_cases.update_appointment_status import UpdateAppointmentStatusUseCase
from ...core.auth import Principal
from ...domain.enums import AppointmentStatus, Weekday
from ..deps import (
    get_list_practitioner_appointments_use_case,
    get_practitioner_profile_use_case,
    get_set_day_slots_use_case,
    get_toggle_day_use_case,
    get_update_appointment_status_use_case,
    get_update_practitioner_profile_use_case,
    require_practitioner,
)
from ..schemas.appointments import AppointmentSchema, PractitionerAppointmentSchema, UpdateAppointmentStatusSchema
from ..schemas.availability import AvailabilitySchema
from ..schemas.blog import BlogPostSchema
from ..schemas.common import ApiResponse, BasicInfo
from ..schemas.practitioner import (
    DayToggleRequest,
    PractitionerProfileResponse,
    PractitionerProfileUpdateRequest,
    ProfessionalProfileSchema,
)
from ..utils.responses import ok

router = APIRouter(prefix="/practitioner", tags=["practitioner"])


@router.get("/appointments", response_model=ApiResponse[List[PractitionerAppointmentSchema]])
async def list_appointments(
    request: Request,
    principal: Principal = Depends(require_practitioner),
    use_case: ListPractitionerAppointmentsUseCase = Depends(get_list_practitioner_appointments_use_case),
):
    """Appointments booked with the caller, oldest date first."""
    views = await use_case.execute(principal.user_id)
    return ok(request, data=[PractitionerAppointmentSchema.from_view(v) for v in views])


@router.put("/appointments", response_model=ApiResponse[AppointmentSchema])
async def update_appointment_status(
    payload: UpdateAppointmentStatusSchema,
    request: Request,
    principal: Principal = Depends(require_practitioner),
    use_case: UpdateAppointmentStatusUseCase = Depends(get_update_appointment_status_use_case),
):
    appointment = await use_case.execute(
        UpdateAppointmentStatusRequest(
            practitioner_id=principal.user_id,
            appointment_id=payload.appointment_id,
            status=AppointmentStatus(payload.status),
        )
    )
    return ok(request, data=AppointmentSchema.from_domain(appointment), message="Appointment status updated")


async def _profile_response(use_case: GetPractitionerProfileUseCase, practitioner_id: str) -> PractitionerProfileResponse:
    view = await use_case.execute(practitioner_id)
    return PractitionerProfileResponse(
        profile=ProfessionalProfileSchema.from_domain(view.profile),
        basic_info=BasicInfo(id=view.account_id, name=view.name, email=view.email),
        posts=[BlogPostSchema.from_domain(p) for p in view.posts],
    )


@router.get("/profile", response_model=ApiResponse[PractitionerProfileResponse])
async def get_profile(
    request: Request,
    principal: Principal = Depends(require_practitioner),
    use_case: GetPractitionerProfileUseCase = Depends(get_practitioner_profile_use_case),
):
    """Profile with defaulted fields, basic info and the caller's posts."""
    return ok(request, data=await _profile_response(use_case, principal.user_id))


@router.put("/profile", response_model=ApiResponse[PractitionerProfileResponse])
async def update_profile(
    payload: PractitionerProfileUpdateRequest,
    request: Request,
    principal: Principal = Depends(require_practitioner),
    update_use_case: UpdatePractitionerProfileUseCase = Depends(get_update_practitioner_profile_use_case),
    set_slots_use_case: SetDaySlotsUseCase = Depends(get_set_day_slots_use_case),
    get_use_case: GetPractitionerProfileUseCase = Depends(get_practitioner_profile_use_case),
):
    """
    Update the professional profile.

    ``{professionalProfile}`` replaces the whole profile; ``{day, timeSlots}``
    replaces the slots of one already enabled weekday.
    """
    if payload.is_partial:
        await set_slots_use_case.execute(
            principal.user_id, payload.day, [s.to_domain() for s in payload.time_slots]
        )
    else:
        await update_use_case.execute(principal.user_id, payload.professional_profile.to_domain())
    return ok(
        request,
        data=await _profile_response(get_use_case, principal.user_id),
        message="Profile updated successfully",
    )


@router.put("/availability/{day}", response_model=ApiResponse[AvailabilitySchema])
async def toggle_day(
    day: Weekday,
    payload: DayToggleRequest,
    request: Request,
    principal: Principal = Depends(require_practitioner),
    use_case: ToggleDayEnabledUseCase = Depends(get_toggle_day_use_case),
):
    """Enable a weekday (default hourly slots unless ``timeSlots`` given) or remove it."""
    initial = [s.to_domain() for s in payload.time_slots] if payload.time_slots else None
    template = await use_case.execute(principal.user_id, day, payload.enabled, initial)
    return ok(
        request,
        data=AvailabilitySchema.from_domain(template),
        message=f"{day.value} {'enabled' if payload.enabled else 'disabled'}",
    )
