"""
Consumer endpoints: own appointments and profile.
"""

from typing import List

from fastapi import APIRouter, Depends, Request

from ...application.use_cases.consumer_profile import GetConsumerProfileUseCase, UpdateConsumerProfileUseCase
from ...application.use_cases.list_appointments import ListConsumerAppointmentsUseCase
from ...core.auth import Principal
from ..deps import (
    enforce_rate_limit,
    get_consumer_profile_use_case,
    get_list_consumer_appointments_use_case,
    get_update_consumer_profile_use_case,
    require_consumer,
)
from ..schemas.appointments import ConsumerAppointmentSchema
from ..schemas.common import ApiResponse, BasicInfo
from ..schemas.consumer import ConsumerProfileResponse, ConsumerProfileSchema, ConsumerProfileUpdateRequest
from ..utils.responses import ok

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/appointments", response_model=ApiResponse[List[ConsumerAppointmentSchema]])
async def list_my_appointments(
    request: Request,
    principal: Principal = Depends(require_consumer),
    use_case: ListConsumerAppointmentsUseCase = Depends(get_list_consumer_appointments_use_case),
):
    """Own appointments, most recent date first."""
    views = await use_case.execute(principal.user_id)
    return ok(request, data=[ConsumerAppointmentSchema.from_view(v) for v in views])


@router.get(
    "/profile",
    response_model=ApiResponse[ConsumerProfileResponse],
    dependencies=[Depends(enforce_rate_limit)],
)
async def get_profile(
    request: Request,
    principal: Principal = Depends(require_consumer),
    use_case: GetConsumerProfileUseCase = Depends(get_consumer_profile_use_case),
):
    account = await use_case.execute(principal.user_id)
    return ok(request, data=ConsumerProfileResponse(
        profile=ConsumerProfileSchema.from_domain(account.user_profile),
        basic_info=BasicInfo(id=account.account_id, name=account.name, email=account.email),
    ))


@router.put(
    "/profile",
    response_model=ApiResponse[ConsumerProfileSchema],
    dependencies=[Depends(enforce_rate_limit)],
)
async def update_profile(
    payload: ConsumerProfileUpdateRequest,
    request: Request,
    principal: Principal = Depends(require_consumer),
    use_case: UpdateConsumerProfileUseCase = Depends(get_update_consumer_profile_use_case),
):
    """Replace the consumer profile; age must be within 0-120."""
    account = await use_case.execute(principal.user_id, payload.user_profile.to_domain())
    return ok(
        request,
        data=ConsumerProfileSchema.from_domain(account.user_profile),
        message="Profile updated successfully",
    )
