"""
Practitioner directory endpoints (consumer side).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from ...application.dto.practitioner_dto import DirectoryFilter
from ...application.use_cases.practitioner_directory import GetPractitionerUseCase, ListPractitionersUseCase
from ...domain.enums import ConsultationMethod
from ..deps import get_list_practitioners_use_case, get_practitioner_detail_use_case, require_consumer
from ..schemas.common import ApiResponse
from ..schemas.directory import DirectoryEntrySchema, PractitionerDetailSchema
from ..utils.responses import ok

router = APIRouter(prefix="/practitioners", tags=["directory"], dependencies=[Depends(require_consumer)])


@router.get("", response_model=ApiResponse[List[DirectoryEntrySchema]])
async def list_practitioners(
    request: Request,
    specialization: Optional[str] = Query(None, description="Case-insensitive substring"),
    consultation_method: Optional[ConsultationMethod] = Query(None, alias="consultationMethod"),
    available: Optional[bool] = Query(None),
    use_case: ListPractitionersUseCase = Depends(get_list_practitioners_use_case),
):
    entries = await use_case.execute(
        DirectoryFilter(
            specialization=specialization,
            consultation_method=consultation_method,
            available=available,
        )
    )
    return ok(request, data=[DirectoryEntrySchema.from_dto(e) for e in entries])


@router.get("/{practitioner_id}", response_model=ApiResponse[PractitionerDetailSchema])
async def get_practitioner(
    practitioner_id: str,
    request: Request,
    use_case: GetPractitionerUseCase = Depends(get_practitioner_detail_use_case),
):
    view = await use_case.execute(practitioner_id)
    return ok(request, data=PractitionerDetailSchema.from_view(view))
