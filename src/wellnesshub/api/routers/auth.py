"""
Account registration endpoint.
"""

from fastapi import APIRouter, Depends, Request, status

from ...application.use_cases.register_account import RegisterAccountUseCase
from ..deps import get_register_account_use_case
from ..schemas.auth import AccountSummary, RegisterRequest
from ..schemas.common import ApiResponse
from ..utils.responses import ok

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=ApiResponse[AccountSummary],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    payload: RegisterRequest,
    request: Request,
    use_case: RegisterAccountUseCase = Depends(get_register_account_use_case),
):
    """Create a consumer or practitioner account."""
    account = await use_case.execute(payload.name, payload.email, payload.password, payload.role)
    return ok(request, data=AccountSummary.from_domain(account), message="Account created")
