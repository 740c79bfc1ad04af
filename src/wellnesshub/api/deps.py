"""FastAPI dependency providers."""

from functools import lru_cache
from typing import Callable

from fastapi import Depends, Request

from ..adapters.db.mongo.repositories.account_repository import MongoAccountRepository
from ..adapters.db.mongo.repositories.appointment_repository import MongoAppointmentRepository
from ..adapters.db.mongo.repositories.blog_post_repository import MongoBlogPostRepository
from ..adapters.external.embedding_service_openai import OpenAIEmbeddingService
from ..application.ports.repositories.account_repo import AccountRepository
from ..application.ports.repositories.appointment_repo import AppointmentRepository
from ..application.ports.repositories.blog_post_repo import BlogPostRepository
from ..application.ports.services.embedding_service import EmbeddingService
from ..application.use_cases.blog_posts import (
    CreateBlogPostUseCase,
    GetBlogPostUseCase,
    UpdateBlogPostUseCase,
)
from ..application.use_cases.book_appointment import BookAppointmentUseCase
from ..application.use_cases.consumer_profile import (
    GetConsumerProfileUseCase,
    UpdateConsumerProfileUseCase,
)
from ..application.use_cases.list_appointments import (
    ListConsumerAppointmentsUseCase,
    ListPractitionerAppointmentsUseCase,
)
from ..application.use_cases.manage_availability import SetDaySlotsUseCase, ToggleDayEnabledUseCase
from ..application.use_cases.practitioner_directory import GetPractitionerUseCase, ListPractitionersUseCase
from ..application.use_cases.practitioner_profile import (
    GetPractitionerProfileUseCase,
    UpdatePractitionerProfileUseCase,
)
from ..application.use_cases.register_account import RegisterAccountUseCase
from ..application.use_cases.update_appointment_status import UpdateAppointmentStatusUseCase
from ..core.auth import Principal
from ..core.config import get_settings
from ..core.rate_limiter import RateLimiter
from ..domain.enums import Role
from .errors import AuthenticationError, AuthorizationError, RateLimitError


@lru_cache()
def get_account_repository() -> AccountRepository:
    """Get account repository instance."""
    return MongoAccountRepository()


@lru_cache()
def get_appointment_repository() -> AppointmentRepository:
    """Get appointment repository instance."""
    return MongoAppointmentRepository()


@lru_cache()
def get_blog_post_repository() -> BlogPostRepository:
    """Get blog post repository instance."""
    return MongoBlogPostRepository()


@lru_cache()
def get_embedding_service() -> EmbeddingService:
    """Get embedding service instance."""
    return OpenAIEmbeddingService()


# ---------------------------------------------------------------------------
# Identity and role gate
# ---------------------------------------------------------------------------


def get_principal(request: Request) -> Principal:
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise AuthenticationError()
    return principal


def require_role(*roles: Role) -> Callable[..., Principal]:
    """Dependency factory: the session role must be one of ``roles``."""

    def _dependency(principal: Principal = Depends(get_principal)) -> Principal:
        if principal.role is None or principal.role not in roles:
            raise AuthorizationError(
                details={
                    "required": [r.value for r in roles],
                    "actual": principal.role.value if principal.role else None,
                }
            )
        return principal

    return _dependency


require_consumer = require_role(Role.USER)
require_practitioner = require_role(Role.PRACTITIONER)


# ---------------------------------------------------------------------------
# Rate limiting
# ---------------------------------------------------------------------------


def get_client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def enforce_rate_limit(request: Request) -> None:
    """Consume one point from the limiter held on ``app.state``."""
    limiter: RateLimiter = getattr(request.app.state, "rate_limiter", None)
    if limiter is None:
        return
    user_id = getattr(request.state, "user_id", None)
    key = f"user:{user_id}" if user_id else f"ip:{get_client_ip(request)}"
    result = limiter.hit(key)
    if not result.allowed:
        raise RateLimitError(retry_after=result.retry_after)


# ---------------------------------------------------------------------------
# Use cases
# ---------------------------------------------------------------------------


def get_register_account_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
) -> RegisterAccountUseCase:
    return RegisterAccountUseCase(accounts)


def get_book_appointment_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
    appointments: AppointmentRepository = Depends(get_appointment_repository),
) -> BookAppointmentUseCase:
    return BookAppointmentUseCase(accounts, appointments)


def get_list_consumer_appointments_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
    appointments: AppointmentRepository = Depends(get_appointment_repository),
) -> ListConsumerAppointmentsUseCase:
    return ListConsumerAppointmentsUseCase(accounts, appointments)


def get_list_practitioner_appointments_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
    appointments: AppointmentRepository = Depends(get_appointment_repository),
) -> ListPractitionerAppointmentsUseCase:
    return ListPractitionerAppointmentsUseCase(accounts, appointments)


def get_update_appointment_status_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
    appointments: AppointmentRepository = Depends(get_appointment_repository),
) -> UpdateAppointmentStatusUseCase:
    return UpdateAppointmentStatusUseCase(accounts, appointments)


def get_set_day_slots_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
) -> SetDaySlotsUseCase:
    return SetDaySlotsUseCase(accounts)


def get_toggle_day_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
) -> ToggleDayEnabledUseCase:
    return ToggleDayEnabledUseCase(accounts, get_settings().booking)


def get_practitioner_profile_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
    posts: BlogPostRepository = Depends(get_blog_post_repository),
) -> GetPractitionerProfileUseCase:
    return GetPractitionerProfileUseCase(accounts, posts)


def get_update_practitioner_profile_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
) -> UpdatePractitionerProfileUseCase:
    return UpdatePractitionerProfileUseCase(accounts)


def get_consumer_profile_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
) -> GetConsumerProfileUseCase:
    return GetConsumerProfileUseCase(accounts)


def get_update_consumer_profile_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
) -> UpdateConsumerProfileUseCase:
    return UpdateConsumerProfileUseCase(accounts)


def get_list_practitioners_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
) -> ListPractitionersUseCase:
    return ListPractitionersUseCase(accounts)


def get_practitioner_detail_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
) -> GetPractitionerUseCase:
    return GetPractitionerUseCase(accounts)


def get_create_blog_post_use_case(
    accounts: AccountRepository = Depends(get_account_repository),
    posts: BlogPostRepository = Depends(get_blog_post_repository),
    embeddings: EmbeddingService = Depends(get_embedding_service),
) -> CreateBlogPostUseCase:
    return CreateBlogPostUseCase(accounts, posts, embeddings)


def get_blog_post_use_case(
    posts: BlogPostRepository = Depends(get_blog_post_repository),
) -> GetBlogPostUseCase:
    return GetBlogPostUseCase(posts)


def get_update_blog_post_use_case(
    posts: BlogPostRepository = Depends(get_blog_post_repository),
    embeddings: EmbeddingService = Depends(get_embedding_service),
) -> UpdateBlogPostUseCase:
    return UpdateBlogPostUseCase(posts, embeddings)
