"""Practitioner profile use cases."""

import logging

from ...domain.entities.account import PractitionerProfile
from ...domain.errors import AccountNotFoundError
from ..dto.practitioner_dto import PractitionerProfileView
from ..ports.repositories.account_repo import AccountRepository
from ..ports.repositories.blog_post_repo import BlogPostRepository

logger = logging.getLogger(__name__)


class GetPractitionerProfileUseCase:
    """Profile with defaulted fields, basic account info and the author's posts."""

    def __init__(self, account_repository: AccountRepository, blog_post_repository: BlogPostRepository):
        self._account_repository = account_repository
        self._blog_post_repository = blog_post_repository

    async def execute(self, practitioner_id: str) -> PractitionerProfileView:
        account = await self._account_repository.find_by_id(practitioner_id)
        if account is None or not account.is_practitioner:
            raise AccountNotFoundError(practitioner_id, "practitioner")
        posts = await self._blog_post_repository.find_by_author_id(account.account_id)
        return PractitionerProfileView(
            account_id=account.account_id,
            name=account.name,
            email=account.email,
            profile=account.practitioner_profile_or_default(),
            posts=posts,
        )


class UpdatePractitionerProfileUseCase:
    """Replace the whole professional profile."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repository = account_repository

    async def execute(self, practitioner_id: str, profile: PractitionerProfile) -> PractitionerProfile:
        account = await self._account_repository.find_by_id(practitioner_id)
        if account is None or not account.is_practitioner:
            raise AccountNotFoundError(practitioner_id, "practitioner")
        updated = await self._account_repository.update_practitioner_profile(practitioner_id, profile)
        if updated is None:
            raise AccountNotFoundError(practitioner_id, "practitioner")
        logger.info(f"Practitioner {practitioner_id} replaced professional profile")
        return updated.practitioner_profile_or_default()
