"""Practitioner directory: read-only projections with filtering."""

from typing import List

from ...domain.entities.account import Account
from ...domain.errors import AccountNotFoundError
from ..dto.practitioner_dto import (
    DEFAULT_PROFESSIONAL_TITLE,
    DEFAULT_SPECIALIZATION,
    DirectoryEntry,
    DirectoryFilter,
    PractitionerProfileView,
)
from ..ports.repositories.account_repo import AccountRepository


def to_directory_entry(account: Account) -> DirectoryEntry:
    profile = account.practitioner_profile_or_default()
    details = profile.consultation_details
    return DirectoryEntry(
        id=account.account_id,
        name=account.name,
        specialization=profile.specialization or DEFAULT_SPECIALIZATION,
        professional_title=profile.professional_title or DEFAULT_PROFESSIONAL_TITLE,
        bio=profile.bio,
        is_available=details.is_available,
        consultation_fee=details.consultation_fee,
        consultation_methods=list(details.consultation_methods),
        areas_of_expertise=list(profile.areas_of_expertise),
    )


def matches_filter(entry: DirectoryEntry, criteria: DirectoryFilter) -> bool:
    if criteria.specialization:
        if criteria.specialization.strip().lower() not in entry.specialization.lower():
            return False
    if criteria.consultation_method is not None:
        if criteria.consultation_method not in entry.consultation_methods:
            return False
    if criteria.available is not None and entry.is_available != criteria.available:
        return False
    return True


class ListPractitionersUseCase:
    def __init__(self, account_repository: AccountRepository):
        self._account_repository = account_repository

    async def execute(self, criteria: DirectoryFilter = None) -> List[DirectoryEntry]:
        criteria = criteria or DirectoryFilter()
        accounts = await self._account_repository.list_practitioners()
        entries = [to_directory_entry(account) for account in accounts]
        return [entry for entry in entries if matches_filter(entry, criteria)]


class GetPractitionerUseCase:
    """Directory detail of one practitioner, nested fields defaulted."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repository = account_repository

    async def execute(self, practitioner_id: str) -> PractitionerProfileView:
        account = await self._account_repository.find_by_id(practitioner_id)
        if account is None or not account.is_practitioner:
            raise AccountNotFoundError(practitioner_id, "practitioner")
        profile = account.practitioner_profile_or_default()
        profile.specialization = profile.specialization or DEFAULT_SPECIALIZATION
        profile.professional_title = profile.professional_title or DEFAULT_PROFESSIONAL_TITLE
        return PractitionerProfileView(
            account_id=account.account_id,
            name=account.name,
            email=account.email,
            profile=profile,
        )
