"""Consumer profile use cases."""

import logging

from ...domain.entities.account import Account, ConsumerProfile
from ...domain.enums import Role
from ...domain.errors import AccountNotFoundError
from ..ports.repositories.account_repo import AccountRepository

logger = logging.getLogger(__name__)


class GetConsumerProfileUseCase:
    def __init__(self, account_repository: AccountRepository):
        self._account_repository = account_repository

    async def execute(self, consumer_id: str) -> Account:
        account = await self._account_repository.find_by_id(consumer_id)
        if account is None or account.role != Role.USER:
            raise AccountNotFoundError(consumer_id)
        if account.user_profile is None:
            account.user_profile = ConsumerProfile()
        return account


class UpdateConsumerProfileUseCase:
    def __init__(self, account_repository: AccountRepository):
        self._account_repository = account_repository

    async def execute(self, consumer_id: str, profile: ConsumerProfile) -> Account:
        account = await self._account_repository.find_by_id(consumer_id)
        if account is None or account.role != Role.USER:
            raise AccountNotFoundError(consumer_id)
        updated = await self._account_repository.update_consumer_profile(consumer_id, profile)
        if updated is None:
            raise AccountNotFoundError(consumer_id)
        logger.info(f"Consumer {consumer_id} updated profile")
        return updated
