"""Register Account use case."""

import logging
import uuid

from ...core.auth import hash_password
from ...domain.entities.account import Account, ConsumerProfile, PractitionerProfile
from ...domain.enums import Role
from ...domain.errors import DuplicateAccountError, InvalidProfileDataError
from ..ports.repositories.account_repo import AccountRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class RegisterAccountUseCase:
    """Create a consumer or practitioner account with an empty profile."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repository = account_repository

    async def execute(self, name: str, email: str, password: str, role: Role) -> Account:
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidProfileDataError(
                "password", f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        normalized_email = (email or "").strip().lower()
        if await self._account_repository.find_by_email(normalized_email):
            raise DuplicateAccountError(normalized_email)

        account = Account(
            account_id=uuid.uuid4().hex,
            name=(name or "").strip(),
            email=normalized_email,
            role=role,
            password_hash=hash_password(password),
        )
        if account.is_practitioner:
            account.professional_profile = PractitionerProfile()
        else:
            account.user_profile = ConsumerProfile()

        saved = await self._account_repository.save(account)
        logger.info(f"Registered {saved.role.value} account {saved.account_id}")
        return saved
