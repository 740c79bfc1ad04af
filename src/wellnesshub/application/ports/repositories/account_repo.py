"""
Account repository interface for consumers and practitioners.
"""

from typing import List, Optional

from wellnesshub.domain.entities.account import Account, ConsumerProfile, PractitionerProfile
from wellnesshub.domain.enums import Weekday
from wellnesshub.domain.value_objects.time_slot import TimeSlot


class AccountRepository:
    """Repository interface for managing accounts and their embedded profiles."""

    async def save(self, account: Account) -> Account:
        """Insert or replace an account; raises DuplicateAccountError when another account holds the email."""
        raise NotImplementedError

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        """Find an account by ID."""
        raise NotImplementedError

    async def find_by_ids(self, account_ids: List[str]) -> List[Account]:
        """Find several accounts at once; unknown IDs are skipped."""
        raise NotImplementedError

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by (lower-cased) email."""
        raise NotImplementedError

    async def find_practitioner_by_name(self, name: str) -> Optional[Account]:
        """Find a practitioner by exact display name."""
        raise NotImplementedError

    async def list_practitioners(self) -> List[Account]:
        """All practitioner accounts."""
        raise NotImplementedError

    async def update_practitioner_profile(
        self, account_id: str, profile: PractitionerProfile
    ) -> Optional[Account]:
        """Replace the whole professional profile."""
        raise NotImplementedError

    async def update_consumer_profile(
        self, account_id: str, profile: ConsumerProfile
    ) -> Optional[Account]:
        """Replace the consumer profile."""
        raise NotImplementedError

    async def set_day_slots(
        self, account_id: str, day: Weekday, slots: List[TimeSlot]
    ) -> bool:
        """Replace the slot list of one enabled weekday; False when the day is absent."""
        raise NotImplementedError

    async def add_day(self, account_id: str, day: Weekday, slots: List[TimeSlot]) -> bool:
        """Append a weekday entry unless one already exists."""
        raise NotImplementedError

    async def remove_day(self, account_id: str, day: Weekday) -> bool:
        """Remove a weekday entry."""
        raise NotImplementedError

    async def try_claim_slot(
        self, practitioner_id: str, day: Weekday, start: str, end: str
    ) -> bool:
        """
        Atomically flip a free slot to booked.

        Returns True only for the single caller whose update changed the
        flag; a missing day or slot and an already booked slot all return False.
        """
        raise NotImplementedError

    async def release_slot(
        self, practitioner_id: str, day: Weekday, start: str, end: str
    ) -> bool:
        """Atomically flip a booked slot back to free."""
        raise NotImplementedError
