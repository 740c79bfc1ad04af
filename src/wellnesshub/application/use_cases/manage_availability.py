"""Availability template use cases: per-day slot replacement and day toggling."""

import logging
from typing import List, Optional

from ...core.config import BookingSettings, get_settings
from ...domain.entities.account import Account
from ...domain.entities.availability import AvailabilityTemplate
from ...domain.enums import Weekday
from ...domain.errors import AccountNotFoundError, DayNotEnabledError
from ...domain.value_objects.time_slot import TimeSlot, hourly_slots
from ..ports.repositories.account_repo import AccountRepository

logger = logging.getLogger(__name__)


async def _load_practitioner(account_repository: AccountRepository, practitioner_id: str) -> Account:
    account = await account_repository.find_by_id(practitioner_id)
    if account is None or not account.is_practitioner:
        raise AccountNotFoundError(practitioner_id, "practitioner")
    return account


class SetDaySlotsUseCase:
    """Replace the slot list of an already enabled weekday."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repository = account_repository

    async def execute(self, practitioner_id: str, day: Weekday, slots: List[TimeSlot]) -> AvailabilityTemplate:
        account = await _load_practitioner(self._account_repository, practitioner_id)
        template = account.practitioner_profile_or_default().availability
        # validates day presence and slot uniqueness before writing
        template.set_day_slots(day, slots)

        if not await self._account_repository.set_day_slots(practitioner_id, day, slots):
            raise DayNotEnabledError(day.value)

        logger.info(f"Practitioner {practitioner_id} set {len(slots)} slot(s) for {day.value}")
        return template


class ToggleDayEnabledUseCase:
    """Enable a weekday with an initial slot set, or remove it from the template."""

    def __init__(self, account_repository: AccountRepository, booking_settings: Optional[BookingSettings] = None):
        self._account_repository = account_repository
        self._booking_settings = booking_settings or get_settings().booking

    def default_slots(self) -> List[TimeSlot]:
        settings = self._booking_settings
        return hourly_slots(settings.default_day_start, settings.default_day_end, settings.default_slot_minutes)

    async def execute(
        self,
        practitioner_id: str,
        day: Weekday,
        enabled: bool,
        initial_slots: Optional[List[TimeSlot]] = None,
    ) -> AvailabilityTemplate:
        account = await _load_practitioner(self._account_repository, practitioner_id)
        template = account.practitioner_profile_or_default().availability

        if enabled:
            if template.find_day(day) is not None:
                return template
            slots = list(initial_slots) if initial_slots else self.default_slots()
            template.enable_day(day, slots)
            await self._account_repository.add_day(practitioner_id, day, slots)
            logger.info(f"Practitioner {practitioner_id} enabled {day.value} with {len(slots)} slot(s)")
        else:
            if template.disable_day(day):
                await self._account_repository.remove_day(practitioner_id, day)
                logger.info(f"Practitioner {practitioner_id} disabled {day.value}")
        return template
