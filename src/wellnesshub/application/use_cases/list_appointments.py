"""Appointment listing use cases for both sides of a booking."""

from typing import Dict, List

from ...domain.entities.account import Account
from ..dto.booking_dto import ConsumerAppointmentView, PractitionerAppointmentView
from ..ports.repositories.account_repo import AccountRepository
from ..ports.repositories.appointment_repo import AppointmentRepository


async def _accounts_by_id(account_repository: AccountRepository, account_ids: List[str]) -> Dict[str, Account]:
    unique_ids = list(dict.fromkeys(account_ids))
    if not unique_ids:
        return {}
    accounts = await account_repository.find_by_ids(unique_ids)
    return {account.account_id: account for account in accounts}


class ListPractitionerAppointmentsUseCase:
    """Appointments of a practitioner with consumer name/email, oldest date first."""

    def __init__(self, account_repository: AccountRepository, appointment_repository: AppointmentRepository):
        self._account_repository = account_repository
        self._appointment_repository = appointment_repository

    async def execute(self, practitioner_id: str) -> List[PractitionerAppointmentView]:
        appointments = await self._appointment_repository.find_by_practitioner(practitioner_id)
        consumers = await _accounts_by_id(
            self._account_repository, [a.consumer_id for a in appointments]
        )
        appointments = sorted(appointments, key=lambda a: (a.date, a.time_slot.start))
        views = []
        for appointment in appointments:
            consumer = consumers.get(appointment.consumer_id)
            views.append(
                PractitionerAppointmentView(
                    appointment=appointment,
                    consumer_name=consumer.name if consumer else "",
                    consumer_email=consumer.email if consumer else "",
                )
            )
        return views


class ListConsumerAppointmentsUseCase:
    """Appointments of a consumer with practitioner name/title, most recent date first."""

    def __init__(self, account_repository: AccountRepository, appointment_repository: AppointmentRepository):
        self._account_repository = account_repository
        self._appointment_repository = appointment_repository

    async def execute(self, consumer_id: str) -> List[ConsumerAppointmentView]:
        appointments = await self._appointment_repository.find_by_consumer(consumer_id)
        practitioners = await _accounts_by_id(
            self._account_repository, [a.practitioner_id for a in appointments]
        )
        appointments = sorted(appointments, key=lambda a: (a.date, a.time_slot.start), reverse=True)
        views = []
        for appointment in appointments:
            practitioner = practitioners.get(appointment.practitioner_id)
            title = ""
            if practitioner is not None and practitioner.professional_profile is not None:
                title = practitioner.professional_profile.professional_title
            views.append(
                ConsumerAppointmentView(
                    appointment=appointment,
                    practitioner_name=practitioner.name if practitioner else "",
                    professional_title=title,
                )
            )
        return views
