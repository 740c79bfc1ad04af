import asyncio
import logging

import pytest

from conftest import InMemoryAppointmentRepository, date_for, make_consumer, make_practitioner
from wellnesshub.application.dto.booking_dto import BookAppointmentRequest, UpdateAppointmentStatusRequest
from wellnesshub.application.use_cases.book_appointment import BookAppointmentUseCase
from wellnesshub.application.use_cases.manage_availability import ToggleDayEnabledUseCase
from wellnesshub.application.use_cases.update_appointment_status import UpdateAppointmentStatusUseCase
from wellnesshub.core.config import BookingSettings
from wellnesshub.domain.entities.appointment import Appointment
from wellnesshub.domain.enums import AppointmentStatus, ConsultationType, Weekday
from wellnesshub.domain.errors import AppointmentNotFoundError, InvalidStatusTransitionError
from wellnesshub.domain.value_objects.time_slot import TimeSlot


@pytest.fixture
def booked(accounts, appointments):
    make_practitioner(accounts)
    make_practitioner(accounts, "prac-2", "Dr. Omar Haddad")
    make_consumer(accounts)
    appointment = asyncio.run(
        BookAppointmentUseCase(accounts, appointments).execute(
            BookAppointmentRequest(
                consumer_id="user-1",
                practitioner_id="prac-1",
                date=date_for(Weekday.MONDAY),
                start="09:00",
                end="10:00",
                consultation_type=ConsultationType.PHONE,
            )
        )
    )
    return appointment


def _update(accounts, appointments, appointment_id, status, practitioner_id="prac-1"):
    use_case = UpdateAppointmentStatusUseCase(accounts, appointments)
    return asyncio.run(
        use_case.execute(
            UpdateAppointmentStatusRequest(
                practitioner_id=practitioner_id,
                appointment_id=appointment_id,
                status=status,
            )
        )
    )


def test_confirm_keeps_slot_booked(booked, accounts, appointments):
    updated = _update(accounts, appointments, booked.appointment_id, AppointmentStatus.CONFIRMED)

    assert updated.status == AppointmentStatus.CONFIRMED
    assert appointments.appointments[booked.appointment_id].status == AppointmentStatus.CONFIRMED
    assert accounts.slot("prac-1", Weekday.MONDAY, "09:00", "10:00").is_booked is True


def test_cancel_frees_slot(booked, accounts, appointments):
    _update(accounts, appointments, booked.appointment_id, AppointmentStatus.CONFIRMED)
    updated = _update(accounts, appointments, booked.appointment_id, AppointmentStatus.CANCELLED)

    assert updated.status == AppointmentStatus.CANCELLED
    assert accounts.slot("prac-1", Weekday.MONDAY, "09:00", "10:00").is_booked is False


def test_cancelled_cannot_be_confirmed(booked, accounts, appointments):
    _update(accounts, appointments, booked.appointment_id, AppointmentStatus.CANCELLED)

    with pytest.raises(InvalidStatusTransitionError):
        _update(accounts, appointments, booked.appointment_id, AppointmentStatus.CONFIRMED)
    assert appointments.appointments[booked.appointment_id].status == AppointmentStatus.CANCELLED


def test_repeated_status_is_noop(booked, accounts, appointments):
    _update(accounts, appointments, booked.appointment_id, AppointmentStatus.CANCELLED)
    again = _update(accounts, appointments, booked.appointment_id, AppointmentStatus.CANCELLED)
    assert again.status == AppointmentStatus.CANCELLED


def test_other_practitioner_sees_not_found(booked, accounts, appointments):
    with pytest.raises(AppointmentNotFoundError):
        _update(accounts, appointments, booked.appointment_id, AppointmentStatus.CONFIRMED, "prac-2")
    assert appointments.appointments[booked.appointment_id].status == AppointmentStatus.PENDING


def test_unknown_appointment(booked, accounts, appointments):
    with pytest.raises(AppointmentNotFoundError):
        _update(accounts, appointments, "does-not-exist", AppointmentStatus.CONFIRMED)


def test_transition_table():
    appointment = Appointment(
        practitioner_id="p",
        consumer_id="c",
        date=date_for(Weekday.MONDAY),
        time_slot=TimeSlot(start="09:00", end="10:00", is_booked=True),
        consultation_type="online",
    )
    # booked flag never travels with the appointment's copy of the slot
    assert appointment.time_slot.is_booked is False
    assert appointment.weekday == Weekday.MONDAY
    assert appointment.transition_to(AppointmentStatus.PENDING) is False
    assert appointment.transition_to(AppointmentStatus.CONFIRMED) is True
    with pytest.raises(InvalidStatusTransitionError):
        appointment.transition_to(AppointmentStatus.PENDING)
    assert appointment.transition_to(AppointmentStatus.CANCELLED) is True
    assert appointment.is_active is False


class InterleavingAppointmentRepository(InMemoryAppointmentRepository):
    """Yields to the event loop after every read so concurrent updates interleave."""

    def __init__(self, shared):
        super().__init__()
        self.appointments = shared.appointments

    async def find_by_id(self, appointment_id):
        found = await super().find_by_id(appointment_id)
        await asyncio.sleep(0)
        return found


def _request(appointment_id, status):
    return UpdateAppointmentStatusRequest(
        practitioner_id="prac-1", appointment_id=appointment_id, status=status
    )


@pytest.mark.parametrize(
    "order",
    [
        (AppointmentStatus.CANCELLED, AppointmentStatus.CONFIRMED),
        (AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED),
    ],
)
def test_concurrent_cancel_and_confirm_end_cancelled_with_slot_free(booked, accounts, appointments, order):
    use_case = UpdateAppointmentStatusUseCase(accounts, InterleavingAppointmentRepository(appointments))

    async def race():
        return await asyncio.gather(
            *(use_case.execute(_request(booked.appointment_id, status)) for status in order),
            return_exceptions=True,
        )

    results = dict(zip(order, asyncio.run(race())))

    assert results[AppointmentStatus.CANCELLED].status == AppointmentStatus.CANCELLED
    assert appointments.appointments[booked.appointment_id].status == AppointmentStatus.CANCELLED
    assert accounts.slot("prac-1", Weekday.MONDAY, "09:00", "10:00").is_booked is False
    if order[0] == AppointmentStatus.CANCELLED:
        # confirm lost the write and re-read a cancelled appointment
        assert isinstance(results[AppointmentStatus.CONFIRMED], InvalidStatusTransitionError)
    else:
        assert results[AppointmentStatus.CONFIRMED].status == AppointmentStatus.CONFIRMED


def test_concurrent_duplicate_cancels_release_slot_once(booked, accounts, appointments, monkeypatch):
    releases = []
    release_slot = accounts.release_slot

    async def counting_release(*args):
        releases.append(args)
        return await release_slot(*args)

    monkeypatch.setattr(accounts, "release_slot", counting_release)
    use_case = UpdateAppointmentStatusUseCase(accounts, InterleavingAppointmentRepository(appointments))

    async def race():
        return await asyncio.gather(
            use_case.execute(_request(booked.appointment_id, AppointmentStatus.CANCELLED)),
            use_case.execute(_request(booked.appointment_id, AppointmentStatus.CANCELLED)),
        )

    first, second = asyncio.run(race())

    assert first.status == second.status == AppointmentStatus.CANCELLED
    assert len(releases) == 1
    assert accounts.slot("prac-1", Weekday.MONDAY, "09:00", "10:00").is_booked is False


def test_stale_cancel_does_not_free_rebooked_slot(booked, accounts, appointments):
    _update(accounts, appointments, booked.appointment_id, AppointmentStatus.CANCELLED)
    make_consumer(accounts, "user-2", "Ana Costa")
    asyncio.run(
        BookAppointmentUseCase(accounts, appointments).execute(
            BookAppointmentRequest(
                consumer_id="user-2",
                practitioner_id="prac-1",
                date=date_for(Weekday.MONDAY),
                start="09:00",
                end="10:00",
                consultation_type=ConsultationType.ONLINE,
            )
        )
    )

    _update(accounts, appointments, booked.appointment_id, AppointmentStatus.CANCELLED)

    assert accounts.slot("prac-1", Weekday.MONDAY, "09:00", "10:00").is_booked is True


def test_cancel_after_day_disabled_leaves_day_removed(booked, accounts, appointments, caplog):
    asyncio.run(ToggleDayEnabledUseCase(accounts, BookingSettings()).execute("prac-1", Weekday.MONDAY, False))
    assert appointments.appointments[booked.appointment_id].status == AppointmentStatus.PENDING

    with caplog.at_level(logging.WARNING, logger="wellnesshub.application.use_cases.update_appointment_status"):
        updated = _update(accounts, appointments, booked.appointment_id, AppointmentStatus.CANCELLED)

    assert updated.status == AppointmentStatus.CANCELLED
    assert appointments.appointments[booked.appointment_id].status == AppointmentStatus.CANCELLED
    availability = accounts.accounts["prac-1"].professional_profile.availability
    assert Weekday.MONDAY not in availability.enabled_days
    assert availability.find_day(Weekday.MONDAY) is None
    assert "had no booked slot to release" in caplog.text
