import asyncio

import pytest

from conftest import make_practitioner
from wellnesshub.application.use_cases.manage_availability import SetDaySlotsUseCase, ToggleDayEnabledUseCase
from wellnesshub.application.use_cases.practitioner_profile import GetPractitionerProfileUseCase
from wellnesshub.core.config import BookingSettings
from wellnesshub.domain.entities.availability import AvailabilityTemplate, AvailableDay
from wellnesshub.domain.enums import Weekday
from wellnesshub.domain.errors import AccountNotFoundError, DayNotEnabledError, InvalidProfileDataError
from wellnesshub.domain.value_objects.time_slot import TimeSlot


def _slots(*pairs):
    return [TimeSlot(start=s, end=e) for s, e in pairs]


def test_template_rejects_repeated_weekday():
    with pytest.raises(InvalidProfileDataError):
        AvailabilityTemplate(days=[AvailableDay(day=Weekday.MONDAY), AvailableDay(day=Weekday.MONDAY)])


def test_day_rejects_duplicate_slot():
    with pytest.raises(InvalidProfileDataError):
        AvailableDay(day=Weekday.MONDAY, time_slots=_slots(("09:00", "10:00"), ("09:00", "10:00")))


def test_set_day_slots_requires_enabled_day():
    template = AvailabilityTemplate(days=[AvailableDay(day=Weekday.MONDAY)])
    with pytest.raises(DayNotEnabledError):
        template.set_day_slots(Weekday.TUESDAY, _slots(("09:00", "10:00")))
    assert template.enabled_days == [Weekday.MONDAY]


def test_enable_existing_day_is_noop():
    template = AvailabilityTemplate(days=[AvailableDay(day=Weekday.MONDAY, time_slots=_slots(("09:00", "10:00")))])
    entry = template.enable_day(Weekday.MONDAY, _slots(("13:00", "14:00")))
    assert [s.key for s in entry.time_slots] == [("09:00", "10:00")]


def test_disable_day_reports_removal():
    template = AvailabilityTemplate(days=[AvailableDay(day=Weekday.MONDAY)])
    assert template.disable_day(Weekday.MONDAY) is True
    assert template.disable_day(Weekday.MONDAY) is False
    assert template.enabled_days == []


def test_set_slots_then_read_back_preserves_order(accounts, posts):
    make_practitioner(accounts, days={Weekday.TUESDAY: [("09:00", "10:00")]})
    new_slots = _slots(("14:00", "15:00"), ("08:00", "09:00"), ("11:00", "12:00"))

    asyncio.run(SetDaySlotsUseCase(accounts).execute("prac-1", Weekday.TUESDAY, new_slots))
    view = asyncio.run(GetPractitionerProfileUseCase(accounts, posts).execute("prac-1"))

    entry = view.profile.availability.find_day(Weekday.TUESDAY)
    assert [s.key for s in entry.time_slots] == [("14:00", "15:00"), ("08:00", "09:00"), ("11:00", "12:00")]


def test_set_slots_on_disabled_day_changes_nothing(accounts):
    make_practitioner(accounts, days={Weekday.MONDAY: [("09:00", "10:00")]})
    with pytest.raises(DayNotEnabledError):
        asyncio.run(SetDaySlotsUseCase(accounts).execute("prac-1", Weekday.FRIDAY, _slots(("09:00", "10:00"))))
    template = accounts.accounts["prac-1"].professional_profile.availability
    assert template.enabled_days == [Weekday.MONDAY]


def test_set_slots_unknown_practitioner(accounts):
    with pytest.raises(AccountNotFoundError):
        asyncio.run(SetDaySlotsUseCase(accounts).execute("nobody", Weekday.MONDAY, []))


def test_enable_day_uses_default_working_hours(accounts):
    make_practitioner(accounts, days={})
    use_case = ToggleDayEnabledUseCase(accounts, BookingSettings())

    template = asyncio.run(use_case.execute("prac-1", Weekday.WEDNESDAY, True))

    stored = accounts.accounts["prac-1"].professional_profile.availability.find_day(Weekday.WEDNESDAY)
    assert [s.key for s in stored.time_slots][0] == ("09:00", "10:00")
    assert len(stored.time_slots) == 8
    assert template.enabled_days == [Weekday.WEDNESDAY]


def test_enable_day_with_initial_slots(accounts):
    make_practitioner(accounts, days={})
    use_case = ToggleDayEnabledUseCase(accounts, BookingSettings())

    asyncio.run(use_case.execute("prac-1", Weekday.SATURDAY, True, _slots(("10:00", "11:00"))))

    stored = accounts.accounts["prac-1"].professional_profile.availability.find_day(Weekday.SATURDAY)
    assert [s.key for s in stored.time_slots] == [("10:00", "11:00")]


def test_enable_already_enabled_day_keeps_slots(accounts):
    make_practitioner(accounts, days={Weekday.MONDAY: [("07:00", "08:00")]})
    use_case = ToggleDayEnabledUseCase(accounts, BookingSettings())

    asyncio.run(use_case.execute("prac-1", Weekday.MONDAY, True))

    stored = accounts.accounts["prac-1"].professional_profile.availability.find_day(Weekday.MONDAY)
    assert [s.key for s in stored.time_slots] == [("07:00", "08:00")]


def test_disable_day_removes_it(accounts):
    make_practitioner(accounts, days={Weekday.MONDAY: [("09:00", "10:00")], Weekday.FRIDAY: [("09:00", "10:00")]})
    use_case = ToggleDayEnabledUseCase(accounts, BookingSettings())

    template = asyncio.run(use_case.execute("prac-1", Weekday.MONDAY, False))

    assert template.enabled_days == [Weekday.FRIDAY]
    assert accounts.accounts["prac-1"].professional_profile.availability.enabled_days == [Weekday.FRIDAY]
