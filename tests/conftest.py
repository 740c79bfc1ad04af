"""
Shared fixtures: in-memory implementations of the repository and service
ports, and a TestClient wired to them through dependency overrides.
"""

import copy
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

import pytest
from fastapi.testclient import TestClient

from wellnesshub.application.ports.repositories.account_repo import AccountRepository
from wellnesshub.application.ports.repositories.appointment_repo import AppointmentRepository
from wellnesshub.application.ports.repositories.blog_post_repo import BlogPostRepository
from wellnesshub.application.ports.services.embedding_service import EmbeddingService
from wellnesshub.core.exceptions import EmbeddingServiceError
from wellnesshub.domain.entities.account import (
    Account,
    ConsultationDetails,
    ConsumerProfile,
    PractitionerProfile,
)
from wellnesshub.domain.entities.availability import AvailabilityTemplate, AvailableDay
from wellnesshub.domain.enums import AppointmentStatus, ConsultationMethod, Role, Weekday
from wellnesshub.domain.errors import DuplicateAccountError
from wellnesshub.domain.value_objects.time_slot import TimeSlot


class InMemoryAccountRepository(AccountRepository):
    def __init__(self):
        self.accounts: Dict[str, Account] = {}

    async def save(self, account):
        for other in self.accounts.values():
            if other.email == account.email and other.account_id != account.account_id:
                raise DuplicateAccountError(account.email)
        self.accounts[account.account_id] = copy.deepcopy(account)
        return copy.deepcopy(account)

    async def find_by_id(self, account_id):
        account = self.accounts.get(account_id)
        return copy.deepcopy(account) if account else None

    async def find_by_ids(self, account_ids):
        return [copy.deepcopy(self.accounts[i]) for i in account_ids if i in self.accounts]

    async def find_by_email(self, email):
        for account in self.accounts.values():
            if account.email == (email or "").strip().lower():
                return copy.deepcopy(account)
        return None

    async def find_practitioner_by_name(self, name):
        for account in self.accounts.values():
            if account.name == name and account.role == Role.PRACTITIONER:
                return copy.deepcopy(account)
        return None

    async def list_practitioners(self):
        return [copy.deepcopy(a) for a in self.accounts.values() if a.role == Role.PRACTITIONER]

    async def update_practitioner_profile(self, account_id, profile):
        account = self.accounts.get(account_id)
        if account is None:
            return None
        account.professional_profile = copy.deepcopy(profile)
        return copy.deepcopy(account)

    async def update_consumer_profile(self, account_id, profile):
        account = self.accounts.get(account_id)
        if account is None:
            return None
        account.user_profile = copy.deepcopy(profile)
        return copy.deepcopy(account)

    def _template(self, account_id) -> Optional[AvailabilityTemplate]:
        account = self.accounts.get(account_id)
        if account is None or account.professional_profile is None:
            return None
        return account.professional_profile.availability

    async def set_day_slots(self, account_id, day, slots):
        template = self._template(account_id)
        entry = template.find_day(day) if template else None
        if entry is None:
            return False
        entry.time_slots = copy.deepcopy(list(slots))
        return True

    async def add_day(self, account_id, day, slots):
        account = self.accounts.get(account_id)
        if account is None:
            return False
        if account.professional_profile is None:
            account.professional_profile = PractitionerProfile()
        template = account.professional_profile.availability
        if template.find_day(day) is not None:
            return False
        template.days.append(AvailableDay(day=day, time_slots=copy.deepcopy(list(slots))))
        return True

    async def remove_day(self, account_id, day):
        template = self._template(account_id)
        return template.disable_day(day) if template else False

    async def try_claim_slot(self, practitioner_id, day, start, end):
        return self._flip(practitioner_id, day, start, end, expected=False)

    async def release_slot(self, practitioner_id, day, start, end):
        return self._flip(practitioner_id, day, start, end, expected=True)

    def _flip(self, practitioner_id, day, start, end, expected):
        account = self.accounts.get(practitioner_id)
        if account is None or account.role != Role.PRACTITIONER:
            return False
        template = self._template(practitioner_id)
        slot = template.find_slot(day, start, end) if template else None
        if slot is None or slot.is_booked != expected:
            return False
        slot.is_booked = not expected
        return True

    # test helper
    def slot(self, practitioner_id, day, start, end) -> Optional[TimeSlot]:
        template = self._template(practitioner_id)
        return template.find_slot(day, start, end) if template else None


class InMemoryAppointmentRepository(AppointmentRepository):
    def __init__(self):
        self.appointments: Dict[str, object] = {}
        self.fail_next_save = False

    async def save(self, appointment):
        if self.fail_next_save:
            self.fail_next_save = False
            raise RuntimeError("storage unavailable")
        self.appointments[appointment.appointment_id] = copy.deepcopy(appointment)
        return copy.deepcopy(appointment)

    async def find_by_id(self, appointment_id):
        found = self.appointments.get(appointment_id)
        return copy.deepcopy(found) if found else None

    async def find_by_practitioner(self, practitioner_id):
        found = [a for a in self.appointments.values() if a.practitioner_id == practitioner_id]
        return copy.deepcopy(sorted(found, key=lambda a: a.date))

    async def find_by_consumer(self, consumer_id):
        found = [a for a in self.appointments.values() if a.consumer_id == consumer_id]
        return copy.deepcopy(sorted(found, key=lambda a: a.date, reverse=True))

    async def update_status(self, appointment_id, status, expected_status):
        found = self.appointments.get(appointment_id)
        if found is None or found.status != AppointmentStatus(expected_status):
            return None
        found.status = AppointmentStatus(status)
        return copy.deepcopy(found)


class InMemoryBlogPostRepository(BlogPostRepository):
    def __init__(self):
        self.posts: Dict[str, object] = {}
        self.embeddings: Dict[str, dict] = {}

    async def save(self, post):
        self.posts[post.post_id] = copy.deepcopy(post)
        return copy.deepcopy(post)

    async def find_by_id(self, post_id):
        found = self.posts.get(post_id)
        return copy.deepcopy(found) if found else None

    async def find_by_author_id(self, author_id):
        return [copy.deepcopy(p) for p in self.posts.values() if p.author_id == author_id]

    async def find_without_author_id(self):
        return [
            copy.deepcopy(p) for p in self.posts.values() if p.author_id is None and not p.no_practitioner
        ]

    async def upsert_embedding(self, post_id, text, embedding, metadata):
        self.embeddings[post_id] = {"text": text, "embedding": list(embedding), "metadata": dict(metadata)}


class FakeEmbeddingService(EmbeddingService):
    def __init__(self):
        self.calls: List[str] = []
        self.fail = False

    async def embed(self, text):
        self.calls.append(text)
        if self.fail:
            raise EmbeddingServiceError("upstream unavailable")
        return [float(len(text)), 0.5, 0.25]


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

SlotSpec = Sequence[Tuple[str, str]]


def date_for(weekday: Weekday, weeks_ahead: int = 0) -> date:
    """First calendar date on or after 2030-01-01 falling on ``weekday``."""
    current = date(2030, 1, 1)
    while Weekday.from_date(current) != weekday:
        current += timedelta(days=1)
    return current + timedelta(weeks=weeks_ahead)


def make_practitioner(
    accounts: InMemoryAccountRepository,
    account_id: str = "prac-1",
    name: str = "Dr. Maya Lin",
    days: Optional[Dict[Weekday, SlotSpec]] = None,
    **profile_fields,
) -> Account:
    days = {Weekday.MONDAY: [("09:00", "10:00"), ("10:00", "11:00")]} if days is None else days
    template = AvailabilityTemplate(
        days=[
            AvailableDay(day=day, time_slots=[TimeSlot(start=s, end=e) for s, e in slots])
            for day, slots in days.items()
        ]
    )
    details = ConsultationDetails(
        is_available=profile_fields.pop("is_available", True),
        consultation_fee=profile_fields.pop("consultation_fee", 80),
        consultation_methods=profile_fields.pop("consultation_methods", [ConsultationMethod.ONLINE]),
        availability=template,
    )
    account = Account(
        account_id=account_id,
        name=name,
        email=f"{account_id}@example.com",
        role=Role.PRACTITIONER,
        professional_profile=PractitionerProfile(consultation_details=details, **profile_fields),
    )
    accounts.accounts[account_id] = account
    return account


def make_consumer(accounts: InMemoryAccountRepository, account_id: str = "user-1", name: str = "Sam Rivera") -> Account:
    account = Account(
        account_id=account_id,
        name=name,
        email=f"{account_id}@example.com",
        role=Role.USER,
        user_profile=ConsumerProfile(),
    )
    accounts.accounts[account_id] = account
    return account


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def accounts():
    return InMemoryAccountRepository()


@pytest.fixture
def appointments():
    return InMemoryAppointmentRepository()


@pytest.fixture
def posts():
    return InMemoryBlogPostRepository()


@pytest.fixture
def embeddings():
    return FakeEmbeddingService()


@pytest.fixture
def client(accounts, appointments, posts, embeddings):
    """TestClient over the real app with storage and embeddings swapped for fakes."""
    from wellnesshub.api import deps
    from wellnesshub.app import app
    from wellnesshub.core.rate_limiter import RateLimiter

    app.dependency_overrides[deps.get_account_repository] = lambda: accounts
    app.dependency_overrides[deps.get_appointment_repository] = lambda: appointments
    app.dependency_overrides[deps.get_blog_post_repository] = lambda: posts
    app.dependency_overrides[deps.get_embedding_service] = lambda: embeddings
    app.state.rate_limiter = RateLimiter(points=10, duration_seconds=60)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def auth_headers(user_id: str, role: Optional[str] = "user", **claims) -> Dict[str, str]:
    from wellnesshub.core.auth import get_auth_service

    token = get_auth_service().create_access_token(user_id, role=role, **claims)
    return {"Authorization": f"Bearer {token}"}
