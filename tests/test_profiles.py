import asyncio

import pytest

from conftest import InMemoryAccountRepository, make_consumer, make_practitioner
from wellnesshub.application.use_cases.consumer_profile import GetConsumerProfileUseCase, UpdateConsumerProfileUseCase
from wellnesshub.application.use_cases.practitioner_profile import (
    GetPractitionerProfileUseCase,
    UpdatePractitionerProfileUseCase,
)
from wellnesshub.application.use_cases.register_account import RegisterAccountUseCase
from wellnesshub.core.auth import verify_password
from wellnesshub.domain.entities.account import (
    ConsultationDetails,
    ConsumerProfile,
    PractitionerProfile,
    normalize_tags,
)
from wellnesshub.domain.entities.blog_post import BlogPost
from wellnesshub.domain.enums import ConsultationMethod, Role
from wellnesshub.domain.errors import AccountNotFoundError, DuplicateAccountError, InvalidProfileDataError


# ---------------------------------------------------------------------------
# Consumer profile
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("age", [-1, 121])
def test_age_out_of_range(age):
    with pytest.raises(InvalidProfileDataError) as exc:
        ConsumerProfile(age=age)
    assert exc.value.message == "Invalid age value"


def test_tags_are_trimmed_and_deduplicated():
    assert normalize_tags("interests", [" yoga", "yoga ", "", "sleep"]) == ["yoga", "sleep"]


def test_more_than_five_goals_rejected():
    with pytest.raises(InvalidProfileDataError) as exc:
        ConsumerProfile(health_goals=["a", "b", "c", "d", "e", "f"])
    assert exc.value.message == "Maximum 5 healthGoals allowed"


def test_about_myself_limit():
    with pytest.raises(InvalidProfileDataError):
        ConsumerProfile(about_myself="x" * 501)


def test_consumer_profile_defaults_when_missing(accounts):
    account = make_consumer(accounts)
    account.user_profile = None

    loaded = asyncio.run(GetConsumerProfileUseCase(accounts).execute("user-1"))

    assert loaded.user_profile == ConsumerProfile()


def test_consumer_profile_update(accounts):
    make_consumer(accounts)
    profile = ConsumerProfile(age=34, health_goals=["sleep better"], interests=["running"])

    updated = asyncio.run(UpdateConsumerProfileUseCase(accounts).execute("user-1", profile))

    assert updated.user_profile.age == 34
    assert accounts.accounts["user-1"].user_profile.health_goals == ["sleep better"]


def test_practitioner_has_no_consumer_profile(accounts):
    make_practitioner(accounts)
    with pytest.raises(AccountNotFoundError):
        asyncio.run(GetConsumerProfileUseCase(accounts).execute("prac-1"))


# ---------------------------------------------------------------------------
# Practitioner profile
# ---------------------------------------------------------------------------


def test_fee_cannot_be_negative():
    with pytest.raises(InvalidProfileDataError):
        ConsultationDetails(consultation_fee=-5)


def test_methods_are_deduplicated():
    details = ConsultationDetails(consultation_methods=["Online", ConsultationMethod.ONLINE, "Phone"])
    assert details.consultation_methods == [ConsultationMethod.ONLINE, ConsultationMethod.PHONE]


@pytest.mark.parametrize("years", [-1, 51])
def test_years_of_experience_bounds(years):
    with pytest.raises(InvalidProfileDataError):
        PractitionerProfile(years_of_experience=years)


def test_profile_lists_only_own_posts(accounts, posts):
    make_practitioner(accounts)
    make_practitioner(accounts, "prac-2", "Dr. Omar Haddad")
    for post_id, author_id in (("p1", "prac-1"), ("p2", "prac-2"), ("p3", "prac-1")):
        posts.posts[post_id] = BlogPost(post_id=post_id, title="Sleep", content="Rest well", author_id=author_id)

    view = asyncio.run(GetPractitionerProfileUseCase(accounts, posts).execute("prac-1"))

    assert sorted(p.post_id for p in view.posts) == ["p1", "p3"]
    assert view.name == "Dr. Maya Lin"
    assert view.email == "prac-1@example.com"


def test_profile_defaults_when_never_filled(accounts, posts):
    account = make_practitioner(accounts)
    account.professional_profile = None

    view = asyncio.run(GetPractitionerProfileUseCase(accounts, posts).execute("prac-1"))

    assert view.profile == PractitionerProfile()
    assert view.profile.availability.enabled_days == []


def test_whole_profile_replacement(accounts):
    make_practitioner(accounts)
    profile = PractitionerProfile(specialization="Nutrition", years_of_experience=7)

    updated = asyncio.run(UpdatePractitionerProfileUseCase(accounts).execute("prac-1", profile))

    assert updated.specialization == "Nutrition"
    assert accounts.accounts["prac-1"].professional_profile.years_of_experience == 7


def test_consumer_has_no_practitioner_profile(accounts, posts):
    make_consumer(accounts)
    with pytest.raises(AccountNotFoundError) as exc:
        asyncio.run(GetPractitionerProfileUseCase(accounts, posts).execute("user-1"))
    assert exc.value.message == "Practitioner not found"


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def test_register_creates_role_profile(accounts):
    use_case = RegisterAccountUseCase(accounts)

    practitioner = asyncio.run(use_case.execute("Dr. Maya Lin", "Maya@Example.com", "s3cret-pass", Role.PRACTITIONER))
    consumer = asyncio.run(use_case.execute("Sam Rivera", "sam@example.com", "s3cret-pass", Role.USER))

    assert practitioner.email == "maya@example.com"
    assert practitioner.professional_profile == PractitionerProfile()
    assert consumer.user_profile == ConsumerProfile()
    assert verify_password("s3cret-pass", accounts.accounts[consumer.account_id].password_hash)


def test_register_duplicate_email(accounts):
    use_case = RegisterAccountUseCase(accounts)
    asyncio.run(use_case.execute("Sam Rivera", "sam@example.com", "s3cret-pass", Role.USER))

    with pytest.raises(DuplicateAccountError):
        asyncio.run(use_case.execute("Sam R", "SAM@example.com", "another-pass", Role.USER))


class InterleavingAccountRepository(InMemoryAccountRepository):
    async def find_by_email(self, email):
        found = await super().find_by_email(email)
        await asyncio.sleep(0)
        return found


def test_concurrent_registration_with_same_email_keeps_one_account():
    accounts = InterleavingAccountRepository()
    use_case = RegisterAccountUseCase(accounts)

    async def register_twice():
        return await asyncio.gather(
            use_case.execute("Sam Rivera", "sam@example.com", "s3cret-pass", Role.USER),
            use_case.execute("Sam R", "SAM@example.com", "another-pass", Role.USER),
            return_exceptions=True,
        )

    first, second = asyncio.run(register_twice())

    assert first.email == "sam@example.com"
    assert isinstance(second, DuplicateAccountError)
    assert [a.email for a in accounts.accounts.values()] == ["sam@example.com"]


def test_register_short_password(accounts):
    with pytest.raises(InvalidProfileDataError):
        asyncio.run(RegisterAccountUseCase(accounts).execute("Sam Rivera", "sam@example.com", "short", Role.USER))
