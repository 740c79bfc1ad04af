"""
MongoDB implementation of AccountRepository.

Slot bookkeeping goes through single-document ``update_one`` calls with
``arrayFilters`` so the check ("slot is free") and the write ("slot is
booked") are one operation executed by the server.
"""

import logging
from datetime import datetime
from typing import List, Optional

from pymongo.errors import DuplicateKeyError

from wellnesshub.application.ports.repositories.account_repo import AccountRepository
from wellnesshub.domain.entities.account import (
    Account,
    Certification,
    ConsultationDetails,
    ConsumerProfile,
    ContactInformation,
    PractitionerProfile,
    Qualification,
)
from wellnesshub.domain.entities.availability import AvailabilityTemplate, AvailableDay
from wellnesshub.domain.enums import Role, Weekday
from wellnesshub.domain.errors import DuplicateAccountError
from wellnesshub.domain.value_objects.time_slot import TimeSlot

from ..models.account_m import (
    AccountMongo,
    AvailableDayMongo,
    CertificationMongo,
    ConsultationDetailsMongo,
    ContactInformationMongo,
    ProfessionalProfileMongo,
    QualificationMongo,
    TimeSlotMongo,
    UserProfileMongo,
)

logger = logging.getLogger(__name__)

DAYS_PATH = "professional_profile.consultation_details.available_days"
SLOT_FLAG_PATH = f"{DAYS_PATH}.$[d].time_slots.$[s].is_booked"


def _slots_to_mongo(slots: List[TimeSlot]) -> List[dict]:
    return [TimeSlotMongo(start=s.start, end=s.end, is_booked=s.is_booked).model_dump() for s in slots]


def _profile_to_mongo(profile: PractitionerProfile) -> ProfessionalProfileMongo:
    details = profile.consultation_details
    return ProfessionalProfileMongo(
        specialization=profile.specialization,
        professional_title=profile.professional_title,
        bio=profile.bio,
        years_of_experience=profile.years_of_experience,
        areas_of_expertise=list(profile.areas_of_expertise),
        qualifications=[QualificationMongo(**vars(q)) for q in profile.qualifications],
        certifications=[CertificationMongo(**vars(c)) for c in profile.certifications],
        contact_information=ContactInformationMongo(**vars(profile.contact_information)),
        consultation_details=ConsultationDetailsMongo(
            is_available=details.is_available,
            consultation_fee=details.consultation_fee,
            consultation_methods=[m.value for m in details.consultation_methods],
            available_days=[
                AvailableDayMongo(
                    day=entry.day.value,
                    time_slots=[TimeSlotMongo(**vars(s)) for s in entry.time_slots],
                )
                for entry in details.availability.days
            ],
        ),
    )


def _profile_to_domain(doc: ProfessionalProfileMongo) -> PractitionerProfile:
    details = doc.consultation_details
    return PractitionerProfile(
        specialization=doc.specialization,
        professional_title=doc.professional_title,
        bio=doc.bio,
        years_of_experience=doc.years_of_experience,
        areas_of_expertise=list(doc.areas_of_expertise),
        qualifications=[Qualification(**q.model_dump()) for q in doc.qualifications],
        certifications=[Certification(**c.model_dump()) for c in doc.certifications],
        contact_information=ContactInformation(**doc.contact_information.model_dump()),
        consultation_details=ConsultationDetails(
            is_available=details.is_available,
            consultation_fee=details.consultation_fee,
            consultation_methods=list(details.consultation_methods),
            availability=AvailabilityTemplate(
                days=[
                    AvailableDay(
                        day=Weekday(entry.day),
                        time_slots=[TimeSlot(**s.model_dump()) for s in entry.time_slots],
                    )
                    for entry in details.available_days
                ]
            ),
        ),
    )


def _user_profile_to_mongo(profile: ConsumerProfile) -> UserProfileMongo:
    return UserProfileMongo(
        age=profile.age,
        gender=profile.gender.value if profile.gender else None,
        about_myself=profile.about_myself,
        health_goals=list(profile.health_goals),
        interests=list(profile.interests),
    )


def _user_profile_to_domain(doc: UserProfileMongo) -> ConsumerProfile:
    return ConsumerProfile(**doc.model_dump())


class MongoAccountRepository(AccountRepository):
    """MongoDB implementation of AccountRepository."""

    async def save(self, account: Account) -> Account:
        """Save an account to MongoDB."""
        account_mongo = await self._domain_to_mongo(account)
        try:
            await account_mongo.save()
        except DuplicateKeyError as e:
            # Unique email index rejected a registration racing an identical one
            logger.warning(f"Duplicate key saving account {account.account_id}: {e}")
            raise DuplicateAccountError(account.email) from e
        return self._mongo_to_domain(account_mongo)

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        account_mongo = await AccountMongo.find_one(AccountMongo.account_id == account_id)
        if not account_mongo:
            return None
        return self._mongo_to_domain(account_mongo)

    async def find_by_ids(self, account_ids: List[str]) -> List[Account]:
        if not account_ids:
            return []
        docs = await AccountMongo.find({"account_id": {"$in": list(account_ids)}}).to_list()
        return [self._mongo_to_domain(doc) for doc in docs]

    async def find_by_email(self, email: str) -> Optional[Account]:
        account_mongo = await AccountMongo.find_one(AccountMongo.email == (email or "").strip().lower())
        if not account_mongo:
            return None
        return self._mongo_to_domain(account_mongo)

    async def find_practitioner_by_name(self, name: str) -> Optional[Account]:
        account_mongo = await AccountMongo.find_one(
            AccountMongo.name == name, AccountMongo.role == Role.PRACTITIONER.value
        )
        if not account_mongo:
            return None
        return self._mongo_to_domain(account_mongo)

    async def list_practitioners(self) -> List[Account]:
        docs = await AccountMongo.find(
            AccountMongo.role == Role.PRACTITIONER.value
        ).sort([("name", 1)]).to_list()
        return [self._mongo_to_domain(doc) for doc in docs]

    async def update_practitioner_profile(
        self, account_id: str, profile: PractitionerProfile
    ) -> Optional[Account]:
        account_mongo = await AccountMongo.find_one(AccountMongo.account_id == account_id)
        if not account_mongo:
            return None
        account_mongo.professional_profile = _profile_to_mongo(profile)
        account_mongo.updated_at = datetime.utcnow()
        await account_mongo.save()
        return self._mongo_to_domain(account_mongo)

    async def update_consumer_profile(
        self, account_id: str, profile: ConsumerProfile
    ) -> Optional[Account]:
        account_mongo = await AccountMongo.find_one(AccountMongo.account_id == account_id)
        if not account_mongo:
            return None
        account_mongo.user_profile = _user_profile_to_mongo(profile)
        account_mongo.updated_at = datetime.utcnow()
        await account_mongo.save()
        return self._mongo_to_domain(account_mongo)

    async def set_day_slots(self, account_id: str, day: Weekday, slots: List[TimeSlot]) -> bool:
        result = await AccountMongo.get_motor_collection().update_one(
            {"account_id": account_id, f"{DAYS_PATH}.day": day.value},
            {
                "$set": {
                    f"{DAYS_PATH}.$.time_slots": _slots_to_mongo(slots),
                    "updated_at": datetime.utcnow(),
                }
            },
        )
        return result.matched_count == 1

    async def add_day(self, account_id: str, day: Weekday, slots: List[TimeSlot]) -> bool:
        collection = AccountMongo.get_motor_collection()
        # $push cannot create a path under a null profile
        await collection.update_one(
            {"account_id": account_id, "professional_profile": None},
            {"$set": {"professional_profile": ProfessionalProfileMongo().model_dump()}},
        )
        result = await collection.update_one(
            {"account_id": account_id, f"{DAYS_PATH}.day": {"$ne": day.value}},
            {
                "$push": {DAYS_PATH: {"day": day.value, "time_slots": _slots_to_mongo(slots)}},
                "$set": {"updated_at": datetime.utcnow()},
            },
        )
        return result.modified_count == 1

    async def remove_day(self, account_id: str, day: Weekday) -> bool:
        result = await AccountMongo.get_motor_collection().update_one(
            {"account_id": account_id, f"{DAYS_PATH}.day": day.value},
            {"$pull": {DAYS_PATH: {"day": day.value}}, "$set": {"updated_at": datetime.utcnow()}},
        )
        return result.modified_count == 1

    async def try_claim_slot(self, practitioner_id: str, day: Weekday, start: str, end: str) -> bool:
        return await self._compare_and_set_slot(practitioner_id, day, start, end, expected=False)

    async def release_slot(self, practitioner_id: str, day: Weekday, start: str, end: str) -> bool:
        return await self._compare_and_set_slot(practitioner_id, day, start, end, expected=True)

    async def _compare_and_set_slot(
        self, practitioner_id: str, day: Weekday, start: str, end: str, expected: bool
    ) -> bool:
        """Flip ``is_booked`` from ``expected`` to its negation in one server-side update."""
        slot_condition = {"start": start, "end": end, "is_booked": expected}
        result = await AccountMongo.get_motor_collection().update_one(
            {
                "account_id": practitioner_id,
                "role": Role.PRACTITIONER.value,
                DAYS_PATH: {
                    "$elemMatch": {"day": day.value, "time_slots": {"$elemMatch": slot_condition}}
                },
            },
            {"$set": {SLOT_FLAG_PATH: not expected, "updated_at": datetime.utcnow()}},
            array_filters=[
                {"d.day": day.value},
                {"s.start": start, "s.end": end, "s.is_booked": expected},
            ],
        )
        changed = result.modified_count == 1
        logger.debug(
            f"Slot {day.value} {start}-{end} of {practitioner_id}: "
            f"is_booked {expected} -> {not expected} {'applied' if changed else 'rejected'}"
        )
        return changed

    async def _domain_to_mongo(self, account: Account) -> AccountMongo:
        """Convert domain entity to MongoDB model."""
        existing = await AccountMongo.find_one(AccountMongo.account_id == account.account_id)
        user_profile = _user_profile_to_mongo(account.user_profile) if account.user_profile else None
        professional_profile = (
            _profile_to_mongo(account.professional_profile) if account.professional_profile else None
        )

        if existing:
            existing.name = account.name
            existing.email = account.email
            existing.role = account.role.value
            existing.password_hash = account.password_hash or existing.password_hash
            existing.user_profile = user_profile
            existing.professional_profile = professional_profile
            existing.updated_at = datetime.utcnow()
            return existing

        return AccountMongo(
            account_id=account.account_id,
            name=account.name,
            email=account.email,
            password_hash=account.password_hash,
            role=account.role.value,
            user_profile=user_profile,
            professional_profile=professional_profile,
            created_at=account.created_at,
            updated_at=datetime.utcnow(),
        )

    def _mongo_to_domain(self, account_mongo: AccountMongo) -> Account:
        """Convert MongoDB model to domain entity."""
        return Account(
            account_id=account_mongo.account_id,
            name=account_mongo.name,
            email=account_mongo.email,
            role=Role(account_mongo.role),
            password_hash=account_mongo.password_hash,
            user_profile=(
                _user_profile_to_domain(account_mongo.user_profile) if account_mongo.user_profile else None
            ),
            professional_profile=(
                _profile_to_domain(account_mongo.professional_profile)
                if account_mongo.professional_profile
                else None
            ),
            created_at=account_mongo.created_at,
        )
