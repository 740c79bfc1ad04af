"""Account aggregate: identity plus the consumer or professional profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..enums import ConsultationMethod, Gender, Role
from ..errors import InvalidProfileDataError
from .availability import AvailabilityTemplate

MAX_TEXT_LENGTH = 500
MAX_LIST_ITEMS = 5


def normalize_tags(field_name: str, values: Optional[List[str]]) -> List[str]:
    """Trim, drop empties and duplicates (first occurrence wins), cap at five."""
    result: List[str] = []
    for raw in values or []:
        item = (raw or "").strip()
        if item and item not in result:
            result.append(item)
    if len(result) > MAX_LIST_ITEMS:
        raise InvalidProfileDataError(
            field_name, f"Maximum {MAX_LIST_ITEMS} {field_name} allowed", len(result)
        )
    return result


def _check_length(field_name: str, value: Optional[str]) -> None:
    if value and len(value) > MAX_TEXT_LENGTH:
        raise InvalidProfileDataError(
            field_name,
            f"{field_name} too long (max {MAX_TEXT_LENGTH} characters), got {len(value)}",
            value[:50],
        )


@dataclass
class ConsumerProfile:
    """Profile of a consumer (role ``user``)."""

    age: Optional[int] = None
    gender: Optional[Gender] = None
    about_myself: str = ""
    health_goals: List[str] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.age is not None and (not isinstance(self.age, int) or not 0 <= self.age <= 120):
            raise InvalidProfileDataError("age", "Invalid age value", self.age)
        if self.gender is not None:
            self.gender = Gender(self.gender)
        self.about_myself = self.about_myself or ""
        _check_length("aboutMyself", self.about_myself)
        self.health_goals = normalize_tags("healthGoals", self.health_goals)
        self.interests = normalize_tags("interests", self.interests)


@dataclass
class Qualification:
    degree: str = ""
    institution: str = ""
    year: Optional[int] = None


@dataclass
class Certification:
    name: str = ""
    issued_by: str = ""
    year: Optional[int] = None


@dataclass
class ContactInformation:
    phone: str = ""
    alternate_email: str = ""
    professional_website: str = ""


@dataclass
class ConsultationDetails:
    is_available: bool = False
    consultation_fee: float = 0
    consultation_methods: List[ConsultationMethod] = field(default_factory=list)
    availability: AvailabilityTemplate = field(default_factory=AvailabilityTemplate)

    def __post_init__(self) -> None:
        if self.consultation_fee is None:
            self.consultation_fee = 0
        if self.consultation_fee < 0:
            raise InvalidProfileDataError(
                "consultationFee", "Consultation fee cannot be negative", self.consultation_fee
            )
        methods: List[ConsultationMethod] = []
        for method in self.consultation_methods or []:
            method = ConsultationMethod(method)
            if method not in methods:
                methods.append(method)
        self.consultation_methods = methods


@dataclass
class PractitionerProfile:
    """Professional profile of a practitioner; every nested field has a default."""

    specialization: str = ""
    professional_title: str = ""
    bio: str = ""
    years_of_experience: int = 0
    areas_of_expertise: List[str] = field(default_factory=list)
    qualifications: List[Qualification] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    contact_information: ContactInformation = field(default_factory=ContactInformation)
    consultation_details: ConsultationDetails = field(default_factory=ConsultationDetails)

    def __post_init__(self) -> None:
        self.specialization = (self.specialization or "").strip()
        self.professional_title = (self.professional_title or "").strip()
        self.bio = self.bio or ""
        _check_length("bio", self.bio)
        if self.years_of_experience is None:
            self.years_of_experience = 0
        if not 0 <= self.years_of_experience <= 50:
            raise InvalidProfileDataError(
                "yearsOfExperience",
                "Years of experience must be between 0 and 50",
                self.years_of_experience,
            )
        self.areas_of_expertise = [a.strip() for a in self.areas_of_expertise or [] if a and a.strip()]

    @property
    def availability(self) -> AvailabilityTemplate:
        return self.consultation_details.availability


@dataclass
class Account:
    """Account aggregate root."""

    account_id: str
    name: str
    email: str
    role: Role = Role.USER
    password_hash: str = ""
    user_profile: Optional[ConsumerProfile] = None
    professional_profile: Optional[PractitionerProfile] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self.role = Role(self.role)
        if not self.name or len(self.name.strip()) < 2:
            raise InvalidProfileDataError("name", "Name must be at least 2 characters", self.name)
        self.email = (self.email or "").strip().lower()
        if "@" not in self.email or len(self.email) > 254:
            raise InvalidProfileDataError("email", "Invalid email address", self.email[:80])

    @property
    def is_practitioner(self) -> bool:
        return self.role == Role.PRACTITIONER

    def practitioner_profile_or_default(self) -> PractitionerProfile:
        return self.professional_profile or PractitionerProfile()

    def consumer_profile_or_default(self) -> ConsumerProfile:
        return self.user_profile or ConsumerProfile()
