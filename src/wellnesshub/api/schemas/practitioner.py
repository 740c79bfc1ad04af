"""Practitioner profile schemas."""

from typing import List, Optional

from pydantic import Field, model_validator

from ...domain.entities.account import (
    Certification,
    ConsultationDetails,
    ContactInformation,
    PractitionerProfile,
    Qualification,
)
from ...domain.enums import ConsultationMethod, Weekday
from .availability import AvailableDaySchema, TimeSlotSchema, template_from_schema
from .blog import BlogPostSchema
from .common import BasicInfo, CamelModel


class QualificationSchema(CamelModel):
    degree: str = ""
    institution: str = ""
    year: Optional[int] = None


class CertificationSchema(CamelModel):
    name: str = ""
    issued_by: str = ""
    year: Optional[int] = None


class ContactInformationSchema(CamelModel):
    phone: str = ""
    alternate_email: str = ""
    professional_website: str = ""


class ConsultationDetailsSchema(CamelModel):
    is_available: bool = False
    consultation_fee: float = 0
    consultation_methods: List[ConsultationMethod] = Field(default_factory=list)
    available_days: List[AvailableDaySchema] = Field(default_factory=list)


class ProfessionalProfileSchema(CamelModel):
    """Professional profile; every omitted field takes its empty/zero default."""

    specialization: str = ""
    professional_title: str = ""
    bio: str = ""
    years_of_experience: int = 0
    areas_of_expertise: List[str] = Field(default_factory=list)
    qualifications: List[QualificationSchema] = Field(default_factory=list)
    certifications: List[CertificationSchema] = Field(default_factory=list)
    contact_information: ContactInformationSchema = Field(default_factory=ContactInformationSchema)
    consultation_details: ConsultationDetailsSchema = Field(default_factory=ConsultationDetailsSchema)

    def to_domain(self) -> PractitionerProfile:
        details = self.consultation_details
        return PractitionerProfile(
            specialization=self.specialization,
            professional_title=self.professional_title,
            bio=self.bio,
            years_of_experience=self.years_of_experience,
            areas_of_expertise=list(self.areas_of_expertise),
            qualifications=[Qualification(**q.model_dump()) for q in self.qualifications],
            certifications=[Certification(**c.model_dump()) for c in self.certifications],
            contact_information=ContactInformation(**self.contact_information.model_dump()),
            consultation_details=ConsultationDetails(
                is_available=details.is_available,
                consultation_fee=details.consultation_fee,
                consultation_methods=list(details.consultation_methods),
                availability=template_from_schema(details.available_days),
            ),
        )

    @classmethod
    def from_domain(cls, profile: PractitionerProfile) -> "ProfessionalProfileSchema":
        details = profile.consultation_details
        return cls(
            specialization=profile.specialization,
            professional_title=profile.professional_title,
            bio=profile.bio,
            years_of_experience=profile.years_of_experience,
            areas_of_expertise=list(profile.areas_of_expertise),
            qualifications=[QualificationSchema(**vars(q)) for q in profile.qualifications],
            certifications=[CertificationSchema(**vars(c)) for c in profile.certifications],
            contact_information=ContactInformationSchema(**vars(profile.contact_information)),
            consultation_details=ConsultationDetailsSchema(
                is_available=details.is_available,
                consultation_fee=details.consultation_fee,
                consultation_methods=list(details.consultation_methods),
                available_days=[AvailableDaySchema.from_domain(d) for d in details.availability.days],
            ),
        )


class PractitionerProfileUpdateRequest(CamelModel):
    """Either ``{professionalProfile}`` or ``{day, timeSlots}``."""

    professional_profile: Optional[ProfessionalProfileSchema] = None
    day: Optional[Weekday] = None
    time_slots: Optional[List[TimeSlotSchema]] = None

    @model_validator(mode="after")
    def check_one_form(self):
        partial = self.day is not None or self.time_slots is not None
        if self.professional_profile is not None and partial:
            raise ValueError("Send either professionalProfile or day/timeSlots, not both")
        if self.professional_profile is None:
            if not partial:
                raise ValueError("Professional profile data is required")
            if self.day is None or self.time_slots is None:
                raise ValueError("Both day and timeSlots are required for a partial update")
        return self

    @property
    def is_partial(self) -> bool:
        return self.professional_profile is None


class DayToggleRequest(CamelModel):
    enabled: bool
    time_slots: Optional[List[TimeSlotSchema]] = None


class PractitionerProfileResponse(CamelModel):
    profile: ProfessionalProfileSchema
    basic_info: BasicInfo
    posts: List[BlogPostSchema] = Field(default_factory=list)
