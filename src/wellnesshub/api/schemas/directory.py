"""Practitioner directory schemas."""

from typing import List

from pydantic import Field

from ...application.dto.practitioner_dto import DirectoryEntry, PractitionerProfileView
from ...domain.enums import ConsultationMethod
from .common import CamelModel
from .practitioner import ProfessionalProfileSchema


class DirectoryEntrySchema(CamelModel):
    id: str
    name: str
    specialization: str
    professional_title: str
    bio: str = ""
    is_available: bool = False
    consultation_fee: float = 0
    consultation_methods: List[ConsultationMethod] = Field(default_factory=list)
    areas_of_expertise: List[str] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, entry: DirectoryEntry) -> "DirectoryEntrySchema":
        return cls(**vars(entry))


class PractitionerDetailSchema(CamelModel):
    id: str
    name: str
    email: str
    professional_profile: ProfessionalProfileSchema

    @classmethod
    def from_view(cls, view: PractitionerProfileView) -> "PractitionerDetailSchema":
        return cls(
            id=view.account_id,
            name=view.name,
            email=view.email,
            professional_profile=ProfessionalProfileSchema.from_domain(view.profile),
        )
