"""MongoDB Beanie model for Account documents (consumers and practitioners)."""

from datetime import datetime
from typing import List, Optional

from beanie import Document
from pydantic import BaseModel, Field
from pymongo import ASCENDING, IndexModel


class TimeSlotMongo(BaseModel):
    start: str
    end: str
    is_booked: bool = False


class AvailableDayMongo(BaseModel):
    day: str
    time_slots: List[TimeSlotMongo] = Field(default_factory=list)


class QualificationMongo(BaseModel):
    degree: str = ""
    institution: str = ""
    year: Optional[int] = None


class CertificationMongo(BaseModel):
    name: str = ""
    issued_by: str = ""
    year: Optional[int] = None


class ContactInformationMongo(BaseModel):
    phone: str = ""
    alternate_email: str = ""
    professional_website: str = ""


class ConsultationDetailsMongo(BaseModel):
    is_available: bool = False
    consultation_fee: float = 0
    consultation_methods: List[str] = Field(default_factory=list)
    available_days: List[AvailableDayMongo] = Field(default_factory=list)


class ProfessionalProfileMongo(BaseModel):
    specialization: str = ""
    professional_title: str = ""
    bio: str = ""
    years_of_experience: int = 0
    areas_of_expertise: List[str] = Field(default_factory=list)
    qualifications: List[QualificationMongo] = Field(default_factory=list)
    certifications: List[CertificationMongo] = Field(default_factory=list)
    contact_information: ContactInformationMongo = Field(default_factory=ContactInformationMongo)
    consultation_details: ConsultationDetailsMongo = Field(default_factory=ConsultationDetailsMongo)


class UserProfileMongo(BaseModel):
    age: Optional[int] = None
    gender: Optional[str] = None
    about_myself: str = ""
    health_goals: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)


class AccountMongo(Document):
    """MongoDB model for Account entity."""

    account_id: str = Field(..., description="Account ID", unique=True)
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email (lower-case)")
    password_hash: str = Field(default="", description="Password hash")
    role: str = Field(default="user", description="Account role (user/practitioner)")
    user_profile: Optional[UserProfileMongo] = None
    professional_profile: Optional[ProfessionalProfileMongo] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "users"
        indexes = [
            IndexModel([("account_id", ASCENDING)], unique=True),
            IndexModel([("email", ASCENDING)], unique=True),
            "role",
            "name",
        ]
