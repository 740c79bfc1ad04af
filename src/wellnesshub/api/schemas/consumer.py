"""Consumer profile schemas."""

from typing import List, Optional

from pydantic import Field

from ...domain.entities.account import ConsumerProfile
from ...domain.enums import Gender
from .common import BasicInfo, CamelModel


class ConsumerProfileSchema(CamelModel):
    # range checked by the domain so the error reads "Invalid age value"
    age: Optional[int] = None
    gender: Optional[Gender] = None
    about_myself: str = ""
    health_goals: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)

    def to_domain(self) -> ConsumerProfile:
        return ConsumerProfile(
            age=self.age,
            gender=self.gender,
            about_myself=self.about_myself or "",
            health_goals=list(self.health_goals),
            interests=list(self.interests),
        )

    @classmethod
    def from_domain(cls, profile: ConsumerProfile) -> "ConsumerProfileSchema":
        return cls(**vars(profile))


class ConsumerProfileUpdateRequest(CamelModel):
    user_profile: ConsumerProfileSchema


class ConsumerProfileResponse(CamelModel):
    profile: ConsumerProfileSchema
    basic_info: BasicInfo
