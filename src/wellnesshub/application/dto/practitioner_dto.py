"""Practitioner profile and directory DTOs."""

from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.entities.account import PractitionerProfile
from ...domain.entities.blog_post import BlogPost
from ...domain.enums import ConsultationMethod

DEFAULT_SPECIALIZATION = "General Wellness"
DEFAULT_PROFESSIONAL_TITLE = "Wellness Practitioner"


@dataclass
class PractitionerProfileView:
    """Profile, basic account info and the practitioner's posts."""

    account_id: str
    name: str
    email: str
    profile: PractitionerProfile
    posts: List[BlogPost] = field(default_factory=list)


@dataclass
class DirectoryEntry:
    id: str
    name: str
    specialization: str = DEFAULT_SPECIALIZATION
    professional_title: str = DEFAULT_PROFESSIONAL_TITLE
    bio: str = ""
    is_available: bool = False
    consultation_fee: float = 0
    consultation_methods: List[ConsultationMethod] = field(default_factory=list)
    areas_of_expertise: List[str] = field(default_factory=list)


@dataclass
class DirectoryFilter:
    """Directory filters; ``None`` means the filter is not applied."""

    specialization: Optional[str] = None
    consultation_method: Optional[ConsultationMethod] = None
    available: Optional[bool] = None
