"""Blog post entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..errors import InvalidProfileDataError


@dataclass
class BlogPost:
    """A post authored by a practitioner, referenced by ``author_id``."""

    title: str
    content: str
    author_id: Optional[str]
    author: str = ""
    tags: List[str] = field(default_factory=list)
    date: Optional[datetime] = None
    post_id: Optional[str] = None
    no_practitioner: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise InvalidProfileDataError("title", "Title and content are required", self.title)
        if not self.content or not self.content.strip():
            raise InvalidProfileDataError("content", "Title and content are required", None)

    @property
    def embedding_text(self) -> str:
        return f"{self.title} {self.content}"
