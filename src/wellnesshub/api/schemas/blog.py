"""Blog post schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ...domain.entities.blog_post import BlogPost
from .common import CamelModel


class BlogPostCreateRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)


class BlogPostUpdateRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    tags: Optional[List[str]] = None


class BlogPostSchema(CamelModel):
    id: str
    title: str
    content: str
    author: str = ""
    author_id: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: BlogPost) -> "BlogPostSchema":
        return cls(
            id=post.post_id,
            title=post.title,
            content=post.content,
            author=post.author,
            author_id=post.author_id,
            tags=list(post.tags),
            date=post.date,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
