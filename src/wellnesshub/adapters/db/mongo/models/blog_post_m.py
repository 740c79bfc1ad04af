"""MongoDB Beanie models for blog posts and their embeddings."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from beanie import Document
from pydantic import Field
from pymongo import ASCENDING, IndexModel


class BlogPostMongo(Document):
    """MongoDB model for BlogPost entity."""

    post_id: str = Field(..., description="Post ID", unique=True)
    title: str
    content: str
    author: str = Field(default="", description="Author display name at creation")
    author_id: Optional[str] = Field(default=None, description="Practitioner account ID")
    tags: List[str] = Field(default_factory=list)
    date: Optional[datetime] = None
    no_practitioner: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "blogposts"
        indexes = [
            IndexModel([("post_id", ASCENDING)], unique=True),
            "author_id",
        ]


class BlogEmbeddingMongo(Document):
    """Embedding vector of a post, stored beside it for similarity search."""

    post_id: str = Field(..., description="Post ID", unique=True)
    text: str = ""
    embedding: List[float] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "blog_embeddings"
        indexes = [
            IndexModel([("post_id", ASCENDING)], unique=True),
        ]
