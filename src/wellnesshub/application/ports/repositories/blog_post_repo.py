"""
Blog post repository interface, including the companion embedding store.
"""

from typing import Any, Dict, List, Optional

from wellnesshub.domain.entities.blog_post import BlogPost


class BlogPostRepository:
    """Repository interface for blog posts and their embeddings."""

    async def save(self, post: BlogPost) -> BlogPost:
        """Insert or replace a post."""
        raise NotImplementedError

    async def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        """Find a post by ID."""
        raise NotImplementedError

    async def find_by_author_id(self, author_id: str) -> List[BlogPost]:
        """Posts of one practitioner, newest first."""
        raise NotImplementedError

    async def find_without_author_id(self) -> List[BlogPost]:
        """Posts not yet linked to a practitioner account."""
        raise NotImplementedError

    async def upsert_embedding(
        self, post_id: str, text: str, embedding: List[float], metadata: Dict[str, Any]
    ) -> None:
        """Create or replace the embedding record of a post."""
        raise NotImplementedError
