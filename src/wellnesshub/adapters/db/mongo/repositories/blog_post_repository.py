"""
MongoDB implementation of BlogPostRepository.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from beanie.odm.operators.update.general import Set

from wellnesshub.application.ports.repositories.blog_post_repo import BlogPostRepository
from wellnesshub.domain.entities.blog_post import BlogPost

from ..models.blog_post_m import BlogEmbeddingMongo, BlogPostMongo


class MongoBlogPostRepository(BlogPostRepository):
    """MongoDB implementation of BlogPostRepository."""

    async def save(self, post: BlogPost) -> BlogPost:
        post_mongo = await self._domain_to_mongo(post)
        await post_mongo.save()
        return self._mongo_to_domain(post_mongo)

    async def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        post_mongo = await BlogPostMongo.find_one(BlogPostMongo.post_id == post_id)
        if not post_mongo:
            return None
        return self._mongo_to_domain(post_mongo)

    async def find_by_author_id(self, author_id: str) -> List[BlogPost]:
        docs = await BlogPostMongo.find(
            BlogPostMongo.author_id == author_id
        ).sort([("date", -1)]).to_list()
        return [self._mongo_to_domain(doc) for doc in docs]

    async def find_without_author_id(self) -> List[BlogPost]:
        docs = await BlogPostMongo.find(
            {"author_id": None, "no_practitioner": {"$ne": True}}
        ).to_list()
        return [self._mongo_to_domain(doc) for doc in docs]

    async def upsert_embedding(
        self, post_id: str, text: str, embedding: List[float], metadata: Dict[str, Any]
    ) -> None:
        now = datetime.utcnow()
        await BlogEmbeddingMongo.find_one(BlogEmbeddingMongo.post_id == post_id).upsert(
            Set({"embedding": embedding, "metadata": metadata, "text": text, "updated_at": now}),
            on_insert=BlogEmbeddingMongo(
                post_id=post_id,
                text=text,
                embedding=embedding,
                metadata=metadata,
                created_at=now,
                updated_at=now,
            ),
        )

    async def _domain_to_mongo(self, post: BlogPost) -> BlogPostMongo:
        """Convert domain entity to MongoDB model."""
        existing = await BlogPostMongo.find_one(BlogPostMongo.post_id == post.post_id)
        if existing:
            existing.title = post.title
            existing.content = post.content
            existing.author = post.author
            existing.author_id = post.author_id
            existing.tags = list(post.tags)
            existing.no_practitioner = post.no_practitioner
            existing.updated_at = post.updated_at
            return existing

        return BlogPostMongo(
            post_id=post.post_id,
            title=post.title,
            content=post.content,
            author=post.author,
            author_id=post.author_id,
            tags=list(post.tags),
            date=post.date,
            no_practitioner=post.no_practitioner,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    def _mongo_to_domain(self, post_mongo: BlogPostMongo) -> BlogPost:
        """Convert MongoDB model to domain entity."""
        return BlogPost(
            post_id=post_mongo.post_id,
            title=post_mongo.title,
            content=post_mongo.content,
            author=post_mongo.author,
            author_id=post_mongo.author_id,
            tags=list(post_mongo.tags),
            date=post_mongo.date,
            no_practitioner=post_mongo.no_practitioner,
            created_at=post_mongo.created_at,
            updated_at=post_mongo.updated_at,
        )
