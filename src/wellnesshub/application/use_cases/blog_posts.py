"""Blog post use cases; every write refreshes the post's embedding."""

import logging
import uuid
from datetime import datetime
from typing import List, Optional

from ...domain.entities.blog_post import BlogPost
from ...domain.errors import AuthorNotPractitionerError, PostNotFoundError
from ..ports.repositories.account_repo import AccountRepository
from ..ports.repositories.blog_post_repo import BlogPostRepository
from ..ports.services.embedding_service import EmbeddingService

logger = logging.getLogger(__name__)


async def _refresh_embedding(
    blog_post_repository: BlogPostRepository, embedding_service: EmbeddingService, post: BlogPost
) -> None:
    embedding = await embedding_service.embed(post.embedding_text)
    await blog_post_repository.upsert_embedding(
        post.post_id,
        post.embedding_text,
        embedding,
        {
            "title": post.title,
            "author": post.author,
            "authorId": post.author_id,
            "date": post.date.isoformat() if post.date else None,
            "tags": list(post.tags),
        },
    )


def _clean_tags(tags: Optional[List[str]]) -> List[str]:
    return [t.strip() for t in tags or [] if t and t.strip()]


class CreateBlogPostUseCase:
    def __init__(
        self,
        account_repository: AccountRepository,
        blog_post_repository: BlogPostRepository,
        embedding_service: EmbeddingService,
    ):
        self._account_repository = account_repository
        self._blog_post_repository = blog_post_repository
        self._embedding_service = embedding_service

    async def execute(
        self, author_id: str, title: str, content: str, tags: Optional[List[str]] = None
    ) -> BlogPost:
        author = await self._account_repository.find_by_id(author_id)
        if author is None or not author.is_practitioner:
            raise AuthorNotPractitionerError(author_id)

        now = datetime.utcnow()
        post = BlogPost(
            post_id=uuid.uuid4().hex,
            title=(title or "").strip(),
            content=content,
            author_id=author.account_id,
            author=author.name,
            tags=_clean_tags(tags),
            date=now,
            created_at=now,
            updated_at=now,
        )
        saved = await self._blog_post_repository.save(post)
        await _refresh_embedding(self._blog_post_repository, self._embedding_service, saved)
        logger.info(f"Blog post {saved.post_id} created by {author.account_id}")
        return saved


class GetBlogPostUseCase:
    def __init__(self, blog_post_repository: BlogPostRepository):
        self._blog_post_repository = blog_post_repository

    async def execute(self, post_id: str) -> BlogPost:
        post = await self._blog_post_repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post


class UpdateBlogPostUseCase:
    """Edit a post; only its author may do so."""

    def __init__(self, blog_post_repository: BlogPostRepository, embedding_service: EmbeddingService):
        self._blog_post_repository = blog_post_repository
        self._embedding_service = embedding_service

    async def execute(
        self,
        author_id: str,
        post_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> BlogPost:
        post = await self._blog_post_repository.find_by_id(post_id)
        if post is None or post.author_id != author_id:
            raise PostNotFoundError(post_id)

        updated = BlogPost(
            post_id=post.post_id,
            title=title.strip() if title is not None else post.title,
            content=content if content is not None else post.content,
            author_id=post.author_id,
            author=post.author,
            tags=_clean_tags(tags) if tags is not None else post.tags,
            date=post.date,
            no_practitioner=post.no_practitioner,
            created_at=post.created_at,
            updated_at=datetime.utcnow(),
        )
        saved = await self._blog_post_repository.save(updated)
        await _refresh_embedding(self._blog_post_repository, self._embedding_service, saved)
        logger.info(f"Blog post {saved.post_id} updated")
        return saved
