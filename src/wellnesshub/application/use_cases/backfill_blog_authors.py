"""One-time backfill linking legacy blog posts to practitioner accounts by name."""

import logging
from dataclasses import dataclass, field
from typing import List

from ..ports.repositories.account_repo import AccountRepository
from ..ports.repositories.blog_post_repo import BlogPostRepository

logger = logging.getLogger(__name__)


@dataclass
class BackfillReport:
    linked: List[str] = field(default_factory=list)
    unmatched: List[str] = field(default_factory=list)


class BackfillBlogAuthorsUseCase:
    """
    Set ``author_id`` on posts that only carry the author's display name.

    Posts whose author matches no practitioner are flagged with
    ``no_practitioner`` so later runs skip them.
    """

    def __init__(self, account_repository: AccountRepository, blog_post_repository: BlogPostRepository):
        self._account_repository = account_repository
        self._blog_post_repository = blog_post_repository

    async def execute(self, dry_run: bool = False) -> BackfillReport:
        report = BackfillReport()
        for post in await self._blog_post_repository.find_without_author_id():
            practitioner = None
            if post.author:
                practitioner = await self._account_repository.find_practitioner_by_name(post.author)

            if practitioner is None:
                logger.warning(f"No practitioner named '{post.author}' for post {post.post_id}")
                report.unmatched.append(post.post_id)
                post.no_practitioner = True
            else:
                logger.info(f"Linking post {post.post_id} to practitioner {practitioner.account_id}")
                report.linked.append(post.post_id)
                post.author_id = practitioner.account_id

            if not dry_run:
                await self._blog_post_repository.save(post)
        return report
