#!/usr/bin/env python3
"""
Migration script: link legacy blog posts to practitioner accounts.

Older posts only stored the author's display name. This sets ``author_id``
by exact name match against practitioner accounts and flags posts with no
match as ``no_practitioner``.

Usage:
    python scripts/migrate_blog_authors.py [--dry-run]
"""

import argparse
import asyncio
import logging

import certifi
from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from wellnesshub.adapters.db.mongo.models import DOCUMENT_MODELS
from wellnesshub.adapters.db.mongo.repositories import MongoAccountRepository, MongoBlogPostRepository
from wellnesshub.application.use_cases.backfill_blog_authors import BackfillBlogAuthorsUseCase
from wellnesshub.core.config import get_settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def migrate_blog_authors(dry_run: bool = False) -> None:
    settings = get_settings()
    mongo_uri = settings.database.uri

    if mongo_uri.startswith("mongodb+srv://"):
        client = AsyncIOMotorClient(
            mongo_uri,
            serverSelectionTimeoutMS=settings.database.server_selection_timeout_ms,
            tls=True,
            tlsCAFile=certifi.where(),
            tlsAllowInvalidCertificates=False,
        )
    else:
        client = AsyncIOMotorClient(
            mongo_uri,
            serverSelectionTimeoutMS=settings.database.server_selection_timeout_ms,
        )

    try:
        await init_beanie(database=client[settings.database.db_name], document_models=DOCUMENT_MODELS)
        use_case = BackfillBlogAuthorsUseCase(MongoAccountRepository(), MongoBlogPostRepository())
        report = await use_case.execute(dry_run=dry_run)
    finally:
        client.close()

    logger.info(
        f"{'[dry run] ' if dry_run else ''}Linked {len(report.linked)} post(s), "
        f"{len(report.unmatched)} without a matching practitioner"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Link blog posts to practitioner accounts")
    parser.add_argument("--dry-run", action="store_true", help="Report without writing")
    args = parser.parse_args()
    asyncio.run(migrate_blog_authors(dry_run=args.dry_run))


if __name__ == "__main__":
    main()
