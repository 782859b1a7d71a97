"""Seed the configured database with the default author and taxonomy."""
from __future__ import annotations

import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inkwell.repositories.store import BlogStore

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = {
    "username": "anujmahajan",
    "email": "anuj@anujmahajan.dev",
    "name": "Anuj Mahajan",
}

DEFAULT_CATEGORIES = [
    {
        "name": "AI/LLM",
        "slug": "ai-llm",
        "description": "Artificial Intelligence and Large Language Models",
        "color": "#8B5CF6",
    },
    {
        "name": "Backend",
        "slug": "backend",
        "description": "Server-side development and architecture",
        "color": "#10B981",
    },
    {
        "name": "Frontend",
        "slug": "frontend",
        "description": "Client-side development and frameworks",
        "color": "#3B82F6",
    },
    {
        "name": "Hosting",
        "slug": "hosting",
        "description": "Deployment and hosting solutions",
        "color": "#F59E0B",
    },
]

DEFAULT_TAGS = [
    {"name": "React", "slug": "react"},
    {"name": "Node.js", "slug": "nodejs"},
    {"name": "TypeScript", "slug": "typescript"},
    {"name": "Docker", "slug": "docker"},
    {"name": "AWS", "slug": "aws"},
    {"name": "Next.js", "slug": "nextjs"},
]


def seed_database(db: Session) -> dict[str, int]:
    """Insert any missing default records and commit.

    Existing rows (matched by username or slug) are left untouched, so the
    function can run on every start-up.

    Returns:
        Number of rows created per entity.
    """
    store = BlogStore.from_session(db)
    created = {"users": 0, "categories": 0, "tags": 0}

    if store.users.get_by_username(DEFAULT_AUTHOR["username"]) is None:
        store.users.create(**DEFAULT_AUTHOR)
        created["users"] += 1

    for category in DEFAULT_CATEGORIES:
        if store.categories.get_by_slug(category["slug"]) is None:
            store.categories.create(**category)
            created["categories"] += 1

    for tag in DEFAULT_TAGS:
        if store.tags.get_by_slug(tag["slug"]) is None:
            store.tags.create(**tag)
            created["tags"] += 1

    db.commit()
    logger.info("Seeded database: %s", created)
    return created


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the configured database")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    from inkwell.db.session import SessionLocal, create_tables

    try:
        if args.create_tables:
            create_tables()
        with SessionLocal() as db:
            created = seed_database(db)
    except SQLAlchemyError as exc:
        print(f"[seed] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"[seed] created {created}")


if __name__ == "__main__":
    main()
