# mypy: ignore-errors
# tests/test_seed.py
"""Tests for the default data seeding script."""

from inkwell.scripts.seed import DEFAULT_CATEGORIES, DEFAULT_TAGS, seed_database


def test_seed_creates_defaults(db_session, store) -> None:
    created = seed_database(db_session)

    assert created == {
        "users": 1,
        "categories": len(DEFAULT_CATEGORIES),
        "tags": len(DEFAULT_TAGS),
    }
    assert store.categories.get_by_slug("ai-llm").color == "#8B5CF6"
    assert store.users.get_by_username("anujmahajan") is not None


def test_seed_is_idempotent(db_session, store) -> None:
    seed_database(db_session)

    assert seed_database(db_session) == {"users": 0, "categories": 0, "tags": 0}
    assert len(store.tags.list_all()) == len(DEFAULT_TAGS)
