# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from inkwell.db.session import Base
from inkwell.db.session import get_db as app_get_session
from inkwell.main import app as fastapi_app
from inkwell.models import Category, Comment, Post, User
from inkwell.repositories.store import BlogStore

TEST_DB_URL = "sqlite://"
BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

_SLUG_COUNTER = count(1)


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def store(db_session: Session) -> BlogStore:
    return BlogStore.from_session(db_session)


@pytest.fixture()
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture()
def client(app: FastAPI, db_session: Session) -> Iterator[TestClient]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        with TestClient(app, base_url="http://test") as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def author(db_session: Session) -> User:
    """Create and return a persisted author."""
    user = User(
        username="writer",
        email="writer@example.com",
        name="Test Writer",
        bio="Writes about systems",
        created_at=BASE_TIME,
    )
    db_session.add(user)
    db_session.flush()
    return user


@pytest.fixture()
def category(db_session: Session) -> Category:
    """Create the default ``ai-llm`` category."""
    category = Category(
        name="AI/LLM",
        slug="ai-llm",
        description="Artificial Intelligence and Large Language Models",
        color="#8B5CF6",
        created_at=BASE_TIME,
    )
    db_session.add(category)
    db_session.flush()
    return category


@pytest.fixture()
def other_category(db_session: Session) -> Category:
    """Create a second category."""
    category = Category(
        name="Backend",
        slug="backend",
        description=None,
        color="#10B981",
        created_at=BASE_TIME,
    )
    db_session.add(category)
    db_session.flush()
    return category


@pytest.fixture()
def make_post(
    db_session: Session,
    author: User,
    category: Category,
) -> Callable[..., Post]:
    """Return a factory that persists posts with sensible defaults."""

    def _make_post(**overrides: Any) -> Post:
        n = next(_SLUG_COUNTER)
        fields: dict[str, Any] = {
            "title": f"Post {n}",
            "slug": f"post-{n}",
            "excerpt": "A short excerpt",
            "content": "Body text",
            "author_id": author.id,
            "category_id": category.id,
            "tags": [],
            "status": "published",
            "read_time": 1,
            "views": 0,
            "likes": 0,
            "published_at": None,
            "created_at": BASE_TIME,
            "updated_at": BASE_TIME,
        }
        fields.update(overrides)
        post = Post(**fields)
        db_session.add(post)
        db_session.flush()
        return post

    return _make_post


@pytest.fixture()
def test_post(make_post: Callable[..., Post]) -> Post:
    """Create a baseline published post."""
    return make_post(title="Hello Inkwell", slug="hello-inkwell")


@pytest.fixture()
def make_comment(db_session: Session) -> Callable[..., Comment]:
    """Return a factory that persists comments; ``minutes`` offsets created_at."""

    def _make_comment(post: Post, *, minutes: int = 0, **overrides: Any) -> Comment:
        fields: dict[str, Any] = {
            "post_id": post.id,
            "parent_id": None,
            "content": "Nice post",
            "author_name": "Reader",
            "author_email": "reader@example.com",
            "likes": 0,
            "is_approved": True,
            "created_at": BASE_TIME + timedelta(minutes=minutes),
        }
        fields.update(overrides)
        comment = Comment(**fields)
        db_session.add(comment)
        db_session.flush()
        return comment

    return _make_comment
