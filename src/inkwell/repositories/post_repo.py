"""Data access helpers for working with posts."""
from __future__ import annotations

from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from inkwell.db.time import utcnow
from inkwell.models.post import Post
from inkwell.services.errors import SlugCollisionError

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: str) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def get_by_slug(self, slug: str) -> Post | None:
        """Return a post by its unique slug."""
        result = self.session.execute(select(Post).where(Post.slug == slug))
        return result.scalars().first()

    def list_all(self) -> list[Post]:
        """Return every post; ordering is left to the caller."""
        result = self.session.execute(select(Post))
        return list(result.scalars())

    def create(self, **fields: Any) -> Post:
        """Insert a new post and return the persisted ORM instance.

        Counters start at zero and both timestamps are set to the same instant.

        Raises:
            SlugCollisionError: If the unique slug constraint rejects the row.
        """
        now = utcnow()
        post = Post(views=0, likes=0, created_at=now, updated_at=now, **fields)
        self.session.add(post)
        self._flush_checking_slug(post.slug)
        return post

    def update(self, post: Post, changes: dict[str, Any]) -> Post:
        """Apply ``changes`` to ``post`` and refresh its update timestamp."""
        for name, value in changes.items():
            setattr(post, name, value)
        post.updated_at = utcnow()
        self._flush_checking_slug(post.slug)
        return post

    def delete(self, post_id: str) -> bool:
        """Delete a post. Comments referencing it are left in place."""
        result = self.session.execute(delete(Post).where(Post.id == post_id))
        self.session.flush()
        return bool(result.rowcount)

    def increment_views(self, post_id: str) -> bool:
        """Atomically increment the view counter."""
        return self._increment(post_id, Post.views)

    def increment_likes(self, post_id: str) -> bool:
        """Atomically increment the like counter."""
        return self._increment(post_id, Post.likes)

    def _flush_checking_slug(self, slug: str) -> None:
        """Flush pending changes, reporting a lost slug race as a collision.

        The session must be rolled back by the caller after a failure.
        """
        try:
            self.session.flush()
        except IntegrityError as exc:
            if "slug" not in str(exc.orig).lower():
                raise
            raise SlugCollisionError(slug) from exc

    def _increment(self, post_id: str, column: Any) -> bool:
        # Increment in SQL; no read-modify-write in Python.
        result = self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .values({column: column + 1})
            .execution_options(synchronize_session="fetch")
        )
        return bool(result.rowcount)
