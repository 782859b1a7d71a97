"""Service-level helpers for creating and changing posts."""
from __future__ import annotations

import logging
import math

from inkwell.core.settings import settings
from inkwell.db.time import utcnow
from inkwell.models.post import POST_STATUS_PUBLISHED, Post
from inkwell.repositories.store import BlogStore
from inkwell.schemas.post import PostCreate, PostUpdate
from inkwell.services.errors import SlugCollisionError, UnknownReferenceError

logger = logging.getLogger(__name__)

__all__ = ["PostService", "estimate_read_time"]


def estimate_read_time(content: str, words_per_minute: int | None = None) -> int:
    """Return the reading time of ``content`` in whole minutes, at least one."""
    wpm = words_per_minute or settings.words_per_minute
    word_count = len(content.split())
    return max(1, math.ceil(word_count / wpm))


class PostService:
    """Write operations on posts.

    Lookups that find nothing return ``None``; rule violations raise the
    errors in :mod:`inkwell.services.errors` before anything is persisted.
    """

    def __init__(self, store: BlogStore) -> None:
        self.store = store

    def create_post(self, data: PostCreate) -> Post:
        """Create a post after checking its slug and references.

        Args:
            data: Validated creation payload.

        Returns:
            The persisted post with zeroed counters.

        Raises:
            SlugCollisionError: If another post already uses the slug.
            UnknownReferenceError: If the author or category does not exist.
        """
        self._ensure_slug_free(data.slug)
        self._ensure_references(data.author_id, data.category_id)

        fields = data.model_dump()
        if fields["read_time"] is None:
            fields["read_time"] = estimate_read_time(data.content)
        if fields["status"] == POST_STATUS_PUBLISHED and fields["published_at"] is None:
            fields["published_at"] = utcnow()

        post = self.store.posts.create(**fields)
        logger.info("Created post %s (%s)", post.id, post.slug)
        return post

    def update_post(self, post_id: str, data: PostUpdate) -> Post | None:
        """Merge the explicitly provided fields into an existing post.

        Returns:
            The updated post, or None when ``post_id`` does not exist.

        Raises:
            SlugCollisionError: If the new slug belongs to a different post.
            UnknownReferenceError: If a new author or category does not exist.
        """
        post = self.store.posts.get_by_id(post_id)
        if post is None:
            return None

        changes = data.model_dump(exclude_unset=True)
        # Columns that cannot hold NULL keep their value when sent as null.
        for name in ("title", "slug", "excerpt", "content", "author_id",
                     "category_id", "tags", "status", "read_time"):
            if name in changes and changes[name] is None:
                del changes[name]

        if "slug" in changes and changes["slug"] != post.slug:
            self._ensure_slug_free(changes["slug"], exclude_post_id=post.id)
        self._ensure_references(changes.get("author_id"), changes.get("category_id"))

        # A published post always carries a publish date: a null keeps the
        # existing one, and a first publication is stamped now.
        status_after = changes.get("status", post.status)
        if (
            status_after == POST_STATUS_PUBLISHED
            and changes.get("published_at", post.published_at) is None
        ):
            changes["published_at"] = post.published_at or utcnow()

        post = self.store.posts.update(post, changes)
        logger.info("Updated post %s fields=%s", post.id, sorted(changes))
        return post

    def delete_post(self, post_id: str) -> bool:
        """Delete a post. Its comments are not removed."""
        deleted = self.store.posts.delete(post_id)
        if deleted:
            logger.info("Deleted post %s", post_id)
        return deleted

    def increment_views(self, post_id: str) -> bool:
        """Count one more view; returns False if the post does not exist."""
        return self.store.posts.increment_views(post_id)

    def increment_likes(self, post_id: str) -> bool:
        """Count one more like; returns False if the post does not exist."""
        return self.store.posts.increment_likes(post_id)

    def _ensure_slug_free(self, slug: str, exclude_post_id: str | None = None) -> None:
        existing = self.store.posts.get_by_slug(slug)
        if existing is not None and existing.id != exclude_post_id:
            raise SlugCollisionError(slug)

    def _ensure_references(self, author_id: str | None, category_id: str | None) -> None:
        if author_id is not None and self.store.users.get_by_id(author_id) is None:
            raise UnknownReferenceError("Author", author_id)
        if category_id is not None and self.store.categories.get_by_id(category_id) is None:
            raise UnknownReferenceError("Category", category_id)
