"""Denormalized post views and the list filter/sort policy."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from inkwell.db.time import as_utc
from inkwell.models.category import Category
from inkwell.models.post import Post
from inkwell.repositories.store import BlogStore
from inkwell.schemas.category import CategoryResponse
from inkwell.schemas.post import PostFilters, PostResponse, PostWithDetails
from inkwell.schemas.user import AuthorResponse
from inkwell.services.errors import DataIntegrityError

logger = logging.getLogger(__name__)

__all__ = ["PostDetailAssembler", "matches_filters"]


def _matches_search(post: Post, term: str) -> bool:
    needle = term.lower()
    return any(
        needle in (field or "").lower()
        for field in (post.title, post.excerpt, post.content)
    )


def matches_filters(post: Post, category: Category | None, filters: PostFilters) -> bool:
    """Return True when ``post`` satisfies every filter that is set.

    Args:
        post: Candidate post.
        category: The post's resolved category; may be None only when
            ``filters.category`` is unset.
        filters: Filters to apply; unset fields impose no constraint.
    """
    if filters.status is not None and post.status != filters.status:
        return False
    if filters.category is not None and category.slug != filters.category:
        return False
    if filters.tag is not None and filters.tag not in (post.tags or []):
        return False
    if filters.search is not None and not _matches_search(post, filters.search):
        return False
    return True


class PostDetailAssembler:
    """Builds :class:`PostWithDetails` views from records in a :class:`BlogStore`."""

    def __init__(self, store: BlogStore) -> None:
        self.store = store

    def assemble(self, post: Post) -> PostWithDetails:
        """Join a post with its author, category and live approved-comment count.

        Raises:
            DataIntegrityError: If the author or category does not resolve.
        """
        author = self.store.users.get_by_id(post.author_id)
        if author is None:
            logger.error("Post %s references missing author %s", post.id, post.author_id)
            raise DataIntegrityError(
                f"Post {post.id} references missing author {post.author_id}"
            )
        category = self._resolve_category(post)

        comments_count = self.store.comments.count_for_post(post.id, approved_only=True)
        return PostWithDetails(
            **PostResponse.model_validate(post).model_dump(),
            author=AuthorResponse.model_validate(author),
            category=CategoryResponse.model_validate(category),
            comments_count=comments_count,
        )

    def get_by_id(self, post_id: str) -> PostWithDetails | None:
        """Return the detailed view of a post, or None when it does not exist."""
        post = self.store.posts.get_by_id(post_id)
        return self.assemble(post) if post is not None else None

    def get_by_slug(self, slug: str) -> PostWithDetails | None:
        """Return the detailed view of the post with ``slug``, or None."""
        post = self.store.posts.get_by_slug(slug)
        return self.assemble(post) if post is not None else None

    def list_posts(self, filters: PostFilters | None = None) -> list[PostWithDetails]:
        """Return matching posts, most recent effective date first.

        No status is assumed here; callers wanting published posts only must
        say so in ``filters``.
        """
        filters = filters or PostFilters()
        selected = self._filter(self.store.posts.list_all(), filters)
        # One coalesced key per post: published_at when set, otherwise created_at.
        selected.sort(key=lambda post: (as_utc(post.effective_date), post.id), reverse=True)
        return [self.assemble(post) for post in selected]

    def _resolve_category(self, post: Post, cache: dict[str, Category] | None = None) -> Category:
        if cache is not None and post.category_id in cache:
            return cache[post.category_id]
        category = self.store.categories.get_by_id(post.category_id)
        if category is None:
            logger.error("Post %s references missing category %s", post.id, post.category_id)
            raise DataIntegrityError(
                f"Post {post.id} references missing category {post.category_id}"
            )
        if cache is not None:
            cache[post.category_id] = category
        return category

    def _filter(self, posts: Iterable[Post], filters: PostFilters) -> list[Post]:
        categories: dict[str, Category] = {}
        selected: list[Post] = []
        for post in posts:
            category = None
            if filters.category is not None:
                # An unresolvable category fails the listing instead of hiding the post.
                category = self._resolve_category(post, categories)
            if matches_filters(post, category, filters):
                selected.append(post)
        return selected
