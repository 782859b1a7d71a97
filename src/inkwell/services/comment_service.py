"""Comment queries and moderation actions."""
from __future__ import annotations

import logging

from inkwell.core.settings import settings
from inkwell.models.comment import Comment
from inkwell.repositories.store import BlogStore
from inkwell.schemas.comment import CommentCreate, CommentWithReplies
from inkwell.services.comment_tree import build_comment_tree
from inkwell.services.errors import UnknownReferenceError

logger = logging.getLogger(__name__)

__all__ = ["CommentService"]


class CommentService:
    """Reader-facing comment operations backed by a :class:`BlogStore`."""

    def __init__(self, store: BlogStore, *, auto_approve: bool | None = None) -> None:
        self.store = store
        self.auto_approve = (
            settings.comments_auto_approve if auto_approve is None else auto_approve
        )

    def comments_for_post(self, post_id: str) -> tuple[CommentWithReplies, ...]:
        """Fetch the approved comments of a post and arrange them as a tree."""
        comments = self.store.comments.list_for_post(post_id, approved_only=True)
        return build_comment_tree(post_id, comments)

    def create_comment(self, post_id: str, data: CommentCreate) -> Comment:
        """Attach a new comment to a post.

        Raises:
            UnknownReferenceError: If the post does not exist, or the parent is
                not a comment on the same post.
        """
        if self.store.posts.get_by_id(post_id) is None:
            raise UnknownReferenceError("Post", post_id)
        if data.parent_id is not None:
            parent = self.store.comments.get_by_id(data.parent_id)
            if parent is None or parent.post_id != post_id:
                raise UnknownReferenceError("Parent comment", data.parent_id)

        comment = self.store.comments.create(
            post_id=post_id,
            is_approved=self.auto_approve,
            **data.model_dump(),
        )
        logger.info(
            "Created comment %s on post %s (approved=%s)",
            comment.id,
            post_id,
            comment.is_approved,
        )
        return comment

    def increment_likes(self, comment_id: str) -> bool:
        """Count one more like on a comment; False if it does not exist."""
        return self.store.comments.increment_likes(comment_id)

    def approve(self, comment_id: str) -> bool:
        """Approve a comment so readers can see it; False if it does not exist."""
        approved = self.store.comments.approve(comment_id)
        if approved:
            logger.info("Approved comment %s", comment_id)
        return approved
