"""Data access helpers for comments."""
from __future__ import annotations

from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from inkwell.db.time import utcnow
from inkwell.models.comment import Comment

__all__ = ["CommentRepository"]


class CommentRepository:
    """Database access for comment records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, comment_id: str) -> Comment | None:
        """Return a comment by identifier."""
        return self.session.get(Comment, comment_id)

    def list_for_post(self, post_id: str, *, approved_only: bool = True) -> list[Comment]:
        """Return the comments attached to a post, oldest first."""
        stmt = select(Comment).where(Comment.post_id == post_id)
        if approved_only:
            stmt = stmt.where(Comment.is_approved.is_(True))
        stmt = stmt.order_by(Comment.created_at.asc(), Comment.id.asc())
        result = self.session.execute(stmt)
        return list(result.scalars())

    def count_for_post(self, post_id: str, *, approved_only: bool = True) -> int:
        """Count a post's comments with a fresh query."""
        stmt = select(func.count()).select_from(Comment).where(Comment.post_id == post_id)
        if approved_only:
            stmt = stmt.where(Comment.is_approved.is_(True))
        return self.session.execute(stmt).scalar_one()

    def create(self, **fields: Any) -> Comment:
        """Insert a new comment with zero likes."""
        comment = Comment(likes=0, created_at=utcnow(), **fields)
        self.session.add(comment)
        self.session.flush()
        return comment

    def increment_likes(self, comment_id: str) -> bool:
        """Atomically increment a comment's like counter."""
        result = self.session.execute(
            update(Comment)
            .where(Comment.id == comment_id)
            .values(likes=Comment.likes + 1)
            .execution_options(synchronize_session="fetch")
        )
        return bool(result.rowcount)

    def approve(self, comment_id: str) -> bool:
        """Mark a comment as approved."""
        result = self.session.execute(
            update(Comment)
            .where(Comment.id == comment_id)
            .values(is_approved=True)
            .execution_options(synchronize_session="fetch")
        )
        return bool(result.rowcount)
