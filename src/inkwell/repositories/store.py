"""Bundle of repositories consumed by the publishing services."""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from inkwell.repositories.comment_repo import CommentRepository
from inkwell.repositories.post_repo import PostRepository
from inkwell.repositories.taxonomy_repo import CategoryRepository, TagRepository
from inkwell.repositories.user_repo import UserRepository

__all__ = ["BlogStore"]


@dataclass(frozen=True)
class BlogStore:
    """Record store the services read from and write to.

    Services only call repository methods, so any object exposing the same
    attributes (for example test doubles) can stand in for the database.
    """

    posts: PostRepository
    comments: CommentRepository
    categories: CategoryRepository
    tags: TagRepository
    users: UserRepository

    @classmethod
    def from_session(cls, session: Session) -> BlogStore:
        """Build a store whose repositories share ``session``."""
        return cls(
            posts=PostRepository(session),
            comments=CommentRepository(session),
            categories=CategoryRepository(session),
            tags=TagRepository(session),
            users=UserRepository(session),
        )
