# src/inkwell/models/__init__.py
"""SQLAlchemy models for the Inkwell application."""

from .category import Category
from .comment import Comment
from .post import POST_STATUS_DRAFT, POST_STATUS_PUBLISHED, POST_STATUSES, Post
from .tag import Tag
from .user import User

__all__ = [
    "Category",
    "Comment",
    "Post", "POST_STATUS_DRAFT", "POST_STATUS_PUBLISHED", "POST_STATUSES",
    "Tag",
    "User",
]
