# src/inkwell/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .category import CategoryCreate, CategoryResponse
from .comment import CommentCreate, CommentResponse, CommentWithReplies
from .post import PostCreate, PostFilters, PostResponse, PostUpdate, PostWithDetails
from .tag import TagCreate, TagResponse
from .user import AuthorResponse, UserCreate

__all__ = [
    "CategoryCreate", "CategoryResponse",
    "CommentCreate", "CommentResponse", "CommentWithReplies",
    "PostCreate", "PostFilters", "PostResponse", "PostUpdate", "PostWithDetails",
    "TagCreate", "TagResponse",
    "AuthorResponse", "UserCreate",
]
