"""Comment-related Pydantic schemas."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """Schema for submitting a comment on a post."""

    content: str = Field(..., min_length=1, max_length=5000)
    author_name: str = Field(..., min_length=1, max_length=100)
    author_email: str = Field(..., min_length=3, max_length=254)
    author_avatar: str | None = None
    parent_id: str | None = Field(None, description="Comment being replied to")


class CommentResponse(BaseModel):
    """Schema for a single comment returned by the API."""

    id: str
    post_id: str
    parent_id: str | None
    content: str
    author_name: str
    author_email: str
    author_avatar: str | None
    likes: int
    is_approved: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentWithReplies(CommentResponse):
    """Comment node in a reply tree; ``replies`` is ordered oldest first."""

    replies: tuple[CommentWithReplies, ...] = ()

    model_config = ConfigDict(from_attributes=True, frozen=True)
