# src/inkwell/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from inkwell.schemas.category import CategoryResponse
from inkwell.schemas.common import Slug, TagLabels
from inkwell.schemas.user import AuthorResponse

PostStatus = Literal["draft", "published"]


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: str = Field(..., min_length=1, max_length=300)
    slug: Slug
    excerpt: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1, description="Markdown content")
    featured_image: str | None = None
    author_id: str
    category_id: str
    tags: TagLabels = Field(default_factory=list)
    status: PostStatus = "draft"
    read_time: int | None = Field(None, ge=1, description="Minutes; estimated when omitted")
    meta_title: str | None = None
    meta_description: str | None = None
    published_at: datetime | None = None


class PostUpdate(BaseModel):
    """Partial update; only fields that are explicitly set are applied."""

    title: str | None = Field(None, min_length=1, max_length=300)
    slug: Slug | None = None
    excerpt: str | None = Field(None, min_length=1)
    content: str | None = Field(None, min_length=1)
    featured_image: str | None = None
    author_id: str | None = None
    category_id: str | None = None
    tags: TagLabels | None = None
    status: PostStatus | None = None
    read_time: int | None = Field(None, ge=1)
    meta_title: str | None = None
    meta_description: str | None = None
    published_at: datetime | None = None


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: str
    title: str
    slug: str
    excerpt: str
    content: str
    featured_image: str | None
    author_id: str
    category_id: str
    tags: list[str]
    status: str
    read_time: int
    views: int
    likes: int
    meta_title: str | None
    meta_description: str | None
    published_at: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostWithDetails(PostResponse):
    """Read view of a post joined with its author, category and comment count."""

    author: AuthorResponse
    category: CategoryResponse
    comments_count: int


class PostFilters(BaseModel):
    """Optional list filters; every supplied field must match."""

    status: str | None = None
    category: str | None = Field(None, description="Category slug")
    tag: str | None = Field(None, description="Tag label")
    search: str | None = Field(None, description="Case-insensitive text search")

    model_config = ConfigDict(frozen=True)
