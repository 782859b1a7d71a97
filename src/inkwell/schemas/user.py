"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for registering an author."""

    username: str = Field(..., min_length=1, max_length=64)
    email: str = Field(..., min_length=3)
    name: str = Field(..., min_length=1)
    bio: str | None = None
    avatar: str | None = None


class AuthorResponse(BaseModel):
    """Public projection of a user shown alongside their posts."""

    id: str
    name: str
    username: str
    email: str
    avatar: str | None
    bio: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
