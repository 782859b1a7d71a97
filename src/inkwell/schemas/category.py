"""Category-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from inkwell.schemas.common import Slug


class CategoryCreate(BaseModel):
    """Schema for creating a new category."""

    name: str = Field(..., min_length=1)
    slug: Slug
    description: str | None = None
    color: str = Field(..., min_length=1, description="Display color, e.g. #8B5CF6")


class CategoryResponse(BaseModel):
    """Schema for category information returned by the API."""

    id: str
    name: str
    slug: str
    description: str | None
    color: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
