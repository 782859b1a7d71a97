"""Tag catalog schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from inkwell.schemas.common import Slug


class TagCreate(BaseModel):
    """Schema for adding a tag to the catalog."""

    name: str = Field(..., min_length=1)
    slug: Slug


class TagResponse(BaseModel):
    """Schema for tag catalog entries returned by the API."""

    id: str
    name: str
    slug: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
