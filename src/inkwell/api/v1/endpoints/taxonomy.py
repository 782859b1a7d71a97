"""Category and tag catalog endpoints."""

from fastapi import APIRouter

from inkwell.api.v1.dependencies import StoreDep
from inkwell.models import Category, Tag
from inkwell.schemas.category import CategoryResponse
from inkwell.schemas.tag import TagResponse

categories_router = APIRouter(prefix="/categories", tags=["categories"])
tags_router = APIRouter(prefix="/tags", tags=["tags"])


@categories_router.get("/", response_model=list[CategoryResponse])
async def list_categories(store: StoreDep) -> list[Category]:
    """List all categories ordered by name."""
    return store.categories.list_all()


@tags_router.get("/", response_model=list[TagResponse])
async def list_tags(store: StoreDep) -> list[Tag]:
    """List the tag catalog ordered by name."""
    return store.tags.list_all()
