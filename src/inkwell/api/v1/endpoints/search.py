"""Full-text search over published posts."""

from fastapi import APIRouter, HTTPException, Query, status

from inkwell.api.v1.dependencies import AssemblerDep
from inkwell.models.post import POST_STATUS_PUBLISHED
from inkwell.schemas.post import PostFilters, PostWithDetails

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/", response_model=list[PostWithDetails])
async def search_posts(
    assembler: AssemblerDep,
    q: str | None = Query(None, description="Text to look for"),
) -> list[PostWithDetails]:
    """Search titles, excerpts and bodies of published posts."""
    if not q or not q.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Search query is required",
        )
    return assembler.list_posts(PostFilters(search=q, status=POST_STATUS_PUBLISHED))
