# src/inkwell/api/v1/endpoints/posts.py
"""Post-related endpoints for the Inkwell API."""

from fastapi import APIRouter, HTTPException, Query, status

from inkwell.api.v1.dependencies import AssemblerDep, PostServiceDep, SessionDep
from inkwell.core.settings import settings
from inkwell.models import Post
from inkwell.models.post import POST_STATUS_DRAFT
from inkwell.schemas.post import (
    PostCreate,
    PostFilters,
    PostResponse,
    PostUpdate,
    PostWithDetails,
)
from inkwell.services.errors import SlugCollisionError, UnknownReferenceError

router = APIRouter(prefix="/posts", tags=["posts"])


def _post_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Post not found",
    )


def _write_error(exc: ValueError) -> HTTPException:
    if isinstance(exc, SlugCollisionError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/", response_model=list[PostWithDetails])
async def list_posts(
    assembler: AssemblerDep,
    status_filter: str | None = Query(
        None,
        alias="status",
        description="Post status; defaults to the configured public status",
    ),
    category: str | None = Query(None, description="Filter by category slug"),
    tag: str | None = Query(None, description="Filter by tag label"),
    search: str | None = Query(None, description="Case-insensitive text search"),
) -> list[PostWithDetails]:
    """List posts with optional filters, most recent first.

    Args:
        assembler: Post view assembler
        status_filter: Exact status match (``published`` when omitted)
        category: Category slug
        tag: Tag label the post must carry
        search: Text matched against title, excerpt or content

    Returns:
        Posts with author, category and comment count
    """
    filters = PostFilters(
        status=status_filter or settings.default_post_status,
        category=category,
        tag=tag,
        search=search,
    )
    return assembler.list_posts(filters)


@router.get("/drafts", response_model=list[PostWithDetails])
async def list_drafts(assembler: AssemblerDep) -> list[PostWithDetails]:
    """List draft posts awaiting review."""
    return assembler.list_posts(PostFilters(status=POST_STATUS_DRAFT))


@router.get("/id/{post_id}", response_model=PostWithDetails)
async def get_post_by_id(post_id: str, assembler: AssemblerDep) -> PostWithDetails:
    """Get a post by ID, e.g. for editing. Does not count as a view."""
    post = assembler.get_by_id(post_id)
    if post is None:
        raise _post_not_found()
    return post


@router.get("/{slug}", response_model=PostWithDetails)
async def get_post(
    slug: str,
    db: SessionDep,
    assembler: AssemblerDep,
    post_service: PostServiceDep,
) -> PostWithDetails:
    """Get a post by slug and record a view.

    Raises:
        HTTPException: If no post has the slug
    """
    record = assembler.store.posts.get_by_slug(slug)
    if record is None:
        raise _post_not_found()

    post_service.increment_views(record.id)
    db.commit()
    return assembler.assemble(record)


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    db: SessionDep,
    post_service: PostServiceDep,
) -> Post:
    """Create a new post.

    Raises:
        HTTPException: 409 if the slug is taken, 400 if author or category is unknown
    """
    try:
        post = post_service.create_post(post_data)
    except (SlugCollisionError, UnknownReferenceError) as exc:
        raise _write_error(exc) from exc
    db.commit()
    db.refresh(post)
    return post


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    post_data: PostUpdate,
    db: SessionDep,
    post_service: PostServiceDep,
) -> Post:
    """Apply a partial update to a post.

    Raises:
        HTTPException: 404 if missing, 409 on slug collision, 400 on unknown references
    """
    try:
        post = post_service.update_post(post_id, post_data)
    except (SlugCollisionError, UnknownReferenceError) as exc:
        raise _write_error(exc) from exc
    if post is None:
        raise _post_not_found()
    db.commit()
    db.refresh(post)
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    db: SessionDep,
    post_service: PostServiceDep,
) -> None:
    """Delete a post. Its comments stay in the store."""
    if not post_service.delete_post(post_id):
        raise _post_not_found()
    db.commit()


@router.post("/{post_id}/like")
async def like_post(
    post_id: str,
    db: SessionDep,
    post_service: PostServiceDep,
) -> dict[str, bool]:
    """Increment a post's like counter."""
    if not post_service.increment_likes(post_id):
        raise _post_not_found()
    db.commit()
    return {"success": True}
