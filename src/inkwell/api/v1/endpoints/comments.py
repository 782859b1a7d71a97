"""Comment endpoints: reply trees, submission and moderation."""

from fastapi import APIRouter, HTTPException, status

from inkwell.api.v1.dependencies import CommentServiceDep, SessionDep
from inkwell.models import Comment
from inkwell.schemas.comment import CommentCreate, CommentResponse, CommentWithReplies
from inkwell.services.errors import UnknownReferenceError

router = APIRouter(tags=["comments"])


def _comment_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Comment not found",
    )


@router.get("/posts/{post_id}/comments", response_model=list[CommentWithReplies])
async def list_comments(
    post_id: str,
    comment_service: CommentServiceDep,
) -> list[CommentWithReplies]:
    """Return the approved comments of a post as a nested reply tree."""
    return list(comment_service.comments_for_post(post_id))


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    comment_data: CommentCreate,
    db: SessionDep,
    comment_service: CommentServiceDep,
) -> Comment:
    """Submit a comment or a reply to an existing comment.

    Raises:
        HTTPException: If the post or the parent comment does not exist
    """
    try:
        comment = comment_service.create_comment(post_id, comment_data)
    except UnknownReferenceError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{exc.kind} not found",
        ) from exc
    db.commit()
    db.refresh(comment)
    return comment


@router.post("/comments/{comment_id}/like")
async def like_comment(
    comment_id: str,
    db: SessionDep,
    comment_service: CommentServiceDep,
) -> dict[str, bool]:
    """Increment a comment's like counter."""
    if not comment_service.increment_likes(comment_id):
        raise _comment_not_found()
    db.commit()
    return {"success": True}


@router.post("/comments/{comment_id}/approve")
async def approve_comment(
    comment_id: str,
    db: SessionDep,
    comment_service: CommentServiceDep,
) -> dict[str, bool]:
    """Approve a held comment so it appears in reply trees."""
    if not comment_service.approve(comment_id):
        raise _comment_not_found()
    db.commit()
    return {"success": True}
