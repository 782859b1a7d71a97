"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from inkwell.db.session import get_db
from inkwell.repositories.store import BlogStore
from inkwell.services.comment_service import CommentService
from inkwell.services.post_details import PostDetailAssembler
from inkwell.services.post_service import PostService

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_store(db: SessionDep) -> BlogStore:
    """Return a record store bound to the request's session."""
    return BlogStore.from_session(db)


StoreDep = Annotated[BlogStore, Depends(get_store)]


def get_assembler(store: StoreDep) -> PostDetailAssembler:
    """Return the post view assembler for this request."""
    return PostDetailAssembler(store)


def get_post_service(store: StoreDep) -> PostService:
    """Return the post write service for this request."""
    return PostService(store)


def get_comment_service(store: StoreDep) -> CommentService:
    """Return the comment service for this request."""
    return CommentService(store)


AssemblerDep = Annotated[PostDetailAssembler, Depends(get_assembler)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
