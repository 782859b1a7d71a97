# src/inkwell/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    categories_router,
    comments_router,
    posts_router,
    search_router,
    tags_router,
)

__all__ = [
    "categories_router",
    "comments_router",
    "posts_router",
    "search_router",
    "tags_router",
]
