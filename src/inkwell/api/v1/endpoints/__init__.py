# src/inkwell/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .comments import router as comments_router
from .posts import router as posts_router
from .search import router as search_router
from .taxonomy import categories_router, tags_router

__all__ = [
    "categories_router",
    "comments_router",
    "posts_router",
    "search_router",
    "tags_router",
]
