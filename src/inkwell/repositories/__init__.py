"""Data access layer for Inkwell entities."""

from .store import BlogStore

__all__ = ["BlogStore"]
