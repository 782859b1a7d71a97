"""Data access helpers for categories and the tag catalog."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from inkwell.models.category import Category
from inkwell.models.tag import Tag

__all__ = ["CategoryRepository", "TagRepository"]


class CategoryRepository:
    """Read-mostly access to categories."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> list[Category]:
        """Return categories sorted by name."""
        result = self.session.execute(select(Category).order_by(Category.name.asc()))
        return list(result.scalars())

    def get_by_id(self, category_id: str) -> Category | None:
        return self.session.get(Category, category_id)

    def get_by_slug(self, slug: str) -> Category | None:
        result = self.session.execute(select(Category).where(Category.slug == slug))
        return result.scalars().first()

    def create(
        self,
        *,
        name: str,
        slug: str,
        color: str,
        description: str | None = None,
    ) -> Category:
        category = Category(name=name, slug=slug, color=color, description=description)
        self.session.add(category)
        self.session.flush()
        return category


class TagRepository:
    """Read-mostly access to the tag catalog."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> list[Tag]:
        """Return catalog tags sorted by name."""
        result = self.session.execute(select(Tag).order_by(Tag.name.asc()))
        return list(result.scalars())

    def get_by_id(self, tag_id: str) -> Tag | None:
        return self.session.get(Tag, tag_id)

    def get_by_slug(self, slug: str) -> Tag | None:
        result = self.session.execute(select(Tag).where(Tag.slug == slug))
        return result.scalars().first()

    def create(self, *, name: str, slug: str) -> Tag:
        tag = Tag(name=name, slug=slug)
        self.session.add(tag)
        self.session.flush()
        return tag
