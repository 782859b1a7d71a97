"""Data access helpers for users."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from inkwell.models.user import User

__all__ = ["UserRepository"]


class UserRepository:
    """Database access for post authors."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by identifier."""
        return self.session.get(User, user_id)

    def get_by_username(self, username: str) -> User | None:
        """Return a user by unique username."""
        result = self.session.execute(select(User).where(User.username == username))
        return result.scalars().first()

    def create(
        self,
        *,
        username: str,
        email: str,
        name: str,
        bio: str | None = None,
        avatar: str | None = None,
    ) -> User:
        """Insert a user and return the persisted instance."""
        user = User(username=username, email=email, name=name, bio=bio, avatar=avatar)
        self.session.add(user)
        self.session.flush()
        return user
