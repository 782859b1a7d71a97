# src/inkwell/models/comment.py
"""SQLAlchemy model for reader comments."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inkwell.db.session import Base
from inkwell.db.time import utcnow
from inkwell.models._ids import new_id


class Comment(Base):
    """Reader comment on a post, optionally replying to another comment.

    Comments are immutable once posted; only ``likes`` and ``is_approved``
    change afterwards.
    """

    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    post_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("posts.id"), nullable=False, index=True
    )
    # Not a foreign key: a parent may be missing or live on another post, and
    # such comments are filtered out when the reply tree is built.
    parent_id: Mapped[str | None] = mapped_column(String(36), nullable=True)

    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_name: Mapped[str] = mapped_column(Text, nullable=False)
    # Contact address only; not an account reference.
    author_email: Mapped[str] = mapped_column(Text, nullable=False)
    author_avatar: Mapped[str | None] = mapped_column(Text, nullable=True)

    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
