"""Engine, session factory and the declarative base."""

from __future__ import annotations

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from inkwell.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Registers every table on Base.metadata.
import inkwell.models  # noqa: E402,F401

_connect_args: dict[str, object] = {}
if settings.effective_database_url.startswith("sqlite"):
    _connect_args["check_same_thread"] = False

engine = create_engine(
    settings.effective_database_url,
    pool_pre_ping=True,
    echo=settings.sql_debug,
    connect_args=_connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a request-scoped session; closed when the request ends."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Create any missing tables on the configured engine."""
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """Drop every Inkwell table."""
    Base.metadata.drop_all(bind=engine)
