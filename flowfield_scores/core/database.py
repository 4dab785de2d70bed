"""Database configuration and session helpers."""

from __future__ import annotations

from typing import Iterator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from .config import DATA_DIR, DATABASE_URL, DEFAULT_DATABASE_URL


def build_engine(url: str = DATABASE_URL) -> Engine:
    """Create an engine for ``url``, preparing the default SQLite location."""

    connect_args = {}
    if url.startswith("sqlite"):
        # Requests are served from FastAPI's thread pool.
        connect_args["check_same_thread"] = False
    if url == DEFAULT_DATABASE_URL:
        DATA_DIR.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args=connect_args)


engine = build_engine()


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


__all__ = ["build_engine", "engine", "get_session"]
