from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from flowfield_scores.app import create_app
from flowfield_scores.services import LeaderboardService, ScoreStore


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def engine():
    engine = _memory_engine()
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def broken_engine():
    """An engine whose database has no tables."""
    engine = _memory_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session):
    return ScoreStore(session)


@pytest.fixture
def service(store):
    return LeaderboardService(store)


@pytest.fixture
def client(engine):
    return TestClient(create_app(engine))
