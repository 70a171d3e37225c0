"""
Shared fixtures for API tests.

Each test gets the real app wired to its own in-memory database.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from movie_catalog.api.dependencies import get_db
from movie_catalog.api.main import app
from movie_catalog.database.models import Base
from movie_catalog.database import crud


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh in-memory database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def client(session_factory):
    """TestClient whose get_db dependency uses the test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def genre_id(session_factory):
    """ID of a genre that exists in the test database."""
    session = session_factory()
    try:
        return crud.create_genre(session, name="Drama").id
    finally:
        session.close()
