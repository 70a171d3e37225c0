"""
FastAPI dependency injection for the database session and request handlers.
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from movie_catalog.api.config import get_database_path
from movie_catalog.core.movies import MovieHandler
from movie_catalog.database.connection import get_db_manager


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_manager = get_db_manager(db_path=get_database_path())
    with db_manager.session_scope() as session:
        yield session


def get_movie_handler(db: Session = Depends(get_db)) -> MovieHandler:
    """Build the movie handler for the current request's session."""
    return MovieHandler(db)
