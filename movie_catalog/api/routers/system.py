"""
System API endpoints (health).
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from movie_catalog.api.dependencies import get_db
from movie_catalog.database import crud

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check: database reachable and record counts."""
    try:
        genre_count = crud.get_genre_count(db)
        movie_count = crud.get_movie_count(db)
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        return {"status": "unhealthy", "database": str(e)}
    return {
        "status": "healthy",
        "database": "connected",
        "genres": genre_count,
        "movies": movie_count,
    }
