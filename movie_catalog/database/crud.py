"""
CRUD operations for Genre and Movie models.

This module is the storage layer the request handlers sit on. Every
mutating helper commits its own write.
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from movie_catalog.database.models import Genre, Movie


# ==================== GENRE CRUD OPERATIONS ====================

def create_genre(session: Session, name: str) -> Genre:
    """
    Create a new genre.
    
    Args:
        session: Database session
        name: Genre name (max 100 characters)
        
    Returns:
        Created Genre object
        
    Raises:
        ValueError: If name is empty or longer than 100 characters
    """
    if not name or len(name) > 100:
        raise ValueError("Genre name must be between 1 and 100 characters")
    
    genre = Genre(name=name)
    session.add(genre)
    session.commit()
    session.refresh(genre)
    return genre


def get_genre(session: Session, genre_id: int) -> Optional[Genre]:
    """
    Get a genre by ID.
    
    Args:
        session: Database session
        genre_id: Genre ID
        
    Returns:
        Genre object or None if not found
    """
    return session.query(Genre).filter(Genre.id == genre_id).first()


def get_genres(session: Session) -> List[Genre]:
    """Get all genres ordered by name."""
    return session.query(Genre).order_by(Genre.name).all()


def get_genre_count(session: Session) -> int:
    """Get total count of genres."""
    return session.query(func.count(Genre.id)).scalar()


def genre_exists(session: Session, genre_id: int) -> bool:
    """
    Check whether a genre with the given ID exists.
    
    Args:
        session: Database session
        genre_id: Genre ID
        
    Returns:
        True if the genre exists
    """
    return session.query(Genre.id).filter(Genre.id == genre_id).first() is not None


def genre_in_use(session: Session, genre_id: int) -> bool:
    """Check whether any movie references the genre."""
    return session.query(Movie.id).filter(Movie.genre_id == genre_id).first() is not None


def update_genre(session: Session, genre: Genre, name: str) -> Genre:
    """
    Rename a genre.
    
    Args:
        session: Database session
        genre: Genre to update
        name: New name
        
    Returns:
        Updated Genre object
    """
    genre.name = name
    session.commit()
    session.refresh(genre)
    return genre


def delete_genre(session: Session, genre: Genre) -> None:
    """Delete a genre. Callers check genre_in_use() first."""
    session.delete(genre)
    session.commit()


# ==================== MOVIE CRUD OPERATIONS ====================

def get_movies(session: Session, genre_id: Optional[int] = None) -> List[Movie]:
    """
    Get all movies, optionally restricted to one genre.
    
    Args:
        session: Database session
        genre_id: Only return movies of this genre (optional)
        
    Returns:
        List of Movie objects ordered by ID
    """
    query = session.query(Movie).options(joinedload(Movie.genre))
    
    if genre_id is not None:
        query = query.filter(Movie.genre_id == genre_id)
    
    return query.order_by(Movie.id).all()


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.
    
    Args:
        session: Database session
        movie_id: Movie ID
        
    Returns:
        Movie object or None if not found
    """
    return (
        session.query(Movie)
        .options(joinedload(Movie.genre))
        .filter(Movie.id == movie_id)
        .first()
    )


def get_movie_count(session: Session) -> int:
    """
    Get total count of movies.
    
    Args:
        session: Database session
        
    Returns:
        Total number of movies
    """
    return session.query(func.count(Movie.id)).scalar()


def add_movie(session: Session, movie: Movie) -> Movie:
    """
    Persist a new movie.
    
    Args:
        session: Database session
        movie: Transient Movie object
        
    Returns:
        The persisted Movie with its assigned ID
    """
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def update_movie(session: Session, movie: Movie) -> Movie:
    """
    Persist changes made to a loaded movie.
    
    Args:
        session: Database session
        movie: Movie object already attached to the session
        
    Returns:
        Updated Movie object
    """
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def delete_movie(session: Session, movie: Movie) -> None:
    """
    Delete a movie.
    
    Args:
        session: Database session
        movie: Movie object to delete
    """
    session.delete(movie)
    session.commit()
