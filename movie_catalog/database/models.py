"""
SQLAlchemy ORM models for the movie catalog database.

This module defines the Genre and Movie tables with their relationship
and constraints.
"""

from typing import List, Optional
from sqlalchemy import (
    Integer, SmallInteger, String, Float, LargeBinary, ForeignKey,
    CheckConstraint, Index
)
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Genre(Base):
    """
    Genre table storing classification categories.
    
    Attributes:
        id: Primary key, byte-sized (0..255), auto-incremented
        name: Genre name (max 100 characters)
    """
    __tablename__ = 'genres'
    
    # SQLite only autoincrements INTEGER PRIMARY KEY columns
    id: Mapped[int] = mapped_column(
        SmallInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    
    # Relationships
    movies: Mapped[List["Movie"]] = relationship("Movie", back_populates="genre")
    
    __table_args__ = (
        CheckConstraint("id >= 0 AND id <= 255", name='check_genre_id_range'),
    )
    
    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name='{self.name}')>"


class Movie(Base):
    """
    Movie table storing catalog records.
    
    Attributes:
        id: Primary key, auto-incremented
        title: Movie title
        year: Release year
        storyline: Synopsis of the movie
        rate: Rating (optional)
        poster: Raw poster image bytes (optional)
        genre_id: Foreign key to genres table
    """
    __tablename__ = 'movies'
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[Optional[str]] = mapped_column(String(250), nullable=True)
    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    storyline: Mapped[Optional[str]] = mapped_column(String(2500), nullable=True)
    rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    poster: Mapped[Optional[bytes]] = mapped_column(LargeBinary, nullable=True)
    genre_id: Mapped[int] = mapped_column(
        SmallInteger,
        ForeignKey('genres.id'),
        nullable=False
    )
    
    # Relationships
    genre: Mapped["Genre"] = relationship("Genre", back_populates="movies")
    
    # Indexes for common queries
    __table_args__ = (
        Index('idx_movies_genre', 'genre_id'),
        Index('idx_movies_title', 'title'),
    )
    
    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', year={self.year}, genre_id={self.genre_id})>"
