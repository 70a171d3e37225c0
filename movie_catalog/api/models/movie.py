"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel


class MovieDetails(BaseModel):
    """Read model for a movie. Poster bytes are served separately."""

    id: int
    title: str | None
    year: int | None
    storyline: str | None
    rate: float | None
    genre_id: int
    genre_name: str | None = None

    class Config:
        from_attributes = True


class MovieResponse(BaseModel):
    """Full movie entity returned by create, update and delete."""

    id: int
    title: str | None
    year: int | None
    storyline: str | None
    rate: float | None
    genre_id: int
    poster: str | None = None  # base64-encoded image bytes
