"""
Pydantic schemas for API request/response validation.
"""

from movie_catalog.api.models.movie import MovieDetails, MovieResponse
from movie_catalog.api.models.genre import GenreCreate, GenreResponse

__all__ = [
    "MovieDetails",
    "MovieResponse",
    "GenreCreate",
    "GenreResponse",
]
