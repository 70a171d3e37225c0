"""
API route handlers.
"""

from movie_catalog.api.routers import movies, genres, system

__all__ = ["movies", "genres", "system"]
