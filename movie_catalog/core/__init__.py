"""
Catalog request handling.

Validation rules, the movie CRUD workflow, and entity/DTO mapping.
"""

from movie_catalog.core.exceptions import CatalogError, InvalidRequestError, NotFoundError
from movie_catalog.core.submission import MovieSubmission, PosterUpload
from movie_catalog.core.movies import MovieHandler, ALLOWED_EXTENSIONS, MAX_ALLOWED_POSTER_SIZE

__all__ = [
    "CatalogError",
    "InvalidRequestError",
    "NotFoundError",
    "MovieSubmission",
    "PosterUpload",
    "MovieHandler",
    "ALLOWED_EXTENSIONS",
    "MAX_ALLOWED_POSTER_SIZE",
]
