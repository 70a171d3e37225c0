"""
Conversions between movie entities and their wire shapes.

Each function copies named fields one by one. The poster is never copied
from a submission; the handler reads the upload and sets it.
"""

import base64

from movie_catalog.api.models.movie import MovieDetails, MovieResponse
from movie_catalog.core.submission import MovieSubmission
from movie_catalog.database.models import Movie


def movie_to_details(movie: Movie) -> MovieDetails:
    """Project a stored movie to its read model."""
    return MovieDetails(
        id=movie.id,
        title=movie.title,
        year=movie.year,
        storyline=movie.storyline,
        rate=movie.rate,
        genre_id=movie.genre_id,
        genre_name=movie.genre.name if movie.genre is not None else None,
    )


def movie_to_response(movie: Movie) -> MovieResponse:
    """Copy every stored field. The poster is base64-encoded for JSON."""
    return MovieResponse(
        id=movie.id,
        title=movie.title,
        year=movie.year,
        storyline=movie.storyline,
        rate=movie.rate,
        genre_id=movie.genre_id,
        poster=base64.b64encode(movie.poster).decode("ascii") if movie.poster is not None else None,
    )


def submission_to_movie(submission: MovieSubmission) -> Movie:
    """Build a new, unsaved movie from a submission, leaving the poster unset."""
    return Movie(
        title=submission.title,
        year=submission.year,
        storyline=submission.storyline,
        rate=submission.rate,
        genre_id=submission.genre_id,
    )
