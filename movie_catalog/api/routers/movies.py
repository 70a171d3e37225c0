"""
Movie API endpoints.

Request bodies are multipart forms so the poster can travel with the
other fields. Field names follow the catalog front-end: title, year,
storyline, rate, genreId, poster.
"""

from fastapi import APIRouter, Depends, File, Form, Path, Response, UploadFile

from movie_catalog.api.dependencies import get_movie_handler
from movie_catalog.api.models.movie import MovieDetails, MovieResponse
from movie_catalog.core.movies import MovieHandler
from movie_catalog.core.submission import MovieSubmission, PosterUpload

router = APIRouter(prefix="/api/movies", tags=["movies"])


def movie_submission(
    title: str | None = Form(None),
    year: int | None = Form(None),
    storyline: str | None = Form(None),
    rate: float | None = Form(None),
    genre_id: int | None = Form(None, alias="genreId", ge=0, le=255),
    poster: UploadFile | None = File(None),
) -> MovieSubmission:
    """Collect the multipart form into a MovieSubmission."""
    upload = None
    if poster is not None and poster.filename:
        upload = PosterUpload(filename=poster.filename, stream=poster.file, size=poster.size)
    return MovieSubmission(
        title=title,
        year=year,
        storyline=storyline,
        rate=rate,
        genre_id=genre_id,
        poster=upload,
    )


@router.get("", response_model=list[MovieDetails])
def list_movies(handler: MovieHandler = Depends(get_movie_handler)):
    """List all movies."""
    return handler.list_movies()


@router.get("/ByGenre", response_model=list[MovieDetails])
def list_movies_without_genre(handler: MovieHandler = Depends(get_movie_handler)):
    """Reject a genre listing with no genre ID."""
    return handler.list_movies_by_genre(None)


@router.get("/ByGenre/{genre_id}", response_model=list[MovieDetails])
def list_movies_by_genre(
    genre_id: int = Path(..., ge=0, le=255),
    handler: MovieHandler = Depends(get_movie_handler),
):
    """List the movies of one genre."""
    return handler.list_movies_by_genre(genre_id)


@router.get("/{movie_id}", response_model=MovieDetails)
def get_movie(movie_id: int, handler: MovieHandler = Depends(get_movie_handler)):
    """Get movie details by ID."""
    return handler.get_movie(movie_id)


@router.get("/{movie_id}/poster")
def get_movie_poster(movie_id: int, handler: MovieHandler = Depends(get_movie_handler)):
    """Get a movie's poster image."""
    content, media_type = handler.get_poster(movie_id)
    return Response(content=content, media_type=media_type)


@router.post("", response_model=MovieResponse)
def create_movie(
    submission: MovieSubmission = Depends(movie_submission),
    handler: MovieHandler = Depends(get_movie_handler),
):
    """Create a movie from a multipart form with a poster."""
    return handler.create_movie(submission)


@router.put("/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_id: int,
    submission: MovieSubmission = Depends(movie_submission),
    handler: MovieHandler = Depends(get_movie_handler),
):
    """Update the supplied fields of a movie."""
    return handler.update_movie(movie_id, submission)


@router.delete("/{movie_id}", response_model=MovieResponse)
def delete_movie(movie_id: int, handler: MovieHandler = Depends(get_movie_handler)):
    """Delete a movie and return it."""
    return handler.delete_movie(movie_id)
