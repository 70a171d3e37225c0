"""
Movie request handling: validation and the CRUD workflow.

MovieHandler works on one database session per request. Validation
failures raise InvalidRequestError before anything is written; unknown
movie IDs raise NotFoundError.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from movie_catalog.api.models.movie import MovieDetails, MovieResponse
from movie_catalog.core.exceptions import InvalidRequestError, NotFoundError
from movie_catalog.core.mapping import movie_to_details, movie_to_response, submission_to_movie
from movie_catalog.core.submission import MovieSubmission, PosterUpload
from movie_catalog.database import crud
from movie_catalog.database.models import Movie

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".jpg", ".png")
MAX_ALLOWED_POSTER_SIZE = 1048576  # 1 MB

POSTER_MEDIA_TYPES = {
    b"\x89PNG\r\n\x1a\n": "image/png",
    b"\xff\xd8\xff": "image/jpeg",
}


def validate_poster(poster: PosterUpload) -> None:
    """
    Check a poster's extension and size.
    
    Raises:
        InvalidRequestError: If the extension is not allowed or the file is too big
    """
    if poster.extension not in ALLOWED_EXTENSIONS:
        raise InvalidRequestError("Only .png and .jpg images are allowed.")
    
    if poster.length > MAX_ALLOWED_POSTER_SIZE:
        raise InvalidRequestError("Max allowed size for poster is 1 MB.")


def poster_media_type(poster: bytes) -> str:
    """Guess the image content type from the poster's magic bytes."""
    for signature, media_type in POSTER_MEDIA_TYPES.items():
        if poster.startswith(signature):
            return media_type
    return "application/octet-stream"


class MovieHandler:
    """
    CRUD workflow for movies on top of the storage layer.
    
    Attributes:
        session: Database session for the current request
    """
    
    def __init__(self, session: Session):
        self.session = session
    
    def list_movies(self) -> List[MovieDetails]:
        """Return every movie as details, ordered by ID."""
        return [movie_to_details(m) for m in crud.get_movies(self.session)]
    
    def get_movie(self, movie_id: int) -> MovieDetails:
        """
        Return one movie's details.
        
        Raises:
            NotFoundError: If no movie has this ID
        """
        return movie_to_details(self._get_or_404(movie_id))
    
    def list_movies_by_genre(self, genre_id: Optional[int]) -> List[MovieDetails]:
        """
        Return the movies of one genre.
        
        Raises:
            InvalidRequestError: If genre_id is missing
        """
        if genre_id is None:
            raise InvalidRequestError("GenreId is required.")
        
        return [movie_to_details(m) for m in crud.get_movies(self.session, genre_id=genre_id)]
    
    def create_movie(self, submission: MovieSubmission) -> MovieResponse:
        """
        Validate a submission and store it as a new movie.
        
        Checks run in order and stop at the first failure: poster present,
        poster extension, poster size, genre present, genre exists.
        
        Returns:
            The persisted movie, poster included
            
        Raises:
            InvalidRequestError: On the first failed check
        """
        poster = submission.poster
        if poster is None:
            raise InvalidRequestError("Poster is required.")
        
        validate_poster(poster)
        
        if submission.genre_id is None:
            raise InvalidRequestError("GenreId is required.")
        
        self._check_genre(submission.genre_id)
        
        movie = submission_to_movie(submission)
        movie.poster = poster.read()
        
        crud.add_movie(self.session, movie)
        logger.info("Created movie %d (%r)", movie.id, movie.title)
        return movie_to_response(movie)
    
    def update_movie(self, movie_id: int, submission: MovieSubmission) -> MovieResponse:
        """
        Overwrite the fields present in the submission.
        
        Empty title or storyline strings count as absent. All checks run
        before any field changes, so a rejected update stores nothing.
        
        Raises:
            NotFoundError: If no movie has this ID
            InvalidRequestError: On an unknown genre or an invalid poster
        """
        movie = self._get_or_404(movie_id)
        
        if submission.genre_id is not None:
            self._check_genre(submission.genre_id)
        
        if submission.poster is not None:
            validate_poster(submission.poster)
        
        if submission.genre_id is not None:
            movie.genre_id = submission.genre_id
        
        if submission.title:
            movie.title = submission.title
        
        if submission.year is not None:
            movie.year = submission.year
        
        if submission.storyline:
            movie.storyline = submission.storyline
        
        if submission.rate is not None:
            movie.rate = submission.rate
        
        if submission.poster is not None:
            movie.poster = submission.poster.read()
        
        crud.update_movie(self.session, movie)
        logger.info("Updated movie %d", movie.id)
        return movie_to_response(movie)
    
    def delete_movie(self, movie_id: int) -> MovieResponse:
        """
        Delete a movie.
        
        Returns:
            The movie as it was before deletion
            
        Raises:
            NotFoundError: If no movie has this ID
        """
        movie = self._get_or_404(movie_id)
        deleted = movie_to_response(movie)
        
        crud.delete_movie(self.session, movie)
        logger.info("Deleted movie %d", movie_id)
        return deleted
    
    def get_poster(self, movie_id: int) -> Tuple[bytes, str]:
        """
        Return a movie's poster bytes and content type.
        
        Raises:
            NotFoundError: If the movie does not exist or has no poster
        """
        movie = self._get_or_404(movie_id)
        if not movie.poster:
            raise NotFoundError(f"Movie {movie_id} has no poster")
        return movie.poster, poster_media_type(movie.poster)
    
    def _get_or_404(self, movie_id: int) -> Movie:
        movie = crud.get_movie(self.session, movie_id)
        if movie is None:
            raise NotFoundError(f"No movie was found with ID: {movie_id}")
        return movie
    
    def _check_genre(self, genre_id: int) -> None:
        if not crud.genre_exists(self.session, genre_id):
            raise InvalidRequestError("Invalid genre.")
