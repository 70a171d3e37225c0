"""
Unit tests for database CRUD operations.

Tests for Genre and Movie CRUD operations using an in-memory
SQLite database for fast, isolated testing.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from movie_catalog.database.models import Base, Movie
from movie_catalog.database import crud


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a new database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def drama(session):
    return crud.create_genre(session, name="Drama")


def make_movie(genre_id, title="Heat", year=1995):
    return Movie(title=title, year=year, storyline="A heist.", rate=8.3, genre_id=genre_id)


class TestGenreCRUD:
    """Tests for Genre CRUD operations."""

    def test_create_genre(self, session):
        """Test creating a new genre assigns an ID."""
        genre = crud.create_genre(session, name="Comedy")

        assert genre.id is not None
        assert genre.name == "Comedy"

    def test_create_genre_invalid_name(self, session):
        """Test that empty or too-long names are rejected."""
        with pytest.raises(ValueError):
            crud.create_genre(session, name="")
        with pytest.raises(ValueError):
            crud.create_genre(session, name="x" * 101)

    def test_get_genres_ordered_by_name(self, session):
        """Test genres come back sorted by name."""
        for name in ("Thriller", "Action", "Horror"):
            crud.create_genre(session, name=name)

        names = [g.name for g in crud.get_genres(session)]
        assert names == ["Action", "Horror", "Thriller"]
        assert crud.get_genre_count(session) == 3

    def test_genre_exists(self, session, drama):
        """Test existence check for present and absent genres."""
        assert crud.genre_exists(session, drama.id) is True
        assert crud.genre_exists(session, 255) is False

    def test_update_genre(self, session, drama):
        """Test renaming a genre."""
        updated = crud.update_genre(session, drama, name="Melodrama")

        assert updated.name == "Melodrama"
        assert crud.get_genre(session, drama.id).name == "Melodrama"

    def test_delete_genre(self, session, drama):
        """Test deleting an unused genre."""
        genre_id = drama.id
        assert crud.genre_in_use(session, genre_id) is False

        crud.delete_genre(session, drama)

        assert crud.get_genre(session, genre_id) is None

    def test_genre_in_use(self, session, drama):
        """Test that a referenced genre is reported as in use."""
        crud.add_movie(session, make_movie(drama.id))

        assert crud.genre_in_use(session, drama.id) is True


class TestMovieCRUD:
    """Tests for Movie CRUD operations."""

    def test_add_movie(self, session, drama):
        """Test persisting a movie assigns an ID and keeps poster bytes."""
        movie = make_movie(drama.id)
        movie.poster = b"\xff\xd8\xffposter"

        saved = crud.add_movie(session, movie)

        assert saved.id is not None
        assert saved.poster == b"\xff\xd8\xffposter"
        assert saved.genre.name == "Drama"

    def test_add_movie_unknown_genre(self, session):
        """Test that the foreign key rejects an unknown genre."""
        with pytest.raises(IntegrityError):
            crud.add_movie(session, make_movie(42))
        session.rollback()

    def test_get_movie(self, session, drama):
        """Test retrieving a movie by ID."""
        movie = crud.add_movie(session, make_movie(drama.id))

        retrieved = crud.get_movie(session, movie.id)
        assert retrieved is not None
        assert retrieved.title == "Heat"

    def test_get_movie_not_found(self, session):
        """Test that getting a non-existent movie returns None."""
        assert crud.get_movie(session, 999) is None

    def test_get_movies_filtered_by_genre(self, session, drama):
        """Test listing all movies and movies of one genre."""
        comedy = crud.create_genre(session, name="Comedy")
        crud.add_movie(session, make_movie(drama.id, title="Heat"))
        crud.add_movie(session, make_movie(comedy.id, title="Airplane!"))
        crud.add_movie(session, make_movie(drama.id, title="Magnolia"))

        assert [m.title for m in crud.get_movies(session)] == ["Heat", "Airplane!", "Magnolia"]
        assert [m.title for m in crud.get_movies(session, genre_id=drama.id)] == ["Heat", "Magnolia"]
        assert crud.get_movies(session, genre_id=200) == []
        assert crud.get_movie_count(session) == 3

    def test_update_movie(self, session, drama):
        """Test persisting changes to a loaded movie."""
        movie = crud.add_movie(session, make_movie(drama.id))

        movie.title = "Heat (Director's Cut)"
        crud.update_movie(session, movie)

        session.expire_all()
        reloaded = crud.get_movie(session, movie.id)
        assert reloaded.title == "Heat (Director's Cut)"
        assert reloaded.year == 1995  # Unchanged

    def test_delete_movie(self, session, drama):
        """Test deleting a movie."""
        movie = crud.add_movie(session, make_movie(drama.id))
        movie_id = movie.id

        crud.delete_movie(session, movie)

        assert crud.get_movie(session, movie_id) is None
        assert crud.get_movie_count(session) == 0
