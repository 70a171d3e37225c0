"""
Database module for the movie catalog.

This module provides database models, connection management, and CRUD operations
for the SQLite database using SQLAlchemy ORM.
"""

from movie_catalog.database.models import Base, Genre, Movie
from movie_catalog.database.connection import DatabaseManager, get_db_manager
from movie_catalog.database.init_db import init_database, seed_genres, verify_schema
from movie_catalog.database import crud

__all__ = [
    # Models
    'Base',
    'Genre',
    'Movie',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'seed_genres',
    'verify_schema',
    # CRUD module
    'crud',
]
