"""
Database initialization and schema creation.

This module provides functions to create the catalog schema and seed the
default genre list.
"""

import logging
from typing import Iterable

from sqlalchemy import inspect

from movie_catalog.database.connection import DatabaseManager, get_db_manager, DEFAULT_DB_PATH
from movie_catalog.database import crud

logger = logging.getLogger(__name__)

DEFAULT_GENRES = (
    "Action",
    "Animation",
    "Comedy",
    "Documentary",
    "Drama",
    "Horror",
    "Romance",
    "Science Fiction",
    "Thriller",
)


def init_database(db_path: str = DEFAULT_DB_PATH, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.
    
    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones
        
    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(db_path=db_path)
    
    if reset:
        logger.info("Resetting database (dropping all tables)...")
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready at %s", db_manager.database_url)
    
    return db_manager


def seed_genres(db_manager: DatabaseManager, names: Iterable[str] = DEFAULT_GENRES) -> int:
    """
    Insert genres that are not already present.
    
    Returns:
        Number of genres created
    """
    created = 0
    with db_manager.session_scope() as session:
        existing = {genre.name for genre in crud.get_genres(session)}
        for name in names:
            if name not in existing:
                crud.create_genre(session, name=name)
                created += 1
    logger.info("Seeded %d genres", created)
    return created


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.
    
    Args:
        db_manager: DatabaseManager instance
        
    Returns:
        True if all tables exist, False otherwise
    """
    inspector = inspect(db_manager.engine)
    existing_tables = set(inspector.get_table_names())
    
    expected_tables = {'genres', 'movies'}
    
    missing_tables = expected_tables - existing_tables
    
    if missing_tables:
        logger.error("Missing tables: %s", missing_tables)
        return False
    
    logger.info("All tables exist: %s", existing_tables)
    return True
