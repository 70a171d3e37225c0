"""
Database connection management using SQLAlchemy.

This module handles SQLite engine creation and per-request session
management for the catalog store.
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from movie_catalog.database.models import Base

logger = logging.getLogger(__name__)

# Default database path
DEFAULT_DB_PATH = "data/catalog.db"

# In-memory databases must share one connection across threads
IN_MEMORY = ":memory:"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Get SQLite database URL.
    
    Args:
        db_path: Path to SQLite database file, or ':memory:'
        
    Returns:
        SQLAlchemy database URL
    """
    if db_path == IN_MEMORY:
        return "sqlite://"
    
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    
    return f"sqlite:///{os.path.abspath(db_path)}"


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """
    Enable foreign key constraints for SQLite.
    
    Movie.genre_id must always reference an existing genre, and SQLite
    only checks that when the pragma is on.
    """
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Database connection manager.
    
    Owns the engine and session factory for one catalog database.
    """
    
    def __init__(self, db_path: str = DEFAULT_DB_PATH, echo: bool = False):
        """
        Initialize database manager.
        
        Args:
            db_path: Path to SQLite database file, or ':memory:'
            echo: If True, log all SQL statements
        """
        self.db_path = db_path
        self.database_url = get_database_url(db_path)
        
        self.engine = create_engine(
            self.database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )
        
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )
        logger.debug("Database engine created for %s", self.database_url)
    
    def create_tables(self):
        """Create all tables that don't exist yet."""
        Base.metadata.create_all(bind=self.engine)
    
    def drop_tables(self):
        """
        Drop all tables defined in the models.
        
        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)
    
    def reset_database(self):
        """Drop and recreate all tables."""
        self.drop_tables()
        self.create_tables()
    
    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.
        
        Commits on success and rolls back on failure.
        
        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


# Global database manager instance
_db_manager: Optional[DatabaseManager] = None


def get_db_manager(db_path: str = DEFAULT_DB_PATH, echo: bool = False) -> DatabaseManager:
    """
    Get or create the global database manager instance.
    
    Args:
        db_path: Path to SQLite database file
        echo: If True, log all SQL statements
        
    Returns:
        DatabaseManager instance
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(db_path=db_path, echo=echo)
    return _db_manager
