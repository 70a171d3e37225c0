#!/usr/bin/env python
"""
Database initialization script for the movie catalog.

Creates the schema and seeds the default genre list.

Usage:
    # Create tables and seed genres
    python scripts/init_database.py

    # Drop everything first
    python scripts/init_database.py --reset

    # Schema only
    python scripts/init_database.py --no-genres
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_catalog.database import init_database, seed_genres, verify_schema
from movie_catalog.utils.logging_config import setup_logging


def main():
    """Main entry point for database initialization."""

    parser = argparse.ArgumentParser(description="Initialize the movie catalog database")
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--no-genres',
        action='store_true',
        help='Do not seed the default genres'
    )
    parser.add_argument(
        '--db-path',
        type=str,
        default='data/catalog.db',
        help='Path to SQLite database file (default: data/catalog.db)'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Only log warnings and errors'
    )

    args = parser.parse_args()
    setup_logging(level="WARNING" if args.quiet else "INFO")

    db_manager = init_database(db_path=args.db_path, reset=args.reset)

    if not args.no_genres:
        seed_genres(db_manager)

    sys.exit(0 if verify_schema(db_manager) else 1)


if __name__ == "__main__":
    main()
