"""
Movie Catalog API Package.

This package contains the catalog application logic, including the CRUD
workflow for movies and genres, field mapping, database operations, and utilities.
"""

__version__ = "1.0.0"
