"""
Shared utilities package.

This package contains the logging configuration used across the application.
"""

from movie_catalog.utils.logging_config import setup_logging

__all__ = ['setup_logging']
