"""
Database Initialization Package
Provides CLI commands and utilities for initializing the database with sample flights
"""

from .init_db import init_database, clear_database, reset_database
from .sample_data import SAMPLE_FLIGHTS

__all__ = [
    'init_database',
    'clear_database',
    'reset_database',
    'SAMPLE_FLIGHTS',
]
