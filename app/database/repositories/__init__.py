"""
Database repositories for data access layer.

Provides clean abstraction over database operations following repository pattern.
"""
from app.database.repositories.activity import ActivityRepository
from app.database.repositories.base import BaseRepository

__all__ = [
    "ActivityRepository",
    "BaseRepository",
]
