"""
SQLAlchemy database models (schemas).
"""
from app.database.schemas.activity import ActivityDBModel

__all__ = [
    "ActivityDBModel",
]
