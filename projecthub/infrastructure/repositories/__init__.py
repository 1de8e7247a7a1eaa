"""
SQLAlchemy repository implementations.
"""

from .user_repository import SQLAlchemyUserRepository
from .project_repository import SQLAlchemyProjectRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyProjectRepository",
]
