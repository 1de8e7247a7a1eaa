"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .project_repository import ProjectRepository
from .user_repository import UserRepositoryInterface

__all__ = [
    "ProjectRepository",
    "UserRepositoryInterface",
]
