"""
Database infrastructure for ProjectHub.
"""

from .database import Base, Database, get_db_session
from .models import UserModel, ProjectModel, ProjectMemberModel

__all__ = [
    "Base",
    "Database",
    "get_db_session",
    "UserModel",
    "ProjectModel",
    "ProjectMemberModel",
]
