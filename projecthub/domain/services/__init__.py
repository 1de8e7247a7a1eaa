"""
Domain services for the project management system.
"""

from .auth_service import AuthService
from .project_access import ProjectAccessPolicy

__all__ = [
    "AuthService",
    "ProjectAccessPolicy",
]
