"""
Project access policy.
Decides who may read or modify a project.
"""

from typing import Optional

from projecthub.domain.models.base import EntityNotFoundError
from projecthub.domain.models.project import Project


class ProjectAccessPolicy:
    """
    Owner-only and owner-or-member checks for projects.

    Denials are reported as "not found" so that callers cannot tell a
    project they may not see from one that does not exist.
    """

    @staticmethod
    def can_read(project: Project, user_id: str) -> bool:
        return project.is_owner(user_id) or project.has_member(user_id)

    @staticmethod
    def can_modify(project: Project, user_id: str) -> bool:
        return project.is_owner(user_id)

    def require_read(self, project: Optional[Project], user_id: str, project_id=None) -> Project:
        """Return the project if user_id owns it or is a member."""
        if project is None or not self.can_read(project, user_id):
            raise EntityNotFoundError("Project", project_id)
        return project

    def require_owner(self, project: Optional[Project], user_id: str, project_id=None) -> Project:
        """Return the project if user_id owns it."""
        if project is None or not self.can_modify(project, user_id):
            raise EntityNotFoundError("Project", project_id)
        return project
