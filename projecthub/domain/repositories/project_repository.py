"""
Project repository interface.
Defines the contract for project data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from projecthub.domain.models.project import Project


class ProjectRepository(ABC):
    """
    Repository interface for Project aggregate.
    Defines all operations needed for project data persistence.
    """

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """
        Save a project entity together with its ordered member list.
        Assigns an id to new projects.
        """
        pass

    @abstractmethod
    async def find_by_id(self, project_id: str) -> Optional[Project]:
        """
        Find a project by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_by_owner_id(self, owner_id: str) -> List[Project]:
        """
        Find all projects owned by a specific user.
        """
        pass

    @abstractmethod
    async def find_by_owner_and_name(self, owner_id: str, name: str) -> Optional[Project]:
        """
        Find a project of this owner whose name matches case-insensitively.
        """
        pass

    @abstractmethod
    async def delete_owned(self, project_id: str, owner_id: str) -> bool:
        """
        Delete a project only if it belongs to owner_id.
        Returns True if a project was deleted.
        """
        pass
