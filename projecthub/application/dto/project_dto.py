"""
Project DTOs for the application layer.
Data Transfer Objects for project-related operations.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import Field

from projecthub.domain.models.project import Project, ProjectStatus
from .base_dto import BaseDTO, RequestDTO, ResponseDTO
from .user_dto import UserSummaryDTO


SCALAR_UPDATE_FIELDS = ("name", "description", "start_date", "end_date", "status")


# Request DTOs
class CreateProjectRequestDTO(RequestDTO):
    """DTO for project creation requests."""

    name: str = Field(min_length=1, max_length=255, description="Project name")
    description: Optional[str] = Field(default=None, max_length=2000, description="Project description")
    start_date: Optional[datetime] = Field(default=None, description="Start date, defaults to now")
    end_date: Optional[datetime] = Field(default=None, description="End date")


class UpdateProjectRequestDTO(RequestDTO):
    """
    DTO for project update requests.

    Only the fields present in the body are applied. addMembers and
    removeMembers accept arbitrary values; entries that are not valid user
    ids are skipped.
    """

    name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[ProjectStatus] = None
    add_members: Optional[List[Any]] = None
    remove_members: Optional[List[Any]] = None

    def field_changes(self) -> Dict[str, Any]:
        """Scalar fields explicitly sent by the client."""
        return {
            name: getattr(self, name)
            for name in SCALAR_UPDATE_FIELDS
            if name in self.model_fields_set
        }


class AddProjectMemberRequestDTO(RequestDTO):
    """DTO for adding a single member."""

    user_id: str = Field(min_length=1, description="ID of the user to add")


# Response DTOs
class ProjectResponseDTO(ResponseDTO):
    """DTO for project responses with owner and members as ids."""

    name: str
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: ProjectStatus
    owner: str
    members: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponseDTO":
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            start_date=project.start_date,
            end_date=project.end_date,
            status=project.status,
            owner=project.owner_id,
            members=list(project.members),
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectDetailResponseDTO(ResponseDTO):
    """DTO for project responses with owner and members resolved to users."""

    name: str
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: ProjectStatus
    owner: Optional[UserSummaryDTO] = None
    members: List[UserSummaryDTO] = Field(default_factory=list)

    @classmethod
    def from_details(cls, details) -> "ProjectDetailResponseDTO":
        project = details.project
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            start_date=project.start_date,
            end_date=project.end_date,
            status=project.status,
            owner=UserSummaryDTO.from_domain(details.owner) if details.owner else None,
            members=[UserSummaryDTO.from_domain(user) for user in details.members],
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectUpdateResponseDTO(BaseDTO):
    """DTO returned after a project update."""

    message: str
    project: ProjectDetailResponseDTO
