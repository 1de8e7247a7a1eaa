"""
Project use cases for the application layer.
Implements project CRUD and membership management on behalf of the
authenticated user.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from projecthub.application.use_cases.base_use_case import AuthorizedUseCase
from projecthub.application.dto.project_dto import (
    CreateProjectRequestDTO,
    UpdateProjectRequestDTO,
    AddProjectMemberRequestDTO,
)
from projecthub.domain.models.base import DuplicateEntityError, EntityNotFoundError
from projecthub.domain.models.project import Project
from projecthub.domain.models.user import User
from projecthub.domain.models.value_objects import parse_id
from projecthub.domain.repositories.project_repository import ProjectRepository
from projecthub.domain.repositories.user_repository import UserRepositoryInterface
from projecthub.domain.services.project_access import ProjectAccessPolicy


logger = logging.getLogger(__name__)


@dataclass
class ProjectDetails:
    """A project with its owner and members resolved to users."""

    project: Project
    owner: Optional[User] = None
    members: List[User] = field(default_factory=list)


@dataclass
class UpdateProjectCommand:
    project_id: str
    data: UpdateProjectRequestDTO


@dataclass
class AddProjectMemberCommand:
    project_id: str
    data: AddProjectMemberRequestDTO


async def load_project_details(project: Project, user_repository: UserRepositoryInterface) -> ProjectDetails:
    """
    Resolve owner and member ids to users.
    Ids that no longer match a user are dropped.
    """
    users = await user_repository.find_by_ids([project.owner_id, *project.members])
    by_id = {user.id: user for user in users}
    return ProjectDetails(
        project=project,
        owner=by_id.get(project.owner_id),
        members=[by_id[member_id] for member_id in project.members if member_id in by_id],
    )


class CreateProjectUseCase(AuthorizedUseCase[CreateProjectRequestDTO, Project]):
    """Use case for creating a new project owned by the current user."""

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_business_logic(self, request: CreateProjectRequestDTO) -> Project:
        # Validates the name and date range before anything is looked up
        project = Project.create(
            owner_id=self.current_user_id,
            name=request.name,
            description=request.description,
            start_date=request.start_date,
            end_date=request.end_date,
        )

        existing = await self.project_repository.find_by_owner_and_name(project.owner_id, project.name)
        if existing:
            raise DuplicateEntityError(
                "Project", "name", project.name,
                message="A project with this name already exists",
            )

        saved = await self.project_repository.save(project)
        logger.info(f"Project {saved.id} created by user {self.current_user_id}")
        return saved


class ListProjectsUseCase(AuthorizedUseCase[None, List[Project]]):
    """
    Use case for listing the current user's projects.
    Only owned projects are returned; shared projects are reachable by id.
    """

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_business_logic(self, request: None) -> List[Project]:
        return await self.project_repository.find_by_owner_id(self.current_user_id)


class GetProjectUseCase(AuthorizedUseCase[str, ProjectDetails]):
    """Use case for reading a project as its owner or a member."""

    def __init__(self, project_repository: ProjectRepository, user_repository: UserRepositoryInterface):
        super().__init__()
        self.project_repository = project_repository
        self.user_repository = user_repository
        self.access_policy = ProjectAccessPolicy()

    async def _execute_business_logic(self, request: str) -> ProjectDetails:
        project_id = parse_id(request)
        project = await self.project_repository.find_by_id(project_id) if project_id else None
        project = self.access_policy.require_read(project, self.current_user_id, request)
        return await load_project_details(project, self.user_repository)


class UpdateProjectUseCase(AuthorizedUseCase[UpdateProjectCommand, ProjectDetails]):
    """Use case for updating project fields and reconciling members."""

    def __init__(self, project_repository: ProjectRepository, user_repository: UserRepositoryInterface):
        super().__init__()
        self.project_repository = project_repository
        self.user_repository = user_repository
        self.access_policy = ProjectAccessPolicy()

    async def _execute_business_logic(self, request: UpdateProjectCommand) -> ProjectDetails:
        project_id = parse_id(request.project_id)
        project = await self.project_repository.find_by_id(project_id) if project_id else None
        project = self.access_policy.require_owner(project, self.current_user_id, request.project_id)

        changes = request.data.field_changes()
        if changes:
            project.update_info(**changes)
            if "name" in changes:
                await self._check_name_available(project)

        if request.data.add_members:
            await self._add_members(project, request.data.add_members)

        if request.data.remove_members:
            removed = project.remove_members(request.data.remove_members)
            if removed:
                logger.info(f"Removed {len(removed)} member(s) from project {project.id}")

        saved = await self.project_repository.save(project)
        logger.info(f"Project {saved.id} updated by user {self.current_user_id}")
        return await load_project_details(saved, self.user_repository)

    async def _check_name_available(self, project: Project) -> None:
        existing = await self.project_repository.find_by_owner_and_name(project.owner_id, project.name)
        if existing and existing.id != project.id:
            raise DuplicateEntityError(
                "Project", "name", project.name,
                message="A project with this name already exists",
            )

    async def _add_members(self, project: Project, candidates: List[Any]) -> None:
        for candidate in candidates:
            member_id = parse_id(candidate)
            if member_id is None or project.has_member(member_id):
                logger.warning(f"Skipping invalid or existing member id {candidate!r} for project {project.id}")
                continue
            if await self.user_repository.find_by_id(member_id) is None:
                logger.warning(f"Skipping unknown user {member_id} for project {project.id}")
                continue
            project.add_member(member_id)


class AddProjectMemberUseCase(AuthorizedUseCase[AddProjectMemberCommand, Project]):
    """Use case for adding a single member to a project."""

    def __init__(self, project_repository: ProjectRepository, user_repository: UserRepositoryInterface):
        super().__init__()
        self.project_repository = project_repository
        self.user_repository = user_repository
        self.access_policy = ProjectAccessPolicy()

    async def _execute_business_logic(self, request: AddProjectMemberCommand) -> Project:
        project_id = parse_id(request.project_id)
        project = await self.project_repository.find_by_id(project_id) if project_id else None
        project = self.access_policy.require_owner(project, self.current_user_id, request.project_id)

        user_id = parse_id(request.data.user_id)
        user = await self.user_repository.find_by_id(user_id) if user_id else None
        if user is None:
            raise EntityNotFoundError("User", request.data.user_id, message="User to add not found")

        # Raises DuplicateEntityError when already a member
        project.add_member(user.id)
        saved = await self.project_repository.save(project)
        logger.info(f"User {user.id} added to project {saved.id}")
        return saved


class DeleteProjectUseCase(AuthorizedUseCase[str, None]):
    """Use case for deleting a project owned by the current user."""

    def __init__(self, project_repository: ProjectRepository):
        super().__init__()
        self.project_repository = project_repository

    async def _execute_business_logic(self, request: str) -> None:
        project_id = parse_id(request)
        if project_id is None or not await self.project_repository.delete_owned(project_id, self.current_user_id):
            raise EntityNotFoundError("Project", request)
        logger.info(f"Project {project_id} deleted by user {self.current_user_id}")
