"""
Project management router.
Handles CRUD operations for projects and project member management.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, HTTPException, status

from projecthub.infrastructure.auth.dependencies import get_current_user_id
from projecthub.application.use_cases.project_use_cases import (
    CreateProjectUseCase,
    ListProjectsUseCase,
    GetProjectUseCase,
    UpdateProjectUseCase,
    UpdateProjectCommand,
    AddProjectMemberUseCase,
    AddProjectMemberCommand,
    DeleteProjectUseCase,
)
from projecthub.application.dto.base_dto import MessageResponseDTO
from projecthub.application.dto.project_dto import (
    CreateProjectRequestDTO,
    UpdateProjectRequestDTO,
    AddProjectMemberRequestDTO,
    ProjectResponseDTO,
    ProjectDetailResponseDTO,
    ProjectUpdateResponseDTO,
)
from projecthub.infrastructure.db.database import get_db_session
from projecthub.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from projecthub.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from projecthub.domain.models.base import DuplicateEntityError, EntityNotFoundError, ValidationError


router = APIRouter()


def get_project_repository(session=Depends(get_db_session)):
    """Dependency to get project repository."""
    return SQLAlchemyProjectRepository(session)


def get_user_repository(session=Depends(get_db_session)):
    """Dependency to get user repository."""
    return SQLAlchemyUserRepository(session)


CurrentUser = Annotated[str, Depends(get_current_user_id)]
ProjectRepository = Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
UserRepository = Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)]

PROJECT_NOT_FOUND = "Project not found or access denied"


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponseDTO)
async def create_project(request: CreateProjectRequestDTO, user_id: CurrentUser, repository: ProjectRepository):
    """
    Create a new project owned by the authenticated user.

    - **name**: Project name, unique per owner ignoring case
    - **description**: Project description
    - **startDate**: Start date, defaults to now
    - **endDate**: End date, not before startDate
    """
    try:
        use_case = CreateProjectUseCase(repository).set_current_user(user_id)
        project = await use_case.execute(request)
        return ProjectResponseDTO.from_domain(project)

    except (ValidationError, DuplicateEntityError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.get("", response_model=List[ProjectResponseDTO])
async def list_projects(user_id: CurrentUser, repository: ProjectRepository):
    """
    List projects owned by the authenticated user.
    """
    projects = await ListProjectsUseCase(repository).set_current_user(user_id).execute()
    return [ProjectResponseDTO.from_domain(project) for project in projects]


@router.get("/{project_id}", response_model=ProjectDetailResponseDTO)
async def get_project(
    project_id: str,
    user_id: CurrentUser,
    repository: ProjectRepository,
    user_repository: UserRepository
):
    """
    Get a project the authenticated user owns or is a member of.
    Owner and members are returned as {id, username, email}.
    """
    try:
        use_case = GetProjectUseCase(repository, user_repository).set_current_user(user_id)
        details = await use_case.execute(project_id)
        return ProjectDetailResponseDTO.from_details(details)

    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROJECT_NOT_FOUND)


@router.put("/{project_id}", response_model=ProjectUpdateResponseDTO)
async def update_project(
    project_id: str,
    request: UpdateProjectRequestDTO,
    user_id: CurrentUser,
    repository: ProjectRepository,
    user_repository: UserRepository
):
    """
    Update an existing project.

    - **name**, **description**, **startDate**, **endDate**, **status**: new values
    - **addMembers**: user ids to add; unknown or invalid ids are skipped
    - **removeMembers**: user ids to remove, applied after additions
    """
    try:
        use_case = UpdateProjectUseCase(repository, user_repository).set_current_user(user_id)
        details = await use_case.execute(UpdateProjectCommand(project_id=project_id, data=request))
        return ProjectUpdateResponseDTO(
            message="Project updated successfully",
            project=ProjectDetailResponseDTO.from_details(details),
        )

    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROJECT_NOT_FOUND)
    except (ValidationError, DuplicateEntityError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.delete("/{project_id}", response_model=MessageResponseDTO)
async def delete_project(project_id: str, user_id: CurrentUser, repository: ProjectRepository):
    """
    Delete a project owned by the authenticated user.
    """
    try:
        await DeleteProjectUseCase(repository).set_current_user(user_id).execute(project_id)
        return MessageResponseDTO(message="Project deleted")

    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")


@router.post("/{project_id}/members", response_model=MessageResponseDTO)
async def add_project_member(
    project_id: str,
    request: AddProjectMemberRequestDTO,
    user_id: CurrentUser,
    repository: ProjectRepository,
    user_repository: UserRepository
):
    """
    Add a single member to a project owned by the authenticated user.

    - **userId**: ID of an existing user
    """
    try:
        use_case = AddProjectMemberUseCase(repository, user_repository).set_current_user(user_id)
        await use_case.execute(AddProjectMemberCommand(project_id=project_id, data=request))
        return MessageResponseDTO(message="Member added to project")

    except EntityNotFoundError as e:
        detail = PROJECT_NOT_FOUND if e.entity_type == "Project" else e.message
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    except (ValidationError, DuplicateEntityError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
