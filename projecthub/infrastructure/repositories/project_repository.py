"""
Project repository implementation using SQLAlchemy.
"""

import uuid
from typing import Optional, List

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.domain.models.project import Project
from projecthub.domain.models.value_objects import new_id, parse_id
from projecthub.domain.repositories.project_repository import ProjectRepository as ProjectRepositoryInterface
from projecthub.domain.models.base import EntityNotFoundError, DuplicateEntityError
from projecthub.infrastructure.db.models import ProjectModel
from projecthub.infrastructure.mappers.project_mapper import ProjectMapper


def _is_membership_conflict(error: IntegrityError) -> bool:
    """Check whether a failed commit hit the project_members unique constraint."""
    detail = str(error.orig)
    # PostgreSQL names the constraint, SQLite names the columns
    return "unique_project_member" in detail or "UNIQUE constraint failed: project_members." in detail


class SQLAlchemyProjectRepository(ProjectRepositoryInterface):
    """SQLAlchemy implementation of project repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = ProjectMapper()

    async def save(self, project: Project) -> Project:
        """Save a project entity."""
        if project.is_new:
            project.id = new_id()
            model = self.mapper.domain_to_model(project)
            self.session.add(model)
        else:
            model = await self.session.get(ProjectModel, uuid.UUID(project.id))
            if not model:
                raise EntityNotFoundError("Project", project.id)
            self.mapper.update_model(model, project)

        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if not _is_membership_conflict(e):
                raise
            # Lost a race against a concurrent add of the same member
            raise DuplicateEntityError(
                "ProjectMember", "project_id", project.id,
                message="User is already a member of this project",
            )
        return project

    async def find_by_id(self, project_id: str) -> Optional[Project]:
        """Get project by ID."""
        normalized = parse_id(project_id)
        if normalized is None:
            return None

        model = await self.session.get(ProjectModel, uuid.UUID(normalized))
        return self.mapper.model_to_domain(model) if model else None

    async def find_by_owner_id(self, owner_id: str) -> List[Project]:
        """Get projects by owner."""
        normalized = parse_id(owner_id)
        if normalized is None:
            return []

        result = await self.session.execute(
            select(ProjectModel)
            .where(ProjectModel.owner_id == uuid.UUID(normalized))
            .order_by(ProjectModel.created_at)
        )
        return [self.mapper.model_to_domain(model) for model in result.scalars()]

    async def find_by_owner_and_name(self, owner_id: str, name: str) -> Optional[Project]:
        """Get the owner's project with this name, ignoring case."""
        normalized = parse_id(owner_id)
        if normalized is None:
            return None

        result = await self.session.execute(
            select(ProjectModel)
            .where(
                ProjectModel.owner_id == uuid.UUID(normalized),
                func.lower(ProjectModel.name) == name.strip().lower(),
            )
            .limit(1)
        )
        model = result.scalars().first()
        return self.mapper.model_to_domain(model) if model else None

    async def delete_owned(self, project_id: str, owner_id: str) -> bool:
        """Delete a project if it belongs to owner_id."""
        project_uuid, owner_uuid = parse_id(project_id), parse_id(owner_id)
        if project_uuid is None or owner_uuid is None:
            return False

        result = await self.session.execute(
            select(ProjectModel).where(
                ProjectModel.id == uuid.UUID(project_uuid),
                ProjectModel.owner_id == uuid.UUID(owner_uuid),
            )
        )
        model = result.scalars().first()
        if not model:
            return False

        await self.session.delete(model)
        await self.session.commit()
        return True
