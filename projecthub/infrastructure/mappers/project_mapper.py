"""
Project mapper for converting between domain entities and database models.
"""

import uuid

from projecthub.domain.models.project import Project, ProjectStatus
from projecthub.infrastructure.db.models import ProjectModel, ProjectMemberModel


class ProjectMapper:
    """Maps between Project domain entity and ProjectModel database model."""

    def domain_to_model(self, project: Project) -> ProjectModel:
        """Convert Project domain entity to a new ProjectModel."""
        model = ProjectModel(
            id=uuid.UUID(project.id) if project.id else uuid.uuid4(),
            owner_id=uuid.UUID(project.owner_id),
            created_at=project.created_at,
            members=[],
        )
        self.update_model(model, project)
        return model

    def update_model(self, model: ProjectModel, project: Project) -> None:
        """
        Copy fields from the entity onto a model.
        Existing membership rows are reused so member order is kept.
        """
        model.name = project.name
        model.description = project.description
        model.status = project.status
        model.start_date = project.start_date
        model.end_date = project.end_date
        model.updated_at = project.updated_at

        existing = {str(row.user_id): row for row in model.members}
        model.members = [
            existing.get(member_id) or ProjectMemberModel(user_id=uuid.UUID(member_id))
            for member_id in project.members
        ]

    def model_to_domain(self, model: ProjectModel) -> Project:
        """Convert ProjectModel to Project domain entity."""
        return Project(
            id=str(model.id),
            owner_id=str(model.owner_id),
            name=model.name,
            description=model.description,
            start_date=model.start_date,
            end_date=model.end_date,
            status=ProjectStatus(model.status),
            members=[str(row.user_id) for row in model.members],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
