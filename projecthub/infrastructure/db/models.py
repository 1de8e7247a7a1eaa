"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

import uuid

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Uuid,
    ForeignKey, Enum as SQLEnum, Index, UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from projecthub.domain.models.project import ProjectStatus
from .database import Base


class UserModel(Base):
    """User table"""
    __tablename__ = 'users'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String(50), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)

    # Timestamps
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())


class ProjectModel(Base):
    """Project table"""
    __tablename__ = 'projects'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # Weak reference: users may be deleted without touching their projects
    owner_id = Column(Uuid(as_uuid=True), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(
        SQLEnum(
            ProjectStatus,
            name='project_status',
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=ProjectStatus.NEW,
    )

    # Dates
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime)

    # Timestamps
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    # Relationships
    members = relationship(
        "ProjectMemberModel",
        order_by="ProjectMemberModel.id",
        cascade="all, delete-orphan",
        lazy="selectin",
        back_populates="project",
    )

    # Indexes
    __table_args__ = (
        Index('idx_projects_owner_name', 'owner_id', 'name'),
    )


class ProjectMemberModel(Base):
    """Project membership table. Row order is member order."""
    __tablename__ = 'project_members'

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Uuid(as_uuid=True), ForeignKey('projects.id', ondelete='CASCADE'), nullable=False)
    user_id = Column(Uuid(as_uuid=True), nullable=False)
    joined_at = Column(DateTime, nullable=False, server_default=func.now())

    project = relationship("ProjectModel", back_populates="members")

    __table_args__ = (
        UniqueConstraint('project_id', 'user_id', name='unique_project_member'),
        Index('idx_project_members_user', 'user_id'),
    )
