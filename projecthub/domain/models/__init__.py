"""
Domain models for the project management system.
This module exports all domain entities and value objects.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    AuthenticationError,
    InvalidTokenError,
    ConfigurationError,
)

# Value Objects
from .value_objects import (
    Email,
    DateRange,
    new_id,
    parse_id,
)

# Domain entities
from .user import User
from .project import Project, ProjectStatus

__all__ = [
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "AuthenticationError",
    "InvalidTokenError",
    "ConfigurationError",
    "Email",
    "DateRange",
    "new_id",
    "parse_id",
    "User",
    "Project",
    "ProjectStatus",
]
