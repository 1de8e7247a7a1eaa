"""
Project domain model.
Represents a project owned by one user and shared with a set of members.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Iterable
from enum import Enum

from projecthub.domain.models.base import (
    BaseEntity,
    ValidationError,
    DuplicateEntityError,
)
from projecthub.domain.models.value_objects import DateRange, parse_id, to_utc_naive


NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 2000


class ProjectStatus(str, Enum):
    """Project lifecycle flag. DELETE is a soft marker only."""
    NEW = "New"
    DELETE = "Delete"


@dataclass
class Project(BaseEntity):
    """
    Project aggregate root.

    The owner is the only user allowed to change the project or its member
    list. Owner and members are weak references to users by id; the owner is
    not implicitly a member.
    """

    owner_id: str = ""
    name: str = ""
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: ProjectStatus = ProjectStatus.NEW
    members: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Initialize project after creation."""
        super().__post_init__()

        if isinstance(self.status, str) and not isinstance(self.status, ProjectStatus):
            self.status = self._parse_status(self.status)

        self.name = (self.name or "").strip()
        if self.description is not None:
            self.description = self.description.strip()

        if self.start_date is None:
            self.start_date = datetime.utcnow()
        self.start_date = to_utc_naive(self.start_date)
        self.end_date = to_utc_naive(self.end_date)

        self.validate()

    @classmethod
    def create(
        cls,
        owner_id: str,
        name: str,
        description: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> "Project":
        """
        Create a new project.
        Date order is only checked when both dates are given; a defaulted
        start date is never compared against the end date.
        """
        if start_date is not None and end_date is not None:
            DateRange(start_date, end_date)
        return cls(
            owner_id=owner_id,
            name=name,
            description=description,
            start_date=start_date,
            end_date=end_date,
        )

    @staticmethod
    def _parse_status(value: str) -> ProjectStatus:
        try:
            return ProjectStatus(value)
        except ValueError:
            allowed = ", ".join(s.value for s in ProjectStatus)
            raise ValidationError(f"Invalid status '{value}' (allowed: {allowed})", "status")

    def validate(self) -> None:
        """Validate project state."""
        if not parse_id(self.owner_id):
            raise ValidationError("Owner ID is required", "owner_id")

        if not self.name:
            raise ValidationError("Project name is required", "name")

        if len(self.name) > NAME_MAX_LENGTH:
            raise ValidationError(f"Project name too long (max {NAME_MAX_LENGTH} characters)", "name")

        if self.description and len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description too long (max {DESCRIPTION_MAX_LENGTH} characters)", "description"
            )

        if len(set(self.members)) != len(self.members):
            raise ValidationError("Duplicate project members", "members")

    def is_owner(self, user_id: Optional[str]) -> bool:
        """Check if the user owns this project."""
        return user_id is not None and parse_id(user_id) == self.owner_id

    def has_member(self, user_id: Optional[str]) -> bool:
        """Check if the user is in the member list."""
        normalized = parse_id(user_id)
        return normalized is not None and normalized in self.members

    def update_info(self, **changes) -> None:
        """
        Apply scalar field changes (name, description, start_date, end_date,
        status) and re-validate.
        """
        allowed = {"name", "description", "start_date", "end_date", "status"}
        unknown = set(changes) - allowed
        if unknown:
            raise ValidationError(f"Unknown project fields: {', '.join(sorted(unknown))}")

        if "name" in changes:
            self.name = (changes["name"] or "").strip()
        if "description" in changes:
            description = changes["description"]
            self.description = description.strip() if description is not None else None
        if "start_date" in changes:
            # A cleared start date falls back to "now", as on creation
            self.start_date = to_utc_naive(changes["start_date"]) or datetime.utcnow()
        if "end_date" in changes:
            self.end_date = to_utc_naive(changes["end_date"])
        if "status" in changes:
            status = changes["status"]
            if status is None:
                raise ValidationError("Status cannot be empty", "status")
            self.status = status if isinstance(status, ProjectStatus) else self._parse_status(status)

        if "start_date" in changes or "end_date" in changes:
            DateRange(self.start_date, self.end_date)

        self.validate()
        self.mark_as_updated()

    def add_member(self, user_id: str) -> None:
        """Append a member. The caller is responsible for checking the user exists."""
        normalized = parse_id(user_id)
        if normalized is None:
            raise ValidationError(f"Invalid user id: {user_id}", "user_id")
        if normalized in self.members:
            raise DuplicateEntityError(
                "ProjectMember", "user_id", normalized,
                message="User is already a member of this project",
            )
        self.members.append(normalized)
        self.mark_as_updated()

    def remove_members(self, user_ids: Iterable) -> List[str]:
        """
        Remove every member whose id appears in user_ids.
        Malformed ids never match anything. Returns the removed ids.
        """
        targets = {parse_id(value) for value in user_ids}
        targets.discard(None)

        removed = [member for member in self.members if member in targets]
        if removed:
            self.members = [member for member in self.members if member not in targets]
            self.mark_as_updated()
        return removed

