"""
Value Objects for the domain layer.
Immutable objects that represent values and encapsulate validation.
"""

from typing import Any, Optional
from datetime import datetime, timezone
from dataclasses import dataclass
import re
import uuid

from projecthub.domain.models.base import ValidationError


EMAIL_PATTERN = re.compile(r'^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$')


def new_id() -> str:
    """Generate a new entity identifier."""
    return str(uuid.uuid4())


def parse_id(value: Any) -> Optional[str]:
    """
    Normalize an identifier to its canonical string form.
    Returns None when the value is not a well-formed identifier.
    """
    if isinstance(value, uuid.UUID):
        return str(value)
    if not isinstance(value, str):
        return None
    try:
        return str(uuid.UUID(value.strip()))
    except ValueError:
        return None


def to_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Convert a datetime to naive UTC so stored and incoming values compare."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address."""

    address: str

    def __post_init__(self):
        """Validate the email address."""
        if not self.address:
            raise ValidationError("Email is required", "email")
        if not EMAIL_PATTERN.match(self.address):
            raise ValidationError(f"Invalid email address: {self.address}", "email")

    @classmethod
    def from_string(cls, email_str: str) -> "Email":
        """Create Email from string."""
        return cls((email_str or "").strip())

    def __str__(self) -> str:
        return self.address

    def __repr__(self) -> str:
        return f"Email('{self.address}')"


@dataclass(frozen=True)
class DateRange:
    """Value object representing a project schedule with an optional end."""

    start: datetime
    end: Optional[datetime] = None

    def __post_init__(self):
        object.__setattr__(self, 'start', to_utc_naive(self.start))
        object.__setattr__(self, 'end', to_utc_naive(self.end))
        if self.end is not None and self.end < self.start:
            raise ValidationError("End date must be on or after the start date", "end_date")
