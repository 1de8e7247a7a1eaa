"""
User domain model.
Represents a system user with credential and profile information.
"""

from dataclasses import dataclass
from typing import Optional

from projecthub.domain.models.base import BaseEntity, ValidationError
from projecthub.domain.models.value_objects import Email


USERNAME_MAX_LENGTH = 50


@dataclass
class User(BaseEntity):
    """
    User aggregate root.
    Holds the identity, unique username and email, and the password hash.
    The plaintext password never reaches this object.
    """

    username: str = ""
    email: Optional[Email] = None
    password_hash: str = ""

    def __post_init__(self):
        """Initialize user after creation."""
        super().__post_init__()

        if isinstance(self.email, str):
            self.email = Email.from_string(self.email)
        if self.username:
            self.username = self.username.strip()

        self.validate()

    def validate(self) -> None:
        """Validate user state."""
        if not self.username:
            raise ValidationError("Username is required", "username")

        if len(self.username) > USERNAME_MAX_LENGTH:
            raise ValidationError(
                f"Username too long (max {USERNAME_MAX_LENGTH} characters)", "username"
            )

        if self.email is None:
            raise ValidationError("Email is required", "email")

        if not self.password_hash:
            raise ValidationError("Password is required", "password")

    def update_profile(self, username: Optional[str] = None, email: Optional[str] = None) -> dict:
        """
        Update username and/or email.
        Returns the changed fields; an empty dict means nothing changed.
        """
        changes = {}

        if username and username.strip() != self.username:
            self.username = username.strip()
            changes["username"] = self.username

        if email and email.strip() != str(self.email):
            self.email = Email.from_string(email)
            changes["email"] = str(self.email)

        self.validate()
        # updated_at is touched even when nothing changed
        self.mark_as_updated()
        return changes

    def change_password_hash(self, password_hash: str) -> None:
        """Replace the stored password hash."""
        if not password_hash:
            raise ValidationError("Password is required", "password")
        self.password_hash = password_hash
        self.mark_as_updated()
