"""
User mapper for converting between domain entities and database models.
"""

import uuid

from projecthub.domain.models.user import User
from projecthub.infrastructure.db.models import UserModel


class UserMapper:
    """Maps between User domain entity and UserModel database model."""

    def domain_to_model(self, user: User) -> UserModel:
        """Convert User domain entity to UserModel."""
        model = UserModel(id=uuid.UUID(user.id) if user.id else uuid.uuid4())
        self.update_model(model, user)
        model.created_at = user.created_at
        return model

    def update_model(self, model: UserModel, user: User) -> None:
        """Copy mutable fields from the entity onto an existing model."""
        model.username = user.username
        model.email = str(user.email)
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at

    def model_to_domain(self, model: UserModel) -> User:
        """Convert UserModel to User domain entity."""
        return User(
            id=str(model.id),
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
