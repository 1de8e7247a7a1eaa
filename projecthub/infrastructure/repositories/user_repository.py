"""
User repository implementation using SQLAlchemy.
"""

import uuid
from typing import Optional, List, Iterable

from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.domain.models.user import User
from projecthub.domain.models.value_objects import new_id, parse_id
from projecthub.domain.repositories.user_repository import UserRepositoryInterface
from projecthub.domain.models.base import EntityNotFoundError, DuplicateEntityError
from projecthub.infrastructure.db.models import UserModel
from projecthub.infrastructure.mappers.user_mapper import UserMapper


class SQLAlchemyUserRepository(UserRepositoryInterface):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = UserMapper()

    async def save(self, user: User) -> User:
        """Save a user entity."""
        is_new = user.is_new
        if is_new:
            user.id = new_id()
            model = self.mapper.domain_to_model(user)
            self.session.add(model)
        else:
            model = await self.session.get(UserModel, uuid.UUID(user.id))
            if not model:
                raise EntityNotFoundError("User", user.id)
            self.mapper.update_model(model, user)

        try:
            await self.session.commit()
        except IntegrityError:
            # Lost a race against a concurrent registration
            await self.session.rollback()
            if is_new:
                user.id = None
            raise DuplicateEntityError(
                "User", "email", str(user.email),
                message="User with this email or username already exists",
            )
        return user

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        normalized = parse_id(user_id)
        if normalized is None:
            return None

        model = await self.session.get(UserModel, uuid.UUID(normalized))
        return self.mapper.model_to_domain(model) if model else None

    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        """Get all existing users among the given IDs."""
        ids = {uuid.UUID(n) for n in map(parse_id, user_ids) if n}
        if not ids:
            return []

        result = await self.session.execute(select(UserModel).where(UserModel.id.in_(ids)))
        return [self.mapper.model_to_domain(model) for model in result.scalars()]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        return await self._find_one(UserModel.email == email)

    async def find_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        return await self._find_one(UserModel.username == username)

    async def find_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        """Get any user holding the email or the username."""
        return await self._find_one(or_(UserModel.email == email, UserModel.username == username))

    async def find_conflicting(self, user_id: str,
                               email: Optional[str] = None,
                               username: Optional[str] = None) -> Optional[User]:
        """Get another user already holding the email or username."""
        conditions = []
        if email:
            conditions.append(UserModel.email == email)
        if username:
            conditions.append(UserModel.username == username)
        if not conditions:
            return None

        query = or_(*conditions)
        normalized = parse_id(user_id)
        if normalized:
            query = query & (UserModel.id != uuid.UUID(normalized))
        return await self._find_one(query)

    async def find_all(self) -> List[User]:
        """Get all users."""
        result = await self.session.execute(select(UserModel).order_by(UserModel.created_at))
        return [self.mapper.model_to_domain(model) for model in result.scalars()]

    async def search(self, term: str) -> List[User]:
        """Case-insensitive substring match on username or email."""
        result = await self.session.execute(
            select(UserModel)
            .where(or_(
                UserModel.username.icontains(term, autoescape=True),
                UserModel.email.icontains(term, autoescape=True),
            ))
            .order_by(UserModel.created_at)
        )
        return [self.mapper.model_to_domain(model) for model in result.scalars()]

    async def delete(self, user_id: str) -> bool:
        """Delete user by ID."""
        normalized = parse_id(user_id)
        if normalized is None:
            return False

        model = await self.session.get(UserModel, uuid.UUID(normalized))
        if not model:
            return False

        await self.session.delete(model)
        await self.session.commit()
        return True

    async def _find_one(self, condition) -> Optional[User]:
        result = await self.session.execute(select(UserModel).where(condition).limit(1))
        model = result.scalars().first()
        return self.mapper.model_to_domain(model) if model else None
