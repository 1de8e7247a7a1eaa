"""
In-memory repositories and a fake auth service for use case tests.
"""

import copy
from typing import Iterable, List, Optional

import pytest

from projecthub.domain.models.base import ConfigurationError, DuplicateEntityError, InvalidTokenError
from projecthub.domain.models.project import Project
from projecthub.domain.models.user import User
from projecthub.domain.models.value_objects import new_id, parse_id
from projecthub.domain.repositories.project_repository import ProjectRepository
from projecthub.domain.repositories.user_repository import UserRepositoryInterface
from projecthub.domain.services.auth_service import AuthService


class InMemoryUserRepository(UserRepositoryInterface):
    """Dict-backed user repository. Stored and returned entities are copies."""

    def __init__(self):
        self.data = {}

    async def save(self, user: User) -> User:
        for other in self.data.values():
            if other.id != user.id and (other.email == user.email or other.username == user.username):
                raise DuplicateEntityError("User", "email", str(user.email))
        if user.id is None:
            user.id = new_id()
        self.data[user.id] = copy.deepcopy(user)
        return user

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.data.get(parse_id(user_id))
        return copy.deepcopy(user) if user else None

    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        wanted = {parse_id(user_id) for user_id in user_ids}
        return [copy.deepcopy(user) for user in self.data.values() if user.id in wanted]

    async def find_by_email(self, email: str) -> Optional[User]:
        return self._first(lambda user: str(user.email) == email)

    async def find_by_username(self, username: str) -> Optional[User]:
        return self._first(lambda user: user.username == username)

    async def find_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        return self._first(lambda user: str(user.email) == email or user.username == username)

    async def find_conflicting(self, user_id, email=None, username=None) -> Optional[User]:
        return self._first(
            lambda user: user.id != user_id and (
                (email and str(user.email) == email) or (username and user.username == username)
            )
        )

    async def find_all(self) -> List[User]:
        return [copy.deepcopy(user) for user in self.data.values()]

    async def search(self, term: str) -> List[User]:
        term = term.lower()
        return [
            copy.deepcopy(user) for user in self.data.values()
            if term in user.username.lower() or term in str(user.email).lower()
        ]

    async def delete(self, user_id: str) -> bool:
        return self.data.pop(parse_id(user_id), None) is not None

    def _first(self, predicate) -> Optional[User]:
        for user in self.data.values():
            if predicate(user):
                return copy.deepcopy(user)
        return None


class InMemoryProjectRepository(ProjectRepository):
    """Dict-backed project repository."""

    def __init__(self):
        self.data = {}

    async def save(self, project: Project) -> Project:
        if project.id is None:
            project.id = new_id()
        self.data[project.id] = copy.deepcopy(project)
        return project

    async def find_by_id(self, project_id: str) -> Optional[Project]:
        project = self.data.get(parse_id(project_id))
        return copy.deepcopy(project) if project else None

    async def find_by_owner_id(self, owner_id: str) -> List[Project]:
        return [copy.deepcopy(p) for p in self.data.values() if p.owner_id == owner_id]

    async def find_by_owner_and_name(self, owner_id: str, name: str) -> Optional[Project]:
        for project in self.data.values():
            if project.owner_id == owner_id and project.name.lower() == name.strip().lower():
                return copy.deepcopy(project)
        return None

    async def delete_owned(self, project_id: str, owner_id: str) -> bool:
        project = self.data.get(parse_id(project_id))
        if project is None or project.owner_id != owner_id:
            return False
        del self.data[project.id]
        return True


class FakeAuthService(AuthService):
    """Predictable hashing and tokens."""

    def __init__(self, secret: Optional[str] = "secret"):
        self.secret = secret
        self.next_password = "Reset123"

    def hash_password(self, password: str) -> str:
        return f"hashed:{password}"

    def verify_password(self, password: str, hashed_password: str) -> bool:
        return hashed_password == f"hashed:{password}"

    def generate_access_token(self, user_id: str) -> str:
        if not self.secret:
            raise ConfigurationError("JWT secret is not configured")
        return f"token:{user_id}"

    def verify_token(self, token: str) -> str:
        if not token.startswith("token:"):
            raise InvalidTokenError()
        return token[len("token:"):]

    @property
    def access_token_ttl_seconds(self) -> int:
        return 3600

    def generate_password(self) -> str:
        return self.next_password


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def project_repository():
    return InMemoryProjectRepository()


@pytest.fixture
def auth_service():
    return FakeAuthService()


@pytest.fixture
def unconfigured_auth_service():
    """Auth service without a signing secret."""
    return FakeAuthService(secret=None)


@pytest.fixture
def make_user(user_repository):
    """Persist a user and return it."""
    async def _make_user(username: str, email: Optional[str] = None, password: str = "pw") -> User:
        user = User(
            username=username,
            email=email or f"{username}@mail.com",
            password_hash=f"hashed:{password}",
        )
        return await user_repository.save(user)
    return _make_user
