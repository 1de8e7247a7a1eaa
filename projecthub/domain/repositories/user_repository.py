"""
User repository interface.
Defines the contract for user data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Iterable

from projecthub.domain.models.user import User


class UserRepositoryInterface(ABC):
    """
    Repository interface for User aggregate.
    Defines all operations needed for user data persistence.
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Save a user entity.
        Assigns an id to new users. Raises DuplicateEntityError when the
        email or username is already taken.
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by their ID.
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        """
        Find every existing user among the given IDs.
        Unknown ids are skipped.
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by their email address.
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find a user by their username.
        """
        pass

    @abstractmethod
    async def find_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        """
        Find any user holding the email or the username.
        """
        pass

    @abstractmethod
    async def find_conflicting(self, user_id: str,
                               email: Optional[str] = None,
                               username: Optional[str] = None) -> Optional[User]:
        """
        Find another user (not user_id) already holding the email or username.
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """
        Find all users.
        """
        pass

    @abstractmethod
    async def search(self, term: str) -> List[User]:
        """
        Case-insensitive substring search on username and email.
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """
        Delete a user by ID.
        Returns True if successful, False if user not found.
        """
        pass
