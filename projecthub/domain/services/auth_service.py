"""
Authentication service for user management.
Handles password hashing, token generation and password resets.
"""

from abc import ABC, abstractmethod


class AuthService(ABC):
    """
    Authentication service interface.
    Defines authentication operations for users.
    """

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """
        Hash a password using a salted, adaptive algorithm.
        """
        pass

    @abstractmethod
    def verify_password(self, password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.
        """
        pass

    @abstractmethod
    def generate_access_token(self, user_id: str) -> str:
        """
        Generate an access token for the user.
        Raises ConfigurationError when no signing secret is configured.
        """
        pass

    @abstractmethod
    def verify_token(self, token: str) -> str:
        """
        Verify a token and return the user ID.
        Raises InvalidTokenError when the token is rejected.
        """
        pass

    @property
    @abstractmethod
    def access_token_ttl_seconds(self) -> int:
        """Lifetime of issued access tokens."""
        pass

    @abstractmethod
    def generate_password(self) -> str:
        """
        Generate a random replacement password.
        """
        pass
