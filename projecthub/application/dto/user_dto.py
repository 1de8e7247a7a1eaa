"""
User DTOs for the application layer.
Data Transfer Objects for user-related operations.
"""

from typing import Optional, List
from pydantic import Field, EmailStr

from projecthub.domain.models.user import User
from .base_dto import BaseDTO, RequestDTO, ResponseDTO


# Request DTOs
class RegisterUserRequestDTO(RequestDTO):
    """DTO for self-registration requests."""

    username: str = Field(min_length=1, max_length=50, description="Unique username")
    email: EmailStr = Field(description="User email address")
    # bcrypt only looks at the first 72 bytes
    password: str = Field(min_length=1, max_length=72, description="Password")


class CreateUserRequestDTO(RegisterUserRequestDTO):
    """DTO for direct user creation requests."""
    pass


class LoginRequestDTO(RequestDTO):
    """DTO for login requests."""

    email: EmailStr = Field(description="User email address")
    password: str = Field(min_length=1, description="Password")


class ForgotPasswordRequestDTO(RequestDTO):
    """DTO for password reset requests."""

    email: EmailStr = Field(description="User email address")


class UpdateUserRequestDTO(RequestDTO):
    """DTO for user update requests. Empty values leave the field unchanged."""

    username: Optional[str] = Field(default=None, max_length=50, description="New username")
    email: Optional[EmailStr] = Field(default=None, description="New email address")


# Response DTOs
class UserResponseDTO(ResponseDTO):
    """DTO for user responses. Never carries the password hash."""

    username: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponseDTO":
        return cls(
            id=user.id,
            username=user.username,
            email=str(user.email),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserSummaryDTO(BaseDTO):
    """Compact user reference embedded in project responses."""

    id: str
    username: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserSummaryDTO":
        return cls(id=user.id, username=user.username, email=str(user.email))


class RegisterResponseDTO(BaseDTO):
    """DTO returned after a user has been created."""

    message: str
    user_id: str


class TokenResponseDTO(BaseDTO):
    """DTO for issued access tokens."""

    token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Token lifetime in seconds")


class ForgotPasswordResponseDTO(BaseDTO):
    """DTO returned after a password reset."""

    message: str
    new_password: str


class UserSearchResponseDTO(BaseDTO):
    """DTO for user search results."""

    message: str
    users: List[UserResponseDTO]


class UserUpdateResponseDTO(BaseDTO):
    """DTO returned after a user update."""

    message: str
    user: UserResponseDTO
