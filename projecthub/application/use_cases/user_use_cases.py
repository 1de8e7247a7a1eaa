"""
User use cases for the application layer.
Implements registration, login, password reset and user administration.
"""

import logging
from dataclasses import dataclass
from typing import List

from projecthub.application.use_cases.base_use_case import BaseUseCase
from projecthub.application.dto.user_dto import (
    RegisterUserRequestDTO,
    CreateUserRequestDTO,
    LoginRequestDTO,
    ForgotPasswordRequestDTO,
    UpdateUserRequestDTO,
    TokenResponseDTO,
)
from projecthub.domain.models.base import (
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from projecthub.domain.models.user import User
from projecthub.domain.models.value_objects import parse_id
from projecthub.domain.repositories.user_repository import UserRepositoryInterface
from projecthub.domain.services.auth_service import AuthService


logger = logging.getLogger(__name__)


@dataclass
class UpdateUserCommand:
    """Target user id plus the requested changes."""

    user_id: str
    data: UpdateUserRequestDTO


class RegisterUserUseCase(BaseUseCase[RegisterUserRequestDTO, User]):
    """Use case for self-registration."""

    def __init__(self, user_repository: UserRepositoryInterface, auth_service: AuthService):
        super().__init__()
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def _execute_business_logic(self, request: RegisterUserRequestDTO) -> User:
        existing = await self.user_repository.find_by_email_or_username(
            str(request.email), request.username.strip()
        )
        if existing:
            raise DuplicateEntityError(
                "User", "email", str(request.email),
                message="User with this email or username already exists",
            )

        user = User(
            username=request.username,
            email=str(request.email),
            password_hash=self.auth_service.hash_password(request.password),
        )
        saved = await self.user_repository.save(user)
        logger.info(f"Registered user {saved.id}")
        return saved


class CreateUserUseCase(BaseUseCase[CreateUserRequestDTO, User]):
    """Use case for creating a user directly, reporting which field clashes."""

    def __init__(self, user_repository: UserRepositoryInterface, auth_service: AuthService):
        super().__init__()
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def _execute_business_logic(self, request: CreateUserRequestDTO) -> User:
        email = str(request.email)
        username = request.username.strip()

        if await self.user_repository.find_by_email(email):
            raise DuplicateEntityError("User", "email", email, message="Email already exists")
        if await self.user_repository.find_by_username(username):
            raise DuplicateEntityError("User", "username", username, message="Username already exists")

        user = User(
            username=username,
            email=email,
            password_hash=self.auth_service.hash_password(request.password),
        )
        saved = await self.user_repository.save(user)
        logger.info(f"Created user {saved.id}")
        return saved


class LoginUseCase(BaseUseCase[LoginRequestDTO, TokenResponseDTO]):
    """Use case for exchanging credentials for an access token."""

    def __init__(self, user_repository: UserRepositoryInterface, auth_service: AuthService):
        super().__init__()
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def _execute_business_logic(self, request: LoginRequestDTO) -> TokenResponseDTO:
        user = await self.user_repository.find_by_email(str(request.email))

        # Unknown email and wrong password must be indistinguishable
        if user is None or not self.auth_service.verify_password(request.password, user.password_hash):
            logger.info("Failed login attempt")
            raise AuthenticationError()

        token = self.auth_service.generate_access_token(user.id)
        logger.info(f"User {user.id} logged in")
        return TokenResponseDTO(
            token=token,
            token_type="bearer",
            expires_in=self.auth_service.access_token_ttl_seconds,
        )


class ForgotPasswordUseCase(BaseUseCase[ForgotPasswordRequestDTO, str]):
    """
    Use case for resetting a forgotten password.
    Returns the new plaintext password so the caller can hand it back.
    """

    def __init__(self, user_repository: UserRepositoryInterface, auth_service: AuthService):
        super().__init__()
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def _execute_business_logic(self, request: ForgotPasswordRequestDTO) -> str:
        user = await self.user_repository.find_by_email(str(request.email))
        if user is None:
            raise EntityNotFoundError("User", message="No user found with this email")

        new_password = self.auth_service.generate_password()
        user.change_password_hash(self.auth_service.hash_password(new_password))
        await self.user_repository.save(user)

        logger.info(f"Password reset for user {user.id}")
        return new_password


class ListUsersUseCase(BaseUseCase[None, List[User]]):
    """Use case for listing every user."""

    def __init__(self, user_repository: UserRepositoryInterface):
        super().__init__()
        self.user_repository = user_repository

    async def _execute_business_logic(self, request: None) -> List[User]:
        return await self.user_repository.find_all()


class SearchUsersUseCase(BaseUseCase[str, List[User]]):
    """Use case for searching users by username or email fragment."""

    def __init__(self, user_repository: UserRepositoryInterface):
        super().__init__()
        self.user_repository = user_repository

    async def _validate_request(self, request: str) -> None:
        if not request:
            raise ValidationError("Please provide a search term", "q")

    async def _execute_business_logic(self, request: str) -> List[User]:
        return await self.user_repository.search(request)


class GetUserUseCase(BaseUseCase[str, User]):
    """Use case for fetching one user."""

    def __init__(self, user_repository: UserRepositoryInterface):
        super().__init__()
        self.user_repository = user_repository

    async def _validate_request(self, request: str) -> None:
        if parse_id(request) is None:
            raise ValidationError("Invalid user id", "id")

    async def _execute_business_logic(self, request: str) -> User:
        user = await self.user_repository.find_by_id(parse_id(request))
        if user is None:
            raise EntityNotFoundError("User", request)
        return user


class UpdateUserUseCase(BaseUseCase[UpdateUserCommand, User]):
    """Use case for changing a user's username and/or email."""

    def __init__(self, user_repository: UserRepositoryInterface):
        super().__init__()
        self.user_repository = user_repository

    async def _validate_request(self, request: UpdateUserCommand) -> None:
        if parse_id(request.user_id) is None:
            raise ValidationError("Invalid user id", "id")

    async def _execute_business_logic(self, request: UpdateUserCommand) -> User:
        user_id = parse_id(request.user_id)
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)

        email = str(request.data.email) if request.data.email else None
        username = request.data.username.strip() if request.data.username else None

        if email and email != str(user.email):
            if await self.user_repository.find_conflicting(user_id, email=email):
                raise DuplicateEntityError("User", "email", email, message="Email already exists")

        if username and username != user.username:
            if await self.user_repository.find_conflicting(user_id, username=username):
                raise DuplicateEntityError("User", "username", username, message="Username already exists")

        changes = user.update_profile(username=username, email=email)
        saved = await self.user_repository.save(user)
        if changes:
            logger.info(f"Updated user {user_id}: {', '.join(changes)}")
        return saved


class DeleteUserUseCase(BaseUseCase[str, None]):
    """
    Use case for deleting a user.
    Projects owned by or shared with the user are left untouched.
    """

    def __init__(self, user_repository: UserRepositoryInterface):
        super().__init__()
        self.user_repository = user_repository

    async def _execute_business_logic(self, request: str) -> None:
        user_id = parse_id(request)
        if user_id is None or not await self.user_repository.delete(user_id):
            raise EntityNotFoundError("User", request)
        logger.info(f"Deleted user {user_id}")
