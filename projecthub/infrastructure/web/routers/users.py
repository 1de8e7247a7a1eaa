"""
User router.
Handles registration, login, password reset and user administration.
"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from projecthub.application.dto.base_dto import MessageResponseDTO
from projecthub.application.dto.user_dto import (
    RegisterUserRequestDTO,
    CreateUserRequestDTO,
    LoginRequestDTO,
    ForgotPasswordRequestDTO,
    UpdateUserRequestDTO,
    UserResponseDTO,
    RegisterResponseDTO,
    TokenResponseDTO,
    ForgotPasswordResponseDTO,
    UserSearchResponseDTO,
    UserUpdateResponseDTO,
)
from projecthub.application.use_cases.user_use_cases import (
    RegisterUserUseCase,
    CreateUserUseCase,
    LoginUseCase,
    ForgotPasswordUseCase,
    ListUsersUseCase,
    SearchUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    UpdateUserCommand,
    DeleteUserUseCase,
)
from projecthub.domain.models.base import (
    AuthenticationError,
    ConfigurationError,
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from projecthub.domain.services.auth_service import AuthService
from projecthub.infrastructure.auth.dependencies import get_auth_service
from projecthub.infrastructure.db.database import get_db_session
from projecthub.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


router = APIRouter()


def get_user_repository(session=Depends(get_db_session)):
    """Dependency to get user repository."""
    return SQLAlchemyUserRepository(session)


UserRepository = Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)]
Auth = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponseDTO)
async def register(request: RegisterUserRequestDTO, repository: UserRepository, auth_service: Auth):
    """
    Register a new user account.

    - **username**: Unique username
    - **email**: Unique, valid email address
    - **password**: Password, stored as a bcrypt hash
    """
    try:
        user = await RegisterUserUseCase(repository, auth_service).execute(request)
        return RegisterResponseDTO(message="User registered successfully", user_id=user.id)

    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.post("/login", response_model=TokenResponseDTO)
async def login(request: LoginRequestDTO, repository: UserRepository, auth_service: Auth):
    """
    Exchange email and password for a bearer token valid for one hour.
    """
    try:
        return await LoginUseCase(repository, auth_service).execute(request)

    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except ConfigurationError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server misconfigured")


@router.post("/forgot-password", response_model=ForgotPasswordResponseDTO)
async def forgot_password(request: ForgotPasswordRequestDTO, repository: UserRepository, auth_service: Auth):
    """
    Reset the password of the account with this email.
    The new password is returned in the response body.
    """
    try:
        new_password = await ForgotPasswordUseCase(repository, auth_service).execute(request)
        return ForgotPasswordResponseDTO(message="Password has been reset", new_password=new_password)

    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RegisterResponseDTO)
async def create_user(request: CreateUserRequestDTO, repository: UserRepository, auth_service: Auth):
    """
    Create a user directly.
    """
    try:
        user = await CreateUserUseCase(repository, auth_service).execute(request)
        return RegisterResponseDTO(message="User created", user_id=user.id)

    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.get("", response_model=List[UserResponseDTO])
async def list_users(repository: UserRepository):
    """
    List all users. Password hashes are never returned.
    """
    users = await ListUsersUseCase(repository).execute()
    return [UserResponseDTO.from_domain(user) for user in users]


@router.get("/search", response_model=UserSearchResponseDTO)
async def search_users(
    repository: UserRepository,
    q: Optional[str] = Query(None, description="Fragment of a username or email")
):
    """
    Case-insensitive search on username and email.
    """
    try:
        users = await SearchUsersUseCase(repository).execute(q)
        return UserSearchResponseDTO(
            message=f"Found {len(users)} users",
            users=[UserResponseDTO.from_domain(user) for user in users],
        )

    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.get("/{user_id}", response_model=UserResponseDTO)
async def get_user(user_id: str, repository: UserRepository):
    """
    Get a specific user by ID.
    """
    try:
        user = await GetUserUseCase(repository).execute(user_id)
        return UserResponseDTO.from_domain(user)

    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


@router.put("/{user_id}", response_model=UserUpdateResponseDTO)
async def update_user(user_id: str, request: UpdateUserRequestDTO, repository: UserRepository):
    """
    Update a user's username and/or email.
    """
    try:
        user = await UpdateUserUseCase(repository).execute(UpdateUserCommand(user_id=user_id, data=request))
        return UserUpdateResponseDTO(message="User updated successfully", user=UserResponseDTO.from_domain(user))

    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)


@router.delete("/{user_id}", response_model=MessageResponseDTO)
async def delete_user(user_id: str, repository: UserRepository):
    """
    Delete a user. Projects referencing the user are not changed.
    """
    try:
        await DeleteUserUseCase(repository).execute(user_id)
        return MessageResponseDTO(message="User deleted successfully")

    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
