"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .user_dto import *
from .project_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "MessageResponseDTO",
    "ErrorResponseDTO",
    "HealthCheckResponseDTO",

    # User DTOs
    "RegisterUserRequestDTO",
    "CreateUserRequestDTO",
    "LoginRequestDTO",
    "ForgotPasswordRequestDTO",
    "UpdateUserRequestDTO",
    "UserResponseDTO",
    "UserSummaryDTO",
    "RegisterResponseDTO",
    "TokenResponseDTO",
    "ForgotPasswordResponseDTO",
    "UserSearchResponseDTO",
    "UserUpdateResponseDTO",

    # Project DTOs
    "CreateProjectRequestDTO",
    "UpdateProjectRequestDTO",
    "AddProjectMemberRequestDTO",
    "ProjectResponseDTO",
    "ProjectDetailResponseDTO",
    "ProjectUpdateResponseDTO",
]
