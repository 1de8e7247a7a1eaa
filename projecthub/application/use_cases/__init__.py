"""
Application use cases.
"""

from .base_use_case import BaseUseCase, AuthorizedUseCase
from .user_use_cases import (
    UpdateUserCommand,
    RegisterUserUseCase,
    CreateUserUseCase,
    LoginUseCase,
    ForgotPasswordUseCase,
    ListUsersUseCase,
    SearchUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)
from .project_use_cases import (
    ProjectDetails,
    UpdateProjectCommand,
    AddProjectMemberCommand,
    CreateProjectUseCase,
    ListProjectsUseCase,
    GetProjectUseCase,
    UpdateProjectUseCase,
    AddProjectMemberUseCase,
    DeleteProjectUseCase,
)

__all__ = [
    "BaseUseCase",
    "AuthorizedUseCase",
    "UpdateUserCommand",
    "RegisterUserUseCase",
    "CreateUserUseCase",
    "LoginUseCase",
    "ForgotPasswordUseCase",
    "ListUsersUseCase",
    "SearchUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "ProjectDetails",
    "UpdateProjectCommand",
    "AddProjectMemberCommand",
    "CreateProjectUseCase",
    "ListProjectsUseCase",
    "GetProjectUseCase",
    "UpdateProjectUseCase",
    "AddProjectMemberUseCase",
    "DeleteProjectUseCase",
]
