"""
Authentication infrastructure module.
Handles password hashing, JWT issuance and validation.
"""

from .jwt_handler import JWTHandler
from .password_hasher import BcryptPasswordHasher
from .auth_service import LocalAuthService
from .dependencies import (
    get_auth_service,
    get_current_user_id,
)

__all__ = [
    "JWTHandler",
    "BcryptPasswordHasher",
    "LocalAuthService",
    "get_auth_service",
    "get_current_user_id",
]
