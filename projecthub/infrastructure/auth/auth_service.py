"""
Authentication service backed by bcrypt and locally signed JWTs.
"""

import secrets
import string

from projecthub.domain.services.auth_service import AuthService
from projecthub.infrastructure.auth.jwt_handler import JWTHandler
from projecthub.infrastructure.auth.password_hasher import BcryptPasswordHasher


PASSWORD_ALPHABET = string.ascii_letters + string.digits


class LocalAuthService(AuthService):
    """AuthService implementation used by the API."""

    def __init__(self, jwt_handler: JWTHandler, password_hasher: BcryptPasswordHasher,
                 reset_password_length: int = 8):
        self.jwt_handler = jwt_handler
        self.password_hasher = password_hasher
        self.reset_password_length = reset_password_length

    def hash_password(self, password: str) -> str:
        return self.password_hasher.hash(password)

    def verify_password(self, password: str, hashed_password: str) -> bool:
        return self.password_hasher.verify(password, hashed_password)

    def generate_access_token(self, user_id: str) -> str:
        return self.jwt_handler.create_access_token(user_id)

    def verify_token(self, token: str) -> str:
        return self.jwt_handler.get_user_id(token)

    @property
    def access_token_ttl_seconds(self) -> int:
        return self.jwt_handler.expires_in

    def generate_password(self) -> str:
        """Random alphanumeric password of the configured length."""
        return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(self.reset_password_length))
