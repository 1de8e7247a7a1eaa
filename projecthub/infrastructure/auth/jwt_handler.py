"""
JWT token handler.
Issues and validates HS256 access tokens carrying the user id.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt as jose_jwt

from projecthub.domain.models.base import ConfigurationError, InvalidTokenError


class JWTHandler:
    """Handles JWT token issuance, validation and user extraction."""

    def __init__(self, secret: Optional[str], algorithm: str = "HS256", expire_minutes: int = 60):
        self.jwt_secret = secret
        self.jwt_algorithm = algorithm
        self.expire_minutes = expire_minutes

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return self.expire_minutes * 60

    def _require_secret(self) -> str:
        if not self.jwt_secret:
            raise ConfigurationError("JWT secret is not configured")
        return self.jwt_secret

    def create_access_token(self, user_id: str) -> str:
        """
        Create a signed token for user_id.

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        secret = self._require_secret()
        now = datetime.now(timezone.utc)

        payload = {
            "sub": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=self.expire_minutes)).timestamp()),
        }
        return jose_jwt.encode(payload, secret, algorithm=self.jwt_algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string

        Returns:
            Dict containing token payload

        Raises:
            InvalidTokenError: If token is invalid, expired or lacks claims
            ConfigurationError: If no signing secret is configured
        """
        secret = self._require_secret()

        try:
            payload = jose_jwt.decode(token, secret, algorithms=[self.jwt_algorithm])
        except JWTError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}")

        if not payload.get('sub'):
            raise InvalidTokenError("Token missing user ID (sub claim)")

        if 'exp' not in payload:
            raise InvalidTokenError("Token missing expiration (exp claim)")

        return payload

    def get_user_id(self, token: str) -> str:
        """
        Extract user ID from JWT token.

        Raises:
            InvalidTokenError: If token is invalid
        """
        payload = self.verify_token(token)
        return str(payload['sub'])
