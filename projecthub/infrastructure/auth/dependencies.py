"""
Authentication dependencies for FastAPI.
Provides the bearer-token dependency guarding project routes.
"""

import logging
from typing import Optional, Annotated
from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from projecthub.domain.models.base import ConfigurationError, InvalidTokenError
from projecthub.domain.services.auth_service import AuthService


logger = logging.getLogger(__name__)

# Security scheme; missing credentials are reported by get_current_user_id
security = HTTPBearer(auto_error=False)


def get_auth_service(request: Request) -> AuthService:
    """Dependency to get authentication service."""
    return request.app.state.auth_service


async def get_current_user_id(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)]
) -> str:
    """
    FastAPI dependency to get current authenticated user ID.
    The id is also stored on request.state.user_id.

    Raises:
        HTTPException: 401 without a bearer token, 403 when the token cannot
            be verified (including when no signing secret is configured)
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user_id = auth_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.info(f"Token verification failed: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )
    except ConfigurationError as e:
        # Tokens cannot be verified without a secret; only login reports it as 500
        logger.error(e.message)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )

    request.state.user_id = user_id
    return user_id
