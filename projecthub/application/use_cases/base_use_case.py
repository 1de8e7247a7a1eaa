"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, TypeVar, Generic
from datetime import datetime

from projecthub.domain.models.base import ValidationError


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Domain exceptions propagate to the caller, which maps them to responses.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    async def execute(self, request: T = None) -> R:
        """
        Validate the request and run the business logic.
        """
        self.execution_start = datetime.utcnow()
        try:
            await self._validate_request(request)
            return await self._execute_business_logic(request)
        finally:
            self.execution_end = datetime.utcnow()
            logger.debug(
                "%s finished in %.3fs",
                type(self).__name__,
                (self.execution_end - self.execution_start).total_seconds(),
            )

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        pass

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class AuthorizedUseCase(BaseUseCase[T, R]):
    """
    Base class for use cases acting on behalf of an authenticated user.
    """

    def __init__(self):
        super().__init__()
        self.current_user_id: Optional[str] = None

    def set_current_user(self, user_id: str) -> "AuthorizedUseCase[T, R]":
        """Set the current user context."""
        self.current_user_id = user_id
        return self

    async def _validate_request(self, request: T) -> None:
        """Validate request with authentication check."""
        await super()._validate_request(request)

        if not self.current_user_id:
            raise ValidationError("User authentication required")
