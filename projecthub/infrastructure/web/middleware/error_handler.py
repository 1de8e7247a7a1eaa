"""
Global error handling for the FastAPI application.
Every error response has the shape {"message": "..."}.
"""

import logging
from typing import Dict, Optional, Tuple
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError

from projecthub.application.dto.base_dto import ErrorResponseDTO
from projecthub.domain.models.base import (
    AuthenticationError,
    ConfigurationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidTokenError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """Build a {"message": ...} error response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponseDTO(message=message).model_dump(),
        headers=headers,
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Turn an exception that escaped the routers into a JSON response.
        Unexpected errors never expose internal details.
        """
        status_code, message = self.format_error_response(exc)

        if status_code >= 500:
            logger.error(
                f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
                exc_info=True,
                extra={
                    "request_path": request.url.path,
                    "request_method": request.method,
                    "client_host": request.client.host if request.client else None
                }
            )

        return error_response(status_code, message)

    def format_error_response(self, exc: Exception) -> Tuple[int, str]:
        """
        Map an exception to a status code and client-facing message.
        """
        if isinstance(exc, ValidationError):
            return status.HTTP_400_BAD_REQUEST, exc.message
        elif isinstance(exc, EntityNotFoundError):
            return status.HTTP_404_NOT_FOUND, exc.message
        elif isinstance(exc, DuplicateEntityError):
            return status.HTTP_409_CONFLICT, exc.message
        elif isinstance(exc, AuthenticationError):
            return status.HTTP_401_UNAUTHORIZED, exc.message
        elif isinstance(exc, InvalidTokenError):
            return status.HTTP_403_FORBIDDEN, exc.message
        elif isinstance(exc, ConfigurationError):
            return status.HTTP_500_INTERNAL_SERVER_ERROR, "Server misconfigured"

        return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"


def _describe_validation_errors(errors: list) -> str:
    """Render pydantic errors as 'field: reason; ...'."""
    parts = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location)
        parts.append(f"{field}: {error.get('msg')}" if field else error.get("msg", "Invalid request"))
    return "; ".join(parts) or "Invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return error_response(exc.status_code, message, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_errors(exc.errors()))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error middleware and the {"message"} exception handlers."""
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
