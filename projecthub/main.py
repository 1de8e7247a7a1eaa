"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from typing import Dict, Any, Optional

from projecthub.application.dto.base_dto import HealthCheckResponseDTO
from projecthub.config import Settings, get_settings
from projecthub.infrastructure.auth.auth_service import LocalAuthService
from projecthub.infrastructure.auth.jwt_handler import JWTHandler
from projecthub.infrastructure.auth.password_hasher import BcryptPasswordHasher
from projecthub.infrastructure.db.database import Database
from projecthub.infrastructure.web.middleware.error_handler import register_exception_handlers
from projecthub.infrastructure.web.routers import projects, users

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Setup and teardown operations.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; login and protected routes will fail")

    await app.state.database.create_all()

    yield

    # Shutdown
    logger.info("Shutting down application")
    await app.state.database.dispose()


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    Shared services are built once here and kept on app.state.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    jwt_handler = JWTHandler(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.jwt_access_token_expire_minutes,
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url_async, echo=settings.database_echo)
    app.state.auth_service = LocalAuthService(
        jwt_handler,
        BcryptPasswordHasher(rounds=settings.password_hash_rounds),
        reset_password_length=settings.reset_password_length,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Error middleware and {"message": ...} error bodies
    register_exception_handlers(app)

    # Include routers
    app.include_router(
        users.router,
        prefix=f"{settings.api_prefix}/users",
        tags=["Users"]
    )
    app.include_router(
        projects.router,
        prefix=f"{settings.api_prefix}/projects",
        tags=["Projects"]
    )

    # Root endpoint
    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": f"{settings.api_prefix}/docs" if settings.debug else None,
            "health": f"{settings.api_prefix}/health"
        }

    # Health check endpoint
    @app.get(f"{settings.api_prefix}/health", response_model=HealthCheckResponseDTO)
    async def health_check() -> HealthCheckResponseDTO:
        """Health check endpoint for monitoring."""
        return HealthCheckResponseDTO(
            status="healthy",
            environment=settings.environment,
            version=settings.api_version,
        )

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "projecthub.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
