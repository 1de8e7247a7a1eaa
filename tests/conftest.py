"""
Shared test fixtures.

API tests run the real application against a temporary SQLite database.
"""

from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from projecthub.config import Settings
from projecthub.main import create_application


TEST_JWT_SECRET = "test-secret-key-for-tests"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        environment="testing",
        database_url=f"sqlite+aiosqlite:///{tmp_path}/test.db",
        jwt_secret=TEST_JWT_SECRET,
        password_hash_rounds=4,
    )


@pytest_asyncio.fixture
async def app(settings):
    """Application with tables created; ASGITransport does not run the lifespan."""
    application = create_application(settings)
    await application.state.database.create_all()
    yield application
    await application.state.database.dispose()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def api(settings):
    return settings.api_prefix


@pytest.fixture
def register(client, api):
    """Register a user and return its id."""
    async def _register(username: str, email: str = None, password: str = "password1") -> str:
        response = await client.post(f"{api}/users/register", json={
            "username": username,
            "email": email or f"{username}@mail.com",
            "password": password,
        })
        assert response.status_code == 201, response.text
        return response.json()["userId"]
    return _register


@pytest.fixture
def login(client, api):
    """Log in and return Authorization headers."""
    async def _login(email: str, password: str = "password1") -> dict:
        response = await client.post(f"{api}/users/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _login


@pytest.fixture
def make_client(tmp_path):
    """Build a client for an application with custom settings."""
    @asynccontextmanager
    async def _make_client(**overrides):
        values = {
            "environment": "testing",
            "database_url": f"sqlite+aiosqlite:///{tmp_path}/custom.db",
            "jwt_secret": TEST_JWT_SECRET,
            "password_hash_rounds": 4,
        }
        values.update(overrides)
        application = create_application(Settings(_env_file=None, **values))
        await application.state.database.create_all()
        try:
            async with AsyncClient(transport=ASGITransport(app=application), base_url="http://test") as ac:
                yield ac
        finally:
            await application.state.database.dispose()
    return _make_client
