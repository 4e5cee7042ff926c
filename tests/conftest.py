# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before the application (and its settings) is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENVIRONMENT"] = "testing"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402

from httpx import ASGITransport, AsyncClient  # noqa: E402
from pytest import fixture  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from bloglist.db import async_session_maker, close_db, drop_db, init_db  # noqa: E402
from bloglist.main import app  # noqa: E402

DEFAULT_PASSWORD = "salainen"

CreateUser = Callable[..., Awaitable[dict]]
LoginAs = Callable[..., Awaitable[dict[str, str]]]


@fixture
async def database() -> AsyncGenerator[None]:
    """Fresh in-memory schema for each test; the connection is dropped afterwards."""
    await init_db()
    yield
    await drop_db()
    await close_db()


@fixture
async def session(database: None) -> AsyncGenerator[AsyncSession]:
    """A bare session for repository and service tests."""
    async with async_session_maker() as db_session:
        yield db_session


@fixture
async def client(database: None) -> AsyncGenerator[AsyncClient]:
    """HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@fixture
def create_user(client: AsyncClient) -> CreateUser:
    """Register a user through the API and return the response body."""

    async def _create(
        username: str = "mluukkai",
        password: str = DEFAULT_PASSWORD,
        name: str | None = "Matti Luukkainen",
    ) -> dict:
        response = await client.post(
            "/users",
            json={"username": username, "password": password, "name": name},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@fixture
def login_as(client: AsyncClient) -> LoginAs:
    """Log in and return ready-made Authorization headers."""

    async def _login(username: str = "mluukkai", password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = await client.post("/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login


@fixture
async def auth_headers(create_user: CreateUser, login_as: LoginAs) -> dict[str, str]:
    """Headers of a freshly registered default user."""
    await create_user()
    return await login_as()
