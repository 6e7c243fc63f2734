import os
import uuid

TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ["JWT_SECRET"] = "test-secret"

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from hotel_api.core import db as db_module
from hotel_api.core.security import hash_password
from hotel_api.main import app
from hotel_api.models.user import User

db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """Fresh database without an HTTP client, for service-level tests."""
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    Lifespan events are not run; the db fixture already initialized Tortoise.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def create_admin(db):
    """
    Factory fixture to create admin users directly via ORM, since registration never grants admin.
    """

    async def _create_admin(password: str = "AdminPass!23") -> tuple[User, str]:
        suffix = uuid.uuid4().hex[:6]
        user = await User.create(
            username=f"admin_{suffix}",
            email=f"admin_{suffix}@example.com",
            password_hash=hash_password(password),
            is_admin=True,
        )
        return user, password

    return _create_admin


@pytest_asyncio.fixture
async def create_user(db):
    """
    Factory fixture to create regular users directly.
    """

    async def _create_user(password: str = "UserPass!23") -> tuple[User, str]:
        suffix = uuid.uuid4().hex[:6]
        user = await User.create(
            username=f"user_{suffix}",
            email=f"{suffix}@example.com",
            password_hash=hash_password(password),
            is_admin=False,
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def login(client):
    """
    Log in through the API and return the token.

    The client's cookie jar is cleared afterwards so each request states its
    credentials explicitly (cookie or bearer header).
    """

    async def _login(username: str, password: str) -> str:
        resp = await client.post(
            "/api/auth/login",
            json={"username": username, "password": password},
        )
        assert resp.status_code == 200, resp.text
        client.cookies.clear()
        return resp.json()["accessToken"]

    return _login


@pytest_asyncio.fixture
async def admin_headers(create_admin, login):
    admin, password = await create_admin()
    token = await login(admin.username, password)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def user_headers(create_user, login):
    user, password = await create_user()
    token = await login(user.username, password)
    return {"Authorization": f"Bearer {token}"}
