import datetime as dt
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from pizzeria.config import Settings
from pizzeria.core.db import build_tortoise_config
from pizzeria.core.security import TokenService
from pizzeria.main import create_app


TEST_DB_URL = "sqlite://:memory:"
TEST_JWT_SECRET = "test-secret-not-for-production"


def make_settings(**overrides) -> Settings:
    values = {
        "database_url": TEST_DB_URL,
        "generate_schemas": True,
        "jwt_secret": TEST_JWT_SECRET,
        "access_token_expire_minutes": 60,
        "auth_enabled": True,
        "protected_resources": ["clientes"],
    }
    values.update(overrides)
    return Settings(**values)


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=build_tortoise_config(TEST_DB_URL))
    await Tortoise.generate_schemas()


def _client_for(app) -> AsyncClient:
    # ASGITransport does not run the lifespan, the db fixture stands in for startup
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://testserver")


@pytest.fixture
def jwt_secret() -> str:
    return TEST_JWT_SECRET


@pytest.fixture
def settings_factory():
    """Build test Settings with keyword overrides."""
    return make_settings


@pytest.fixture
def tokens() -> TokenService:
    """Token service sharing the secret of the test apps."""
    return TokenService(TEST_JWT_SECRET, ttl=dt.timedelta(minutes=60))


@pytest_asyncio.fixture
async def db():
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db, tokens):
    """
    HTTPX AsyncClient bound to the token-secured app (clientes protected).
    """
    app = create_app(make_settings(), token_service=tokens)
    async with _client_for(app) as async_client:
        yield async_client


@pytest_asyncio.fixture
async def plain_client(db):
    """
    HTTPX AsyncClient bound to the plain CRUD app (no auth routes, nothing protected).
    """
    app = create_app(make_settings(auth_enabled=False))
    async with _client_for(app) as async_client:
        yield async_client


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture that registers a user and returns Authorization headers
    obtained through the login endpoint.
    """

    async def _get_headers(username: str | None = None, password: str = "UserPass!23") -> dict[str, str]:
        username = username or f"user_{uuid.uuid4().hex[:6]}"
        reg = await client.post("/registro", json={"username": username, "password": password})
        assert reg.status_code == 201, reg.text
        resp = await client.post("/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        token = resp.json()["token"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers
