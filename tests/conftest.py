"""Shared test fixtures for the Translation Stats service."""

import os

# Set test configuration before any app imports trigger Settings() validation.
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-for-unit-tests")
os.environ.setdefault(
    "INSTALLED_PLUGINS",
    '[{"slug": "hello-dolly", "name": "Hello Dolly"},'
    ' {"slug": "akismet", "name": "Akismet Anti-Spam"}]',
)

import uuid  # noqa: E402
from collections.abc import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import fakeredis.aioredis  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from tests.helpers.fakes import InMemoryOptionRepository  # noqa: E402
from tests.helpers.token_factory import create_access_token  # noqa: E402
from translation_stats.auth.nonce import create_nonce  # noqa: E402
from translation_stats.config import get_settings  # noqa: E402
from translation_stats.constants import NONCE_ACTION  # noqa: E402
from translation_stats.main import app  # noqa: E402
from translation_stats.providers import (  # noqa: E402
    get_option_repository,
    get_settings_registry,
)
from translation_stats.rate_limit import limiter  # noqa: E402
from translation_stats.schemas.auth import TokenUser  # noqa: E402
from translation_stats.services.settings_service import SettingsService  # noqa: E402
from translation_stats.services.transients import TransientStore  # noqa: E402

# ---------------------------------------------------------------------------
# Storage fixtures
# ---------------------------------------------------------------------------


def _make_fake_redis():
    """Create a fakeredis instance that behaves like redis.asyncio.Redis."""
    return fakeredis.aioredis.FakeRedis(decode_responses=True)


@pytest_asyncio.fixture()
async def redis_client():
    """Provide a fake Redis client."""
    client = _make_fake_redis()
    yield client
    await client.aclose()


@pytest.fixture()
def transient_store(redis_client) -> TransientStore:
    return TransientStore(redis_client)


@pytest.fixture()
def option_repo() -> InMemoryOptionRepository:
    return InMemoryOptionRepository()


@pytest.fixture()
def settings():
    return get_settings()


@pytest.fixture()
def registry():
    return get_settings_registry()


@pytest.fixture()
def settings_service(option_repo, transient_store, registry, settings) -> SettingsService:
    return SettingsService(option_repo, transient_store, registry, settings)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


@pytest.fixture()
def admin_user() -> TokenUser:
    return TokenUser(id="user-admin", username="admin", role="administrator")


@pytest.fixture()
def editor_user() -> TokenUser:
    return TokenUser(id="user-editor", username="editor", role="editor")


# ---------------------------------------------------------------------------
# HTTP client fixture (FastAPI app with in-memory infra)
# ---------------------------------------------------------------------------


def _make_mock_session_factory():
    """Return a callable that mimics ``async_sessionmaker().__call__()``."""
    session = AsyncMock()
    result_mock = MagicMock()
    result_mock.scalar.return_value = 1
    session.execute.return_value = result_mock
    factory = MagicMock()
    ctx = AsyncMock()
    ctx.__aenter__.return_value = session
    factory.return_value = ctx
    return factory


@pytest_asyncio.fixture()
async def client(option_repo, redis_client) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the FastAPI app.

    The options store is the in-memory repository and Redis is fakeredis, so
    tests run without a database or cache server.
    """
    app.state.engine = MagicMock()
    app.state.session_factory = _make_mock_session_factory()
    app.state.redis = redis_client
    app.dependency_overrides[get_option_repository] = lambda: option_repo
    limiter.enabled = False

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    limiter.enabled = True


# ---------------------------------------------------------------------------
# Auth helpers: generate JWT tokens directly (no login endpoint needed)
# ---------------------------------------------------------------------------


def auth_headers(role: str, user_id: str | None = None) -> dict[str, str]:
    """Return Authorization header dict with a valid JWT."""
    token = create_access_token(
        user_id=user_id or str(uuid.uuid4()),
        role=role,
        username=role,
        email=f"{role}@example.org",
    )
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture()
async def admin_client(client, admin_user) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client pre-authenticated as the ``admin_user`` administrator."""
    client.headers.update(auth_headers(admin_user.role, admin_user.id))
    yield client
    client.headers.pop("Authorization", None)


@pytest_asyncio.fixture()
async def editor_client(client, editor_user) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client pre-authenticated as an editor (no manage_options)."""
    client.headers.update(auth_headers(editor_user.role, editor_user.id))
    yield client
    client.headers.pop("Authorization", None)


@pytest.fixture()
def admin_nonce(admin_user) -> str:
    return create_nonce(NONCE_ACTION, admin_user.id)
