from __future__ import annotations

import os

# Settings are read at import time, so the test environment must be in place
# before anything from ``formforge`` is imported.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("JWT_SECRET", "test-access-secret-0123456789abcdef0123456789")
os.environ.setdefault("JWT_REFRESH_SECRET", "test-refresh-secret-0123456789abcdef012345678")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from typing import Dict, List, Optional, Tuple

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from formforge.auth.service import AuthService
from formforge.core.database.entities import Organization
from formforge.core.database.repositories.bundle import build_sql_repos_from_session
from formforge.core.database.utils import create_all, create_sessionmaker
from formforge.server.core.config import Settings


class FakeRedis:
    """In-memory stand-in for the subset of ``redis.asyncio.Redis`` the app uses."""

    def __init__(self) -> None:
        self.store: Dict[str, str] = {}
        self.ttls: Dict[str, int] = {}
        self.closed = False

    async def get(self, key: str) -> Optional[str]:
        return self.store.get(key)

    async def setex(self, key: str, ttl: int, value: str) -> bool:
        self.store[key] = value
        self.ttls[key] = ttl
        return True

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if self.store.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
        return removed

    async def ping(self) -> bool:
        return True

    async def aclose(self) -> None:
        self.closed = True


class UnavailableRedis:
    """Redis double whose every command fails as if the server were down."""

    async def get(self, key: str):
        raise RedisConnectionError("Connection refused")

    async def setex(self, key: str, ttl: int, value: str):
        raise RedisConnectionError("Connection refused")

    async def delete(self, *keys: str):
        raise RedisConnectionError("Connection refused")

    async def ping(self):
        raise RedisConnectionError("Connection refused")


class RecordingNotifier:
    """Verification notifier that keeps every code it is asked to send."""

    def __init__(self) -> None:
        self.sent: List[Tuple[str, str]] = []

    async def send_verification_code(self, email: str, code: str) -> None:
        self.sent.append((email, code))

    def last_code_for(self, email: str) -> str:
        for sent_email, code in reversed(self.sent):
            if sent_email == email:
                return code
        raise AssertionError(f"No verification code was sent to {email}")


@pytest.fixture
def app_settings() -> Settings:
    """Settings built from the test environment only, ignoring any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
async def engine():
    """In-memory SQLite engine shared by every connection of a test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def session(engine):
    async with create_sessionmaker(engine)() as session:
        yield session


@pytest.fixture
def repos(session):
    return build_sql_repos_from_session(session=session)


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def unavailable_redis() -> UnavailableRedis:
    return UnavailableRedis()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def auth_service(session, fake_redis, app_settings, notifier) -> AuthService:
    return AuthService.from_session(session, fake_redis, settings=app_settings, notifier=notifier)


@pytest.fixture
async def organization(repos) -> Organization:
    return await repos.organizations.create(Organization(name="Acme Corp", domain="acme.example"))
