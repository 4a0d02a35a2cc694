"""
Shared test fixtures for the events API test suite.

Each test gets a fresh in-memory database (aiosqlite + StaticPool, foreign
keys on) and an httpx AsyncClient wired to the app.
"""

import os
import sys
from typing import AsyncGenerator, Generator

import pytest

# Ensure project root is importable
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# Override environment BEFORE importing application modules
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["CORS_ORIGINS"] = '["*"]'

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession, async_sessionmaker,
                                    create_async_engine)
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.core.security import create_access_token
from app.db.base import Base
from app.db.session import enable_sqlite_foreign_keys
from app.main import app
from app.models.volunteer import Volunteer
from app.services import credentials

ADMIN_EMAIL = "admin@ifrs.edu.br"
ADMIN_PASSWORD = "admin123"
USER_EMAIL = "usuario@ifrs.edu.br"
USER_PASSWORD = "senha123"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create all tables before usage and dispose after."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Return a raw database session for direct queries in tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def asgi_transport(session_factory) -> Generator[ASGITransport, None, None]:
    """ASGI transport into the app, with ``get_db`` bound to the test database."""

    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    yield ASGITransport(app=app)
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(asgi_transport) -> AsyncGenerator[AsyncClient, None]:
    """Return a httpx AsyncClient wired to the app."""
    async with AsyncClient(transport=asgi_transport, base_url="http://test") as client:
        yield client


# ── Auth helpers ────────────────────────────────────────────────────
@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(ADMIN_EMAIL, 'admin')}"}


@pytest.fixture
def user_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(USER_EMAIL, 'user')}"}


@pytest.fixture
async def registered_users(db_session: AsyncSession) -> None:
    """Admin and regular accounts matching the seeded defaults."""
    await credentials.register(db_session, ADMIN_EMAIL, ADMIN_PASSWORD, "admin")
    await credentials.register(db_session, USER_EMAIL, USER_PASSWORD, "user")


@pytest.fixture
async def volunteer_ids(db_session: AsyncSession) -> list[int]:
    """Four volunteers; returns their ids in creation order."""
    volunteers = [
        Volunteer(name="Ana Souza", phone="(54) 99999-0001", email="ana@example.com"),
        Volunteer(name="Bruno Lima", phone="(54) 99999-0002"),
        Volunteer(name="Carla Dias", phone="54 99999 0003", email="carla@example.com"),
        Volunteer(name="Davi Rocha", phone="(54) 99999-0004"),
    ]
    db_session.add_all(volunteers)
    await db_session.commit()
    return [v.id for v in volunteers]
