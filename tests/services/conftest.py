"""Service test fixtures — async DB + FastAPI test client + onboarding helpers.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - `owner` is a registered user with a wedding; `stranger` owns a second wedding

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - StaticPool: one shared connection, so every session sees the same database
    - Factory fixtures (make_event, make_household) keep tests to the behavior
      under test instead of setup boilerplate
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from weddingsite.db.base import Base
from weddingsite.db.session import enable_sqlite_foreign_keys
from weddingsite.infrastructure.database import get_db, DatabaseSessionManager
import weddingsite.infrastructure.database as db_module
from weddingsite.main import app

from tests.services.helpers import OWNER_ID, STRANGER_ID, onboard


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Identities ──────────────────────────────────────────────────

@pytest.fixture
def owner_headers() -> dict:
    return {"X-User-Id": OWNER_ID}


@pytest.fixture
def stranger_headers() -> dict:
    return {"X-User-Id": STRANGER_ID}


@pytest.fixture
async def owner(client) -> dict:
    """The owner's wedding (with a dated "Wedding Day" event)."""
    return await onboard(client, OWNER_ID, "owner@example.com")


@pytest.fixture
async def stranger(client) -> dict:
    """A second, unrelated wedding."""
    return await onboard(
        client, STRANGER_ID, "stranger@example.com",
        groom_first_name="Bob", bride_first_name="Alice",
    )


# ─── Factories ───────────────────────────────────────────────────

@pytest.fixture
def make_event(client, owner_headers):
    async def _make(name: str = "Reception", headers: dict | None = None, **fields):
        res = await client.post(
            "/api/v1/events", json={"name": name, **fields},
            headers=headers or owner_headers,
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _make


@pytest.fixture
def make_household(client, owner_headers):
    async def _make(guest_party: list[dict] | None = None, headers: dict | None = None, **fields):
        body = {
            "guest_party": guest_party or [{"first_name": "Alice", "last_name": "Walker"}],
            **fields,
        }
        res = await client.post(
            "/api/v1/households", json=body, headers=headers or owner_headers,
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _make


@pytest.fixture
def enable_website(client, owner_headers):
    async def _enable(headers: dict | None = None, **fields):
        res = await client.post(
            "/api/v1/websites", json=fields, headers=headers or owner_headers,
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _enable

