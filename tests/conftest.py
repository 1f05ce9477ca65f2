"""Root conftest — shared test configuration and database/client fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched for code that bypasses get_db (readiness probe)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific behaviour is not exercised here)
"""

import os

# Never point tests at a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

import personality_api.infrastructure.database as db_module  # noqa: E402
from personality_api.db.base import Base  # noqa: E402
from personality_api.db.session import create_session_factory  # noqa: E402
from personality_api.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from personality_api.main import app  # noqa: E402
from personality_api.models.personality import Personality  # noqa: E402

TURING_HISTORY = (
    "British mathematician and computer scientist, "
    "considered the father of theoretical computer science."
)


@pytest.fixture
async def test_engine_and_factory():
    engine, factory = create_session_factory("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine, factory
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine_and_factory):
    return test_engine_and_factory[1]


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine_and_factory):
    """FastAPI test client with DB dependency overridden."""
    engine, factory = test_engine_and_factory

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Patch db_manager for the readiness probe, which uses it directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = engine
    fake_manager._session_factory = factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_personality(test_db):
    """Insert one personality directly into the test DB."""
    personality = Personality(name="Alan Turing", history=TURING_HISTORY)
    test_db.add(personality)
    await test_db.commit()
    await test_db.refresh(personality)
    return personality
