import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from typing import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import nurse_connect.models  # noqa: F401
from nurse_connect.core.database import get_async_session
from nurse_connect.db.seeds.initial_data import create_initial_data
from nurse_connect.main import app
from nurse_connect.models.base import Base

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite://"

SCENARIO_SHIFT = {
    "facility_id": 1,
    "unit": "ICU",
    "shift_type": "day",
    "start_time": "2025-03-01T07:00:00Z",
    "end_time": "2025-03-01T19:00:00Z",
    "hourly_rate": 50,
}


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # SQLite leaves foreign keys unenforced unless asked
    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_maker(test_engine) -> async_sessionmaker:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def setup_database(session_maker):
    """Seed the demo facility (id 1) and demo nurse (id 1)"""
    async with session_maker() as session:
        await create_initial_data(session)


@pytest.fixture
async def client(session_maker, setup_database) -> AsyncGenerator[AsyncClient, None]:
    """Create test client"""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def create_shift(client: AsyncClient) -> Callable:
    """POST a shift built from the scenario payload plus overrides; returns the response"""

    async def _create(**overrides):
        payload = {**SCENARIO_SHIFT, **overrides}
        return await client.post("/api/shifts", json=payload)

    return _create
