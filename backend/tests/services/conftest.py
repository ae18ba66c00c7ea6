"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - get_db dependency overridden to use the test engine
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, exercises the same partial
      unique index and CHECK constraints as PostgreSQL
    - make_item / make_fair are factories, not fixtures-per-shape: tests state the
      fields they care about inline
"""

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import artisan.models  # noqa: F401
from artisan.db.base import Base
from artisan.infrastructure.database import (
    get_db, transaction, DatabaseSessionManager, enable_sqlite_foreign_keys,
)
import artisan.infrastructure.database as db_module
from artisan.main import app
from artisan.services.fair_store import FairStore
from artisan.services.item_store import ItemStore


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_item(test_db):
    """Factory: insert and commit an item. Defaults to 'Silver Earrings', 25.00 x 2."""
    async def _make(**overrides):
        fields = {
            "name": "Silver Earrings",
            "category": "earrings",
            "price": 25.0,
            "quantity": 2,
        }
        fields.update(overrides)
        async with transaction(test_db):
            item = await ItemStore(test_db).create(**fields)
        return item
    return _make


@pytest.fixture
def make_fair(test_db):
    """Factory: insert and commit an inactive fair."""
    async def _make(**overrides):
        fields = {
            "name": "Spring Craft Fair",
            "city": "Porto",
            "start_date": date(2026, 5, 1),
            "end_date": date(2026, 5, 3),
        }
        fields.update(overrides)
        async with transaction(test_db):
            fair = await FairStore(test_db).create(**fields)
        return fair
    return _make
