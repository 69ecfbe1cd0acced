"""
Anythink Market Backend — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Overview:
    ├── mock_db_session: Mock AsyncSession (service unit tests, no DB)
    ├── sample_comment_data: Field values for a stored comment
    ├── database: In-memory SQLite Database with tables created
    ├── test_app: FastAPI app using `database`
    └── test_client: HTTPX AsyncClient bound to `test_app`
"""

import os
import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before any app import: app.main builds its default Database at import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from app.config import Settings  # noqa: E402
from app.database import Database  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    `add` assigns a fresh UUID to the added object, standing in for the
    id the database assigns at flush time.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value = result
    """
    def assign_id(obj):
        obj.id = uuid.uuid4()

    session = AsyncMock()
    session.execute = AsyncMock()
    session.delete = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock(side_effect=assign_id)
    return session


@pytest.fixture
def sample_comment_data():
    """Field values matching the Comment model."""
    return {
        "id": uuid.uuid4(),
        "text": "Great product, fast shipping.",
        "author": "bob",
        "created_at": datetime.now(timezone.utc),
    }


@pytest.fixture
def test_settings():
    return Settings(database_url="sqlite+aiosqlite://", log_level="WARNING")


@pytest_asyncio.fixture
async def database(test_settings):
    """
    Provides a fresh in-memory SQLite database per test.

    StaticPool keeps a single connection, so every session sees the same
    in-memory tables.
    """
    db = Database(test_settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def test_app(test_settings, database):
    """FastAPI app wired to the in-memory `database`."""
    from app.main import create_app

    return create_app(app_settings=test_settings, database=database)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so tables come from the
    `database` fixture rather than DB_CREATE_TABLES.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/comments")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
