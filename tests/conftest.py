"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from src.config import settings
from src.db.turso import TursoClient
from src.main import app
from src.repositories.kv_store import InMemoryKeyValueStore, TursoKeyValueStore
from src.services.meeting_cost_service import MeetingCostService
from tests.factories import NOW


@pytest.fixture
def no_retry_wait(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make store retries immediate."""
    monkeypatch.setattr(settings, "store_retry_wait_seconds", 0.0)


@pytest.fixture
def memory_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def service(memory_store: InMemoryKeyValueStore) -> MeetingCostService:
    """Service over an in-memory store with a fixed clock."""
    return MeetingCostService(memory_store, clock=lambda: NOW)


@pytest.fixture
async def db_client(tmp_path: Path) -> AsyncIterator[TursoClient]:
    """Create a temp file database client for testing."""
    db_path = tmp_path / "test_kv.db"
    client = TursoClient(url=f"file:{db_path}")
    await client.connect()
    yield client
    await client.close()


@pytest.fixture
async def client(tmp_path: Path) -> AsyncIterator[AsyncClient]:
    """Create async test client for FastAPI app with database."""
    # Set up test database
    db_path = tmp_path / "test_api.db"
    db = TursoClient(url=f"file:{db_path}")
    await db.connect()

    store = TursoKeyValueStore(db)
    await store.initialize()

    # Set up app state
    app.state.db = db
    app.state.cost_service = MeetingCostService(store)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Cleanup
    await db.close()
    del app.state.db
    del app.state.cost_service
