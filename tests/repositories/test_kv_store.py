"""Tests for the key-value stores."""

from unittest.mock import AsyncMock

import pytest

from src.db.turso import TursoClient
from src.repositories.kv_store import (
    MEETINGS_KEY,
    InMemoryKeyValueStore,
    TursoKeyValueStore,
)
from src.repositories.retry import StoreError


@pytest.fixture
async def store(db_client: TursoClient) -> TursoKeyValueStore:
    """Create TursoKeyValueStore with initialized table."""
    kv = TursoKeyValueStore(db_client)
    await kv.initialize()
    return kv


@pytest.mark.asyncio
async def test_initialize_creates_table(db_client: TursoClient):
    """Initialize should create the kv_store table."""
    await TursoKeyValueStore(db_client).initialize()

    result = await db_client.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='kv_store'"
    )
    assert len(result.rows) == 1


@pytest.mark.asyncio
async def test_initialize_is_idempotent(db_client: TursoClient):
    kv = TursoKeyValueStore(db_client)
    await kv.initialize()
    await kv.initialize()


@pytest.mark.asyncio
async def test_missing_key_is_none(store: TursoKeyValueStore):
    assert await store.get("nope") is None


@pytest.mark.asyncio
async def test_set_and_get(store: TursoKeyValueStore):
    """Values round-trip as JSON documents."""
    value = [{"id": "meeting-1", "durationMinutes": 30}]
    await store.set(MEETINGS_KEY, value)

    assert await store.get(MEETINGS_KEY) == value


@pytest.mark.asyncio
async def test_set_replaces_existing(store: TursoKeyValueStore):
    await store.set("config:settings", {"currency": "USD"})
    await store.set("config:settings", {"currency": "EUR"})

    assert await store.get("config:settings") == {"currency": "EUR"}
    result = await store._db.execute("SELECT COUNT(*) FROM kv_store")
    assert result.rows[0][0] == 1


@pytest.mark.asyncio
async def test_uninitialized_client_raises_store_error():
    """Errors from an unconnected client surface as StoreError."""
    kv = TursoKeyValueStore(TursoClient(url="file:unused.db"))

    with pytest.raises(StoreError, match="Not connected"):
        await kv.get(MEETINGS_KEY)


@pytest.mark.asyncio
async def test_transient_errors_are_retried(no_retry_wait):
    """Connection errors are retried before giving up."""
    db = AsyncMock(spec=TursoClient)
    db.fetch_one.side_effect = [ConnectionError("reset"), ("[1, 2]",)]
    kv = TursoKeyValueStore(db)

    assert await kv.get(MEETINGS_KEY) == [1, 2]
    assert db.fetch_one.await_count == 2


@pytest.mark.asyncio
async def test_retries_exhausted(no_retry_wait):
    db = AsyncMock(spec=TursoClient)
    db.execute.side_effect = ConnectionError("unreachable")
    kv = TursoKeyValueStore(db)

    with pytest.raises(StoreError, match="after 3 attempts"):
        await kv.set(MEETINGS_KEY, [])
    assert db.execute.await_count == 3


class TestInMemoryKeyValueStore:
    """Process-local store used by service tests."""

    async def test_initial_values(self):
        kv = InMemoryKeyValueStore({"a": {"b": 1}})
        assert await kv.get("a") == {"b": 1}
        assert await kv.get("missing") is None

    async def test_values_are_copied(self):
        kv = InMemoryKeyValueStore()
        value = {"items": [1]}
        await kv.set("k", value)
        value["items"].append(2)

        assert await kv.get("k") == {"items": [1]}
