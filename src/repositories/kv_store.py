"""Key-value persistence for the dashboard.

Every dashboard document (the meeting list, the role rates, the settings)
lives under a single key and is replaced wholesale on write. Absent keys
read as None; callers substitute their own defaults.
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any, Protocol

from src.db.turso import TursoClient
from src.repositories.retry import with_store_retry

logger = logging.getLogger(__name__)

MEETINGS_KEY = "meetings"
ROLE_RATES_KEY = "config:roleRates"
SETTINGS_KEY = "config:settings"


class KeyValueStore(Protocol):
    """Storage interface the service layer depends on."""

    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any) -> None: ...


class TursoKeyValueStore:
    """Key-value store on a single libSQL table.

    Values are stored as JSON text. Reads and writes are retried on
    transient failures and raise StoreError when the store is unavailable.
    """

    def __init__(self, db_client: TursoClient):
        """Initialize store with database client.

        Args:
            db_client: TursoClient instance for database operations
        """
        self._db = db_client

    async def initialize(self) -> None:
        """Create the kv_store table if not exists."""
        await self._db.execute_batch(
            [
                """
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """,
            ]
        )
        logger.info("Key-value store initialized")

    @with_store_retry
    async def get(self, key: str) -> Any | None:
        """Read and decode the value stored under ``key``.

        Returns:
            Decoded JSON value, or None when the key is absent
        """
        row = await self._db.fetch_one(
            "SELECT value FROM kv_store WHERE key = ?",
            [key],
        )
        if row is None:
            return None
        return json.loads(row[0])

    @with_store_retry
    async def set(self, key: str, value: Any) -> None:
        """Replace the value stored under ``key`` (upsert)."""
        await self._db.execute(
            """
            INSERT INTO kv_store (key, value, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT(key)
            DO UPDATE SET
                value = excluded.value,
                updated_at = excluded.updated_at
            """,
            [key, json.dumps(value), datetime.now(UTC).isoformat()],
        )


class InMemoryKeyValueStore:
    """Process-local store for tests and local development.

    Values round-trip through JSON so callers never share mutable state
    with the store.
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, str] = {
            key: json.dumps(value) for key, value in (initial or {}).items()
        }

    async def get(self, key: str) -> Any | None:
        raw = self._data.get(key)
        return None if raw is None else json.loads(raw)

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)
