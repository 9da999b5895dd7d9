"""Turso/libSQL database client wrapper."""

import logging
from typing import Any

from libsql_client import Client, ResultSet, create_client

from src.config import settings

logger = logging.getLogger(__name__)


class TursoClient:
    """Thin async wrapper around the libSQL client.

    Backs the key-value store. Works against cloud Turso (with auth token)
    and local SQLite files (``file:`` URLs, used in tests).
    """

    def __init__(
        self,
        url: str | None = None,
        auth_token: str | None = None,
    ):
        """Initialize client with connection parameters.

        Args:
            url: Database URL. Defaults to settings or local file.
            auth_token: Auth token for Turso cloud. Defaults to settings.
        """
        self.url = url or settings.turso_database_url or "file:meeting_costs.db"
        self.auth_token = auth_token or settings.turso_auth_token
        self._client: Client | None = None

    async def connect(self) -> None:
        """Open the connection. Calling twice is a no-op."""
        if self._client is not None:
            return

        if self.auth_token and self.url.startswith("libsql://"):
            self._client = create_client(url=self.url, auth_token=self.auth_token)
        else:
            self._client = create_client(url=self.url)

        logger.info(f"Connected to database: {self.url}")

    def _require_client(self) -> Client:
        if not self._client:
            msg = "Not connected. Call connect() first."
            raise RuntimeError(msg)
        return self._client

    async def execute(
        self,
        sql: str,
        params: list[Any] | None = None,
    ) -> ResultSet:
        """Execute a single SQL statement with ``?`` placeholders."""
        return await self._require_client().execute(sql, params or [])

    async def fetch_one(
        self,
        sql: str,
        params: list[Any] | None = None,
    ) -> tuple | None:
        """Execute a query and return its first row, or None when empty."""
        result = await self.execute(sql, params)
        if not result.rows:
            return None
        return tuple(result.rows[0])

    async def execute_batch(self, statements: list[str]) -> None:
        """Execute several statements in one batch (schema setup)."""
        await self._require_client().batch(statements)

    async def close(self) -> None:
        """Close the database connection."""
        if self._client:
            await self._client.close()
            self._client = None
            logger.info("Database connection closed")

    async def is_healthy(self) -> bool:
        """True when connected and answering a trivial query."""
        if not self._client:
            return False
        try:
            return await self.fetch_one("SELECT 1") is not None
        except Exception:
            logger.warning("Database health check failed", exc_info=True)
            return False
