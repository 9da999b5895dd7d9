"""Repository for the meeting collection.

The whole collection is stored as one list under the ``meetings`` key, so
every write is a read-modify-replace of the full list.
"""

import structlog
from pydantic import ValidationError

from src.models.meeting import Meeting
from src.repositories.kv_store import MEETINGS_KEY, KeyValueStore

logger = structlog.get_logger()


class MeetingRepository:
    """Reads and replaces the stored meeting list."""

    def __init__(self, store: KeyValueStore):
        """Initialize repository with a key-value store.

        Args:
            store: Store holding the ``meetings`` document
        """
        self._store = store

    async def list_all(self) -> list[Meeting]:
        """Load every stored meeting in stored order.

        Records that cannot be read as a Meeting even after defaulting are
        skipped and logged rather than failing the whole read.
        """
        raw = await self._store.get(MEETINGS_KEY)
        if not isinstance(raw, list):
            return []

        meetings = []
        for record in raw:
            try:
                meetings.append(Meeting.model_validate(record))
            except ValidationError as e:
                logger.warning(
                    "skipping unreadable meeting record",
                    record_id=record.get("id") if isinstance(record, dict) else None,
                    error=str(e),
                )
        return meetings

    async def replace_all(self, meetings: list[Meeting]) -> None:
        """Persist the full meeting list."""
        await self._store.set(MEETINGS_KEY, [m.to_store() for m in meetings])

    async def add(self, meeting: Meeting) -> None:
        """Append one meeting to the stored collection."""
        meetings = await self.list_all()
        meetings.append(meeting)
        await self.replace_all(meetings)

    async def delete(self, meeting_id: str) -> bool:
        """Remove a meeting by id.

        Returns:
            True if a meeting was removed, False if the id was unknown
        """
        meetings = await self.list_all()
        remaining = [m for m in meetings if m.id != meeting_id]
        if len(remaining) == len(meetings):
            return False
        await self.replace_all(remaining)
        return True
