"""Repository layer for data persistence.

Provides the key-value store the dashboard persists into and repository
classes for the documents kept in it. Repositories encapsulate data access
logic and provide a clean interface for the service layer.
"""

from src.repositories.config_repo import ConfigRepository
from src.repositories.kv_store import (
    InMemoryKeyValueStore,
    KeyValueStore,
    TursoKeyValueStore,
)
from src.repositories.meeting_repo import MeetingRepository
from src.repositories.retry import StoreError

__all__ = [
    "ConfigRepository",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "MeetingRepository",
    "StoreError",
    "TursoKeyValueStore",
]
