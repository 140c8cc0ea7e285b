"""Persisted key-value state.

Public API:
- KeyValueStore: Protocol the scheduler depends on
- JsonFileStore: File-backed store shared across processes
- MemoryStore: In-memory store
"""

from ces.store.protocols import (
    FIRST_SESSION_DATE_KEY,
    MACHINE_ID_KEY,
    REMIND_LATER_DATE_KEY,
    SKIP_SURVEY_KEY,
    KeyValueStore,
)
from ces.store.storage import JsonFileStore, MemoryStore

__all__ = [
    "FIRST_SESSION_DATE_KEY",
    "MACHINE_ID_KEY",
    "REMIND_LATER_DATE_KEY",
    "SKIP_SURVEY_KEY",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
]
