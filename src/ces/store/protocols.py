"""Protocol definitions for the key-value store.

The survey scheduler only needs string get/set against a store that is durable
across restarts and global to the installation. Implementations can be swapped
or mocked in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# Persisted keys (global scope)
SKIP_SURVEY_KEY = "ces/skipSurvey"
REMIND_LATER_DATE_KEY = "ces/remindLaterDate"
FIRST_SESSION_DATE_KEY = "telemetry.firstSessionDate"
MACHINE_ID_KEY = "telemetry.machineId"


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for persisted string values keyed by string."""

    def get(self, key: str, default: str = "") -> str:
        """Get a value, returning default when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        ...
