"""Key-value state storage backends."""

import json
import logging
from pathlib import Path

from filelock import FileLock

from ces.config.paths import get_state_path

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Read/write persisted state from ~/.ces/state.json.

    Uses file locking for safe concurrent access between processes. Reads
    are not transactional with later writes; a concurrent writer to the same
    key wins on its own write.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or get_state_path()
        self._lock = FileLock(str(self._path) + ".lock")

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(
                "state_read_failed",
                extra={"file.path": str(self._path), "error.message": str(e)},
            )
            return {}
        if not isinstance(data, dict):
            logger.warning("state_not_an_object", extra={"file.path": str(self._path)})
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write_all(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n")

    def get(self, key: str, default: str = "") -> str:
        with self._lock:
            data = self._read_all()
        return data.get(key, default)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read_all()
            data[key] = value
            self._write_all(data)

    def delete(self, key: str) -> bool:
        """Remove a key.

        Returns:
            True if the key was removed, False if not found.
        """
        with self._lock:
            data = self._read_all()
            if key not in data:
                return False
            del data[key]
            self._write_all(data)
        return True


class MemoryStore:
    """In-process store for tests and dry runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str, default: str = "") -> str:
        return self._data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
