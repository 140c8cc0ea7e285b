"""File-backed telemetry sink."""

from __future__ import annotations

import hashlib
import json
import logging
import uuid
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import aiofiles

from ces.dates import format_http_date, utc_now
from ces.services.protocols import TelemetryInfo
from ces.store.protocols import FIRST_SESSION_DATE_KEY, MACHINE_ID_KEY, KeyValueStore

logger = logging.getLogger(__name__)


class FileTelemetryService:
    """Writes public telemetry events to daily JSONL files.

    Events go to ``<events_dir>/YYYY-MM-DD.jsonl``, one JSON object per line.
    Installation identity (first session date, machine id) lives in the
    key-value store and is created on first use.
    """

    def __init__(
        self,
        store: KeyValueStore,
        events_dir: Path,
        enabled: bool = True,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._events_dir = events_dir
        self._enabled = enabled
        self._clock = clock

    async def public_log(self, event_name: str, payload: dict[str, str]) -> None:
        if not self._enabled:
            logger.debug("telemetry_dropped", extra={"telemetry.event": event_name})
            return

        now = self._clock()
        entry = {"ts": now.isoformat(), "event": event_name, "data": payload}
        line = json.dumps(entry, ensure_ascii=False, separators=(",", ":"))

        self._events_dir.mkdir(parents=True, exist_ok=True)
        path = self._events_dir / f"{now.strftime('%Y-%m-%d')}.jsonl"
        async with aiofiles.open(path, "a", encoding="utf-8") as f:
            await f.write(line + "\n")

    async def get_telemetry_info(self) -> TelemetryInfo:
        first_session_date = self._store.get(FIRST_SESSION_DATE_KEY)
        if not first_session_date:
            first_session_date = format_http_date(self._clock())
            self._store.set(FIRST_SESSION_DATE_KEY, first_session_date)

        machine_id = self._store.get(MACHINE_ID_KEY)
        if not machine_id:
            machine_id = hashlib.sha256(uuid.uuid4().bytes).hexdigest()
            self._store.set(MACHINE_ID_KEY, machine_id)

        return TelemetryInfo(
            first_session_date=first_session_date,
            machine_id=machine_id,
        )
