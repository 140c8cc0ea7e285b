"""One-shot delayed callback on the running asyncio loop."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import timedelta

logger = logging.getLogger(__name__)


class RunOnceScheduler:
    """Runs an async callback once after a delay.

    Scheduling again replaces the pending firing, so at most one firing is
    ever pending. A firing that already started runs to completion; cancel()
    and dispose() only affect the pending one.

    Example:
        timer = RunOnceScheduler(show_prompt, timedelta(hours=1))
        timer.schedule()  # uses the default delay
        timer.schedule(timedelta(0))  # replaces it, fires on the next loop turn
    """

    def __init__(
        self,
        callback: Callable[[], Awaitable[None]],
        default_delay: timedelta,
    ) -> None:
        self._callback = callback
        self._default_delay = default_delay
        self._handle: asyncio.TimerHandle | None = None
        self._delay: timedelta | None = None
        self._tasks: set[asyncio.Task] = set()
        self._disposed = False

    @property
    def delay(self) -> timedelta | None:
        """Delay of the most recent schedule() call."""
        return self._delay

    @property
    def is_scheduled(self) -> bool:
        return self._handle is not None

    @property
    def is_running(self) -> bool:
        return bool(self._tasks)

    def schedule(self, delay: timedelta | None = None) -> None:
        if self._disposed:
            logger.debug("schedule_after_dispose_ignored")
            return
        self.cancel()
        if delay is None:
            delay = self._default_delay
        self._delay = delay
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(max(delay.total_seconds(), 0.0), self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def dispose(self) -> None:
        self.cancel()
        self._disposed = True

    async def join(self) -> None:
        """Wait for firings that already started."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _fire(self) -> None:
        self._handle = None
        task = asyncio.get_running_loop().create_task(self._run())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self) -> None:
        try:
            await self._callback()
        except Exception:
            logger.exception("scheduled_callback_failed")
