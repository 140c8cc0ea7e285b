"""URL opening."""

import asyncio
import logging
import webbrowser

logger = logging.getLogger(__name__)


class BrowserUrlOpener:
    """Opens URLs in the user's default browser."""

    async def open(self, uri: str) -> bool:
        opened = await asyncio.to_thread(webbrowser.open, uri)
        if not opened:
            logger.warning("browser_open_failed", extra={"url": uri})
        return opened
