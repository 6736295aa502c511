"""
Periodic tick scheduler on the asyncio event loop.

Ticks are queued on the same loop that delivers key presses, so a tick and a
key handler never run at the same time.
"""

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class Ticker:
    """Cancellable fixed-period timer that re-arms itself after each firing."""

    def __init__(self, interval: float, callback: Callable[[], None]):
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self.interval = interval
        self.callback = callback
        self.count = 0
        self._loop: asyncio.AbstractEventLoop | None = None
        self._handle: asyncio.TimerHandle | None = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Start ticking; must be called from the loop's thread."""
        if self.running:
            return
        self._loop = loop or asyncio.get_running_loop()
        logger.debug(f"Ticker started every {self.interval}s")
        self._schedule()

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug(f"Ticker stopped after {self.count} ticks")

    def _schedule(self) -> None:
        assert self._loop is not None
        self._handle = self._loop.call_later(self.interval, self._fire)

    def _fire(self) -> None:
        if self._handle is None:
            return
        self.count += 1
        try:
            self.callback()
        finally:
            # The callback may have cancelled us
            if self._handle is not None:
                self._schedule()
