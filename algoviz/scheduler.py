"""Tick schedulers driving autoplay."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

logger = logging.getLogger(__name__)


class ScheduledTick(ABC):
    """Handle to one pending callback."""

    @abstractmethod
    def cancel(self) -> None: ...


class TickScheduler(ABC):
    """Abstract source of delayed callbacks."""

    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTick: ...


class _AsyncioTick(ScheduledTick):
    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()


class AsyncioTickScheduler(TickScheduler):
    """Schedules ticks on an asyncio event loop (single-threaded).

    Without an explicit loop, the loop running at scheduling time is used.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTick:
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioTick(loop.call_later(delay, callback))


class _ManualTick(ScheduledTick):
    def __init__(
        self,
        owner: ManualTickScheduler,
        delay: float,
        callback: Callable[[], None],
    ):
        self._owner = owner
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        if not self.cancelled:
            self.cancelled = True
            self._owner._discard(self)


class ManualTickScheduler(TickScheduler):
    """Deterministic scheduler: ticks only fire when the caller says so.

    Keeps a virtual clock advanced by the delay of every fired tick.
    """

    def __init__(self) -> None:
        self._pending: list[_ManualTick] = []
        self.clock = 0.0
        self.fired = 0

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTick:
        tick = _ManualTick(self, delay, callback)
        self._pending.append(tick)
        return tick

    def _discard(self, tick: _ManualTick) -> None:
        if tick in self._pending:
            self._pending.remove(tick)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def fire_next(self) -> bool:
        """Run the oldest pending tick; False when nothing is pending."""
        if not self._pending:
            return False
        tick = self._pending.pop(0)
        self.clock += tick.delay
        self.fired += 1
        tick.callback()
        return True

    def run_until_idle(self, max_ticks: int = 10_000) -> int:
        count = 0
        while count < max_ticks and self.fire_next():
            count += 1
        if count == max_ticks and self.pending:
            logger.warning("Stopped after %d ticks with work still pending", count)
        return count
