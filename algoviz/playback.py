"""Playback controller: cursor navigation and autoplay over a Timeline."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from enum import Enum

from .run_types import PlaybackConfig
from .scheduler import ScheduledTick, TickScheduler
from .timeline_types import Snapshot, Timeline

logger = logging.getLogger(__name__)


class PlaybackState(str, Enum):
    IDLE = "idle"
    PAUSED = "paused"
    PLAYING = "playing"


class PlaybackController:
    """Holds one timeline, a cursor into it, and an autoplay flag.

    Boundary moves are no-ops, never errors. At most one autoplay tick is
    pending at any time; every call that replaces or pauses playback
    cancels it and bumps ``generation``, so a tick that still fires for an
    older generation does nothing.

    ``on_change`` is called with the current snapshot after every reset and
    every move of the cursor.
    """

    def __init__(
        self,
        scheduler: TickScheduler | None = None,
        config: PlaybackConfig = PlaybackConfig(),
        on_change: Callable[[Snapshot | None], None] | None = None,
    ):
        self._scheduler = scheduler
        self._config = config
        self._on_change = on_change
        self._timeline: Timeline | None = None
        self._cursor = 0
        self._playing = False
        self._pending: ScheduledTick | None = None
        self.generation = 0

    # ── Read accessors ───────────────────────────────────────────

    @property
    def timeline(self) -> Timeline | None:
        return self._timeline

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def state(self) -> PlaybackState:
        if self._timeline is None:
            return PlaybackState.IDLE
        return PlaybackState.PLAYING if self._playing else PlaybackState.PAUSED

    @property
    def at_end(self) -> bool:
        return self._timeline is None or self._cursor >= len(self._timeline) - 1

    @property
    def interval(self) -> float:
        if self._timeline is None:
            return 0.0
        return self._config.interval_for(self._timeline.algorithm)

    def current_snapshot(self) -> Snapshot | None:
        if self._timeline is None:
            return None
        return self._timeline[self._cursor]

    # ── Transitions ──────────────────────────────────────────────

    def reset(self, timeline: Timeline | None) -> Snapshot | None:
        self._cancel_pending()
        self._timeline = timeline
        self._cursor = 0
        self._playing = False
        logger.debug(
            "Reset to %s (%d steps)",
            timeline.algorithm.value if timeline else "idle",
            len(timeline) if timeline else 0,
        )
        self._notify()
        return self.current_snapshot()

    def step_forward(self) -> Snapshot | None:
        return self._move_to(self._cursor + 1)

    def step_backward(self) -> Snapshot | None:
        return self._move_to(self._cursor - 1)

    def seek(self, index: int) -> Snapshot | None:
        """Jump to *index*, clamped into the timeline."""
        return self._move_to(index)

    def toggle_play(self) -> bool:
        """Flip autoplay; returns the new ``is_playing``."""
        if self._playing:
            self._playing = False
            self._cancel_pending()
        elif not self.at_end:
            self._playing = True
            self._schedule_tick()
        return self._playing

    def _move_to(self, index: int) -> Snapshot | None:
        if self._timeline is None:
            return None
        target = min(max(index, 0), len(self._timeline) - 1)
        moved = target != self._cursor
        self._cursor = target
        if self.at_end and self._playing:
            self._playing = False
            self._cancel_pending()
        if moved:
            self._notify()
        return self.current_snapshot()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.current_snapshot())

    # ── Autoplay ─────────────────────────────────────────────────

    def _cancel_pending(self) -> None:
        self.generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _schedule_tick(self) -> None:
        if self._scheduler is None:
            return
        self._cancel_pending()
        self._pending = self._scheduler.schedule(
            self.interval, functools.partial(self._on_tick, self.generation)
        )

    def _on_tick(self, generation: int) -> None:
        if generation != self.generation or not self._playing:
            logger.debug("Ignoring stale tick (generation %d)", generation)
            return
        self._pending = None
        self.step_forward()
        if self._playing:
            self._schedule_tick()
