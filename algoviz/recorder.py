"""Snapshot recorder shared by every step generator."""

from __future__ import annotations

import logging
import time
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from .run_types import Algorithm, GenerationStats
from .timeline_types import Snapshot, StepKind, Timeline

logger = logging.getLogger(__name__)


class StepRecorder:
    """Accumulates snapshots for one run, then seals them into a Timeline.

    Callers pass the live working values; highlights are copied into a
    tuple and Snapshot freezes metrics into a read-only copy. Callers are
    responsible for passing an immutable (or freshly copied) primary state.
    """

    def __init__(self, algorithm: Algorithm):
        self.algorithm = algorithm
        self._snapshots: list[Snapshot] = []
        self._started = time.perf_counter()

    def __len__(self) -> int:
        return len(self._snapshots)

    def emit(
        self,
        kind: StepKind,
        primary_state: Any,
        highlight: Iterable = (),
        metrics: Mapping[str, Any] | None = None,
        description: str = "",
    ) -> Snapshot:
        snapshot = Snapshot(
            step_index=len(self._snapshots),
            kind=kind,
            primary_state=primary_state,
            highlight=tuple(highlight),
            metrics=metrics or {},
            description=description,
        )
        self._snapshots.append(snapshot)
        logger.debug(
            "[%s %d] %s %s",
            self.algorithm.value,
            snapshot.step_index,
            kind.value,
            description,
        )
        return snapshot

    def finish(self) -> Timeline:
        elapsed = time.perf_counter() - self._started
        counts = Counter(s.kind.value for s in self._snapshots)
        stats = GenerationStats(
            algorithm=self.algorithm.value,
            steps=len(self._snapshots),
            kind_counts=dict(counts),
            generation_time=elapsed,
        )
        logger.info(
            "Generated %s timeline: %d steps in %.2fms",
            self.algorithm.value,
            stats.steps,
            elapsed * 1000,
        )
        return Timeline(
            algorithm=self.algorithm,
            snapshots=tuple(self._snapshots),
            stats=stats,
        )
