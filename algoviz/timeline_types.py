"""Timeline data types for step-by-step algorithm replay."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from .run_types import Algorithm, GenerationStats


class StepKind(str, Enum):
    START = "start"
    # Sorts
    SELECT = "select"
    COMPARE = "compare"
    SWAP = "swap"
    MERGE_COMPARE = "merge-compare"
    MERGE_DRAIN = "merge-drain"
    MERGE_WRITE = "merge-write"
    # MST
    CANDIDATES = "candidates"
    CONSIDER_EDGE = "consider-edge"
    ACCEPT_EDGE = "accept-edge"
    REJECT_EDGE = "reject-edge"
    UPDATE = "update"
    # Trees
    VISIT = "visit"
    INSERT = "insert"
    REMOVE = "remove"
    # Terminal
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"


TERMINAL_KINDS: frozenset[StepKind] = frozenset(
    {StepKind.COMPLETE, StepKind.INCOMPLETE}
)


def _serialize_state(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (tuple, list)):
        return [_serialize_state(v) for v in value]
    return value


@dataclass(frozen=True)
class Snapshot:
    """A single recorded step of an algorithm run.

    Every field holds either an immutable value or a fresh copy taken when
    the step was emitted, so later steps can never leak into earlier ones.
    """

    step_index: int
    kind: StepKind
    primary_state: Any
    highlight: tuple = ()
    metrics: Mapping[str, Any] = field(default_factory=dict)
    description: str = ""

    def __post_init__(self) -> None:
        # Read-only copy of the caller's metrics.
        object.__setattr__(self, "metrics", MappingProxyType(dict(self.metrics)))

    @property
    def is_terminal(self) -> bool:
        return self.kind in TERMINAL_KINDS

    def to_dict(self) -> dict:
        return {
            "step_index": self.step_index,
            "kind": self.kind.value,
            "primary_state": _serialize_state(self.primary_state),
            "highlight": list(self.highlight),
            "metrics": dict(self.metrics),
            "description": self.description,
        }


@dataclass(frozen=True)
class Timeline:
    """Complete, eagerly materialized record of one generation run.

    The first snapshot is the state before the algorithm starts and the
    last one is its terminal state.
    """

    algorithm: Algorithm
    snapshots: tuple[Snapshot, ...]
    stats: GenerationStats = field(default_factory=GenerationStats)

    def __post_init__(self) -> None:
        if not self.snapshots:
            raise ValueError("A timeline must contain at least one snapshot")

    def __len__(self) -> int:
        return len(self.snapshots)

    def __getitem__(self, index: int) -> Snapshot:
        return self.snapshots[index]

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self.snapshots)

    @property
    def initial(self) -> Snapshot:
        return self.snapshots[0]

    @property
    def terminal(self) -> Snapshot:
        return self.snapshots[-1]

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm.value,
            "steps": len(self.snapshots),
            "snapshots": [s.to_dict() for s in self.snapshots],
        }
