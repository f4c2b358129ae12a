"""Generation and playback data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from . import constants


class Algorithm(str, Enum):
    """Every algorithm the engine can record a timeline for."""

    INSERTION_SORT = "insertion"
    MERGE_SORT = "merge"
    KRUSKAL = "kruskal"
    PRIM = "prim"
    INORDER = "inorder"
    PREORDER = "preorder"
    POSTORDER = "postorder"
    LEVEL_ORDER = "levelorder"
    BST_OPERATIONS = "bst"


SORT_ALGORITHMS: frozenset[Algorithm] = frozenset(
    {Algorithm.INSERTION_SORT, Algorithm.MERGE_SORT}
)
MST_ALGORITHMS: frozenset[Algorithm] = frozenset({Algorithm.KRUSKAL, Algorithm.PRIM})
TRAVERSAL_ORDERS: frozenset[Algorithm] = frozenset(
    {
        Algorithm.INORDER,
        Algorithm.PREORDER,
        Algorithm.POSTORDER,
        Algorithm.LEVEL_ORDER,
    }
)


def parse_algorithm(name: str | Algorithm, allowed: frozenset[Algorithm]) -> Algorithm:
    """Resolve *name* to an Algorithm, restricted to the *allowed* family."""
    try:
        algorithm = Algorithm(name)
    except ValueError:
        algorithm = None
    if algorithm is None or algorithm not in allowed:
        choices = ", ".join(sorted(a.value for a in allowed))
        raise ValueError(
            f"Unsupported algorithm: {name!r} (expected one of: {choices})"
        )
    return algorithm


@dataclass(frozen=True)
class PlaybackConfig:
    """Autoplay tick intervals, in seconds, per algorithm family."""

    insertion_sort_interval: float = constants.INSERTION_SORT_INTERVAL
    merge_sort_interval: float = constants.MERGE_SORT_INTERVAL
    traversal_interval: float = constants.TRAVERSAL_INTERVAL
    bst_operations_interval: float = constants.BST_OPERATIONS_INTERVAL
    kruskal_interval: float = constants.KRUSKAL_INTERVAL
    prim_interval: float = constants.PRIM_INTERVAL

    def interval_for(self, algorithm: Algorithm) -> float:
        if algorithm == Algorithm.INSERTION_SORT:
            return self.insertion_sort_interval
        if algorithm == Algorithm.MERGE_SORT:
            return self.merge_sort_interval
        if algorithm == Algorithm.KRUSKAL:
            return self.kruskal_interval
        if algorithm == Algorithm.PRIM:
            return self.prim_interval
        if algorithm == Algorithm.BST_OPERATIONS:
            return self.bst_operations_interval
        return self.traversal_interval


@dataclass
class GenerationStats:
    """Size and timing statistics for one timeline generation run."""

    algorithm: str = ""
    steps: int = 0
    kind_counts: dict[str, int] = field(default_factory=dict)
    generation_time: float = 0.0

    def report(self) -> str:
        lines = [
            "═══ Timeline Statistics ═══",
            f"  Algorithm: {self.algorithm}",
            f"  Steps: {self.steps} ({self.generation_time * 1000:.2f}ms to generate)",
            "",
            f"  {'Kind':<16} {'Count':>8}",
            f"  {'─' * 16} {'─' * 8}",
        ]
        for kind, count in self.kind_counts.items():
            lines.append(f"  {kind:<16} {count:>8}")
        return "\n".join(lines)
