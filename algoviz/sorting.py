"""Step generators for comparison sorts."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from .recorder import StepRecorder
from .run_types import Algorithm
from .timeline_types import StepKind, Timeline

SortKey = Callable[[Any], Any]


def _identity(item: Any) -> Any:
    return item


def insertion_sort_steps(values: Sequence[Any], key: SortKey | None = None) -> Timeline:
    """Record insertion sort, one snapshot per compare and per swap.

    Each insertion opens with a ``select`` step on the element being
    inserted; every out-of-order adjacent pair then produces a ``compare``
    step followed by a ``swap`` step highlighting the same pair.
    """
    key = key or _identity
    a = list(values)
    recorder = StepRecorder(Algorithm.INSERTION_SORT)
    counters = {"comparisons": 0, "writes": 0}

    recorder.emit(
        StepKind.START,
        tuple(a),
        highlight=(0,) if a else (),
        metrics=counters,
        description=f"Starting insertion sort on {len(a)} items",
    )

    for i in range(1, len(a)):
        recorder.emit(
            StepKind.SELECT,
            tuple(a),
            highlight=(i,),
            metrics=counters,
            description=f"Inserting {a[i]!r} from index {i}",
        )
        j = i
        while j > 0:
            counters["comparisons"] += 1
            if not key(a[j - 1]) > key(a[j]):
                break
            recorder.emit(
                StepKind.COMPARE,
                tuple(a),
                highlight=(j, j - 1),
                metrics=counters,
                description=f"{a[j - 1]!r} > {a[j]!r}, out of order",
            )
            a[j - 1], a[j] = a[j], a[j - 1]
            counters["writes"] += 1
            recorder.emit(
                StepKind.SWAP,
                tuple(a),
                highlight=(j, j - 1),
                metrics=counters,
                description=f"Swapped indices {j - 1} and {j}",
            )
            j -= 1

    recorder.emit(
        StepKind.COMPLETE,
        tuple(a),
        metrics=counters,
        description="Array sorted",
    )
    return recorder.finish()


def merge_sort_steps(values: Sequence[Any], key: SortKey | None = None) -> Timeline:
    """Record top-down merge sort.

    Every merge emits one ``merge-compare`` step per comparison, one
    ``merge-drain`` step per element taken after the other half ran out,
    and one ``merge-write`` step per write-back, left to right. Ties take
    the left element, so the sort is stable.
    """
    key = key or _identity
    a = list(values)
    recorder = StepRecorder(Algorithm.MERGE_SORT)
    counters = {"comparisons": 0, "writes": 0}

    def merge(left: int, mid: int, right: int) -> None:
        merged: list[Any] = []
        i, j = left, mid + 1
        while i <= mid and j <= right:
            counters["comparisons"] += 1
            recorder.emit(
                StepKind.MERGE_COMPARE,
                tuple(a),
                highlight=(i, j),
                metrics=counters,
                description=f"Comparing {a[i]!r} (index {i}) with {a[j]!r} (index {j})",
            )
            if key(a[i]) <= key(a[j]):
                merged.append(a[i])
                i += 1
            else:
                merged.append(a[j])
                j += 1
        for rest, stop in ((i, mid), (j, right)):
            for k in range(rest, stop + 1):
                recorder.emit(
                    StepKind.MERGE_DRAIN,
                    tuple(a),
                    highlight=(k,),
                    metrics=counters,
                    description=f"Taking remaining {a[k]!r} from index {k}",
                )
                merged.append(a[k])
        for k in range(left, right + 1):
            a[k] = merged[k - left]
            counters["writes"] += 1
            recorder.emit(
                StepKind.MERGE_WRITE,
                tuple(a),
                highlight=(k,),
                metrics=counters,
                description=f"Wrote {a[k]!r} to index {k}",
            )

    def sort(left: int, right: int) -> None:
        if left >= right:
            return
        mid = (left + right) // 2
        sort(left, mid)
        sort(mid + 1, right)
        merge(left, mid, right)

    recorder.emit(
        StepKind.START,
        tuple(a),
        metrics=counters,
        description=f"Starting merge sort on {len(a)} items",
    )
    sort(0, len(a) - 1)
    recorder.emit(
        StepKind.COMPLETE,
        tuple(a),
        metrics=counters,
        description="Array sorted",
    )
    return recorder.finish()
