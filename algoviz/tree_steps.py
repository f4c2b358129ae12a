"""Timelines over binary search trees: traversals and operation logs."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from . import bst
from .bst import TreeNode
from .recorder import StepRecorder
from .run_types import TRAVERSAL_ORDERS, Algorithm, parse_algorithm
from .timeline_types import StepKind, Timeline

_TRAVERSALS: dict[Algorithm, Callable[[TreeNode | None], list[Any]]] = {
    Algorithm.INORDER: bst.inorder,
    Algorithm.PREORDER: bst.preorder,
    Algorithm.POSTORDER: bst.postorder,
    Algorithm.LEVEL_ORDER: bst.level_order,
}


def traversal_steps(root: TreeNode | None, order: str | Algorithm) -> Timeline:
    """Wrap a traversal's visit order as a timeline revealing one value per step."""
    algorithm = parse_algorithm(order, TRAVERSAL_ORDERS)
    sequence = _TRAVERSALS[algorithm](root)
    recorder = StepRecorder(algorithm)
    total = len(sequence)

    recorder.emit(
        StepKind.START,
        (),
        metrics={"visited_count": 0, "total": total},
        description=f"Starting {algorithm.value} traversal of {total} nodes",
    )
    for position, value in enumerate(sequence):
        recorder.emit(
            StepKind.VISIT,
            tuple(sequence[: position + 1]),
            highlight=(value,),
            metrics={"visited_count": position + 1, "total": total},
            description=f"Step {position + 1} of {total}: visited {value!r}",
        )
    recorder.emit(
        StepKind.COMPLETE,
        tuple(sequence),
        metrics={"visited_count": total, "total": total},
        description=f"Full sequence: [{', '.join(repr(v) for v in sequence)}]",
    )
    return recorder.finish()


# ── Operation log ────────────────────────────────────────────────


class BstOperation(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal["insert", "remove"]
    value: Any


@dataclass(frozen=True)
class BstState:
    root: TreeNode | None
    values: tuple[Any, ...] = ()

    def to_dict(self) -> dict:
        return {
            "root": self.root.to_dict() if self.root else None,
            "values": list(self.values),
        }


def _coerce_operation(op: BstOperation | tuple[str, Any]) -> BstOperation:
    if isinstance(op, BstOperation):
        return op
    action, value = op
    return BstOperation(action=action, value=value)


def bst_operation_steps(
    operations: Iterable[BstOperation | tuple[str, Any]],
    initial: TreeNode | None = None,
) -> Timeline:
    """Record the tree after every insert/remove in *operations*.

    Trees are immutable, so every snapshot keeps the exact tree it saw.
    Inserting a present value or removing an absent one still records a
    step, with the tree unchanged.
    """
    ops = [_coerce_operation(op) for op in operations]
    recorder = StepRecorder(Algorithm.BST_OPERATIONS)
    root = initial

    def emit(kind: StepKind, highlight: Iterable[Any], description: str) -> None:
        recorder.emit(
            kind,
            BstState(root=root, values=tuple(bst.inorder(root))),
            highlight=highlight,
            metrics={"size": bst.size(root), "height": bst.height(root)},
            description=description,
        )

    emit(StepKind.START, (), f"Starting with {bst.size(root)} nodes")
    for op in ops:
        path = bst.search_path(root, op.value)
        if op.action == "insert":
            updated = bst.insert(root, op.value)
            if updated is root:
                description = f"{op.value!r} already present, tree unchanged"
            else:
                description = f"Added node: {op.value!r}"
                path.append(op.value)
            root = updated
            emit(StepKind.INSERT, path, description)
        else:
            updated = bst.remove(root, op.value)
            if updated is root:
                description = f"{op.value!r} not found, tree unchanged"
            else:
                description = f"Removed node: {op.value!r}"
            root = updated
            emit(StepKind.REMOVE, path, description)
    emit(StepKind.COMPLETE, (), f"Finished {len(ops)} operations")
    return recorder.finish()
