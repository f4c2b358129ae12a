"""Composable API functions for timeline generation.

Each function corresponds to a CLI workflow (sort, mst, traverse, bst)
but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from . import constants
from .bst import TreeNode
from .graph_types import GraphEdge, MstState
from .mst import kruskal_steps, prim_steps
from .run_types import (
    MST_ALGORITHMS,
    SORT_ALGORITHMS,
    Algorithm,
    parse_algorithm,
)
from .sorting import SortKey, insertion_sort_steps, merge_sort_steps
from .timeline_types import Snapshot, Timeline
from .tree_steps import BstOperation, BstState, bst_operation_steps, traversal_steps

logger = logging.getLogger(__name__)


def generate_sort_timeline(
    algorithm: str | Algorithm,
    values: Sequence[Any],
    key: SortKey | None = None,
) -> Timeline:
    """Run a comparison sort to completion and return its timeline.

    Args:
        algorithm: "insertion" or "merge".
        values: Items to sort; the sequence itself is never modified.
        key: Optional key function applied before every comparison.

    Returns:
        A Timeline whose last snapshot holds the sorted items.
    """
    resolved = parse_algorithm(algorithm, SORT_ALGORITHMS)
    logger.info("Sorting %d items with %s sort", len(values), resolved.value)
    if resolved == Algorithm.INSERTION_SORT:
        return insertion_sort_steps(values, key=key)
    return merge_sort_steps(values, key=key)


def generate_mst_timeline(
    algorithm: str | Algorithm,
    node_count: int,
    edges: Iterable[GraphEdge | Mapping[str, Any]],
    start_node: int = constants.DEFAULT_START_NODE,
) -> Timeline:
    """Build a minimum spanning tree and return its timeline.

    Args:
        algorithm: "kruskal" or "prim".
        node_count: Number of nodes; ids run from 0 to node_count - 1.
        edges: GraphEdge objects or ``{node1, node2, weight}`` mappings.
        start_node: Root of Prim's tree; ignored by Kruskal.

    Returns:
        A Timeline whose snapshots carry an MstState.
    """
    resolved = parse_algorithm(algorithm, MST_ALGORITHMS)
    logger.info("Building MST with %s over %d nodes", resolved.value, node_count)
    if resolved == Algorithm.KRUSKAL:
        return kruskal_steps(node_count, edges)
    return prim_steps(node_count, edges, start_node=start_node)


def generate_traversal_timeline(
    tree: TreeNode | None, order: str | Algorithm
) -> Timeline:
    """Traverse a BST and return a timeline revealing one visited value per step.

    Args:
        tree: Root of the tree (None for an empty tree).
        order: "inorder", "preorder", "postorder" or "levelorder".

    Returns:
        A Timeline whose primary state is the tuple of values visited so far.
    """
    return traversal_steps(tree, order)


def generate_bst_timeline(
    operations: Iterable[BstOperation | tuple[str, Any]],
    initial: TreeNode | None = None,
) -> Timeline:
    """Apply insert/remove operations to a BST, recording the tree after each.

    Args:
        operations: BstOperation objects or ``(action, value)`` pairs where
            action is "insert" or "remove".
        initial: Tree to start from (None for an empty tree).

    Returns:
        A Timeline whose primary state is a BstState.
    """
    return bst_operation_steps(operations, initial=initial)


def _format_state(state: Any) -> str:
    if isinstance(state, MstState):
        accepted = ", ".join(e.key for e in state.accepted) or "(none)"
        return f"mst=[{accepted}]"
    if isinstance(state, BstState):
        return f"tree={list(state.values)}"
    return str(list(state))


def format_snapshot(snapshot: Snapshot) -> str:
    highlight = ",".join(str(h) for h in snapshot.highlight)
    return (
        f"[{snapshot.step_index:>4}] {snapshot.kind.value:<14} "
        f"{{{highlight}}}  {_format_state(snapshot.primary_state)}  "
        f"# {snapshot.description}"
    )


def dump_timeline(timeline: Timeline) -> str:
    """Render a timeline as text, one snapshot per line.

    Args:
        timeline: The timeline to render.

    Returns:
        A multi-line string.
    """
    return "\n".join(format_snapshot(s) for s in timeline)
