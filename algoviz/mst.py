"""Step generators for minimum spanning tree construction."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from . import constants
from .disjoint_set import DisjointSet
from .graph_types import GraphEdge, MstState, coerce_edges, total_weight
from .recorder import StepRecorder
from .run_types import Algorithm
from .timeline_types import StepKind, Timeline

EdgeInput = Iterable[GraphEdge | Mapping[str, Any]]


def _weight(edge: GraphEdge) -> int | float:
    return edge.weight


def _crosses_cut(edge: GraphEdge, visited: set[int]) -> bool:
    return (edge.node1 in visited) != (edge.node2 in visited)


def _touched_nodes(edges: Iterable[GraphEdge]) -> tuple[int, ...]:
    nodes: set[int] = set()
    for edge in edges:
        nodes.update((edge.node1, edge.node2))
    return tuple(sorted(nodes))


def kruskal_steps(node_count: int, edges: EdgeInput) -> Timeline:
    """Record Kruskal's algorithm over an undirected weighted graph.

    Edges are considered in ascending weight order (ties keep input order).
    Generation stops with a ``complete`` step as soon as ``node_count - 1``
    edges are accepted; a disconnected graph exhausts the edge list and ends
    with an ``incomplete`` step holding the spanning forest.
    """
    ordered = sorted(coerce_edges(edges, node_count), key=_weight)
    target = max(node_count - 1, 0)
    dsu = DisjointSet(node_count)
    accepted: list[GraphEdge] = []
    rejected: list[GraphEdge] = []
    recorder = StepRecorder(Algorithm.KRUSKAL)

    def emit(
        kind: StepKind,
        current: GraphEdge | None,
        pending: list[GraphEdge],
        description: str,
    ) -> None:
        components = dsu.components()
        state = MstState(
            accepted=tuple(accepted),
            rejected=tuple(rejected),
            candidates=tuple(pending),
            current=current,
            visited=_touched_nodes(accepted),
            components=components,
        )
        recorder.emit(
            kind,
            state,
            highlight=(current.key,) if current else (),
            metrics={
                "total_cost": total_weight(accepted),
                "accepted_count": len(accepted),
                "rejected_count": len(rejected),
                "component_count": len(components),
                "spanning": len(accepted) == target,
            },
            description=description,
        )

    emit(
        StepKind.START,
        None,
        ordered,
        f"Starting Kruskal's algorithm: {len(ordered)} edges sorted by weight",
    )
    if len(accepted) == target:
        emit(StepKind.COMPLETE, None, ordered, "MST complete! Total cost: 0")
        return recorder.finish()

    for index, edge in enumerate(ordered):
        pending = ordered[index + 1 :]
        emit(
            StepKind.CONSIDER_EDGE,
            edge,
            pending,
            f"Considering edge {edge.node1}-{edge.node2} with weight {edge.weight}",
        )
        if dsu.find(edge.node1) != dsu.find(edge.node2):
            dsu.union(edge.node1, edge.node2)
            accepted.append(edge)
            emit(
                StepKind.ACCEPT_EDGE,
                edge,
                pending,
                f"Accepted edge {edge.node1}-{edge.node2}. No cycle formed.",
            )
        else:
            rejected.append(edge)
            emit(
                StepKind.REJECT_EDGE,
                edge,
                pending,
                f"Rejected edge {edge.node1}-{edge.node2}. Would create a cycle.",
            )

        if len(accepted) == target:
            emit(
                StepKind.COMPLETE,
                None,
                pending,
                f"MST complete! Total cost: {total_weight(accepted)}",
            )
            return recorder.finish()

    emit(
        StepKind.INCOMPLETE,
        None,
        [],
        f"Edges exhausted: graph is disconnected. Spanning forest has "
        f"{len(dsu.components())} components, total cost {total_weight(accepted)}",
    )
    return recorder.finish()


def prim_steps(
    node_count: int,
    edges: EdgeInput,
    start_node: int = constants.DEFAULT_START_NODE,
) -> Timeline:
    """Record Prim's algorithm growing a tree from *start_node*.

    Candidates are edges with exactly one visited endpoint, kept sorted by
    weight; each round takes the first candidate crossing the cut with a
    linear scan. The run ends with a ``complete`` step either when the tree
    spans every node or when no candidate is left, in which case the
    ``spanning`` metric is False.
    An empty graph records just ``start`` and ``complete``.
    """
    graph_edges = coerce_edges(edges, node_count)
    if node_count and not 0 <= start_node < node_count:
        raise ValueError(
            f"Start node {start_node} is outside 0..{node_count - 1}"
        )

    incident: dict[int, list[GraphEdge]] = {n: [] for n in range(node_count)}
    for edge in graph_edges:
        incident[edge.node1].append(edge)
        incident[edge.node2].append(edge)

    target = node_count - 1
    visited: set[int] = {start_node} if node_count else set()
    mst: list[GraphEdge] = []
    candidates: list[GraphEdge] = []
    recorder = StepRecorder(Algorithm.PRIM)

    def emit(kind: StepKind, current: GraphEdge | None, description: str) -> None:
        tree = (tuple(sorted(visited)),) if visited else ()
        components = tree + tuple(
            (n,) for n in range(node_count) if n not in visited
        )
        state = MstState(
            accepted=tuple(mst),
            candidates=tuple(candidates),
            current=current,
            visited=tuple(sorted(visited)),
            components=tuple(sorted(components)),
        )
        recorder.emit(
            kind,
            state,
            highlight=(current.key,) if current else (),
            metrics={
                "total_cost": total_weight(mst),
                "accepted_count": len(mst),
                "visited_count": len(visited),
                "component_count": len(components),
                "spanning": len(visited) == node_count,
            },
            description=description,
        )

    if node_count == 0:
        emit(StepKind.START, None, "Starting Prim's algorithm on an empty graph")
        emit(StepKind.COMPLETE, None, "MST complete! Total minimum cost: 0")
        return recorder.finish()

    emit(StepKind.START, None, f"Starting Prim's algorithm from node {start_node}")

    candidates = sorted(incident[start_node], key=_weight)
    emit(
        StepKind.CANDIDATES,
        None,
        f"Added candidate edges from node {start_node}. Selecting minimum weight edge.",
    )

    while len(mst) < target:
        index = next(
            (i for i, e in enumerate(candidates) if _crosses_cut(e, visited)), None
        )
        if index is None:
            break
        edge = candidates[index]
        emit(
            StepKind.CONSIDER_EDGE,
            edge,
            f"Considering edge {edge.node1}-{edge.node2} with weight {edge.weight}",
        )

        mst.append(edge)
        new_node = edge.node2 if edge.node1 in visited else edge.node1
        visited.add(new_node)
        del candidates[index]
        emit(
            StepKind.ACCEPT_EDGE,
            edge,
            f"Added edge {edge.node1}-{edge.node2} to MST. "
            f"Node {new_node} joined the tree.",
        )

        if len(mst) < target:
            candidates.extend(
                e for e in incident[new_node] if e.other(new_node) not in visited
            )
            candidates = sorted(
                (e for e in candidates if _crosses_cut(e, visited)), key=_weight
            )
            next_weight = candidates[0].weight if candidates else "none"
            emit(
                StepKind.UPDATE,
                None,
                f"Updated candidate edges. Next minimum: {next_weight}",
            )

    candidates = []
    if len(visited) == node_count:
        description = f"MST complete! Total minimum cost: {total_weight(mst)}"
    else:
        description = (
            f"No candidate edge reaches the remaining nodes. Tree covers "
            f"{len(visited)} of {node_count} nodes, total cost {total_weight(mst)}"
        )
    emit(StepKind.COMPLETE, None, description)
    return recorder.finish()
