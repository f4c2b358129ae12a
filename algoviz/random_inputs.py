"""Random inputs for the visualizer pages: arrays and small weighted graphs."""

from __future__ import annotations

import logging
import random

from . import constants
from .graph_types import GraphEdge

logger = logging.getLogger(__name__)


def random_array(
    rng: random.Random,
    length: int = constants.RANDOM_ARRAY_LENGTH,
    low: int = constants.RANDOM_ARRAY_LOW,
    high: int = constants.RANDOM_ARRAY_HIGH,
) -> list[int]:
    """*length* integers drawn uniformly from [low, high]."""
    return [rng.randint(low, high) for _ in range(length)]


def random_graph(
    rng: random.Random,
    node_count: int = constants.RANDOM_GRAPH_NODE_COUNT,
    edge_probability: float = constants.RANDOM_GRAPH_EDGE_PROBABILITY,
    max_weight: int = constants.RANDOM_GRAPH_MAX_WEIGHT,
) -> list[GraphEdge]:
    """Random undirected graph over ``0..node_count-1``.

    Each pair is joined with probability *edge_probability*. A repair pass
    then gives every node left without an incident edge one edge to
    another randomly chosen node, so no node is isolated (the graph as a
    whole may still be disconnected).
    """
    edges: list[GraphEdge] = []
    for i in range(node_count):
        for j in range(i + 1, node_count):
            if rng.random() < edge_probability:
                edges.append(
                    GraphEdge(node1=i, node2=j, weight=rng.randint(1, max_weight))
                )

    touched = {n for e in edges for n in (e.node1, e.node2)}
    for node in range(node_count):
        if node in touched or node_count < 2:
            continue
        target = rng.choice([n for n in range(node_count) if n != node])
        low, high = sorted((node, target))
        edges.append(
            GraphEdge(
                node1=low,
                node2=high,
                weight=rng.randint(1, constants.REPAIR_EDGE_MAX_WEIGHT),
            )
        )
        touched.update((node, target))
        logger.debug("Repaired isolated node %d with edge %d-%d", node, low, high)
    return edges
