"""Weighted undirected graph data types."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from . import constants


class GraphEdge(BaseModel):
    """An undirected weighted edge between two node ids."""

    model_config = ConfigDict(frozen=True)

    node1: int = Field(ge=0)
    node2: int = Field(ge=0)
    weight: int | float

    @model_validator(mode="after")
    def _reject_self_loop(self) -> GraphEdge:
        if self.node1 == self.node2:
            raise ValueError(f"Self-loop on node {self.node1} is not allowed")
        return self

    @property
    def key(self) -> str:
        low, high = sorted((self.node1, self.node2))
        return constants.EDGE_KEY_TEMPLATE.format(low=low, high=high)

    def other(self, node: int) -> int:
        return self.node2 if node == self.node1 else self.node1

    def __str__(self) -> str:
        return f"{self.node1}-{self.node2} (w={self.weight})"

    def to_dict(self) -> dict:
        return {"node1": self.node1, "node2": self.node2, "weight": self.weight}


def coerce_edges(
    edges: Iterable[GraphEdge | Mapping[str, Any]], node_count: int
) -> tuple[GraphEdge, ...]:
    """Validate raw edge records and check their endpoints against *node_count*."""
    if node_count < 0:
        raise ValueError(f"Node count must be non-negative, got {node_count}")
    result = tuple(
        e if isinstance(e, GraphEdge) else GraphEdge.model_validate(e) for e in edges
    )
    for edge in result:
        if edge.node1 >= node_count or edge.node2 >= node_count:
            raise ValueError(
                f"Edge {edge} references a node outside 0..{node_count - 1}"
            )
    return result


def total_weight(edges: Iterable[GraphEdge]) -> int | float:
    return sum(e.weight for e in edges)


@dataclass(frozen=True)
class MstState:
    """Everything a renderer needs to draw one MST step."""

    accepted: tuple[GraphEdge, ...] = ()
    rejected: tuple[GraphEdge, ...] = ()
    candidates: tuple[GraphEdge, ...] = ()
    current: GraphEdge | None = None
    visited: tuple[int, ...] = ()
    components: tuple[tuple[int, ...], ...] = ()

    def to_dict(self) -> dict:
        return {
            "accepted": [e.to_dict() for e in self.accepted],
            "rejected": [e.to_dict() for e in self.rejected],
            "candidates": [e.to_dict() for e in self.candidates],
            "current": self.current.to_dict() if self.current else None,
            "visited": list(self.visited),
            "components": [list(c) for c in self.components],
        }
