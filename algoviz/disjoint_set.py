"""Disjoint-Set (Union-Find) over the integer range 0..n-1."""

from __future__ import annotations


class DisjointSet:
    """Union by rank with path compression."""

    def __init__(self, size: int) -> None:
        self.parent: dict[int, int] = {i: i for i in range(size)}
        self.rank: dict[int, int] = {i: 0 for i in range(size)}

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression: point every node on the walk at the root
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets holding *x* and *y*; False if they already match."""
        rx = self.find(x)
        ry = self.find(y)
        if rx == ry:
            return False
        if self.rank[rx] < self.rank[ry]:
            self.parent[rx] = ry
        elif self.rank[rx] > self.rank[ry]:
            self.parent[ry] = rx
        else:
            self.parent[ry] = rx
            self.rank[rx] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def components(self) -> tuple[tuple[int, ...], ...]:
        """Current partition, each part sorted, parts ordered by smallest member."""
        groups: dict[int, list[int]] = {}
        for element in sorted(self.parent):
            groups.setdefault(self.find(element), []).append(element)
        return tuple(sorted(tuple(g) for g in groups.values()))
