"""Tests for the DisjointSet union-find structure."""

from algoviz.disjoint_set import DisjointSet


class TestDisjointSet:
    def test_starts_as_singletons(self):
        dsu = DisjointSet(4)

        assert len(dsu) == 4
        assert dsu.components() == ((0,), (1,), (2,), (3,))

    def test_union_merges_components(self):
        dsu = DisjointSet(4)

        assert dsu.union(0, 1) is True
        assert dsu.union(2, 3) is True
        assert dsu.components() == ((0, 1), (2, 3))
        assert dsu.connected(0, 1)
        assert not dsu.connected(1, 2)

    def test_union_within_component_returns_false(self):
        dsu = DisjointSet(3)
        dsu.union(0, 1)
        dsu.union(1, 2)

        assert dsu.union(0, 2) is False

    def test_find_is_idempotent_after_compression(self):
        dsu = DisjointSet(5)
        for a, b in [(0, 1), (2, 3), (0, 2), (4, 3)]:
            dsu.union(a, b)

        root = dsu.find(4)

        assert dsu.find(4) == root
        assert dsu.parent[4] == root
        assert {dsu.find(i) for i in range(5)} == {root}

    def test_rank_grows_only_on_equal_rank_union(self):
        dsu = DisjointSet(3)
        dsu.union(0, 1)
        dsu.union(2, 0)

        assert dsu.rank[dsu.find(0)] == 1
