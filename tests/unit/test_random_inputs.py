"""Tests for the random array and graph generators."""

import random

import pytest

from algoviz.random_inputs import random_array, random_graph


class TestRandomArray:
    def test_default_bounds(self):
        values = random_array(random.Random(0))

        assert len(values) == 20
        assert all(10 <= v <= 99 for v in values)

    def test_same_seed_same_array(self):
        assert random_array(random.Random(7)) == random_array(random.Random(7))

    def test_custom_length(self):
        assert len(random_array(random.Random(1), length=5)) == 5


class TestRandomGraph:
    @pytest.mark.parametrize("seed", range(30))
    def test_every_node_has_an_edge(self, seed):
        edges = random_graph(random.Random(seed))

        touched = {n for e in edges for n in (e.node1, e.node2)}
        assert touched == set(range(6))

    def test_weights_in_range(self):
        edges = random_graph(random.Random(3))

        assert all(1 <= e.weight <= 15 for e in edges)
        assert all(e.node1 < e.node2 for e in edges)

    def test_repair_pass_on_empty_graph(self):
        edges = random_graph(random.Random(5), node_count=4, edge_probability=0.0)

        touched = {n for e in edges for n in (e.node1, e.node2)}
        assert touched == {0, 1, 2, 3}
        assert all(1 <= e.weight <= 10 for e in edges)

    def test_full_graph(self):
        edges = random_graph(random.Random(5), node_count=5, edge_probability=1.0)

        assert len(edges) == 10

    def test_single_node_has_no_edges(self):
        assert random_graph(random.Random(0), node_count=1) == []
