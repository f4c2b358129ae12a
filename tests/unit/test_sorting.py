"""Tests for the comparison-sort step generators."""

import random

import pytest

from algoviz.sorting import insertion_sort_steps, merge_sort_steps
from algoviz.timeline_types import StepKind, Timeline


def _kinds(timeline):
    return [s.kind for s in timeline]


class TestInsertionSortSteps:
    def test_step_sequence_for_small_array(self):
        timeline = insertion_sort_steps([5, 3, 8, 1])

        assert _kinds(timeline) == [
            StepKind.START,
            StepKind.SELECT,
            StepKind.COMPARE,
            StepKind.SWAP,
            StepKind.SELECT,
            StepKind.SELECT,
            StepKind.COMPARE,
            StepKind.SWAP,
            StepKind.COMPARE,
            StepKind.SWAP,
            StepKind.COMPARE,
            StepKind.SWAP,
            StepKind.COMPLETE,
        ]
        assert timeline.terminal.primary_state == (1, 3, 5, 8)

    def test_swap_pairs_per_insertion(self):
        timeline = insertion_sort_steps([5, 3, 8, 1])
        selects = [i for i, s in enumerate(timeline) if s.kind == StepKind.SELECT]
        bounds = selects + [len(timeline) - 1]

        swaps_per_insertion = [
            sum(1 for s in timeline.snapshots[lo:hi] if s.kind == StepKind.SWAP)
            for lo, hi in zip(bounds, bounds[1:])
        ]

        assert swaps_per_insertion == [1, 0, 3]

    def test_swap_highlights_same_pair_as_compare(self):
        timeline = insertion_sort_steps([4, 2, 3, 1])

        for prev, step in zip(timeline.snapshots, timeline.snapshots[1:]):
            if step.kind == StepKind.SWAP:
                assert prev.kind == StepKind.COMPARE
                assert step.highlight == prev.highlight

    def test_initial_snapshot_highlights_first_element(self):
        timeline = insertion_sort_steps([2, 1])

        assert timeline.initial.kind == StepKind.START
        assert timeline.initial.highlight == (0,)
        assert timeline.initial.primary_state == (2, 1)

    def test_terminal_snapshot_has_empty_highlight(self):
        timeline = insertion_sort_steps([2, 1])

        assert timeline.terminal.kind == StepKind.COMPLETE
        assert timeline.terminal.highlight == ()

    def test_metrics_count_comparisons_and_writes(self):
        timeline = insertion_sort_steps([5, 3, 8, 1])

        assert timeline.terminal.metrics == {"comparisons": 5, "writes": 4}

    def test_does_not_mutate_input(self):
        values = [3, 2, 1]
        insertion_sort_steps(values)
        assert values == [3, 2, 1]

    def test_empty_input_yields_start_and_complete(self):
        timeline = insertion_sort_steps([])

        assert _kinds(timeline) == [StepKind.START, StepKind.COMPLETE]
        assert timeline.initial.highlight == ()

    def test_sorted_input_needs_no_swaps(self):
        timeline = insertion_sort_steps([1, 2, 3])

        assert StepKind.SWAP not in _kinds(timeline)


class TestMergeSortSteps:
    def test_step_sequence_for_three_items(self):
        timeline = merge_sort_steps([3, 1, 2])

        assert _kinds(timeline) == [
            StepKind.START,
            StepKind.MERGE_COMPARE,
            StepKind.MERGE_DRAIN,
            StepKind.MERGE_WRITE,
            StepKind.MERGE_WRITE,
            StepKind.MERGE_COMPARE,
            StepKind.MERGE_COMPARE,
            StepKind.MERGE_DRAIN,
            StepKind.MERGE_WRITE,
            StepKind.MERGE_WRITE,
            StepKind.MERGE_WRITE,
            StepKind.COMPLETE,
        ]
        assert timeline.terminal.primary_state == (1, 2, 3)
        assert timeline.terminal.metrics == {"comparisons": 3, "writes": 5}

    def test_compare_highlights_competing_indices(self):
        timeline = merge_sort_steps([3, 1, 2])

        compares = [s.highlight for s in timeline if s.kind == StepKind.MERGE_COMPARE]
        assert compares == [(0, 1), (0, 2), (1, 2)]

    def test_writes_go_left_to_right(self):
        timeline = merge_sort_steps([4, 3, 2, 1])

        writes = [s.highlight[0] for s in timeline if s.kind == StepKind.MERGE_WRITE]
        assert writes == [0, 1, 2, 3, 0, 1, 2, 3]

    def test_stable_for_equal_keys(self):
        tagged = [(2, "a"), (1, "b"), (2, "c"), (1, "d"), (2, "e")]

        timeline = merge_sort_steps(tagged, key=lambda item: item[0])

        assert timeline.terminal.primary_state == (
            (1, "b"),
            (1, "d"),
            (2, "a"),
            (2, "c"),
            (2, "e"),
        )

    def test_single_item(self):
        timeline = merge_sort_steps([7])

        assert _kinds(timeline) == [StepKind.START, StepKind.COMPLETE]

    def test_earlier_snapshots_unaffected_by_later_steps(self):
        timeline = merge_sort_steps([4, 3, 2, 1])

        assert timeline.initial.primary_state == (4, 3, 2, 1)
        assert isinstance(timeline.initial.primary_state, tuple)


class TestSortProperties:
    @pytest.mark.parametrize("generator", [insertion_sort_steps, merge_sort_steps])
    @pytest.mark.parametrize("seed", range(8))
    def test_terminal_state_is_sorted_permutation(self, generator, seed):
        rng = random.Random(seed)
        values = [rng.randint(10, 99) for _ in range(rng.randint(0, 20))]

        timeline = generator(values)

        assert isinstance(timeline, Timeline)
        assert list(timeline.terminal.primary_state) == sorted(values)
        assert timeline.initial.primary_state == tuple(values)

    @pytest.mark.parametrize("generator", [insertion_sort_steps, merge_sort_steps])
    def test_step_indices_are_sequential(self, generator):
        timeline = generator([9, 4, 7, 1, 3])

        assert [s.step_index for s in timeline] == list(range(len(timeline)))

    @pytest.mark.parametrize("generator", [insertion_sort_steps, merge_sort_steps])
    def test_stats_count_every_snapshot(self, generator):
        timeline = generator([9, 4, 7, 1, 3])

        assert timeline.stats.steps == len(timeline)
        assert sum(timeline.stats.kind_counts.values()) == len(timeline)
