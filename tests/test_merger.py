"""Tests for merging gym runs with adjacent supersets."""
import pytest

from session_composer.models import MergedGymGroup, SectionKind, SupersetRun, TypedRun
from session_composer.services.grouping import group_sequentially
from session_composer.services.merger import merge_gym_groups

from factories import gym, ids, other, superset


def _merge(entries):
    return merge_gym_groups(group_sequentially(entries))


class TestGymAdjacency:
    """Supersets fold into gym blocks only when they touch gym work."""

    def test_superset_between_gym_runs_merges_into_one_group(self):
        groups = _merge([gym(1, 1), gym(2, 2), superset("S", 3, 3), superset("S", 4, 4), gym(5, 5)])
        assert len(groups) == 1
        assert isinstance(groups[0], MergedGymGroup)
        assert ids(groups[0].exercises) == [1, 2, 3, 4, 5]

    def test_sprint_breaks_adjacency(self):
        groups = _merge([gym(1, 1), other(2, 2, kind_id=6), superset("S", 3, 3)])
        assert [type(g) for g in groups] == [MergedGymGroup, TypedRun, SupersetRun]
        assert groups[1].kind == SectionKind.SPRINT
        assert ids(groups[2].exercises) == [3]

    def test_superset_before_gym_opens_merged_group(self):
        groups = _merge([superset("A", 1, 1), superset("A", 2, 2), gym(3, 3)])
        assert len(groups) == 1
        assert isinstance(groups[0], MergedGymGroup)
        assert ids(groups[0].exercises) == [1, 2, 3]

    def test_superset_after_sprint_then_gym_opens_new_block(self):
        groups = _merge([gym(1, 1), other(2, 2, kind_id=6), superset("A", 3, 3), gym(4, 4)])
        assert [type(g) for g in groups] == [MergedGymGroup, TypedRun, MergedGymGroup]
        assert ids(groups[0].exercises) == [1]
        assert ids(groups[2].exercises) == [3, 4]

    def test_order_distance_of_one_chains_second_superset(self):
        groups = _merge([gym(1, 1), superset("A", 2, 2), superset("B", 3, 3)])
        assert len(groups) == 1
        assert ids(groups[0].exercises) == [1, 2, 3]

    def test_order_gap_keeps_second_superset_standalone(self):
        groups = _merge([gym(1, 1), superset("A", 2, 2), superset("B", 3, 5)])
        assert [type(g) for g in groups] == [MergedGymGroup, SupersetRun]
        assert ids(groups[0].exercises) == [1, 2]
        assert groups[1].superset_id == "B"

    def test_standalone_superset_closes_gym_block(self):
        groups = _merge([
            gym(1, 1),
            superset("A", 2, 2),
            superset("B", 3, 5),
            superset("C", 4, 6),
        ])
        assert [type(g) for g in groups] == [MergedGymGroup, SupersetRun, SupersetRun]

    def test_split_superset_around_gym_merges(self):
        groups = _merge([superset("S", 1, 1), gym(2, 2), superset("S", 3, 3)])
        assert len(groups) == 1
        assert ids(groups[0].exercises) == [1, 2, 3]

    def test_split_superset_around_sprint_stays_two_runs(self):
        groups = _merge([superset("S", 1, 1), other(2, 2, kind_id=6), superset("S", 3, 3)])
        assert [type(g) for g in groups] == [SupersetRun, TypedRun, SupersetRun]
        assert groups[0].superset_id == groups[2].superset_id == "S"

    def test_supersets_without_gym_untouched(self):
        groups = _merge([superset("A", 1, 1), superset("A", 2, 2)])
        assert len(groups) == 1
        assert isinstance(groups[0], SupersetRun)


class TestNonGymRuns:
    """Non-gym kinds pass through and are never merged."""

    @pytest.mark.parametrize("kind_id", [1, 3, 4, 5, 6, 7, None])
    def test_non_gym_run_passes_through(self, kind_id):
        groups = _merge([other(1, 1, kind_id=kind_id), other(2, 2, kind_id=kind_id)])
        assert len(groups) == 1
        assert isinstance(groups[0], TypedRun)
        assert ids(groups[0].exercises) == [1, 2]

    def test_non_gym_next_to_superset_does_not_merge(self):
        groups = _merge([other(1, 1, kind_id=5), superset("A", 2, 2), other(3, 3, kind_id=5)])
        assert [type(g) for g in groups] == [TypedRun, SupersetRun, TypedRun]

    def test_gym_runs_separated_by_other_kind_stay_separate(self):
        groups = _merge([gym(1, 1), other(2, 2, kind_id=7), gym(3, 3)])
        assert [type(g) for g in groups] == [MergedGymGroup, TypedRun, MergedGymGroup]


class TestMergeOutput:
    """Ordering and purity of the merge pass."""

    def test_merged_exercises_sorted_by_order(self):
        groups = _merge([gym(1, 10), superset("A", 2, 11), superset("A", 3, 12), gym(4, 13)])
        assert [e.order for e in groups[0].exercises] == [10, 11, 12, 13]

    def test_input_groups_not_mutated(self):
        provisional = group_sequentially([gym(1, 1), superset("A", 2, 2), gym(3, 3)])
        before = [g.model_dump() for g in provisional]
        merge_gym_groups(provisional)
        assert [g.model_dump() for g in provisional] == before

    def test_empty_input(self):
        assert merge_gym_groups([]) == []

    def test_unknown_group_raises(self):
        with pytest.raises(TypeError):
            merge_gym_groups([{"group_type": "typed"}])
