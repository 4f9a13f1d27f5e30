"""Grouping, merging and completion services for training sessions."""
from .classifier import classify, section_label
from .completion import exercises_of, mark_all, mark_all_persisted, stats, toggle_target
from .completion_store import CompletionStore, InMemoryCompletionStore
from .composer import (
    compute_groups,
    compute_groups_with_separate_supersets,
    exercises_for_kind,
    group_contains_supersets,
    summarize_session,
)
from .decomposer import decompose
from .grouping import group_sequentially
from .merger import merge_gym_groups

__all__ = [
    "classify",
    "section_label",
    "exercises_of",
    "mark_all",
    "mark_all_persisted",
    "stats",
    "toggle_target",
    "CompletionStore",
    "InMemoryCompletionStore",
    "compute_groups",
    "compute_groups_with_separate_supersets",
    "exercises_for_kind",
    "group_contains_supersets",
    "summarize_session",
    "decompose",
    "group_sequentially",
    "merge_gym_groups",
]
