"""Compose a training session's exercises into typed sections and supersets."""
from .errors import PartialMutationError, SessionComposerError
from .models import (
    CompletionPatch,
    CompletionStats,
    DecomposedGroup,
    ExerciseEntry,
    MergedGymGroup,
    SectionKind,
    SessionSummary,
    SupersetRun,
    TypedRun,
)
from .services import (
    CompletionStore,
    InMemoryCompletionStore,
    classify,
    compute_groups,
    compute_groups_with_separate_supersets,
    decompose,
    exercises_for_kind,
    group_contains_supersets,
    mark_all,
    mark_all_persisted,
    section_label,
    stats,
    summarize_session,
    toggle_target,
)

__all__ = [
    "PartialMutationError",
    "SessionComposerError",
    "CompletionPatch",
    "CompletionStats",
    "DecomposedGroup",
    "ExerciseEntry",
    "MergedGymGroup",
    "SectionKind",
    "SessionSummary",
    "SupersetRun",
    "TypedRun",
    "CompletionStore",
    "InMemoryCompletionStore",
    "classify",
    "compute_groups",
    "compute_groups_with_separate_supersets",
    "decompose",
    "exercises_for_kind",
    "group_contains_supersets",
    "mark_all",
    "mark_all_persisted",
    "section_label",
    "stats",
    "summarize_session",
    "toggle_target",
]
