"""Entry points composing a session's exercises into render-ready groups."""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Union

from session_composer.models import (
    ExerciseEntry,
    MergedGymGroup,
    SectionKind,
    SessionSummary,
    SupersetRun,
    TypedRun,
)
from session_composer.services.completion import stats
from session_composer.services.decomposer import decompose
from session_composer.services.grouping import group_sequentially, sort_entries
from session_composer.services.merger import merge_gym_groups

logger = logging.getLogger(__name__)

FinalGroup = Union[TypedRun, SupersetRun, MergedGymGroup]


def compute_groups(exercises: Iterable[ExerciseEntry]) -> List[FinalGroup]:
    """Group a session's exercises and merge gym work with adjacent supersets.

    Pure: call it again on every change to order, superset membership or
    exercise type. Completion changes never alter the result.
    """
    return merge_gym_groups(group_sequentially(exercises))


def compute_groups_with_separate_supersets(
    exercises: Iterable[ExerciseEntry],
) -> List[Union[TypedRun, SupersetRun]]:
    """Like ``compute_groups`` but every merged gym group is flattened into a
    gym ``TypedRun`` (when it has plain gym work) followed by its supersets.
    """
    flattened: List[Union[TypedRun, SupersetRun]] = []
    for group in compute_groups(exercises):
        if isinstance(group, MergedGymGroup):
            parts = decompose(group)
            if parts.gym_exercises:
                flattened.append(TypedRun(kind=SectionKind.GYM, exercises=parts.gym_exercises))
            flattened.extend(parts.supersets)
        elif isinstance(group, (TypedRun, SupersetRun)):
            flattened.append(group)
        else:
            raise TypeError(f"Unknown group: {group!r}")
    return flattened


def exercises_for_kind(groups: Sequence[FinalGroup], kind: SectionKind) -> List[ExerciseEntry]:
    """Exercises of every section of ``kind``; merged gym groups count as gym."""
    selected: List[ExerciseEntry] = []
    for group in groups:
        if isinstance(group, TypedRun):
            if group.kind == kind:
                selected.extend(group.exercises)
        elif isinstance(group, MergedGymGroup):
            if kind == SectionKind.GYM:
                selected.extend(group.exercises)
        elif not isinstance(group, SupersetRun):
            raise TypeError(f"Unknown group: {group!r}")
    return selected


def group_contains_supersets(group: FinalGroup) -> bool:
    """True if any exercise of the group belongs to a superset."""
    return any(exercise.superset_id is not None for exercise in group.exercises)


def summarize_session(exercises: Iterable[ExerciseEntry], separate_supersets: bool = False) -> SessionSummary:
    """Final groups plus per-group and whole-session completion stats."""
    entries = sort_entries(exercises)
    if separate_supersets:
        groups: List[FinalGroup] = list(compute_groups_with_separate_supersets(entries))
    else:
        groups = compute_groups(entries)
    logger.info(f"[composer] composed {len(entries)} exercises into {len(groups)} groups")
    return SessionSummary(
        groups=groups,
        group_stats=[stats(group) for group in groups],
        session_stats=stats(entries),
    )
