"""Completion statistics and "mark all" batch updates."""
from __future__ import annotations

import logging
from typing import List, Sequence, Union

from session_composer.errors import PartialMutationError
from session_composer.models import (
    CompletionPatch,
    CompletionStats,
    ExerciseEntry,
    MergedGymGroup,
    SupersetRun,
    TypedRun,
)
from session_composer.services.completion_store import CompletionStore

logger = logging.getLogger(__name__)

ExerciseSource = Union[TypedRun, SupersetRun, MergedGymGroup, Sequence[ExerciseEntry]]


def exercises_of(source: ExerciseSource) -> List[ExerciseEntry]:
    """Return the exercises held by any group kind, or the list itself."""
    if isinstance(source, (TypedRun, SupersetRun, MergedGymGroup)):
        return source.exercises
    if isinstance(source, (list, tuple)):
        return list(source)
    raise TypeError(f"Unknown group: {source!r}")


def stats(source: ExerciseSource) -> CompletionStats:
    """Compute completion stats; percentage is rounded half up."""
    exercises = exercises_of(source)
    total = len(exercises)
    completed = sum(1 for exercise in exercises if exercise.completed)
    percentage = (200 * completed + total) // (2 * total) if total > 0 else 0
    return CompletionStats(
        total=total,
        completed=completed,
        percentage=percentage,
        all_completed=total > 0 and completed == total,
        none_completed=completed == 0,
    )


def toggle_target(source: ExerciseSource) -> bool:
    """Value a "mark all" toggle applies: uncheck everything once all are done."""
    return not stats(source).all_completed


def mark_all(source: ExerciseSource, value: bool) -> CompletionPatch:
    """Set ``completed`` on every exercise in place and return the patch.

    On a merged gym group this covers both plain gym work and the nested
    superset members.
    """
    exercises = exercises_of(source)
    for exercise in exercises:
        exercise.completed = value
    return CompletionPatch(exercise_ids=[e.id for e in exercises], completed=value)


def mark_all_persisted(source: ExerciseSource, value: bool, store: CompletionStore) -> CompletionPatch:
    """Persist a "mark all" batch, then mirror it onto the local exercises.

    Local entries are only touched once the store confirms every id.

    Raises:
        PartialMutationError: If the store did not update every target id.
    """
    exercises = exercises_of(source)
    patch = CompletionPatch(exercise_ids=[e.id for e in exercises], completed=value)
    updated = store.apply(patch)
    failed = [i for i in patch.exercise_ids if i not in updated]
    if failed:
        logger.warning(f"[completion] mark all failed for {len(failed)}/{len(exercises)} exercises")
        raise PartialMutationError(failed, value)
    return mark_all(exercises, value)
