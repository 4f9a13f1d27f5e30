"""Split merged gym groups back into gym work and supersets for rendering."""
from __future__ import annotations

from typing import Dict, List

from session_composer.models import (
    DecomposedGroup,
    ExerciseEntry,
    MergedGymGroup,
    SupersetId,
    SupersetRun,
)
from session_composer.services.grouping import order_key


def decompose(group: MergedGymGroup) -> DecomposedGroup:
    """Separate plain gym exercises from nested supersets.

    Supersets keep the order in which their ids are first seen; the group
    itself is not modified.
    """
    if not isinstance(group, MergedGymGroup):
        raise TypeError(f"Only merged gym groups can be decomposed, got {group!r}")

    gym_exercises: List[ExerciseEntry] = []
    by_superset: Dict[SupersetId, List[ExerciseEntry]] = {}
    for exercise in group.exercises:
        if exercise.superset_id is None:
            gym_exercises.append(exercise)
        else:
            by_superset.setdefault(exercise.superset_id, []).append(exercise)

    return DecomposedGroup(
        gym_exercises=sorted(gym_exercises, key=order_key),
        supersets=[
            SupersetRun(superset_id=superset_id, exercises=sorted(members, key=order_key))
            for superset_id, members in by_superset.items()
        ],
    )
