"""Fuse gym runs with the supersets next to them into merged gym groups."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from session_composer.models import (
    ExerciseEntry,
    MergedGymGroup,
    SectionKind,
    SupersetRun,
    TypedRun,
)
from session_composer.services.grouping import order_key

logger = logging.getLogger(__name__)

ProvisionalGroup = Union[TypedRun, SupersetRun]
FinalGroup = Union[TypedRun, SupersetRun, MergedGymGroup]


def _is_gym_run(group: Optional[ProvisionalGroup]) -> bool:
    return isinstance(group, TypedRun) and group.kind == SectionKind.GYM


def _orders_adjacent(last: ExerciseEntry, first: ExerciseEntry) -> bool:
    if last.order is None or first.order is None:
        return False
    return abs(last.order - first.order) == 1


def _is_gym_adjacent(
    groups: Sequence[ProvisionalGroup],
    index: int,
    current_gym: Optional[MergedGymGroup],
) -> bool:
    """A superset is gym adjacent when a gym run sits right before or after it,
    or when the open gym group ends exactly one order step before it starts.
    """
    previous = groups[index - 1] if index > 0 else None
    following = groups[index + 1] if index + 1 < len(groups) else None
    if _is_gym_run(previous) or _is_gym_run(following):
        return True
    if current_gym is not None and current_gym.exercises and groups[index].exercises:
        return _orders_adjacent(current_gym.exercises[-1], groups[index].exercises[0])
    return False


def _insert_by_order(target: List[ExerciseEntry], incoming: List[ExerciseEntry]) -> None:
    """Insert ``incoming`` before the first entry ordered after its head."""
    if not incoming:
        return
    head = order_key(incoming[0])
    for position, entry in enumerate(target):
        if order_key(entry) > head:
            target[position:position] = incoming
            return
    target.extend(incoming)


def merge_gym_groups(groups: Sequence[ProvisionalGroup]) -> List[FinalGroup]:
    """Merge gym runs and their adjacent supersets.

    Non-gym runs and supersets that are not next to gym work are passed
    through unchanged and close the currently open gym group. The input
    groups are left untouched.
    """
    final: List[FinalGroup] = []
    current_gym: Optional[MergedGymGroup] = None

    for index, group in enumerate(groups):
        if isinstance(group, TypedRun) and group.kind == SectionKind.GYM:
            if current_gym is not None:
                current_gym.exercises.extend(group.exercises)
            else:
                current_gym = MergedGymGroup(exercises=list(group.exercises))
                final.append(current_gym)
        elif isinstance(group, SupersetRun):
            if _is_gym_adjacent(groups, index, current_gym):
                if current_gym is not None:
                    _insert_by_order(current_gym.exercises, list(group.exercises))
                else:
                    # Superset leads the gym block it belongs to.
                    current_gym = MergedGymGroup(exercises=list(group.exercises))
                    final.append(current_gym)
            else:
                final.append(group)
                current_gym = None
        elif isinstance(group, TypedRun):
            final.append(group)
            current_gym = None
        else:
            raise TypeError(f"Unknown group: {group!r}")

    for group in final:
        if isinstance(group, MergedGymGroup):
            group.exercises.sort(key=order_key)

    logger.debug(f"[merger] {len(groups)} provisional groups -> {len(final)} final groups")
    return final
