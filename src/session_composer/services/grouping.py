"""Sequential grouping of order-sorted exercises into typed and superset runs."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set, Tuple, Union

from session_composer.models import ExerciseEntry, SupersetRun, TypedRun
from session_composer.services.classifier import classify

logger = logging.getLogger(__name__)


def order_key(entry: ExerciseEntry) -> Tuple[bool, int]:
    """Sort key placing entries without an order after all ordered ones."""
    return (entry.order is None, entry.order if entry.order is not None else 0)


def dedupe_entries(entries: Iterable[ExerciseEntry]) -> List[ExerciseEntry]:
    """Drop repeated ids, keeping the first occurrence."""
    seen: Set = set()
    unique: List[ExerciseEntry] = []
    for entry in entries:
        if entry.id in seen:
            logger.warning(f"[grouping] dropping duplicate exercise id {entry.id!r}")
            continue
        seen.add(entry.id)
        unique.append(entry)
    return unique


def sort_entries(entries: Iterable[ExerciseEntry]) -> List[ExerciseEntry]:
    """Dedupe then stable-sort entries by order."""
    return sorted(dedupe_entries(entries), key=order_key)


def group_sequentially(entries: Iterable[ExerciseEntry]) -> List[Union[TypedRun, SupersetRun]]:
    """Split a session's exercises into contiguous typed and superset runs.

    Entries are sorted by ``order`` first. A run of exercises sharing a
    superset id becomes a ``SupersetRun``; a run of non-superset exercises of
    the same kind becomes a ``TypedRun``. A superset id that shows up again
    after other exercises starts a new ``SupersetRun`` with the same id.
    """
    groups: List[Union[TypedRun, SupersetRun]] = []
    current_typed: Optional[TypedRun] = None
    current_superset: Optional[SupersetRun] = None

    for entry in sort_entries(entries):
        if entry.superset_id is not None:
            if current_superset is not None and current_superset.superset_id == entry.superset_id:
                current_superset.exercises.append(entry)
            else:
                current_superset = SupersetRun(superset_id=entry.superset_id, exercises=[entry])
                groups.append(current_superset)
            current_typed = None
        else:
            kind = classify(entry.kind_id)
            if current_typed is not None and current_typed.kind == kind:
                current_typed.exercises.append(entry)
            else:
                current_typed = TypedRun(kind=kind, exercises=[entry])
                groups.append(current_typed)
            current_superset = None

    logger.debug(f"[grouping] {len(groups)} provisional groups")
    return groups
