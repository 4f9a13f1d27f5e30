"""Persistence seam for batch completion updates."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional, Set

from session_composer.models import CompletionPatch, ExerciseId

logger = logging.getLogger(__name__)


class CompletionStore(ABC):
    """Applies completion patches to wherever exercises are stored."""

    @abstractmethod
    def apply(self, patch: CompletionPatch) -> Set[ExerciseId]:
        """Apply ``patch`` as one batch and return the ids that were updated."""
        ...


class InMemoryCompletionStore(CompletionStore):
    """Completion flags kept in a dict keyed by exercise id.

    Ids the store has never seen are reported as not updated.
    """

    def __init__(self, completed_by_id: Optional[Dict[ExerciseId, bool]] = None):
        self.completed_by_id: Dict[ExerciseId, bool] = dict(completed_by_id or {})

    @classmethod
    def from_ids(cls, ids: Iterable[ExerciseId], completed: bool = False) -> "InMemoryCompletionStore":
        return cls({exercise_id: completed for exercise_id in ids})

    def apply(self, patch: CompletionPatch) -> Set[ExerciseId]:
        known = [i for i in patch.exercise_ids if i in self.completed_by_id]
        if len(known) != len(patch.exercise_ids):
            # Batch is rejected as a whole so the store never holds half of it.
            logger.warning(
                f"[completion_store] rejecting batch: {len(patch.exercise_ids) - len(known)} unknown ids"
            )
            return set()
        for exercise_id in known:
            self.completed_by_id[exercise_id] = patch.completed
        return set(known)
