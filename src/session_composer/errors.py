"""Exceptions raised by the session composer."""
from __future__ import annotations

from typing import Iterable, List, Union

ExerciseId = Union[int, str]


class SessionComposerError(RuntimeError):
    """Base class for session composer failures."""


class PartialMutationError(SessionComposerError):
    """Raised when a completion batch could not be applied to every target id."""

    def __init__(self, failed_ids: Iterable[ExerciseId], completed: bool):
        self.failed_ids: List[ExerciseId] = list(failed_ids)
        self.completed = completed
        super().__init__(
            f"Could not set completed={completed} on exercises: "
            f"{', '.join(str(i) for i in self.failed_ids)}"
        )
