"""API routes for session composition."""

import logging
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from session_composer.models import (
    CompletionPatch,
    CompletionStats,
    DecomposedGroup,
    ExerciseEntry,
    MergedGymGroup,
    SessionSummary,
)
from session_composer.services.completion import mark_all, stats, toggle_target
from session_composer.services.composer import compute_groups, summarize_session
from session_composer.services.decomposer import decompose
from session_composer.services.grouping import sort_entries

logger = logging.getLogger(__name__)

router = APIRouter()

# ---------------------------------------------------------------------------
# Small helper models
# ---------------------------------------------------------------------------


class ComposeRequest(BaseModel):
    exercises: List[ExerciseEntry] = Field(default_factory=list)
    separate_supersets: bool = False


class DecomposeRequest(BaseModel):
    exercises: List[ExerciseEntry] = Field(default_factory=list)


class MarkAllRequest(BaseModel):
    exercises: List[ExerciseEntry] = Field(default_factory=list)
    completed: Optional[bool] = None  # None toggles, like the section header button


class MarkAllResponse(BaseModel):
    exercises: List[ExerciseEntry]
    patch: CompletionPatch
    stats: CompletionStats


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"ok": True}


@router.post("/sessions/compose", response_model=SessionSummary)
def compose_session(request: ComposeRequest):
    """Group a session's exercises into sections with completion stats."""
    return summarize_session(request.exercises, separate_supersets=request.separate_supersets)


@router.post("/sessions/decompose", response_model=List[DecomposedGroup])
def decompose_session(request: DecomposeRequest):
    """Split every merged gym group of the session into gym work and supersets."""
    return [
        decompose(group)
        for group in compute_groups(request.exercises)
        if isinstance(group, MergedGymGroup)
    ]


@router.post("/sessions/mark-all", response_model=MarkAllResponse)
def mark_all_exercises(request: MarkAllRequest):
    """Set completion on every supplied exercise and return the batch patch."""
    exercises = sort_entries(request.exercises)
    value = request.completed if request.completed is not None else toggle_target(exercises)
    patch = mark_all(exercises, value)
    logger.info(f"[routes] mark all completed={value} on {len(patch.exercise_ids)} exercises")
    return MarkAllResponse(exercises=exercises, patch=patch, stats=stats(exercises))
