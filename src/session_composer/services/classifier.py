"""Map external exercise type identifiers to section kinds."""
from __future__ import annotations

from typing import Any, Dict, Union

from session_composer.models import (
    MergedGymGroup,
    SectionKind,
    SupersetRun,
    TypedRun,
)

# Exercise type ids as stored in the exercise catalogue.
_KIND_BY_ID: Dict[int, SectionKind] = {
    1: SectionKind.WARM_UP,
    2: SectionKind.GYM,
    3: SectionKind.CIRCUIT,
    4: SectionKind.ISOMETRIC,
    5: SectionKind.PLYOMETRIC,
    6: SectionKind.SPRINT,
    7: SectionKind.DRILL,
}

_KIND_BY_NAME: Dict[str, SectionKind] = {kind.value: kind for kind in SectionKind}
_KIND_BY_NAME.update({
    "warm_up": SectionKind.WARM_UP,
    "warmup": SectionKind.WARM_UP,
    "warm-up": SectionKind.WARM_UP,
})

_LABELS: Dict[SectionKind, str] = {
    SectionKind.WARM_UP: "Warm Up",
    SectionKind.GYM: "Gym",
    SectionKind.CIRCUIT: "Circuit",
    SectionKind.ISOMETRIC: "Isometric",
    SectionKind.PLYOMETRIC: "Plyometric",
    SectionKind.SPRINT: "Sprint",
    SectionKind.DRILL: "Drill",
    SectionKind.OTHER: "Other",
}


def classify(kind_id: Any) -> SectionKind:
    """Classify an exercise type identifier.

    Accepts the numeric catalogue id (or its string form) and the kind names
    themselves. Anything unrecognised, including ``None``, is ``OTHER``.
    """
    if kind_id is None or isinstance(kind_id, bool):
        return SectionKind.OTHER
    if isinstance(kind_id, SectionKind):
        return kind_id
    if isinstance(kind_id, int):
        return _KIND_BY_ID.get(kind_id, SectionKind.OTHER)
    if isinstance(kind_id, str):
        key = kind_id.strip().lower()
        if key.isdigit():
            return _KIND_BY_ID.get(int(key), SectionKind.OTHER)
        return _KIND_BY_NAME.get(key, SectionKind.OTHER)
    return SectionKind.OTHER


def section_label(target: Union[SectionKind, TypedRun, SupersetRun, MergedGymGroup]) -> str:
    """Display label for a section kind or a group."""
    if isinstance(target, SectionKind):
        return _LABELS[target]
    if isinstance(target, TypedRun):
        return _LABELS[target.kind]
    if isinstance(target, SupersetRun):
        return "Superset"
    if isinstance(target, MergedGymGroup):
        return _LABELS[SectionKind.GYM]
    raise TypeError(f"Unknown group: {target!r}")
