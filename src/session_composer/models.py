"""Data models for session composition."""
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    StrictInt,
    StrictStr,
    field_validator,
)

ExerciseId = Union[int, str]
SupersetId = Union[int, str]


class SectionKind(str, Enum):
    """Closed set of section kinds an exercise can be classified into."""
    WARM_UP = "warm up"
    GYM = "gym"
    CIRCUIT = "circuit"
    ISOMETRIC = "isometric"
    PLYOMETRIC = "plyometric"
    SPRINT = "sprint"
    DRILL = "drill"
    OTHER = "other"


class ExerciseEntry(BaseModel):
    """One exercise assignment inside a training session.

    Only ``id``, ``order``, ``kind_id``, ``superset_id`` and ``completed`` take
    part in grouping. Any other field (sets, reps, exercise details...) is kept
    as opaque payload.
    """
    id: ExerciseId
    order: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("order", "preset_order"),
    )
    kind_id: Optional[Union[StrictInt, StrictStr]] = Field(
        default=None,
        validation_alias=AliasChoices(
            "kind_id",
            "kindId",
            "exercise_type_id",
            AliasPath("exercise", "exercise_type_id"),
        ),
    )
    superset_id: Optional[SupersetId] = Field(
        default=None,
        validation_alias=AliasChoices("superset_id", "supersetId"),
    )
    completed: bool = False

    class Config:
        extra = "allow"  # Keep payload fields like sets/reps from the UI

    @field_validator("kind_id", mode="before")
    @classmethod
    def _unusable_kind_is_none(cls, value):
        # bool and float would otherwise be coerced into a catalogue id
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            return None
        if isinstance(value, SectionKind):
            return value.value
        return value

    @field_validator("superset_id", mode="before")
    @classmethod
    def _blank_superset_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        if value == 0 and not isinstance(value, bool):
            return None  # superset id 0 means "no superset" in the catalogue
        return value

    @field_validator("completed", mode="before")
    @classmethod
    def _missing_completed_is_false(cls, value):
        return False if value is None else value


class TypedRun(BaseModel):
    """Contiguous run of non-superset exercises sharing one section kind."""
    group_type: Literal["typed"] = "typed"
    kind: SectionKind
    exercises: List[ExerciseEntry] = Field(default_factory=list)


class SupersetRun(BaseModel):
    """Contiguous run of exercises sharing one superset id."""
    group_type: Literal["superset"] = "superset"
    superset_id: SupersetId
    exercises: List[ExerciseEntry] = Field(default_factory=list)


class MergedGymGroup(BaseModel):
    """Gym exercises fused with the supersets adjacent to them."""
    group_type: Literal["gym_merged"] = "gym_merged"
    exercises: List[ExerciseEntry] = Field(default_factory=list)


Group = Annotated[
    Union[TypedRun, SupersetRun, MergedGymGroup],
    Field(discriminator="group_type"),
]


class CompletionStats(BaseModel):
    """Derived completion figures for a set of exercises."""
    total: int = 0
    completed: int = 0
    percentage: int = Field(default=0, ge=0, le=100)
    all_completed: bool = False
    none_completed: bool = True


class CompletionPatch(BaseModel):
    """Batch descriptor produced by a "mark all" operation."""
    exercise_ids: List[ExerciseId] = Field(default_factory=list)
    completed: bool


class DecomposedGroup(BaseModel):
    """A merged gym group split back into plain gym work and supersets."""
    gym_exercises: List[ExerciseEntry] = Field(default_factory=list)
    supersets: List[SupersetRun] = Field(default_factory=list)


class SessionSummary(BaseModel):
    """Final groups of a session together with their completion stats."""
    groups: List[Group] = Field(default_factory=list)
    group_stats: List[CompletionStats] = Field(default_factory=list)
    session_stats: CompletionStats = Field(default_factory=CompletionStats)
