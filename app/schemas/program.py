"""
Program / day / workout schemas.

These are read-only snapshots handed to the analytics engine by the
builder.  The engine never mutates them.

A program is composed either as a flat list of days or as
blocks → weeks → days; :meth:`Program.all_days` flattens both shapes
into one ordered list.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ProgramGoal(str, Enum):
    """Training goal — drives per-set volume constants and weekly set bands."""
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"
    POWER = "power"


class DayType(str, Enum):
    WORKOUT = "workout"
    REST = "rest"
    ACTIVE_REST = "active_rest"
    OTHER = "other"


class GroupType(str, Enum):
    STANDARD = "standard"
    SUPERSET = "superset"
    CIRCUIT = "circuit"


class SetType(str, Enum):
    WARMUP = "warmup"
    STANDARD = "standard"
    AMRAP = "amrap"
    DROP = "drop"
    CLUSTER = "cluster"
    MYO_REPS = "myo_reps"
    REST_PAUSE = "rest_pause"
    TOP_SET = "top_set"
    BACKOFF = "backoff"


# ======================================================================
# Sets and exercises
# ======================================================================

class SetInfo(BaseModel):
    """One prescribed set.  Only one intensity field is normally filled."""

    reps: int = Field(0, ge=0)
    rest: float | None = Field(None, ge=0.0, description="Rest after the set, in seconds")
    rpe: float | None = Field(None, ge=0.0, le=10.0)
    rir: float | None = Field(None, ge=0.0)
    one_rep_max_percent: float | None = Field(None, ge=0.0, le=100.0)
    set_type: SetType = SetType.STANDARD


class WorkoutExercise(BaseModel):
    """A catalog exercise placed in a workout, with its ordered sets."""

    exercise_id: str
    name: str | None = None
    order_num: int = 0
    sets: list[SetInfo] = Field(default_factory=list)
    notes: str | None = None

    @property
    def set_count(self) -> int:
        return len(self.sets)


class WorkoutExerciseGroup(BaseModel):
    """Exercises performed together (straight sets, superset or circuit)."""

    group_type: GroupType = GroupType.STANDARD
    exercises: list[WorkoutExercise] = Field(default_factory=list)
    rest_after_group: float | None = Field(None, ge=0.0)


class Workout(BaseModel):
    exercise_groups: list[WorkoutExerciseGroup] = Field(default_factory=list)

    def flat_exercises(self) -> list[WorkoutExercise]:
        return flatten_groups(self.exercise_groups)


# ======================================================================
# Days, weeks, blocks, programs
# ======================================================================

class ProgramDay(BaseModel):
    id: str
    name: str = ""
    day_type: DayType = DayType.WORKOUT
    workouts: list[Workout] = Field(default_factory=list)
    order: int = 0

    def flat_exercises(self) -> list[WorkoutExercise]:
        return [we for w in self.workouts for we in w.flat_exercises()]


class ProgramWeek(BaseModel):
    name: str = ""
    days: list[ProgramDay] = Field(default_factory=list)


class ProgramBlock(BaseModel):
    id: str = ""
    name: str = ""
    order: int = 0
    weeks: list[ProgramWeek] = Field(default_factory=list)
    days: list[ProgramDay] = Field(
        default_factory=list,
        description="Days attached directly to the block (no week split)",
    )

    def all_days(self) -> list[ProgramDay]:
        """Week days in week order, then any days attached to the block."""
        return [d for week in self.weeks for d in week.days] + list(self.days)


class Program(BaseModel):
    id: str = ""
    name: str = ""
    goal: ProgramGoal = ProgramGoal.HYPERTROPHY
    days: list[ProgramDay] | None = None
    blocks: list[ProgramBlock] | None = None

    def all_days(self) -> list[ProgramDay]:
        """Flatten the program into one ordered list of days.

        A flat ``days`` list wins over ``blocks`` when both are present.
        """
        if self.days is not None:
            return list(self.days)
        return [d for block in self.blocks or [] for d in block.all_days()]

    def workout_days(self) -> list[ProgramDay]:
        return [d for d in self.all_days() if d.day_type == DayType.WORKOUT]


def flatten_groups(groups: list[WorkoutExerciseGroup]) -> list[WorkoutExercise]:
    """All exercises of the given groups, in group then exercise order."""
    return [we for g in groups for we in g.exercises]
