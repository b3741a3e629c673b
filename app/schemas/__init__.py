"""Pydantic schemas for request/response validation."""

from app.schemas.exercise import (
    EnergySystem,
    Exercise,
    ExerciseCategory,
    MovementType,
    MuscleContribution,
    MuscleRegion,
    MuscleRole,
    SkillRequirement,
    VolumePerSet,
)
from app.schemas.program import (
    Program,
    ProgramBlock,
    ProgramDay,
    ProgramGoal,
    ProgramWeek,
    SetInfo,
    Workout,
    WorkoutExercise,
    WorkoutExerciseGroup,
)
from app.schemas.day_summary import InjuryRisk, WorkoutDaySummary, WorkoutType
from app.schemas.score import ProgramScore, RecoveryWarning, WorkoutScore
from app.schemas.suggestion import DayIntent, DaySnapshot, IntentMatch, Suggestion
from app.schemas.load import ExerciseLoad, WorkoutLoad

__all__ = [
    "EnergySystem",
    "Exercise",
    "ExerciseCategory",
    "MovementType",
    "MuscleContribution",
    "MuscleRegion",
    "MuscleRole",
    "SkillRequirement",
    "VolumePerSet",
    "Program",
    "ProgramBlock",
    "ProgramDay",
    "ProgramGoal",
    "ProgramWeek",
    "SetInfo",
    "Workout",
    "WorkoutExercise",
    "WorkoutExerciseGroup",
    "InjuryRisk",
    "WorkoutDaySummary",
    "WorkoutType",
    "ProgramScore",
    "RecoveryWarning",
    "WorkoutScore",
    "DayIntent",
    "DaySnapshot",
    "IntentMatch",
    "Suggestion",
    "ExerciseLoad",
    "WorkoutLoad",
]
