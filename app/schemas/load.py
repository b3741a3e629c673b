"""
Estimated Training Load (ETL) schemas.
"""

from pydantic import BaseModel, Field


class ExerciseLoad(BaseModel):
    exercise_id: str
    total_etl: float = Field(0.0, ge=0.0, description="Un-normalised load, useful for debugging")
    normalized_etl: float = Field(0.0, ge=0.0, le=10.0)
    sets: int = Field(0, ge=0, description="Set weight used for averaging (at least 1)")


class WorkoutLoad(BaseModel):
    normalized_etl: float = Field(
        0.0, ge=0.0, le=10.0,
        description="Set-weighted average of exercise ETLs — how hard the typical exercise is",
    )
    session_etl: float = Field(
        0.0, ge=0.0, description="Sum of exercise ETLs — for volume tracking across sessions",
    )
    per_exercise: list[ExerciseLoad] = Field(default_factory=list)
    total_sets: int = 0
    num_exercises: int = 0
    estimated_duration_seconds: float = Field(0.0, ge=0.0)
