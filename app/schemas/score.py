"""
Workout and program score schemas.

All component scores and overall scores are in [0, 100].  Components keep
full precision; overall scores are rounded to the nearest integer.
"""

from pydantic import BaseModel, Field


# ======================================================================
# Workout
# ======================================================================

class WorkoutScoreComponents(BaseModel):
    balance: float = Field(..., ge=0.0, le=100.0, description="Push/pull and upper/lower set balance")
    fatigue: float = Field(..., ge=0.0, le=100.0, description="Inverse of CNS + metabolic demand per set")
    time: float = Field(..., ge=0.0, le=100.0, description="Fit of the estimated duration to the ideal window")
    energy: float = Field(..., ge=0.0, le=100.0, description="Energy-system diversity (normalised entropy)")
    skill_risk: float = Field(..., ge=0.0, le=100.0, description="Inverse of joint stress and skill demand")
    volume: float = Field(..., ge=0.0, le=100.0, description="Fit of total sets to the session band")


class WorkoutEstimates(BaseModel):
    time_min: int = Field(..., ge=0, description="Crude session duration, minutes")
    total_sets: int = 0
    push_sets: int = 0
    pull_sets: int = 0
    leg_sets: int = 0
    volume_units: float = Field(0.0, ge=0.0, description="Sets × per-set volume estimate for the goal, summed")


class WorkoutScore(BaseModel):
    score: int = Field(..., ge=0, le=100)
    components: WorkoutScoreComponents
    estimates: WorkoutEstimates
    hints: list[str] = Field(default_factory=list)


# ======================================================================
# Program
# ======================================================================

class ProgramScoreComponents(BaseModel):
    weekly_volume: float = Field(..., ge=0.0, le=100.0)
    recovery: float = Field(..., ge=0.0, le=100.0)
    coverage: float = Field(..., ge=0.0, le=100.0)
    balance: float = Field(..., ge=0.0, le=100.0)


class RecoveryWarning(BaseModel):
    """A muscle loaded again the day after a high-volume exposure."""

    muscle_id: str
    day_index: int = Field(..., ge=1, description="Index into the program's workout days")
    note: str


class DayScore(BaseModel):
    day_id: str
    workout_score: int = Field(..., ge=0, le=100)


class ProgramDetails(BaseModel):
    muscle_weekly_sets: dict[str, float] = Field(
        default_factory=dict,
        description="Weighted sets per muscle across the program's workout days",
    )
    recovery_warnings: list[RecoveryWarning] = Field(default_factory=list)
    day_scores: list[DayScore] = Field(default_factory=list)


class ProgramScore(BaseModel):
    score: int = Field(..., ge=0, le=100)
    components: ProgramScoreComponents
    details: ProgramDetails
    hints: list[str] = Field(default_factory=list)
