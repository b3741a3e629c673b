"""
Exercise catalog schema.

An :class:`Exercise` is static reference data: the movement pattern,
energy system, normalised fatigue components and the list of muscles it
trains (with how much, in which role, region and movement direction).

Demand, fatigue and contribution values are **clamped** into [0, 1] on
input rather than rejected — catalog rows authored by hand are allowed to
be slightly off without breaking the analytics.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


# ======================================================================
# Enums
# ======================================================================

class ExerciseCategory(str, Enum):
    """Movement pattern of an exercise."""
    SQUAT = "squat"
    HINGE = "hinge"
    LUNGE = "lunge"
    PUSH_HORIZONTAL = "push_horizontal"
    PUSH_VERTICAL = "push_vertical"
    PULL_HORIZONTAL = "pull_horizontal"
    PULL_VERTICAL = "pull_vertical"
    HINGE_HORIZONTAL = "hinge_horizontal"
    CARRY = "carry"
    JUMP = "jump"
    SPRINT = "sprint"
    THROW = "throw"
    BRACE = "brace"
    OTHER = "other"


class EnergySystem(str, Enum):
    """Dominant energy pathway."""
    ATP_CP = "ATP-CP"
    GLYCOLYTIC = "Glycolytic"
    OXIDATIVE = "Oxidative"


class SkillRequirement(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class MuscleRole(str, Enum):
    PRIME = "prime"
    SECONDARY = "secondary"


class MuscleRegion(str, Enum):
    UPPER = "upper"
    LOWER = "lower"
    CORE = "core"


class MovementType(str, Enum):
    """Direction of force a muscle produces in the exercise."""
    PUSH = "push"
    PULL = "pull"
    NEUTRAL = "neutral"
    ABDUCTION = "abduction"


class Equipment(str, Enum):
    BARBELL = "barbell"
    RACK = "rack"
    BENCH = "bench"
    BOX = "box"
    BAR = "bar"
    KETTLEBELL = "kettlebell"
    CABLE = "cable"
    DUMBBELL = "dumbbell"
    MACHINE = "machine"
    BODYWEIGHT = "bodyweight"
    OTHER = "other"


def _clamp_unit(value: float | None) -> float:
    if value is None:
        return 0.0
    return min(max(float(value), 0.0), 1.0)


# ======================================================================
# Models
# ======================================================================

class MuscleContribution(BaseModel):
    """How much one muscle is engaged by an exercise.

    Contributions across an exercise's muscles need not sum to 1.
    """

    muscle_id: str = Field(..., description="Muscle slug, e.g. 'pectoralis_major'")
    contribution: float = Field(0.5, description="Engagement weight, clamped to [0, 1]")
    role: MuscleRole = MuscleRole.SECONDARY
    region: MuscleRegion
    movement_type: MovementType = MovementType.NEUTRAL

    @field_validator("contribution", mode="before")
    @classmethod
    def _clamp_contribution(cls, value: float | None) -> float:
        if value is None:
            return 0.5
        return _clamp_unit(value)


class VolumePerSet(BaseModel):
    """Estimated volume units (kg-reps) produced by one hard set."""

    strength: float = Field(0.0, ge=0.0)
    hypertrophy: float = Field(0.0, ge=0.0)

    def for_goal(self, goal: str) -> float:
        """Per-set volume for a program goal.

        Only strength programs use the strength estimate; every other goal
        uses the hypertrophy estimate.
        """
        return self.strength if goal == "strength" else self.hypertrophy

    def average(self) -> float:
        return (self.strength + self.hypertrophy) / 2


class Exercise(BaseModel):
    """Catalog entry describing a single exercise."""

    id: str = Field(..., description="Unique slug, e.g. 'back_squat'")
    name: str = Field(..., description="Human-readable name")
    category: ExerciseCategory = ExerciseCategory.OTHER
    energy_system: EnergySystem = EnergySystem.GLYCOLYTIC

    fatigue_index: float = Field(0.0, description="Overall physiological toll (0-1)")
    cns_demand: float = Field(0.0, description="Neurological load (0-1)")
    metabolic_demand: float = Field(0.0, description="Local metabolic burn (0-1)")
    joint_stress: float = Field(0.0, description="Joint loading (0-1)")

    recovery_days: float = Field(1.5, ge=0.0, description="Days before full-capacity retraining")
    skill_requirement: SkillRequirement | None = SkillRequirement.MODERATE
    compound: bool = False
    equipment: list[Equipment] = Field(default_factory=list)
    volume_per_set: VolumePerSet = Field(default_factory=VolumePerSet)
    muscles: list[MuscleContribution] = Field(default_factory=list)

    @field_validator(
        "fatigue_index", "cns_demand", "metabolic_demand", "joint_stress",
        mode="before",
    )
    @classmethod
    def _clamp_demands(cls, value: float | None) -> float:
        return _clamp_unit(value)

    def total_contribution(self) -> float:
        """Sum of muscle contributions (0.0 when no muscle metadata)."""
        return sum(m.contribution for m in self.muscles)

    def is_machine(self) -> bool:
        return Equipment.MACHINE in self.equipment
