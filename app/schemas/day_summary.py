"""
Day summary schema — flat aggregation of one training day.
"""

from enum import Enum

from pydantic import BaseModel, Field


class WorkoutType(str, Enum):
    UPPER = "Upper"
    LOWER = "Lower"
    FULL_BODY = "Full Body"
    MIXED = "Mixed"


class InjuryRisk(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


class WorkoutDaySummary(BaseModel):
    """Volumes, per-set averages and breakdowns for a single day."""

    total_sets: int = 0
    total_volume: float = Field(0.0, description="Sum of avg(strength, hypertrophy) volume per set")
    total_fatigue: float = 0.0

    avg_fatigue: float = Field(0.0, description="Mean fatigue_index per set")
    avg_cns: float = Field(0.0, description="Mean cns_demand per set")
    avg_metabolic: float = Field(0.0, description="Mean metabolic_demand per set")
    avg_joint: float = Field(0.0, description="Mean joint_stress per set")
    avg_recovery: float = Field(0.0, description="Mean recovery_days per set")
    max_recovery: float = Field(0.0, description="Longest recovery_days of any trained exercise")

    muscle_volumes: dict[str, float] = Field(
        default_factory=dict,
        description="Accumulated contribution per muscle (one add per set)",
    )
    muscle_set_counts: dict[str, int] = Field(default_factory=dict)
    top_muscles: list[tuple[str, float]] = Field(
        default_factory=list,
        description="Top muscles by accumulated contribution, descending",
    )
    category_counts: dict[str, int] = Field(
        default_factory=dict, description="Exercises per movement category",
    )
    energy_system_counts: dict[str, int] = Field(
        default_factory=dict, description="Exercises per energy system",
    )
    region_totals: dict[str, float] = Field(default_factory=dict)
    movement_totals: dict[str, float] = Field(default_factory=dict)

    workout_type: WorkoutType = WorkoutType.MIXED
    injury_risk: InjuryRisk = InjuryRisk.LOW
    push_pull_ratio: float = 0.0
    lower_upper_ratio: float = 1.0
