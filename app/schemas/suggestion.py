"""
Day intent and exercise suggestion schemas.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from app.schemas.exercise import Exercise


class DayIntent(str, Enum):
    """Training theme inferred from a partially built day."""
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    PUSH = "push"
    PULL = "pull"
    UPPER = "upper"
    LOWER = "lower"
    LEGS = "legs"
    POSTERIOR_CHAIN = "posterior_chain"
    FULL_BODY = "full_body"
    POWER = "power"
    CORE = "core"
    EMPTY = "empty"


class IntentMatch(BaseModel):
    intent: DayIntent
    confidence: float = Field(..., ge=0.0, le=1.0)


class DaySnapshot(BaseModel):
    """What the in-progress day already contains, rolled up for intent
    detection and gap analysis.
    """

    used_ids: list[str] = Field(
        default_factory=list,
        description="Distinct exercise ids present in the day, first-seen order "
                    "(includes ids missing from the catalog)",
    )
    category_counts: dict[str, int] = Field(default_factory=dict)
    muscle_group_volume: dict[str, float] = Field(default_factory=dict)
    muscle_volume: dict[str, float] = Field(
        default_factory=dict, description="contribution × sets per muscle",
    )
    region_sets: dict[str, float] = Field(
        default_factory=lambda: {"upper": 0.0, "lower": 0.0, "core": 0.0},
    )
    total_exercises: int = Field(0, description="Exercises matched in the catalog")
    total_sets: int = 0
    total_fatigue: float = Field(0.0, description="fatigue_index × sets, summed")
    compound_count: int = Field(0, description="Distinct compound exercises used")

    @property
    def avg_fatigue_per_set(self) -> float:
        # Rounded so a running sum of equal values compares equal to that value.
        return round(self.total_fatigue / self.total_sets, 9) if self.total_sets > 0 else 0.0


class Suggestion(BaseModel):
    exercise: Exercise
    score: float
    reason: str = Field(..., description="Short label explaining the main scoring rule")
