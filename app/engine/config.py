"""
Scoring policy — every weight, threshold and band table used by the
engine, in one injectable object.

Defaults are declared as module-level tables (so they can be inspected
and tested) and copied into pydantic config models.  Every engine entry
point takes an optional ``config``; ``None`` means
:data:`DEFAULT_SCORING_CONFIG`.

.. note::

   These are **heuristics**, not empirically fitted constants.  Tune them
   by injecting a modified :class:`ScoringConfig`, never by editing the
   engine functions.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

NonNegative = Annotated[float, Field(ge=0.0)]


# ======================================================================
# Shared category tables
# ======================================================================

# Movement category → push / pull / legs bucket for set balance.
_DEFAULT_MAJOR_GROUPS: dict[str, str] = {
    "push_horizontal": "push",
    "push_vertical": "push",
    "pull_horizontal": "pull",
    "pull_vertical": "pull",
    "squat": "legs",
    "hinge": "legs",
    "lunge": "legs",
    "hinge_horizontal": "legs",
}

_ENERGY_SYSTEMS: list[str] = ["ATP-CP", "Glycolytic", "Oxidative"]


# ======================================================================
# Day aggregation
# ======================================================================

class DayConfig(BaseModel):
    """Classification thresholds for :func:`app.engine.day.analyze_workout_day`."""

    joint_stress_high: float = Field(0.7, ge=0.0, le=1.0)
    joint_stress_moderate: float = Field(0.4, ge=0.0, le=1.0)
    region_dominance: float = Field(1.3, ge=1.0, description="upper/lower multiple to call a day Upper or Lower")
    top_muscles: int = Field(5, ge=1)


# ======================================================================
# Workout scoring
# ======================================================================

_DEFAULT_WORKOUT_WEIGHTS: dict[str, float] = {
    "balance": 0.22,
    "fatigue": 0.22,
    "time": 0.12,
    "energy": 0.10,
    "skill_risk": 0.14,
    "volume": 0.20,
}

_DEFAULT_SKILL_LEVELS: dict[str, float] = {
    "low": 0.2,
    "moderate": 0.6,
    "high": 1.0,
}


class WorkoutScoringConfig(BaseModel):
    """Weights and bands for :func:`app.engine.workout.score_workout`."""

    weights: dict[str, NonNegative] = Field(default_factory=lambda: dict(_DEFAULT_WORKOUT_WEIGHTS))
    major_groups: dict[str, str] = Field(default_factory=lambda: dict(_DEFAULT_MAJOR_GROUPS))
    energy_systems: list[str] = Field(default_factory=lambda: list(_ENERGY_SYSTEMS))

    # Balance
    ideal_push_pull_ratio: float = Field(1.0, gt=0.0)
    ideal_upper_lower_ratio: float = Field(1.0, gt=0.0)
    push_pull_share: float = Field(0.6, ge=0.0, le=1.0)
    upper_lower_share: float = Field(0.4, ge=0.0, le=1.0)

    # Fatigue / skill risk
    fatigue_ceiling: float = Field(1.2, gt=0.0, description="avg (cns + metabolic) per set that scores 0")
    joint_share: float = Field(0.6, ge=0.0, le=1.0)
    skill_share: float = Field(0.4, ge=0.0, le=1.0)
    skill_levels: dict[str, float] = Field(default_factory=lambda: dict(_DEFAULT_SKILL_LEVELS))
    unknown_skill: float = Field(0.4, ge=0.0, le=1.0)

    # Volume
    session_sets_min: float = Field(10, gt=0.0)
    session_sets_max: float = Field(24, gt=0.0)

    # Time
    work_seconds_per_set: float = Field(60.0, ge=0.0)
    default_rest_seconds: float = Field(60.0, ge=0.0)
    ideal_time_min: float = Field(45.0, gt=0.0)
    ideal_time_max: float = Field(75.0, gt=0.0)
    max_session_minutes: float = Field(120.0, gt=0.0)
    overtime_window_minutes: float = Field(30.0, gt=0.0)
    time_range_share: float = Field(0.8, ge=0.0, le=1.0)
    overtime_share: float = Field(0.2, ge=0.0, le=1.0)

    # Hints
    imbalance_ratio: float = Field(1.4, ge=1.0)
    long_session_minutes: float = Field(90.0, gt=0.0)
    high_sets_per_move: int = Field(6, ge=1)
    skill_risk_hint_below: float = Field(55.0, ge=0.0, le=100.0)
    volume_hint_below: float = Field(55.0, ge=0.0, le=100.0)


# ======================================================================
# Program scoring
# ======================================================================

_DEFAULT_PROGRAM_WEIGHTS: dict[str, float] = {
    "weekly_volume": 0.40,
    "recovery": 0.30,
    "coverage": 0.15,
    "balance": 0.15,
}


class SetBand(BaseModel):
    min: float = Field(..., gt=0.0)
    max: float = Field(..., gt=0.0)


# Weekly weighted sets per muscle, by program goal.
_DEFAULT_TARGET_SETS: dict[str, SetBand] = {
    "hypertrophy": SetBand(min=10, max=20),
    "strength": SetBand(min=6, max=12),
    "power": SetBand(min=4, max=10),
    "endurance": SetBand(min=8, max=18),
}

_DEFAULT_PROGRAM_HINT_THRESHOLDS: dict[str, float] = {
    "weekly_volume": 60.0,
    "recovery": 70.0,
    "coverage": 70.0,
    "balance": 70.0,
}


class ProgramScoringConfig(BaseModel):
    """Weights and bands for :func:`app.engine.program.score_program`."""

    weights: dict[str, NonNegative] = Field(default_factory=lambda: dict(_DEFAULT_PROGRAM_WEIGHTS))
    target_sets: dict[str, SetBand] = Field(
        default_factory=lambda: {k: v.model_copy() for k, v in _DEFAULT_TARGET_SETS.items()},
    )
    coverage_fraction: float = Field(0.5, ge=0.0, le=1.0, description="share of goal min that counts as covered")
    overlap_min_sets: float = Field(4.0, ge=0.0, description="previous-day weighted sets that trigger an overlap")
    overlap_min_recovery_days: float = Field(1.0, ge=0.0)
    hint_thresholds: dict[str, float] = Field(
        default_factory=lambda: dict(_DEFAULT_PROGRAM_HINT_THRESHOLDS),
    )

    def band_for(self, goal: str) -> SetBand:
        return self.target_sets.get(goal, self.target_sets["hypertrophy"])


# ======================================================================
# Intent detection
# ======================================================================

# Muscle group → member muscle ids.  A muscle may belong to more than one
# group (biceps is both "biceps" and "arms").
_DEFAULT_MUSCLE_GROUPS: dict[str, list[str]] = {
    "chest": ["pectoralis_major"],
    "back": ["latissimus_dorsi", "rhomboids", "lower_traps", "upper_traps", "erector_spinae"],
    "shoulders": ["anterior_deltoid", "lateral_deltoid", "posterior_deltoid"],
    "triceps": ["triceps_brachii"],
    "biceps": ["biceps"],
    "arms": ["biceps", "triceps_brachii", "forearms"],
    "quads": ["quadriceps", "sartorius"],
    "hamstrings": ["hamstrings"],
    "glutes": ["gluteus_maximus"],
    "core": ["core"],
}

_UPPER_PUSH = ["push_horizontal", "push_vertical"]
_UPPER_PULL = ["pull_horizontal", "pull_vertical"]
_LOWER = ["squat", "hinge", "hinge_horizontal", "lunge"]

_DEFAULT_CATEGORY_SETS: dict[str, list[str]] = {
    "upper_push": _UPPER_PUSH,
    "upper_pull": _UPPER_PULL,
    "upper": _UPPER_PUSH + _UPPER_PULL,
    "lower": _LOWER,
    "hinge": ["hinge", "hinge_horizontal"],
    "power": ["jump", "sprint", "throw"],
}

# Categories that "fit" each intent; scopes suggestions to the day's theme.
_DEFAULT_INTENT_CATEGORIES: dict[str, list[str]] = {
    "chest": ["push_horizontal"],
    "back": ["pull_horizontal", "pull_vertical"],
    "shoulders": ["push_vertical"],
    "arms": ["pull_vertical", "push_vertical", "push_horizontal", "other"],
    "push": list(_UPPER_PUSH),
    "pull": list(_UPPER_PULL),
    "upper": _UPPER_PUSH + _UPPER_PULL,
    "lower": list(_LOWER),
    "legs": list(_LOWER),
    "posterior_chain": ["hinge", "hinge_horizontal"],
    "full_body": _UPPER_PUSH + _UPPER_PULL + _LOWER + ["brace", "carry"],
    "power": ["jump", "sprint", "throw", "hinge"],
    "core": ["brace"],
    "empty": [],
}

_DEFAULT_INTENT_LABELS: dict[str, str] = {
    "chest": "Chest day",
    "back": "Back day",
    "shoulders": "Shoulder day",
    "arms": "Arms day",
    "push": "Push day",
    "pull": "Pull day",
    "upper": "Upper day",
    "lower": "Lower day",
    "legs": "Leg day",
    "posterior_chain": "Posterior chain",
    "full_body": "Full body",
    "power": "Power / speed day",
    "core": "Core day",
    "empty": "",
}

# Gate thresholds, keyed "<intent>_<what>".  Group fractions are strict
# (>), category fractions inclusive (>=).
_DEFAULT_INTENT_THRESHOLDS: dict[str, float] = {
    "chest_group": 0.25,
    "chest_category": 0.4,
    "back_group": 0.25,
    "back_category": 0.4,
    "shoulders_group": 0.3,
    "shoulders_category": 0.3,
    "arms_group": 0.35,
    "core_category": 0.5,
    "push_category": 0.5,
    "pull_category": 0.5,
    "upper_category": 0.6,
    "upper_mix": 0.1,
    "lower_category": 0.5,
    "posterior_chain_category": 0.4,
    "power_category": 0.3,
    "full_body_category": 0.25,
    "fallback_confidence": 0.2,
}

# Confidence = base + slope × driving fraction.
_DEFAULT_INTENT_CONFIDENCE: dict[str, tuple[float, float]] = {
    "chest": (0.5, 0.5),
    "back": (0.5, 0.5),
    "shoulders": (0.4, 0.5),
    "arms": (0.3, 0.5),
    "core": (0.6, 0.3),
    "push": (0.4, 0.4),
    "pull": (0.4, 0.4),
    "upper": (0.3, 0.4),
    "lower": (0.4, 0.4),
    "legs": (0.35, 0.35),
    "posterior_chain": (0.3, 0.5),
    "power": (0.4, 0.5),
    "full_body": (0.2, 0.3),
}


class IntentConfig(BaseModel):
    """Tables for :mod:`app.engine.intent`."""

    muscle_groups: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in _DEFAULT_MUSCLE_GROUPS.items()},
    )
    category_sets: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in _DEFAULT_CATEGORY_SETS.items()},
    )
    intent_categories: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in _DEFAULT_INTENT_CATEGORIES.items()},
    )
    intent_labels: dict[str, str] = Field(default_factory=lambda: dict(_DEFAULT_INTENT_LABELS))
    thresholds: dict[str, float] = Field(default_factory=lambda: dict(_DEFAULT_INTENT_THRESHOLDS))
    confidence: dict[str, tuple[float, float]] = Field(
        default_factory=lambda: dict(_DEFAULT_INTENT_CONFIDENCE),
    )

    def confidence_for(self, intent: str, fraction: float) -> float:
        base, slope = self.confidence[intent]
        return min(max(base + slope * fraction, 0.0), 1.0)


# ======================================================================
# Suggestions
# ======================================================================

class SuggestionConfig(BaseModel):
    """Additive point values for :func:`app.engine.suggest.suggest_exercises`."""

    # Empty day
    empty_compound_bonus: float = Field(25.0, ge=0.0)
    empty_fatigue_weight: float = Field(10.0, ge=0.0)

    # Intent fit
    intent_fit_bonus: float = Field(30.0, ge=0.0)
    primary_fit_bonus: float = Field(10.0, ge=0.0)
    off_theme_penalty: float = Field(20.0, ge=0.0)

    # Gap fill
    gap_cap: float = Field(25.0, ge=0.0)
    gap_untrained_weight: float = Field(15.0, ge=0.0)
    gap_prime_bonus: float = Field(5.0, ge=0.0)
    gap_low_volume: float = Field(2.0, ge=0.0)
    gap_low_volume_weight: float = Field(6.0, ge=0.0)
    gap_reason_min: float = Field(8.0, ge=0.0)

    # Accessory pairing
    accessory_min_compounds: int = Field(2, ge=0)
    isolation_finisher_bonus: float = Field(12.0, ge=0.0)
    first_compound_bonus: float = Field(10.0, ge=0.0)

    # Fatigue budget
    fatigue_budget_threshold: float = Field(0.6, ge=0.0, le=1.0)
    fatigue_budget_weight: float = Field(10.0, ge=0.0)
    low_fatigue_reason_below: float = Field(0.3, ge=0.0, le=1.0)

    # Universal finishers
    finisher_categories: list[str] = Field(default_factory=lambda: ["brace", "carry"])
    finisher_bonus: float = Field(5.0, ge=0.0)

    metadata_tiebreak: float = Field(1.0, ge=0.0)


# ======================================================================
# Estimated training load
# ======================================================================

_DEFAULT_SET_TYPE_MULTIPLIERS: dict[str, float] = {
    "warmup": 0.3,
    "standard": 1.0,
    "amrap": 1.2,
    "drop": 1.15,
    "cluster": 1.1,
    "myo_reps": 1.15,
    "rest_pause": 1.15,
    "top_set": 1.1,
    "backoff": 0.8,
}

# %1RM floor → RPE approximation, checked top-down.
_DEFAULT_PERCENT_TO_RPE: list[tuple[float, float]] = [
    (95.0, 10.0),
    (90.0, 9.0),
    (85.0, 8.5),
    (80.0, 8.0),
    (75.0, 7.0),
    (70.0, 6.5),
    (65.0, 6.0),
]


class LoadConfig(BaseModel):
    """Constants for :mod:`app.engine.load`.

    ``normalizer`` is tuned so a reference moderate exercise
    (3 × 10 @ RPE 7.5, difficulty 1.0) lands at ETL ≈ 4.
    """

    normalizer: float = Field(2.45, gt=0.0)
    max_etl: float = Field(10.0, gt=0.0)
    rep_exponent: float = Field(0.75, gt=0.0)
    default_rpe: float = Field(7.0, ge=0.0, le=10.0)
    min_rpe: float = Field(5.0, ge=0.0, le=10.0)
    intensity_scale: float = Field(0.0275, gt=0.0)
    intensity_growth: float = 0.39
    max_intensity_weight: float = Field(1.5, gt=0.0)
    set_type_multipliers: dict[str, NonNegative] = Field(
        default_factory=lambda: dict(_DEFAULT_SET_TYPE_MULTIPLIERS),
    )
    percent_to_rpe: list[tuple[float, float]] = Field(
        default_factory=lambda: list(_DEFAULT_PERCENT_TO_RPE),
    )
    seconds_per_rep: float = Field(4.0, ge=0.0)
    default_rest_seconds: float = Field(90.0, ge=0.0)


# ======================================================================
# Bundle
# ======================================================================

class ScoringConfig(BaseModel):
    """All scoring policy, injected at call time."""

    day: DayConfig = Field(default_factory=DayConfig)
    workout: WorkoutScoringConfig = Field(default_factory=WorkoutScoringConfig)
    program: ProgramScoringConfig = Field(default_factory=ProgramScoringConfig)
    intent: IntentConfig = Field(default_factory=IntentConfig)
    suggestion: SuggestionConfig = Field(default_factory=SuggestionConfig)
    load: LoadConfig = Field(default_factory=LoadConfig)


# Singleton default config
DEFAULT_SCORING_CONFIG = ScoringConfig()
