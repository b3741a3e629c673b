"""
Estimated Training Load (ETL) — a 0-10 "how hard is this exercise" number.

Per set::

    set_load = reps^0.75 × intensity_weight × set_type_multiplier

    intensity_weight = min(1.5, 0.0275 × e^(0.39 × rpe))

RPE comes from whichever intensity field the set carries, in order:
``rpe``, then ``rir`` (RPE = max(5, 10 − RIR)), then ``%1RM`` via a step
table, then a default of RPE 7.

Per exercise::

    total_etl      = Σ set_load × difficulty
    normalized_etl = min(10, total_etl / 2.45)

``difficulty`` (0.65-1.5) rises with CNS demand and for compounds, and
drops for isolation and machine work.

Reference values
----------------

=============================  ======
Face pull 3×15 @ RPE 7         ~3.5
Bench press 3×8 @ RPE 8        ~4.5
Back squat 4×5 @ RPE 8         ~5.0
Deadlift 4×5 @ RPE 9           ~6.8
=============================  ======
"""

from __future__ import annotations

import math
from typing import Optional

from app.catalog.provider import CatalogLike, as_catalog
from app.core.logging import get_logger
from app.engine.config import DEFAULT_SCORING_CONFIG, LoadConfig, ScoringConfig
from app.schemas.exercise import Exercise
from app.schemas.load import ExerciseLoad, WorkoutLoad
from app.schemas.program import ProgramGoal, SetInfo, WorkoutExercise, WorkoutExerciseGroup, flatten_groups

logger = get_logger(__name__)


# ======================================================================
# Per-set terms
# ======================================================================


def set_rpe(s: SetInfo, cfg: LoadConfig = DEFAULT_SCORING_CONFIG.load) -> float:
    """RPE-equivalent of one set from whichever intensity field is filled."""
    if s.rpe is not None:
        return s.rpe
    if s.rir is not None:
        return max(cfg.min_rpe, 10.0 - s.rir)
    if s.one_rep_max_percent is not None:
        for floor, rpe in cfg.percent_to_rpe:
            if s.one_rep_max_percent >= floor:
                return rpe
        return cfg.min_rpe
    return cfg.default_rpe


def intensity_weight(s: SetInfo, cfg: LoadConfig = DEFAULT_SCORING_CONFIG.load) -> float:
    rpe = set_rpe(s, cfg)
    return min(cfg.max_intensity_weight, cfg.intensity_scale * math.exp(cfg.intensity_growth * rpe))


def rep_factor(reps: int, cfg: LoadConfig = DEFAULT_SCORING_CONFIG.load) -> float:
    """Diminishing returns: 15 reps is ~2.3× the stimulus of 5, not 3×."""
    if reps <= 0:
        return 0.0
    return reps ** cfg.rep_exponent


def set_load(s: SetInfo, cfg: LoadConfig = DEFAULT_SCORING_CONFIG.load) -> float:
    multiplier = cfg.set_type_multipliers.get(s.set_type.value, 1.0)
    return rep_factor(s.reps, cfg) * intensity_weight(s, cfg) * multiplier


def exercise_difficulty(exercise: Exercise) -> float:
    """Multiplier in [0.65, 1.5] from CNS demand, compound status and equipment."""
    base = 0.8 + exercise.cns_demand * 0.35
    base *= 1.15 if exercise.compound else 0.88
    if exercise.is_machine():
        base *= 0.90
    return max(0.65, min(1.5, base))


def max_allowed_percent_1rm(reps: int) -> float:
    """Highest sensible %1RM for a rep target (Epley-based ceiling)."""
    if reps <= 1:
        return 100.0
    if reps <= 3:
        return 95.0
    if reps <= 5:
        return 90.0
    if reps <= 8:
        return 80.0
    if reps <= 10:
        return 72.0
    if reps <= 12:
        return 67.0
    return 50.0


# ======================================================================
# Exercise / workout load
# ======================================================================


def exercise_load(
    we: WorkoutExercise,
    exercise: Exercise,
    config: Optional[ScoringConfig] = None,
) -> ExerciseLoad:
    """ETL of one placed exercise.  ``sets`` is at least 1 for averaging."""
    cfg = (config or DEFAULT_SCORING_CONFIG).load
    raw = sum(set_load(s, cfg) for s in we.sets)
    total = raw * exercise_difficulty(exercise)
    return ExerciseLoad(
        exercise_id=we.exercise_id,
        total_etl=total,
        normalized_etl=min(cfg.max_etl, total / cfg.normalizer),
        sets=we.set_count or 1,
    )


def workout_load(
    groups: list[WorkoutExerciseGroup],
    catalog: CatalogLike,
    goal: ProgramGoal | str = ProgramGoal.HYPERTROPHY,
    config: Optional[ScoringConfig] = None,
) -> WorkoutLoad:
    """Session ETL: set-weighted average, sum and per-exercise breakdown.

    *goal* is accepted for parity with the scorers; the load formula does
    not vary by goal.
    """
    scoring = config or DEFAULT_SCORING_CONFIG
    lookup = as_catalog(catalog)
    exercises = flatten_groups(groups)

    per_exercise: list[ExerciseLoad] = []
    for we in exercises:
        exercise = lookup.get(we.exercise_id)
        if exercise is None:
            logger.debug("exercise_not_in_catalog", exercise_id=we.exercise_id)
            continue
        per_exercise.append(exercise_load(we, exercise, scoring))

    total_sets = sum(e.sets for e in per_exercise)
    weighted = sum(e.normalized_etl * e.sets for e in per_exercise)

    return WorkoutLoad(
        normalized_etl=weighted / total_sets if total_sets > 0 else 0.0,
        session_etl=sum(e.normalized_etl for e in per_exercise),
        per_exercise=per_exercise,
        total_sets=total_sets,
        num_exercises=len(per_exercise),
        estimated_duration_seconds=estimate_workout_duration(groups, config=scoring),
    )


# ======================================================================
# Duration
# ======================================================================


def estimate_exercise_duration(
    we: WorkoutExercise,
    seconds_per_rep: Optional[float] = None,
    config: Optional[ScoringConfig] = None,
) -> float:
    """Seconds to complete *we*: every rep plus rest between sets.

    No rest is counted after the final set; a set without a rest value
    rests the configured default (90 s).
    """
    cfg = (config or DEFAULT_SCORING_CONFIG).load
    per_rep = cfg.seconds_per_rep if seconds_per_rep is None else seconds_per_rep
    reps = sum(s.reps for s in we.sets)
    rest = sum(
        s.rest if s.rest is not None else cfg.default_rest_seconds
        for s in we.sets[:-1]
    )
    return reps * per_rep + rest


def estimate_workout_duration(
    groups: list[WorkoutExerciseGroup],
    seconds_per_rep: Optional[float] = None,
    config: Optional[ScoringConfig] = None,
) -> float:
    return sum(
        estimate_exercise_duration(we, seconds_per_rep, config)
        for we in flatten_groups(groups)
    )
