"""
Program scoring — whole-program weekly volume, recovery overlap,
coverage and balance.

Only ``workout`` days take part; blocks → weeks → days are flattened in
order and the result is treated as one weekly micro-cycle.

Weighted sets
-------------

An exercise's set count is split across its muscles in proportion to
each muscle's share of the exercise's total contribution.  A 3-set
exercise hitting quads (0.9) and glutes (0.6) adds 1.8 weighted sets to
quads and 1.2 to glutes.

Recovery overlap
----------------

For every workout day after the first, each (exercise, muscle) pair of
that day is checked against the **previous day only**: if the previous
day gave the muscle at least ``overlap_min_sets`` weighted sets and the
exercise needs more than ``overlap_min_recovery_days``, one warning is
emitted.  Two long-recovery quad exercises after a heavy quad day give
two warnings.  This is a 1-day lookback approximation, not a
recovery-debt simulation.
"""

from __future__ import annotations

from typing import Optional

from app.catalog.provider import CatalogLike, ExerciseCatalog, as_catalog
from app.core.logging import get_logger
from app.engine.config import DEFAULT_SCORING_CONFIG, ProgramScoringConfig, ScoringConfig
from app.engine.primitives import (
    clamp01,
    clamp_score,
    round_half_up,
    safe_div,
    score_from_range,
)
from app.engine.workout import balance_score, score_workout
from app.schemas.exercise import Exercise
from app.schemas.program import Program, ProgramDay, ProgramGoal
from app.schemas.score import (
    DayScore,
    ProgramDetails,
    ProgramScore,
    ProgramScoreComponents,
    RecoveryWarning,
)

logger = get_logger(__name__)

_OVERLAP_NOTE = "Back-to-back high volume with <48h typical recovery."


# ======================================================================
# Weighted sets
# ======================================================================


def distribute_sets(exercise: Exercise, sets: int) -> list[tuple[str, float]]:
    """Split *sets* across the exercise's muscles by contribution share.

    Returns ``(muscle_id, weighted_sets)`` in the exercise's muscle order.
    An exercise whose contributions sum to 0 distributes nothing.
    """
    total = exercise.total_contribution() or 1.0
    return [(m.muscle_id, sets * m.contribution / total) for m in exercise.muscles]


def _day_muscle_load(
    day: ProgramDay,
    lookup: ExerciseCatalog,
) -> tuple[dict[str, float], list[tuple[str, float]], dict[str, int]]:
    """Weighted sets per muscle, one ``(muscle_id, recovery_days)`` stamp
    per exercise and muscle, and raw sets per exercise category for one day.
    """
    weighted: dict[str, float] = {}
    stamps: list[tuple[str, float]] = []
    category_sets: dict[str, int] = {}

    for we in day.flat_exercises():
        exercise = lookup.get(we.exercise_id)
        if exercise is None:
            logger.debug("exercise_not_in_catalog", exercise_id=we.exercise_id, day_id=day.id)
            continue
        sets = we.set_count
        key = exercise.category.value
        category_sets[key] = category_sets.get(key, 0) + sets
        for muscle_id, share in distribute_sets(exercise, sets):
            weighted[muscle_id] = weighted.get(muscle_id, 0.0) + share
            stamps.append((muscle_id, exercise.recovery_days))

    return weighted, stamps, category_sets


def _recovery_warnings(
    day_loads: list[dict[str, float]],
    day_stamps: list[list[tuple[str, float]]],
    cfg: ProgramScoringConfig,
) -> list[RecoveryWarning]:
    warnings: list[RecoveryWarning] = []
    for idx in range(1, len(day_loads)):
        previous = day_loads[idx - 1]
        for muscle_id, recovery_days in day_stamps[idx]:
            prev_sets = previous.get(muscle_id, 0.0)
            if prev_sets >= cfg.overlap_min_sets and recovery_days > cfg.overlap_min_recovery_days:
                warnings.append(RecoveryWarning(muscle_id=muscle_id, day_index=idx, note=_OVERLAP_NOTE))
    return warnings


def _hints(components: ProgramScoreComponents, cfg: ProgramScoringConfig) -> list[str]:
    limits = cfg.hint_thresholds
    hints: list[str] = []
    if components.weekly_volume < limits.get("weekly_volume", 60.0):
        hints.append("Low weekly volume for goal — add sets to key muscles.")
    if components.recovery < limits.get("recovery", 70.0):
        hints.append("Recovery overlaps detected — spread high-volume days apart.")
    if components.coverage < limits.get("coverage", 70.0):
        hints.append("Important muscles under-served — ensure full-body coverage.")
    if components.balance < limits.get("balance", 70.0):
        hints.append("Push/Pull/Legs imbalance — even out set distribution.")
    return hints


# ======================================================================
# Main entry point
# ======================================================================


def score_program(
    program: Program,
    catalog: CatalogLike,
    config: Optional[ScoringConfig] = None,
) -> ProgramScore:
    """Score a whole program 0-100.

    Args:
        program: Program with flat days or blocks → weeks → days.
        catalog: Exercise catalog (or any iterable of exercises).
        config: Optional :class:`ScoringConfig` override.

    Returns:
        :class:`ProgramScore` with components, per-muscle weekly sets,
        recovery warnings, per-day workout scores and hints.
    """
    scoring = config or DEFAULT_SCORING_CONFIG
    cfg = scoring.program
    lookup = as_catalog(catalog)
    goal = program.goal.value if isinstance(program.goal, ProgramGoal) else str(program.goal)
    days = program.workout_days()

    # --- Per-day workout scores ---
    day_scores: list[DayScore] = []
    for day in days:
        scores = [score_workout(w, goal, lookup, scoring).score for w in day.workouts]
        avg = round_half_up(sum(scores) / len(scores)) if scores else 0
        day_scores.append(DayScore(day_id=day.id, workout_score=avg))

    # --- Weekly muscle volume + movement buckets ---
    muscle_weekly_sets: dict[str, float] = {}
    bucket_sets = {"push": 0, "pull": 0, "legs": 0, "other": 0}
    day_loads: list[dict[str, float]] = []
    day_stamps: list[list[tuple[str, float]]] = []

    for day in days:
        weighted, stamps, category_sets = _day_muscle_load(day, lookup)
        day_loads.append(weighted)
        day_stamps.append(stamps)
        for muscle_id, sets in weighted.items():
            muscle_weekly_sets[muscle_id] = muscle_weekly_sets.get(muscle_id, 0.0) + sets
        for category, sets in category_sets.items():
            bucket = scoring.workout.major_groups.get(category, "other")
            bucket_sets[bucket] = bucket_sets.get(bucket, 0) + sets

    recovery_warnings = _recovery_warnings(day_loads, day_stamps, cfg)

    # --- Components ---
    band = cfg.band_for(goal)
    volume_scores = [score_from_range(s, band.min, band.max) for s in muscle_weekly_sets.values()]
    weekly_volume = 100 * safe_div(sum(volume_scores), len(volume_scores))

    covered = sum(1 for s in muscle_weekly_sets.values() if s >= band.min * cfg.coverage_fraction)
    coverage = 100 * clamp01(safe_div(covered, len(muscle_weekly_sets)))

    balance = balance_score(bucket_sets["push"], bucket_sets["pull"], bucket_sets["legs"], scoring.workout)
    recovery = 100 * (1 - clamp01(len(recovery_warnings) / max(1, len(days))))

    components = ProgramScoreComponents(
        weekly_volume=clamp_score(weekly_volume),
        recovery=clamp_score(recovery),
        coverage=clamp_score(coverage),
        balance=balance,
    )

    overall = sum(
        weight * getattr(components, name, 0.0) for name, weight in cfg.weights.items()
    )
    score = round_half_up(clamp_score(overall))

    logger.debug(
        "program_scored",
        score=score,
        workout_days=len(days),
        recovery_warnings=len(recovery_warnings),
    )

    return ProgramScore(
        score=score,
        components=components,
        details=ProgramDetails(
            muscle_weekly_sets=muscle_weekly_sets,
            recovery_warnings=recovery_warnings,
            day_scores=day_scores,
        ),
        hints=_hints(components, cfg),
    )
