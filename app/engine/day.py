"""
Day aggregation — folds one day's exercise groups and the catalog into a
flat :class:`~app.schemas.day_summary.WorkoutDaySummary`.

Accumulation rules
------------------

* Category and energy-system counts: **once per exercise**.
* Fatigue, recovery days, joint stress, CNS / metabolic demand and
  volume (mean of the strength and hypertrophy per-set estimates):
  **once per set**.
* Every muscle contribution of the exercise, once per set: muscle volume
  (+contribution), muscle set count (+1), region total and movement-type
  total (both +contribution).

Exercise ids missing from the catalog are skipped; an exercise with no
sets only counts toward the category / energy-system tallies.

Neutral values
--------------

* Averages with zero sets → 0.
* ``push_pull_ratio`` with no pull → the raw push total (0 when both are
  empty).  A one-sided day reads as its push magnitude.
* ``lower_upper_ratio`` unless both regions are present → 1.0.
"""

from __future__ import annotations

from typing import Optional

from app.catalog.provider import CatalogLike, as_catalog
from app.core.logging import get_logger
from app.engine.config import DEFAULT_SCORING_CONFIG, DayConfig, ScoringConfig
from app.engine.primitives import per_set_mean
from app.schemas.day_summary import InjuryRisk, WorkoutDaySummary, WorkoutType
from app.schemas.exercise import MovementType, MuscleRegion
from app.schemas.program import WorkoutExerciseGroup, flatten_groups

logger = get_logger(__name__)


def _increment(counter: dict, key: str, by: float = 1) -> None:
    counter[key] = counter.get(key, 0) + by


# ======================================================================
# Classification
# ======================================================================


def _classify_workout_type(region_totals: dict[str, float], cfg: DayConfig) -> WorkoutType:
    upper = region_totals.get(MuscleRegion.UPPER.value, 0.0)
    lower = region_totals.get(MuscleRegion.LOWER.value, 0.0)
    if upper > lower * cfg.region_dominance:
        return WorkoutType.UPPER
    if lower > upper * cfg.region_dominance:
        return WorkoutType.LOWER
    if upper > 0 and lower > 0:
        return WorkoutType.FULL_BODY
    return WorkoutType.MIXED


def _classify_injury_risk(avg_joint: float, cfg: DayConfig) -> InjuryRisk:
    if avg_joint > cfg.joint_stress_high:
        return InjuryRisk.HIGH
    if avg_joint > cfg.joint_stress_moderate:
        return InjuryRisk.MODERATE
    return InjuryRisk.LOW


def push_pull_ratio(push: float, pull: float) -> float:
    return push / pull if pull > 0 else push


def lower_upper_ratio(upper: float, lower: float) -> float:
    return upper / lower if upper > 0 and lower > 0 else 1.0


# ======================================================================
# Main entry point
# ======================================================================


def analyze_workout_day(
    groups: list[WorkoutExerciseGroup],
    catalog: CatalogLike,
    config: Optional[ScoringConfig] = None,
) -> WorkoutDaySummary:
    """Aggregate a day's exercise groups into a flat summary.

    Args:
        groups: Ordered exercise groups of the day.
        catalog: Exercise catalog (or any iterable of exercises).
        config: Optional :class:`ScoringConfig` override.

    Returns:
        :class:`WorkoutDaySummary` — all zeros for an empty day.
    """
    cfg = (config or DEFAULT_SCORING_CONFIG).day
    lookup = as_catalog(catalog)

    muscle_volumes: dict[str, float] = {}
    muscle_set_counts: dict[str, int] = {}
    category_counts: dict[str, int] = {}
    energy_system_counts: dict[str, int] = {}
    region_totals: dict[str, float] = {r.value: 0.0 for r in MuscleRegion}
    movement_totals: dict[str, float] = {m.value: 0.0 for m in MovementType}

    total_sets = 0
    total_volume = 0.0
    total_fatigue = 0.0
    total_recovery = 0.0
    total_joint = 0.0
    total_cns = 0.0
    total_metabolic = 0.0
    max_recovery = 0.0

    for we in flatten_groups(groups):
        exercise = lookup.get(we.exercise_id)
        if exercise is None:
            logger.debug("exercise_not_in_catalog", exercise_id=we.exercise_id)
            continue

        _increment(category_counts, exercise.category.value)
        _increment(energy_system_counts, exercise.energy_system.value)

        if we.sets:
            max_recovery = max(max_recovery, exercise.recovery_days)
        volume_per_set = exercise.volume_per_set.average()

        for _set in we.sets:
            total_sets += 1
            total_fatigue += exercise.fatigue_index
            total_recovery += exercise.recovery_days
            total_joint += exercise.joint_stress
            total_cns += exercise.cns_demand
            total_metabolic += exercise.metabolic_demand
            total_volume += volume_per_set

            for muscle in exercise.muscles:
                _increment(muscle_volumes, muscle.muscle_id, muscle.contribution)
                _increment(muscle_set_counts, muscle.muscle_id)
                _increment(region_totals, muscle.region.value, muscle.contribution)
                _increment(movement_totals, muscle.movement_type.value, muscle.contribution)

    avg_joint = per_set_mean(total_joint, total_sets)

    # sorted() is stable: ties keep first-seen order.
    top_muscles = sorted(muscle_volumes.items(), key=lambda kv: kv[1], reverse=True)
    top_muscles = top_muscles[: cfg.top_muscles]

    return WorkoutDaySummary(
        total_sets=total_sets,
        total_volume=total_volume,
        total_fatigue=total_fatigue,
        avg_fatigue=per_set_mean(total_fatigue, total_sets),
        avg_cns=per_set_mean(total_cns, total_sets),
        avg_metabolic=per_set_mean(total_metabolic, total_sets),
        avg_joint=avg_joint,
        avg_recovery=per_set_mean(total_recovery, total_sets),
        max_recovery=max_recovery,
        muscle_volumes=muscle_volumes,
        muscle_set_counts=muscle_set_counts,
        top_muscles=top_muscles,
        category_counts=category_counts,
        energy_system_counts=energy_system_counts,
        region_totals=region_totals,
        movement_totals=movement_totals,
        workout_type=_classify_workout_type(region_totals, cfg),
        injury_risk=_classify_injury_risk(avg_joint, cfg),
        push_pull_ratio=push_pull_ratio(
            movement_totals[MovementType.PUSH.value],
            movement_totals[MovementType.PULL.value],
        ),
        lower_upper_ratio=lower_upper_ratio(
            region_totals[MuscleRegion.UPPER.value],
            region_totals[MuscleRegion.LOWER.value],
        ),
    )
