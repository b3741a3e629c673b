"""
Workout scoring — one workout, 0-100, from six weighted sub-scores.

Each matched exercise becomes a *signal* (set-weighted demands, rest and
a crude duration estimate).  Signals are summed into:

================  ===========================================================
balance           100 × (0.6 × ratio(push, pull) + 0.4 × ratio(push+pull, legs))
fatigue           100 × (1 − clamp(avg per set (cns + metabolic) / 1.2))
skill_risk        100 × (1 − clamp(0.6 × avg per set joint + 0.4 × avg per exercise skill))
volume            100 × range(total sets, 10, 24)
time              100 × (0.8 × range(minutes, 45, 75) + 0.2 × (1 − clamp(overtime / 30)))
energy            normalised entropy over ATP-CP / Glycolytic / Oxidative sets
================  ===========================================================

All weights and bands come from
:class:`~app.engine.config.WorkoutScoringConfig`.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.catalog.provider import CatalogLike, as_catalog
from app.core.logging import get_logger
from app.engine.config import DEFAULT_SCORING_CONFIG, ScoringConfig, WorkoutScoringConfig
from app.engine.primitives import (
    clamp01,
    clamp_score,
    entropy_score,
    ratio_score,
    round_half_up,
    safe_div,
    score_from_range,
)
from app.schemas.exercise import Exercise
from app.schemas.program import ProgramGoal, Workout, WorkoutExercise
from app.schemas.score import WorkoutEstimates, WorkoutScore, WorkoutScoreComponents

logger = get_logger(__name__)


# ======================================================================
# Per-exercise signal
# ======================================================================


class ExerciseSignal(BaseModel):
    """Set-weighted contribution of one exercise instance."""

    exercise_id: str
    sets: int = 0
    est_volume: float = 0.0
    cns: float = 0.0
    metabolic: float = 0.0
    joint: float = 0.0
    skill: float = 0.0
    energy: dict[str, float] = Field(default_factory=dict)
    rest_seconds: float = 0.0
    time_min: float = 0.0
    group: str = "other"


def build_exercise_signal(
    we: WorkoutExercise,
    exercise: Exercise,
    goal: ProgramGoal | str,
    cfg: WorkoutScoringConfig,
) -> ExerciseSignal:
    """Turn one placed exercise into its scoring signal."""
    sets = we.set_count
    goal_value = goal.value if isinstance(goal, ProgramGoal) else str(goal)

    # A missing per-set estimate counts as one unit per set.
    per_set = exercise.volume_per_set.for_goal(goal_value) or 1.0

    total_rest = sum(s.rest or 0.0 for s in we.sets)
    avg_rest = round_half_up(safe_div(total_rest, sets)) or cfg.default_rest_seconds
    rest_seconds = avg_rest * sets

    skill = (
        cfg.skill_levels.get(exercise.skill_requirement.value, cfg.unknown_skill)
        if exercise.skill_requirement is not None
        else cfg.unknown_skill
    )

    return ExerciseSignal(
        exercise_id=exercise.id,
        sets=sets,
        est_volume=sets * max(0.0, per_set),
        cns=exercise.cns_demand * sets,
        metabolic=exercise.metabolic_demand * sets,
        joint=exercise.joint_stress * sets,
        skill=skill,
        energy={exercise.energy_system.value: float(sets)},
        rest_seconds=rest_seconds,
        time_min=(sets * cfg.work_seconds_per_set + rest_seconds) / 60.0,
        group=cfg.major_groups.get(exercise.category.value, "other"),
    )


def collect_signals(
    workout: Workout,
    goal: ProgramGoal | str,
    catalog: CatalogLike,
    cfg: WorkoutScoringConfig,
) -> list[ExerciseSignal]:
    """Signals for every exercise of *workout* found in the catalog."""
    lookup = as_catalog(catalog)
    signals: list[ExerciseSignal] = []
    for we in workout.flat_exercises():
        exercise = lookup.get(we.exercise_id)
        if exercise is None:
            logger.debug("exercise_not_in_catalog", exercise_id=we.exercise_id)
            continue
        signals.append(build_exercise_signal(we, exercise, goal, cfg))
    return signals


# ======================================================================
# Sub-scores
# ======================================================================


def balance_score(push: float, pull: float, legs: float, cfg: WorkoutScoringConfig) -> float:
    """Set balance in [0, 100]; shared with the program scorer."""
    push_pull = ratio_score(push, pull, cfg.ideal_push_pull_ratio)
    upper_lower = ratio_score(push + pull, legs, cfg.ideal_upper_lower_ratio)
    return clamp_score(100 * (cfg.push_pull_share * push_pull + cfg.upper_lower_share * upper_lower))


def _time_score(total_minutes: float, cfg: WorkoutScoringConfig) -> float:
    in_window = score_from_range(total_minutes, cfg.ideal_time_min, cfg.ideal_time_max)
    overtime = max(0.0, total_minutes - cfg.max_session_minutes) / cfg.overtime_window_minutes
    return clamp_score(100 * (cfg.time_range_share * in_window + cfg.overtime_share * (1 - clamp01(overtime))))


def _hints(
    components: WorkoutScoreComponents,
    signals: list[ExerciseSignal],
    push: int,
    pull: int,
    total_minutes: float,
    cfg: WorkoutScoringConfig,
) -> list[str]:
    hints: list[str] = []
    if push > pull * cfg.imbalance_ratio:
        hints.append("Push exceeds pull — add rows/pull-ups to balance.")
    if pull > push * cfg.imbalance_ratio:
        hints.append("Pull exceeds push — add presses to balance.")
    if total_minutes > cfg.long_session_minutes:
        hints.append("Session is long — consider trimming sets or rests.")
    if any(s.sets >= cfg.high_sets_per_move for s in signals):
        hints.append("High sets on a single movement — consider splitting across days.")
    if components.skill_risk < cfg.skill_risk_hint_below:
        hints.append("High joint/skill demand — watch technique and load.")
    if components.volume < cfg.volume_hint_below:
        hints.append("Low total sets — consider adding working sets.")
    return hints


# ======================================================================
# Main entry point
# ======================================================================


def score_workout(
    workout: Workout,
    goal: ProgramGoal | str,
    catalog: CatalogLike,
    config: Optional[ScoringConfig] = None,
) -> WorkoutScore:
    """Score one workout 0-100 for the given program goal.

    Args:
        workout: The workout (its exercise groups are flattened in order).
        goal: Program goal; selects the per-set volume estimate.
        catalog: Exercise catalog (or any iterable of exercises).
        config: Optional :class:`ScoringConfig` override.

    Returns:
        :class:`WorkoutScore` with components, estimates and hints.
    """
    cfg = (config or DEFAULT_SCORING_CONFIG).workout
    signals = collect_signals(workout, goal, catalog, cfg)

    total_sets = sum(s.sets for s in signals)
    total_minutes = sum(s.time_min for s in signals)
    push = sum(s.sets for s in signals if s.group == "push")
    pull = sum(s.sets for s in signals if s.group == "pull")
    legs = sum(s.sets for s in signals if s.group == "legs")

    # Per-set averages divide by at least one set; skill is per exercise.
    fatigue_raw = sum(s.cns + s.metabolic for s in signals) / max(1, total_sets)
    joint_raw = sum(s.joint for s in signals) / max(1, total_sets)
    skill_raw = sum(s.skill for s in signals) / max(1, len(signals))

    energy_totals: dict[str, float] = {name: 0.0 for name in cfg.energy_systems}
    for s in signals:
        for name, value in s.energy.items():
            energy_totals[name] = energy_totals.get(name, 0.0) + value

    components = WorkoutScoreComponents(
        balance=balance_score(push, pull, legs, cfg),
        fatigue=clamp_score(100 * (1 - clamp01(fatigue_raw / cfg.fatigue_ceiling))),
        time=_time_score(total_minutes, cfg),
        energy=entropy_score(energy_totals, cfg.energy_systems),
        skill_risk=clamp_score(
            100 * (1 - clamp01(cfg.joint_share * joint_raw + cfg.skill_share * skill_raw))
        ),
        volume=clamp_score(
            100 * score_from_range(total_sets, cfg.session_sets_min, cfg.session_sets_max)
        ),
    )

    overall = sum(
        weight * getattr(components, name, 0.0) for name, weight in cfg.weights.items()
    )
    score = round_half_up(clamp_score(overall))

    logger.debug("workout_scored", score=score, total_sets=total_sets, exercises=len(signals))

    return WorkoutScore(
        score=score,
        components=components,
        estimates=WorkoutEstimates(
            time_min=round_half_up(total_minutes),
            total_sets=total_sets,
            push_sets=push,
            pull_sets=pull,
            leg_sets=legs,
            volume_units=sum(s.est_volume for s in signals),
        ),
        hints=_hints(components, signals, push, pull, total_minutes, cfg),
    )
