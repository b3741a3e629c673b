"""
Day intent detection — what kind of day is the user building?

The snapshot rolls the in-progress day up by category and by the named
muscle groups of :class:`~app.engine.config.IntentConfig`.  Intents are
then checked narrow-first:

1. Body-part days (chest, back, shoulders, arms, core) need a muscle-group
   share **and**, for most, a category share.
2. Split days (push, pull, upper, lower / legs, posterior chain, power,
   full body) use category shares only.  Push is suppressed when chest or
   shoulders already matched, pull when back did.

Matches are not exclusive: a squat + deadlift day is lower, legs *and*
posterior chain at once.  The ranked list is never empty.
"""

from __future__ import annotations

from typing import Optional

from app.catalog.provider import CatalogLike, as_catalog
from app.core.logging import get_logger
from app.engine.config import DEFAULT_SCORING_CONFIG, IntentConfig, ScoringConfig
from app.engine.primitives import safe_div
from app.schemas.program import WorkoutExerciseGroup, flatten_groups
from app.schemas.suggestion import DayIntent, DaySnapshot, IntentMatch

logger = get_logger(__name__)


# ======================================================================
# Snapshot
# ======================================================================


def build_snapshot(
    groups: list[WorkoutExerciseGroup],
    catalog: CatalogLike,
    config: Optional[ScoringConfig] = None,
) -> DaySnapshot:
    """Roll a day's exercise groups up for intent detection and gap fill.

    Every exercise id is recorded as used, even when it is missing from the
    catalog; only matched exercises feed the counts and volumes.  A muscle
    listed in several groups adds to each of them.
    """
    cfg = (config or DEFAULT_SCORING_CONFIG).intent
    lookup = as_catalog(catalog)
    snap = DaySnapshot()
    compound_ids: set[str] = set()

    for we in flatten_groups(groups):
        if we.exercise_id not in snap.used_ids:
            snap.used_ids.append(we.exercise_id)
        exercise = lookup.get(we.exercise_id)
        if exercise is None:
            continue

        sets = we.set_count
        snap.total_exercises += 1
        snap.total_sets += sets
        snap.total_fatigue += exercise.fatigue_index * sets
        category = exercise.category.value
        snap.category_counts[category] = snap.category_counts.get(category, 0) + 1
        if exercise.compound:
            compound_ids.add(exercise.id)

        for muscle in exercise.muscles:
            volume = muscle.contribution * sets
            mid = muscle.muscle_id
            snap.muscle_volume[mid] = snap.muscle_volume.get(mid, 0.0) + volume
            region = muscle.region.value
            snap.region_sets[region] = snap.region_sets.get(region, 0.0) + sets
            for group, members in cfg.muscle_groups.items():
                if mid in members:
                    snap.muscle_group_volume[group] = snap.muscle_group_volume.get(group, 0.0) + volume

    snap.compound_count = len(compound_ids)
    return snap


# ======================================================================
# Detection
# ======================================================================


def detect_intent(
    snapshot: DaySnapshot,
    config: Optional[ScoringConfig] = None,
) -> list[IntentMatch]:
    """Rank the day's likely intents by confidence, highest first.

    Returns ``[empty @ 1.0]`` for a day with no matched exercises and
    ``[full_body @ fallback]`` when nothing else matches.
    """
    cfg: IntentConfig = (config or DEFAULT_SCORING_CONFIG).intent
    t = cfg.thresholds

    if snapshot.total_exercises == 0:
        return [IntentMatch(intent=DayIntent.EMPTY, confidence=1.0)]

    total = snapshot.total_exercises
    group_total = sum(snapshot.muscle_group_volume.values())

    def cat_fraction(categories: list[str]) -> float:
        return sum(snapshot.category_counts.get(c, 0) for c in categories) / total

    def group_fraction(group: str) -> float:
        return safe_div(snapshot.muscle_group_volume.get(group, 0.0), group_total)

    sets = cfg.category_sets
    scores: dict[str, float] = {}

    # --- Body-part days ---
    chest = group_fraction("chest")
    if chest > t["chest_group"] and cat_fraction(["push_horizontal"]) >= t["chest_category"]:
        scores["chest"] = cfg.confidence_for("chest", chest)

    back = group_fraction("back")
    if back > t["back_group"] and cat_fraction(sets["upper_pull"]) >= t["back_category"]:
        scores["back"] = cfg.confidence_for("back", back)

    shoulders = group_fraction("shoulders")
    if shoulders > t["shoulders_group"] and cat_fraction(["push_vertical"]) >= t["shoulders_category"]:
        scores["shoulders"] = cfg.confidence_for("shoulders", shoulders)

    arms = group_fraction("arms")
    if arms > t["arms_group"]:
        scores["arms"] = cfg.confidence_for("arms", arms)

    core = cat_fraction(["brace"])
    if core >= t["core_category"]:
        scores["core"] = cfg.confidence_for("core", core)

    # --- Split days ---
    push = cat_fraction(sets["upper_push"])
    if push >= t["push_category"] and "chest" not in scores and "shoulders" not in scores:
        scores["push"] = cfg.confidence_for("push", push)

    pull = cat_fraction(sets["upper_pull"])
    if pull >= t["pull_category"] and "back" not in scores:
        scores["pull"] = cfg.confidence_for("pull", pull)

    upper = cat_fraction(sets["upper"])
    if upper >= t["upper_category"] and push > t["upper_mix"] and pull > t["upper_mix"]:
        scores["upper"] = cfg.confidence_for("upper", upper)

    lower = cat_fraction(sets["lower"])
    if lower >= t["lower_category"]:
        scores["lower"] = cfg.confidence_for("lower", lower)
        scores["legs"] = cfg.confidence_for("legs", lower)

    hinge = cat_fraction(sets["hinge"])
    if hinge >= t["posterior_chain_category"] and lower >= t["lower_category"]:
        scores["posterior_chain"] = cfg.confidence_for("posterior_chain", hinge)

    power = cat_fraction(sets["power"])
    if power >= t["power_category"]:
        scores["power"] = cfg.confidence_for("power", power)

    if upper >= t["full_body_category"] and lower >= t["full_body_category"]:
        scores["full_body"] = cfg.confidence_for("full_body", min(upper, lower))

    if not scores:
        return [IntentMatch(intent=DayIntent.FULL_BODY, confidence=t["fallback_confidence"])]

    # sorted() is stable: equal confidences keep evaluation order.
    ranked = sorted(scores.items(), key=lambda kv: kv[1], reverse=True)
    logger.debug("intent_detected", primary=ranked[0][0], matches=len(ranked))
    return [IntentMatch(intent=DayIntent(name), confidence=value) for name, value in ranked]
