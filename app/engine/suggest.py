"""
Exercise suggestions — rank unused catalog exercises for the day being built.

Scoring is additive (see :class:`~app.engine.config.SuggestionConfig`):

1. **Intent fit** — on-theme category +30, primary-intent category +10
   more, off-theme −20.
2. **Gap fill** — muscles the day's theme trains but the day has not hit
   yet (capped at +25).
3. **Accessory pairing** — isolation finisher after two compounds, or a
   first compound.
4. **Fatigue budget** — favour low-fatigue work once the day is heavy.
5. **Universal finishers** — brace / carry work not yet on the day.

An empty day skips all of the above and favours low-fatigue compounds.
The reason shown is the first rule that fired.
"""

from __future__ import annotations

from typing import Optional

from app.catalog.provider import CatalogLike, as_catalog
from app.core.logging import get_logger
from app.engine.config import DEFAULT_SCORING_CONFIG, ScoringConfig, SuggestionConfig
from app.engine.intent import build_snapshot, detect_intent
from app.schemas.exercise import Exercise, MuscleRole
from app.schemas.program import WorkoutExerciseGroup
from app.schemas.suggestion import DayIntent, DaySnapshot, Suggestion

logger = get_logger(__name__)


def _gap_score(
    exercise: Exercise,
    snapshot: DaySnapshot,
    day_muscles: set[str],
    cfg: SuggestionConfig,
) -> float:
    gap = 0.0
    for muscle in exercise.muscles:
        if muscle.muscle_id not in day_muscles:
            continue
        current = snapshot.muscle_volume.get(muscle.muscle_id, 0.0)
        if current == 0:
            gap += muscle.contribution * cfg.gap_untrained_weight
            if muscle.role == MuscleRole.PRIME:
                gap += cfg.gap_prime_bonus
        elif current < cfg.gap_low_volume:
            gap += muscle.contribution * cfg.gap_low_volume_weight
    return min(gap, cfg.gap_cap)


def _score_candidate(
    exercise: Exercise,
    snapshot: DaySnapshot,
    primary: DayIntent,
    primary_categories: set[str],
    day_categories: set[str],
    day_muscles: set[str],
    intent_label: str,
    cfg: SuggestionConfig,
) -> Suggestion:
    score = 0.0
    reasons: list[str] = []
    category = exercise.category.value

    if snapshot.total_exercises == 0:
        if exercise.compound:
            score += cfg.empty_compound_bonus
        score += (1 - exercise.fatigue_index) * cfg.empty_fatigue_weight
        reasons.append("Good starting exercise")
    else:
        on_theme = category in day_categories

        # 1. Intent fit
        if on_theme:
            score += cfg.intent_fit_bonus
            if category in primary_categories:
                score += cfg.primary_fit_bonus
            reasons.append(f"Fits your {intent_label.lower()}")
        else:
            score -= cfg.off_theme_penalty

        # 2. Gap fill
        gap = _gap_score(exercise, snapshot, day_muscles, cfg)
        if gap > cfg.gap_reason_min and not reasons:
            reasons.append("Targets under-hit muscles")
        score += gap

        # 3. Accessory pairing
        if snapshot.compound_count >= cfg.accessory_min_compounds and not exercise.compound and on_theme:
            score += cfg.isolation_finisher_bonus
            if not reasons:
                reasons.append("Isolation finisher")
        elif snapshot.compound_count == 0 and exercise.compound and on_theme:
            score += cfg.first_compound_bonus
            if not reasons:
                reasons.append("Add a compound lift")

        # 4. Fatigue budget
        if snapshot.avg_fatigue_per_set > cfg.fatigue_budget_threshold:
            score += (1 - exercise.fatigue_index) * cfg.fatigue_budget_weight
            if exercise.fatigue_index < cfg.low_fatigue_reason_below and not reasons:
                reasons.append("Low fatigue finisher")

        # 5. Universal finishers
        if (
            category in cfg.finisher_categories
            and primary != DayIntent.CORE
            and not snapshot.category_counts.get(category)
        ):
            score += cfg.finisher_bonus
            if not reasons:
                reasons.append("Core / stability finisher")

    if exercise.muscles:
        score += cfg.metadata_tiebreak

    return Suggestion(
        exercise=exercise,
        score=score,
        reason=reasons[0] if reasons else "Complements workout",
    )


def _select_diverse(scored: list[Suggestion], count: int) -> list[Suggestion]:
    """Top *count* positive scores, one per category until the last slot,
    then back-filled in score order.
    """
    results: list[Suggestion] = []
    used_categories: set[str] = set()

    for s in scored:
        if len(results) >= count:
            break
        if s.score <= 0:
            continue
        category = s.exercise.category.value
        if category in used_categories and len(results) < count - 1:
            continue
        results.append(s)
        used_categories.add(category)

    if len(results) < count:
        chosen = {r.exercise.id for r in results}
        for s in scored:
            if len(results) >= count:
                break
            if s.score <= 0 or s.exercise.id in chosen:
                continue
            results.append(s)
            chosen.add(s.exercise.id)

    return results


def suggest_exercises(
    groups: list[WorkoutExerciseGroup],
    catalog: CatalogLike,
    count: int = 3,
    config: Optional[ScoringConfig] = None,
) -> list[Suggestion]:
    """Suggest up to *count* exercises that fit the day being built.

    Args:
        groups: The day's current exercise groups.
        catalog: Exercise catalog (or any iterable of exercises).
        count: Maximum number of suggestions.
        config: Optional :class:`ScoringConfig` override.

    Returns:
        Ranked :class:`Suggestion` list; never contains an exercise already
        in *groups*.  Empty for an empty catalog or ``count <= 0``.
    """
    scoring = config or DEFAULT_SCORING_CONFIG
    cfg = scoring.suggestion
    lookup = as_catalog(catalog)
    if len(lookup) == 0 or count <= 0:
        return []

    snapshot = build_snapshot(groups, lookup, scoring)
    intents = detect_intent(snapshot, scoring)
    primary = intents[0].intent
    intent_categories = scoring.intent.intent_categories

    primary_categories = set(intent_categories.get(primary.value, []))
    day_categories = set(primary_categories)
    if len(intents) > 1:
        day_categories.update(intent_categories.get(intents[1].intent.value, []))

    # Muscles any on-theme catalog exercise can train.
    day_muscles = {
        muscle.muscle_id
        for exercise in lookup
        if exercise.category.value in day_categories
        for muscle in exercise.muscles
    }

    intent_label = scoring.intent.intent_labels.get(primary.value, "")
    used = set(snapshot.used_ids)
    scored = [
        _score_candidate(
            exercise, snapshot, primary, primary_categories,
            day_categories, day_muscles, intent_label, cfg,
        )
        for exercise in lookup
        if exercise.id not in used
    ]

    # sorted() is stable: ties keep catalog order.
    scored = sorted(scored, key=lambda s: s.score, reverse=True)
    results = _select_diverse(scored, count)

    logger.debug(
        "exercises_suggested",
        primary_intent=primary.value,
        candidates=len(scored),
        returned=len(results),
    )
    return results
