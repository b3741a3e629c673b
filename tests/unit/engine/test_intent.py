"""
Unit tests for day snapshots and intent detection.
"""

import pytest

from app.engine.intent import build_snapshot, detect_intent
from app.schemas.exercise import (
    Exercise,
    ExerciseCategory,
    MovementType,
    MuscleContribution,
    MuscleRegion,
)
from app.schemas.program import SetInfo, WorkoutExercise, WorkoutExerciseGroup
from app.schemas.suggestion import DayIntent, DaySnapshot, IntentMatch


# ======================================================================
# Helpers
# ======================================================================

_REGIONS = {
    "quadriceps": MuscleRegion.LOWER,
    "hamstrings": MuscleRegion.LOWER,
    "gastrocnemius": MuscleRegion.LOWER,
    "core": MuscleRegion.CORE,
}


def _make_exercise(
    exercise_id: str,
    category: ExerciseCategory,
    muscles: dict[str, float],
    compound: bool = True,
) -> Exercise:
    return Exercise(
        id=exercise_id,
        name=exercise_id,
        category=category,
        compound=compound,
        fatigue_index=0.5,
        muscles=[
            MuscleContribution(
                muscle_id=mid, contribution=c,
                region=_REGIONS.get(mid, MuscleRegion.UPPER), movement_type=MovementType.PUSH,
            )
            for mid, c in muscles.items()
        ],
    )


def _groups(*entries: tuple[str, int]) -> list[WorkoutExerciseGroup]:
    return [WorkoutExerciseGroup(exercises=[
        WorkoutExercise(exercise_id=eid, sets=[SetInfo(reps=10) for _ in range(sets)])
        for eid, sets in entries
    ])]


CATALOG = [
    _make_exercise("press", ExerciseCategory.PUSH_HORIZONTAL, {"pectoralis_major": 0.9}),
    _make_exercise("close_grip", ExerciseCategory.PUSH_HORIZONTAL, {"triceps_brachii": 0.8}),
    _make_exercise("front_raise", ExerciseCategory.PUSH_HORIZONTAL, {"anterior_deltoid": 1.0}),
    _make_exercise("row", ExerciseCategory.PULL_HORIZONTAL, {"latissimus_dorsi": 0.9}),
    _make_exercise("curl", ExerciseCategory.OTHER, {"biceps": 0.9}, compound=False),
    _make_exercise("squat", ExerciseCategory.SQUAT, {"quadriceps": 0.9}),
    _make_exercise("leg_squat", ExerciseCategory.SQUAT, {"quadriceps": 1.0}),
    _make_exercise("deadlift", ExerciseCategory.HINGE, {"hamstrings": 0.9}),
    _make_exercise("plank", ExerciseCategory.BRACE, {"core": 0.9}, compound=False),
    _make_exercise("box_jump", ExerciseCategory.JUMP, {"quadriceps": 0.7}),
    _make_exercise("calf_raise", ExerciseCategory.OTHER, {"gastrocnemius": 0.9}, compound=False),
]


def _intents(*entries: tuple[str, int]) -> list[IntentMatch]:
    return detect_intent(build_snapshot(_groups(*entries), CATALOG))


# ======================================================================
# Snapshot
# ======================================================================


class TestSnapshot:

    def test_totals(self):
        snap = build_snapshot(_groups(("press", 3), ("row", 2)), CATALOG)
        assert snap.total_exercises == 2
        assert snap.total_sets == 5
        assert snap.total_fatigue == pytest.approx(2.5)
        assert snap.avg_fatigue_per_set == pytest.approx(0.5)
        assert snap.category_counts == {"push_horizontal": 1, "pull_horizontal": 1}
        assert snap.region_sets == {"upper": 5.0, "lower": 0.0, "core": 0.0}

    def test_muscle_volume(self):
        snap = build_snapshot(_groups(("press", 3)), CATALOG)
        assert snap.muscle_volume["pectoralis_major"] == pytest.approx(2.7)
        assert snap.muscle_group_volume == pytest.approx({"chest": 2.7})

    def test_muscle_counts_in_every_group(self):
        snap = build_snapshot(_groups(("curl", 2)), CATALOG)
        assert snap.muscle_group_volume == pytest.approx({"biceps": 1.8, "arms": 1.8})

    def test_used_ids_include_misses_once(self):
        snap = build_snapshot(_groups(("ghost", 2), ("press", 3), ("ghost", 1)), CATALOG)
        assert snap.used_ids == ["ghost", "press"]
        assert snap.total_exercises == 1

    def test_compound_count_is_distinct(self):
        snap = build_snapshot(_groups(("press", 3), ("press", 2), ("curl", 2), ("row", 1)), CATALOG)
        assert snap.compound_count == 2

    def test_empty_day_has_zero_fatigue_per_set(self):
        assert build_snapshot([], CATALOG).avg_fatigue_per_set == 0.0

    def test_fatigue_per_set_does_not_drift_past_threshold(self):
        # 0.6 + 0.6 accumulates to 1.2000000000000002
        snap = DaySnapshot(total_fatigue=1.2000000000000002, total_sets=2)
        assert snap.avg_fatigue_per_set == 0.6
        assert not snap.avg_fatigue_per_set > 0.6


# ======================================================================
# detect_intent
# ======================================================================


class TestDetectIntent:

    def test_empty_day(self):
        assert _intents() == [IntentMatch(intent=DayIntent.EMPTY, confidence=1.0)]

    def test_only_unknown_exercises_is_empty(self):
        assert _intents(("ghost", 3)) == [IntentMatch(intent=DayIntent.EMPTY, confidence=1.0)]

    def test_chest_day(self):
        intents = _intents(("press", 3))
        assert intents[0].intent == DayIntent.CHEST
        assert intents[0].confidence > 0.5

    def test_chest_suppresses_push(self):
        names = [m.intent for m in _intents(("press", 3))]
        assert DayIntent.PUSH not in names

    def test_push_day_without_chest_volume(self):
        intents = _intents(("close_grip", 3))
        assert [m.intent for m in intents] == [DayIntent.PUSH, DayIntent.ARMS]
        assert intents[0].confidence == pytest.approx(0.8)
        assert intents[1].confidence == pytest.approx(0.55)

    def test_back_day(self):
        intents = _intents(("row", 3))
        assert intents[0].intent == DayIntent.BACK
        assert DayIntent.PULL not in [m.intent for m in intents]

    def test_lower_day_matches_several(self):
        intents = _intents(("squat", 3), ("deadlift", 3))
        assert [m.intent for m in intents] == [
            DayIntent.LOWER, DayIntent.LEGS, DayIntent.POSTERIOR_CHAIN,
        ]
        assert [m.confidence for m in intents] == pytest.approx([0.8, 0.7, 0.55])

    def test_core_day(self):
        intents = _intents(("plank", 3))
        assert intents[0].intent == DayIntent.CORE
        assert intents[0].confidence == pytest.approx(0.9)

    def test_power_day(self):
        intents = _intents(("box_jump", 3))
        assert intents[0].intent == DayIntent.POWER

    def test_full_body(self):
        intents = _intents(("front_raise", 3), ("leg_squat", 3))
        by_name = {m.intent: m.confidence for m in intents}
        assert by_name[DayIntent.FULL_BODY] == pytest.approx(0.35)

    def test_fallback_is_full_body(self):
        assert _intents(("calf_raise", 3)) == [IntentMatch(intent=DayIntent.FULL_BODY, confidence=0.2)]

    def test_ranked_and_bounded(self):
        for entries in [
            (("press", 3), ("row", 3)),
            (("squat", 3), ("press", 2), ("row", 2), ("plank", 1)),
            (("curl", 4), ("close_grip", 4)),
        ]:
            intents = _intents(*entries)
            confidences = [m.confidence for m in intents]
            assert intents
            assert confidences == sorted(confidences, reverse=True)
            assert all(0.0 <= c <= 1.0 for c in confidences)
