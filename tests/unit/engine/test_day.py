"""
Unit tests for the day aggregator.

Tests per-exercise vs per-set accumulation, muscle / region / movement
totals, classification thresholds and neutral values on empty input.
"""

import pytest

from app.engine.config import DayConfig, ScoringConfig
from app.engine.day import analyze_workout_day, lower_upper_ratio, push_pull_ratio
from app.schemas.day_summary import InjuryRisk, WorkoutType
from app.schemas.exercise import (
    EnergySystem,
    Exercise,
    ExerciseCategory,
    MovementType,
    MuscleContribution,
    MuscleRegion,
    VolumePerSet,
)
from app.schemas.program import SetInfo, WorkoutExercise, WorkoutExerciseGroup


# ======================================================================
# Helpers
# ======================================================================


def _muscle(
    muscle_id: str,
    contribution: float = 1.0,
    region: MuscleRegion = MuscleRegion.UPPER,
    movement: MovementType = MovementType.PUSH,
) -> MuscleContribution:
    return MuscleContribution(
        muscle_id=muscle_id, contribution=contribution, region=region, movement_type=movement,
    )


def _make_exercise(
    exercise_id: str = "press",
    category: ExerciseCategory = ExerciseCategory.PUSH_HORIZONTAL,
    muscles: list[MuscleContribution] | None = None,
    **overrides,
) -> Exercise:
    defaults = dict(
        fatigue_index=0.6,
        cns_demand=0.5,
        metabolic_demand=0.4,
        joint_stress=0.3,
        recovery_days=2.0,
        energy_system=EnergySystem.ATP_CP,
        volume_per_set=VolumePerSet(strength=100, hypertrophy=200),
    )
    defaults.update(overrides)
    return Exercise(
        id=exercise_id,
        name=exercise_id.title(),
        category=category,
        muscles=muscles if muscles is not None else [_muscle("pectoralis_major", 0.9)],
        **defaults,
    )


def _make_we(exercise_id: str, sets: int = 3) -> WorkoutExercise:
    return WorkoutExercise(exercise_id=exercise_id, sets=[SetInfo(reps=10) for _ in range(sets)])


def _groups(*exercises: WorkoutExercise) -> list[WorkoutExerciseGroup]:
    return [WorkoutExerciseGroup(exercises=list(exercises))]


# ======================================================================
# Empty input
# ======================================================================


class TestEmptyDay:

    def test_all_zero(self):
        summary = analyze_workout_day([], [])
        assert summary.total_sets == 0
        assert summary.total_volume == 0.0
        assert summary.avg_fatigue == 0.0
        assert summary.avg_joint == 0.0
        assert summary.avg_recovery == 0.0
        assert summary.muscle_volumes == {}
        assert summary.top_muscles == []

    def test_neutral_classification(self):
        summary = analyze_workout_day([], [])
        assert summary.workout_type == WorkoutType.MIXED
        assert summary.injury_risk == InjuryRisk.LOW
        assert summary.push_pull_ratio == 0.0
        assert summary.lower_upper_ratio == 1.0

    def test_unmatched_ids_are_skipped(self):
        summary = analyze_workout_day(_groups(_make_we("ghost")), [_make_exercise()])
        assert summary.total_sets == 0
        assert summary.category_counts == {}


# ======================================================================
# Accumulation
# ======================================================================


class TestAccumulation:

    def test_per_set_totals(self):
        summary = analyze_workout_day(_groups(_make_we("press", 3)), [_make_exercise()])
        assert summary.total_sets == 3
        assert summary.total_fatigue == pytest.approx(1.8)
        assert summary.avg_fatigue == pytest.approx(0.6)
        assert summary.avg_cns == pytest.approx(0.5)
        assert summary.avg_metabolic == pytest.approx(0.4)
        assert summary.avg_joint == pytest.approx(0.3)
        assert summary.avg_recovery == pytest.approx(2.0)
        assert summary.max_recovery == 2.0

    def test_volume_uses_mean_of_goal_estimates(self):
        summary = analyze_workout_day(_groups(_make_we("press", 3)), [_make_exercise()])
        assert summary.total_volume == pytest.approx(450.0)

    def test_category_and_energy_counted_once_per_exercise(self):
        summary = analyze_workout_day(_groups(_make_we("press", 4)), [_make_exercise()])
        assert summary.category_counts == {"push_horizontal": 1}
        assert summary.energy_system_counts == {"ATP-CP": 1}

    def test_muscle_totals(self):
        summary = analyze_workout_day(_groups(_make_we("press", 3)), [_make_exercise()])
        assert summary.muscle_volumes["pectoralis_major"] == pytest.approx(2.7)
        assert summary.muscle_set_counts["pectoralis_major"] == 3
        assert summary.region_totals["upper"] == pytest.approx(2.7)
        assert summary.region_totals["lower"] == 0.0
        assert summary.movement_totals["push"] == pytest.approx(2.7)

    def test_zero_set_exercise_only_counts_category(self):
        exercise = _make_exercise(recovery_days=4.0)
        summary = analyze_workout_day(_groups(_make_we("press", 0)), [exercise])
        assert summary.category_counts == {"push_horizontal": 1}
        assert summary.total_sets == 0
        assert summary.max_recovery == 0.0

    def test_groups_are_flattened_in_order(self):
        press = _make_exercise("press")
        row = _make_exercise(
            "row", ExerciseCategory.PULL_HORIZONTAL,
            muscles=[_muscle("latissimus_dorsi", 0.8, movement=MovementType.PULL)],
        )
        groups = [
            WorkoutExerciseGroup(exercises=[_make_we("press", 2)]),
            WorkoutExerciseGroup(exercises=[_make_we("row", 2)]),
        ]
        summary = analyze_workout_day(groups, [press, row])
        assert summary.total_sets == 4
        assert summary.push_pull_ratio == pytest.approx(1.8 / 1.6)

    def test_top_muscles_limited_and_stable(self):
        muscles = [_muscle(f"m{i}", 0.5) for i in range(7)]
        exercise = _make_exercise(muscles=muscles)
        summary = analyze_workout_day(_groups(_make_we("press", 1)), [exercise])
        assert [m for m, _ in summary.top_muscles] == ["m0", "m1", "m2", "m3", "m4"]

    def test_top_muscles_descending(self):
        muscles = [_muscle("a", 0.2), _muscle("b", 0.9), _muscle("c", 0.5)]
        summary = analyze_workout_day(_groups(_make_we("press", 1)), [_make_exercise(muscles=muscles)])
        assert [m for m, _ in summary.top_muscles] == ["b", "c", "a"]

    def test_top_muscles_size_from_config(self):
        muscles = [_muscle(f"m{i}", 0.5) for i in range(4)]
        config = ScoringConfig(day=DayConfig(top_muscles=2))
        summary = analyze_workout_day(_groups(_make_we("press", 1)), [_make_exercise(muscles=muscles)], config)
        assert len(summary.top_muscles) == 2


# ======================================================================
# Classification
# ======================================================================


class TestClassification:

    def test_upper_day(self):
        summary = analyze_workout_day(_groups(_make_we("press")), [_make_exercise()])
        assert summary.workout_type == WorkoutType.UPPER

    def test_lower_day(self):
        squat = _make_exercise(
            "squat", ExerciseCategory.SQUAT,
            muscles=[_muscle("quadriceps", 0.9, region=MuscleRegion.LOWER)],
        )
        summary = analyze_workout_day(_groups(_make_we("squat")), [squat])
        assert summary.workout_type == WorkoutType.LOWER

    def test_full_body_day(self):
        press = _make_exercise()
        squat = _make_exercise(
            "squat", ExerciseCategory.SQUAT,
            muscles=[_muscle("quadriceps", 0.9, region=MuscleRegion.LOWER)],
        )
        summary = analyze_workout_day(_groups(_make_we("press"), _make_we("squat")), [press, squat])
        assert summary.workout_type == WorkoutType.FULL_BODY
        assert summary.lower_upper_ratio == pytest.approx(1.0)

    @pytest.mark.parametrize("joint,expected", [
        (0.2, InjuryRisk.LOW),
        (0.4, InjuryRisk.LOW),
        (0.5, InjuryRisk.MODERATE),
        (0.7, InjuryRisk.MODERATE),
        (0.8, InjuryRisk.HIGH),
    ])
    def test_injury_risk(self, joint, expected):
        summary = analyze_workout_day(_groups(_make_we("press")), [_make_exercise(joint_stress=joint)])
        assert summary.injury_risk == expected


class TestRatios:

    def test_push_pull_without_pull_is_raw_push(self):
        assert push_pull_ratio(2.7, 0.0) == 2.7
        assert push_pull_ratio(0.0, 0.0) == 0.0

    def test_push_pull(self):
        assert push_pull_ratio(3.0, 2.0) == 1.5

    def test_lower_upper_needs_both(self):
        assert lower_upper_ratio(3.0, 0.0) == 1.0
        assert lower_upper_ratio(0.0, 3.0) == 1.0
        assert lower_upper_ratio(3.0, 2.0) == 1.5
