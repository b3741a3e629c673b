"""Simulate a 4-day upper/lower hypertrophy week against the built-in catalog.

Prints each day's summary, workout score and training load, the
whole-program score, and what the engine would suggest adding to a
half-built push day.

Usage:
    python scripts/simulate_program.py
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.catalog import default_catalog
from app.engine.day import analyze_workout_day
from app.engine.intent import build_snapshot, detect_intent
from app.engine.load import workout_load
from app.engine.program import score_program
from app.engine.suggest import suggest_exercises
from app.engine.workout import score_workout
from app.schemas.program import (
    Program,
    ProgramDay,
    ProgramGoal,
    SetInfo,
    Workout,
    WorkoutExercise,
    WorkoutExerciseGroup,
)

# ─── (exercise_id, sets, reps, rpe) per day ─────────────────────────
WEEK = {
    "Upper A": [
        ("bench_press", 4, 8, 8),
        ("barbell_row", 4, 10, 8),
        ("overhead_press", 3, 8, 8),
        ("lat_pulldown", 3, 12, 8),
        ("lateral_raise", 3, 15, 9),
    ],
    "Lower A": [
        ("back_squat", 4, 6, 8),
        ("romanian_deadlift", 3, 10, 8),
        ("walking_lunge", 3, 12, 7),
        ("leg_curl", 3, 12, 8),
        ("plank", 3, 0, 7),
    ],
    "Upper B": [
        ("incline_db_press", 4, 10, 8),
        ("pull_up", 4, 8, 8),
        ("dip", 3, 10, 8),
        ("seated_cable_row", 3, 12, 8),
        ("face_pull", 3, 15, 7),
    ],
    "Lower B": [
        ("deadlift", 4, 5, 8),
        ("front_squat", 3, 8, 8),
        ("hip_thrust", 3, 10, 8),
        ("farmers_carry", 3, 0, 7),
    ],
}

PARTIAL_PUSH_DAY = [("bench_press", 4, 8, 8), ("overhead_press", 3, 8, 8)]


def _groups(rows) -> list[WorkoutExerciseGroup]:
    return [
        WorkoutExerciseGroup(
            exercises=[
                WorkoutExercise(
                    exercise_id=exercise_id,
                    order_num=i,
                    sets=[SetInfo(reps=reps, rpe=rpe, rest=120) for _ in range(sets)],
                )
            ]
        )
        for i, (exercise_id, sets, reps, rpe) in enumerate(rows)
    ]


def main():
    catalog = default_catalog()
    goal = ProgramGoal.HYPERTROPHY

    days = [
        ProgramDay(id=name.lower().replace(" ", "_"), name=name, workouts=[Workout(exercise_groups=_groups(rows))])
        for name, rows in WEEK.items()
    ]
    program = Program(id="sim", name="Upper / Lower", goal=goal, days=days)

    for day in days:
        groups = day.workouts[0].exercise_groups
        summary = analyze_workout_day(groups, catalog)
        score = score_workout(day.workouts[0], goal, catalog)
        load = workout_load(groups, catalog, goal)

        print(f"\n{'─' * 60}")
        print(f"  {day.name}")
        print(f"{'─' * 60}")
        print(f"  Type: {summary.workout_type.value:10s}  Injury risk: {summary.injury_risk.value}")
        print(f"  Sets: {summary.total_sets:3d}  Avg fatigue: {summary.avg_fatigue:.2f}"
              f"  Push/pull: {summary.push_pull_ratio:.2f}")
        print(f"  Top muscles: {', '.join(m for m, _ in summary.top_muscles)}")
        print(f"  Workout score: {score.score:3d}  (~{score.estimates.time_min} min)")
        for name, value in score.components.model_dump().items():
            print(f"    {name:12s} {value:6.1f}")
        print(f"  ETL: {load.normalized_etl:.1f} / 10  (session {load.session_etl:.1f})")
        for hint in score.hints:
            print(f"  ! {hint}")

    result = score_program(program, catalog)
    print(f"\n{'=' * 60}")
    print(f"  Program score: {result.score}")
    print(f"{'=' * 60}")
    for name, value in result.components.model_dump().items():
        print(f"  {name:14s} {value:6.1f}")
    for warning in result.details.recovery_warnings:
        print(f"  Day {warning.day_index + 1}: {warning.muscle_id} — {warning.note}")
    for hint in result.hints:
        print(f"  ! {hint}")

    partial = _groups(PARTIAL_PUSH_DAY)
    intents = detect_intent(build_snapshot(partial, catalog))
    print(f"\n  Partial day intent: "
          + ", ".join(f"{m.intent.value} ({m.confidence:.2f})" for m in intents))
    for s in suggest_exercises(partial, catalog, count=3):
        print(f"  + {s.exercise.name:24s} {s.score:5.1f}  {s.reason}")


if __name__ == "__main__":
    main()
