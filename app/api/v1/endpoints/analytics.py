"""
Analytics endpoints — day summary, workout / program scores, intent,
suggestions and training load.

Every endpoint is a stateless computation over the posted snapshot; the
builder re-posts after each edit.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_catalog, get_scoring_config
from app.catalog import ExerciseCatalog
from app.core.config import settings
from app.engine.config import ScoringConfig
from app.engine.day import analyze_workout_day
from app.engine.intent import build_snapshot, detect_intent
from app.engine.load import workout_load
from app.engine.program import score_program
from app.engine.suggest import suggest_exercises
from app.engine.workout import score_workout
from app.schemas.day_summary import WorkoutDaySummary
from app.schemas.load import WorkoutLoad
from app.schemas.program import Program, ProgramGoal, Workout, WorkoutExerciseGroup
from app.schemas.score import ProgramScore, WorkoutScore
from app.schemas.suggestion import IntentMatch, Suggestion

router = APIRouter()


@router.post(
    "/day-summary",
    summary="Aggregate a day's exercise groups into a flat summary.",
    response_model=WorkoutDaySummary,
)
def post_day_summary(
    groups: list[WorkoutExerciseGroup],
    catalog: ExerciseCatalog = Depends(get_catalog),
    config: ScoringConfig = Depends(get_scoring_config),
):
    return analyze_workout_day(groups, catalog, config)


@router.post(
    "/workout-score",
    summary="Score one workout 0-100 for a program goal.",
    response_model=WorkoutScore,
)
def post_workout_score(
    workout: Workout,
    goal: ProgramGoal = Query(ProgramGoal.HYPERTROPHY, description="Program goal"),
    catalog: ExerciseCatalog = Depends(get_catalog),
    config: ScoringConfig = Depends(get_scoring_config),
):
    return score_workout(workout, goal, catalog, config)


@router.post(
    "/program-score",
    summary="Score a whole program 0-100.",
    response_model=ProgramScore,
)
def post_program_score(
    program: Program,
    catalog: ExerciseCatalog = Depends(get_catalog),
    config: ScoringConfig = Depends(get_scoring_config),
):
    return score_program(program, catalog, config)


@router.post(
    "/intent",
    summary="Detect the likely theme of a day being built.",
    response_model=list[IntentMatch],
)
def post_intent(
    groups: list[WorkoutExerciseGroup],
    catalog: ExerciseCatalog = Depends(get_catalog),
    config: ScoringConfig = Depends(get_scoring_config),
):
    return detect_intent(build_snapshot(groups, catalog, config), config)


@router.post(
    "/suggestions",
    summary="Suggest exercises that fit the day being built.",
    response_model=list[Suggestion],
)
def post_suggestions(
    groups: list[WorkoutExerciseGroup],
    count: Optional[int] = Query(
        None, ge=1, le=settings.MAX_SUGGESTION_COUNT,
        description="Number of suggestions (defaults to the configured count)",
    ),
    catalog: ExerciseCatalog = Depends(get_catalog),
    config: ScoringConfig = Depends(get_scoring_config),
):
    return suggest_exercises(groups, catalog, count or settings.DEFAULT_SUGGESTION_COUNT, config)


@router.post(
    "/load",
    summary="Estimated training load (ETL) of a day's exercises.",
    response_model=WorkoutLoad,
)
def post_load(
    groups: list[WorkoutExerciseGroup],
    goal: ProgramGoal = Query(ProgramGoal.HYPERTROPHY, description="Program goal"),
    catalog: ExerciseCatalog = Depends(get_catalog),
    config: ScoringConfig = Depends(get_scoring_config),
):
    return workout_load(groups, catalog, goal, config)
