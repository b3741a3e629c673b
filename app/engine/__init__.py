"""Training-load analytics engine — day summary, scoring, intent, suggestions, ETL."""

from app.engine.config import DEFAULT_SCORING_CONFIG, ScoringConfig
from app.engine.day import analyze_workout_day
from app.engine.intent import build_snapshot, detect_intent
from app.engine.load import estimate_workout_duration, workout_load
from app.engine.program import score_program
from app.engine.suggest import suggest_exercises
from app.engine.workout import score_workout

__all__ = [
    "DEFAULT_SCORING_CONFIG",
    "ScoringConfig",
    "analyze_workout_day",
    "build_snapshot",
    "detect_intent",
    "estimate_workout_duration",
    "score_program",
    "score_workout",
    "suggest_exercises",
    "workout_load",
]
