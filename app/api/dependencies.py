"""
Shared API dependencies.

The exercise catalog and scoring policy are injected so tests can swap
them with ``app.dependency_overrides``.
"""

from functools import lru_cache

from app.catalog import ExerciseCatalog, default_catalog
from app.engine.config import DEFAULT_SCORING_CONFIG, ScoringConfig


@lru_cache
def get_catalog() -> ExerciseCatalog:
    """The built-in exercise catalog, loaded once per process."""
    return default_catalog()


def get_scoring_config() -> ScoringConfig:
    return DEFAULT_SCORING_CONFIG
