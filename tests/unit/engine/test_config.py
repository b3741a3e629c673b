"""
Unit tests for the scoring configuration bundle.
"""

import pytest
from pydantic import ValidationError

from app.engine.config import (
    DEFAULT_SCORING_CONFIG,
    IntentConfig,
    LoadConfig,
    ProgramScoringConfig,
    ScoringConfig,
    SuggestionConfig,
    WorkoutScoringConfig,
)


class TestDefaults:

    def test_workout_weights_sum_to_one(self):
        assert sum(DEFAULT_SCORING_CONFIG.workout.weights.values()) == pytest.approx(1.0)

    def test_program_weights_sum_to_one(self):
        assert sum(DEFAULT_SCORING_CONFIG.program.weights.values()) == pytest.approx(1.0)

    @pytest.mark.parametrize("goal,lo,hi", [
        ("hypertrophy", 10, 20),
        ("strength", 6, 12),
        ("power", 4, 10),
        ("endurance", 8, 18),
    ])
    def test_goal_bands(self, goal, lo, hi):
        band = DEFAULT_SCORING_CONFIG.program.band_for(goal)
        assert (band.min, band.max) == (lo, hi)

    def test_unknown_goal_falls_back_to_hypertrophy(self):
        band = ProgramScoringConfig().band_for("mobility")
        assert (band.min, band.max) == (10, 20)

    def test_every_intent_has_a_label(self):
        cfg = IntentConfig()
        assert set(cfg.intent_categories) == set(cfg.intent_labels)


class TestIsolation:

    def test_instances_do_not_share_tables(self):
        a = ScoringConfig()
        b = ScoringConfig()
        a.workout.weights["balance"] = 0.0
        a.intent.muscle_groups["chest"].append("serratus")
        assert b.workout.weights["balance"] == 0.22
        assert "serratus" not in b.intent.muscle_groups["chest"]
        assert DEFAULT_SCORING_CONFIG.workout.weights["balance"] == 0.22


class TestConfidence:

    def test_linear(self):
        assert IntentConfig().confidence_for("chest", 0.4) == pytest.approx(0.7)

    def test_clamped(self):
        assert IntentConfig().confidence_for("core", 5.0) == 1.0


class TestValidation:

    def test_negative_workout_weight_rejected(self):
        with pytest.raises(ValidationError):
            WorkoutScoringConfig(weights={"balance": -5.0})

    def test_negative_program_weight_rejected(self):
        with pytest.raises(ValidationError):
            ProgramScoringConfig(weights={"recovery": -0.1})

    @pytest.mark.parametrize("field", ["intent_fit_bonus", "gap_cap", "off_theme_penalty"])
    def test_negative_suggestion_points_rejected(self, field):
        with pytest.raises(ValidationError):
            SuggestionConfig(**{field: -1.0})

    def test_fatigue_threshold_is_a_unit_fraction(self):
        with pytest.raises(ValidationError):
            SuggestionConfig(fatigue_budget_threshold=1.5)

    def test_negative_set_type_multiplier_rejected(self):
        with pytest.raises(ValidationError):
            LoadConfig(set_type_multipliers={"warmup": -0.3})

    def test_zero_weights_allowed(self):
        assert WorkoutScoringConfig(weights={"balance": 0.0}).weights == {"balance": 0.0}
