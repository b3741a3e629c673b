"""
Unit tests for the exercise catalog provider and built-in catalog.
"""

import pytest

from app.catalog import BUILTIN_EXERCISES, ExerciseCatalog, as_catalog, default_catalog
from app.catalog.builtin import MUSCLES
from app.schemas.exercise import Exercise


def _make_exercise(exercise_id: str, name: str | None = None) -> Exercise:
    return Exercise(id=exercise_id, name=name or exercise_id)


class TestExerciseCatalog:

    def test_get_miss_returns_none(self):
        assert ExerciseCatalog().get("nope") is None

    def test_get_or_raise(self):
        catalog = ExerciseCatalog([_make_exercise("a")])
        assert catalog.get_or_raise("a").id == "a"
        with pytest.raises(KeyError, match="not in catalog"):
            catalog.get_or_raise("b")

    def test_duplicate_registration_raises(self):
        catalog = ExerciseCatalog([_make_exercise("a")])
        with pytest.raises(ValueError, match="already registered"):
            catalog.register(_make_exercise("a"))

    def test_iteration_keeps_registration_order(self):
        catalog = ExerciseCatalog([_make_exercise("b"), _make_exercise("a")])
        assert [e.id for e in catalog] == ["b", "a"]
        assert [e.id for e in catalog.all()] == ["b", "a"]
        assert catalog.ids() == ["a", "b"]
        assert len(catalog) == 2
        assert "a" in catalog

    def test_as_catalog_passthrough(self):
        catalog = ExerciseCatalog()
        assert as_catalog(catalog) is catalog

    def test_as_catalog_first_duplicate_wins(self):
        wrapped = as_catalog([_make_exercise("a", "First"), _make_exercise("a", "Second")])
        assert len(wrapped) == 1
        assert wrapped.get("a").name == "First"


class TestExerciseSchema:

    def test_demands_are_clamped(self):
        exercise = Exercise(id="x", name="x", fatigue_index=1.5, cns_demand=-0.2, joint_stress=None)
        assert exercise.fatigue_index == 1.0
        assert exercise.cns_demand == 0.0
        assert exercise.joint_stress == 0.0

    def test_missing_contribution_defaults_to_half(self):
        exercise = Exercise(
            id="x", name="x",
            muscles=[{"muscle_id": "core", "contribution": None, "region": "core"}],
        )
        assert exercise.muscles[0].contribution == 0.5


class TestBuiltinCatalog:

    def test_ids_unique(self):
        ids = [e.id for e in BUILTIN_EXERCISES]
        assert len(ids) == len(set(ids))

    def test_default_catalog_is_fresh(self):
        a = default_catalog()
        a.register(_make_exercise("custom"))
        assert "custom" not in default_catalog()

    def test_every_muscle_is_known(self):
        for exercise in BUILTIN_EXERCISES:
            for muscle in exercise.muscles:
                assert muscle.muscle_id in MUSCLES
                assert (muscle.region, muscle.movement_type) == MUSCLES[muscle.muscle_id]

    def test_demands_in_unit_range(self):
        for exercise in BUILTIN_EXERCISES:
            for value in (exercise.fatigue_index, exercise.cns_demand,
                          exercise.metabolic_demand, exercise.joint_stress):
                assert 0.0 <= value <= 1.0
