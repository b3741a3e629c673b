"""
HTTP tests for the analytics and catalog endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_catalog
from app.catalog import BUILTIN_EXERCISES, ExerciseCatalog
from app.main import app
from app.schemas.exercise import Exercise, ExerciseCategory


# ======================================================================
# Helpers
# ======================================================================


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _groups(*entries: tuple[str, int]) -> list[dict]:
    return [{
        "exercises": [
            {"exercise_id": eid, "sets": [{"reps": 8, "rpe": 8} for _ in range(sets)]}
            for eid, sets in entries
        ]
    }]


# ======================================================================
# Service
# ======================================================================


class TestService:

    def test_root(self, client):
        body = client.get("/").json()
        assert body["status"] == "healthy"

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_info(self, client):
        assert "project name" in client.get("/info").json()

    def test_request_id_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    def test_request_id_generated(self, client):
        assert client.get("/health").headers["X-Request-ID"]


# ======================================================================
# Catalog
# ======================================================================


class TestCatalogEndpoints:

    def test_list(self, client):
        body = client.get("/api/v1/catalog/exercises").json()
        assert len(body) == len(BUILTIN_EXERCISES)

    def test_get(self, client):
        body = client.get("/api/v1/catalog/exercises/bench_press").json()
        assert body["category"] == "push_horizontal"

    def test_get_missing(self, client):
        response = client.get("/api/v1/catalog/exercises/nope")
        assert response.status_code == 404


# ======================================================================
# Analytics
# ======================================================================


class TestAnalyticsEndpoints:

    def test_day_summary(self, client):
        response = client.post("/api/v1/analytics/day-summary", json=_groups(("bench_press", 3)))
        assert response.status_code == 200
        body = response.json()
        assert body["total_sets"] == 3
        assert body["workout_type"] == "Upper"
        assert body["top_muscles"][0][0] == "pectoralis_major"

    def test_day_summary_empty(self, client):
        body = client.post("/api/v1/analytics/day-summary", json=[]).json()
        assert body["total_sets"] == 0
        assert body["lower_upper_ratio"] == 1.0

    def test_workout_score(self, client):
        workout = {"exercise_groups": _groups(("bench_press", 3), ("barbell_row", 3), ("back_squat", 4))}
        response = client.post("/api/v1/analytics/workout-score?goal=strength", json=workout)
        assert response.status_code == 200
        body = response.json()
        assert 0 <= body["score"] <= 100
        assert body["estimates"]["total_sets"] == 10

    def test_workout_score_bad_goal(self, client):
        response = client.post("/api/v1/analytics/workout-score?goal=flexibility", json={})
        assert response.status_code == 422

    def test_program_score(self, client):
        day = {"exercise_groups": _groups(("back_squat", 12))}
        program = {
            "name": "Squat twice",
            "days": [
                {"id": "d1", "workouts": [day]},
                {"id": "d2", "workouts": [day]},
            ],
        }
        body = client.post("/api/v1/analytics/program-score", json=program).json()
        assert [d["day_id"] for d in body["details"]["day_scores"]] == ["d1", "d2"]
        assert any(w["muscle_id"] == "quadriceps" for w in body["details"]["recovery_warnings"])

    def test_intent_empty(self, client):
        body = client.post("/api/v1/analytics/intent", json=[]).json()
        assert body == [{"intent": "empty", "confidence": 1.0}]

    def test_intent_chest(self, client):
        body = client.post("/api/v1/analytics/intent", json=_groups(("bench_press", 3))).json()
        assert body[0]["intent"] == "chest"

    def test_suggestions_default_count(self, client):
        body = client.post("/api/v1/analytics/suggestions", json=_groups(("bench_press", 3))).json()
        assert len(body) == 3
        assert "bench_press" not in [s["exercise"]["id"] for s in body]

    def test_suggestions_count(self, client):
        body = client.post("/api/v1/analytics/suggestions?count=1", json=[]).json()
        assert len(body) == 1

    @pytest.mark.parametrize("count", [0, 21])
    def test_suggestions_count_out_of_range(self, client, count):
        response = client.post(f"/api/v1/analytics/suggestions?count={count}", json=[])
        assert response.status_code == 422

    def test_load(self, client):
        body = client.post("/api/v1/analytics/load", json=_groups(("bench_press", 3))).json()
        assert body["num_exercises"] == 1
        assert 0.0 < body["normalized_etl"] <= 10.0

    def test_malformed_body(self, client):
        response = client.post("/api/v1/analytics/day-summary", json=[{"exercises": [{"sets": []}]}])
        assert response.status_code == 422

    def test_catalog_override(self, client):
        only = Exercise(id="only", name="Only", category=ExerciseCategory.BRACE, compound=True)
        app.dependency_overrides[get_catalog] = lambda: ExerciseCatalog([only])
        body = client.post("/api/v1/analytics/suggestions", json=[]).json()
        assert [s["exercise"]["id"] for s in body] == ["only"]
