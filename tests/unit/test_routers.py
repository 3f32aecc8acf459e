"""
Unit tests for api/routers.

Routers run against in-memory fakes through FastAPI dependency overrides
(see tests/conftest.py).
"""

import time
import uuid

import jwt
import pytest
from fastapi.testclient import TestClient

from api import deps
from application.exceptions import NotFoundError, StoreError
from domain.models import UserProfile
from domain.sample_data import sample_exercises
from tests.fakes import TEST_JWT_SECRET, TEST_USER_ID, create_workouts

pytestmark = pytest.mark.unit


class TestRouterInclusion:
    """Test that all routers are correctly included in the app."""

    def test_openapi_paths(self, test_app):
        paths = test_app.openapi()["paths"]
        for path in (
            "/health",
            "/profile",
            "/profile/image",
            "/exercises",
            "/exercises/{exercise_id}",
            "/exercises/{exercise_id}/image",
            "/workouts",
            "/workouts/{workout_id}",
        ):
            assert path in paths

    def test_health(self, api_client):
        response = api_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["environment"] == "test"


class TestAppErrorHandler:

    def test_uncaught_not_found_maps_to_404(self, test_app):
        @test_app.get("/_raise")
        async def _raise():
            raise NotFoundError("Workout not found", path="users/u/workouts/w")

        response = TestClient(test_app).get("/_raise")
        assert response.status_code == 404
        assert response.json() == {"success": False, "detail": "Workout not found"}

    def test_uncaught_store_error_maps_to_502(self, test_app):
        @test_app.get("/_raise")
        async def _raise():
            raise StoreError("connection reset")

        assert TestClient(test_app).get("/_raise").status_code == 502


class TestAuthentication:

    @pytest.fixture
    def client(self, test_app):
        test_app.dependency_overrides.pop(deps.get_current_user)
        return TestClient(test_app)

    def test_missing_header(self, client):
        assert client.get("/workouts").status_code == 401

    def test_malformed_header(self, client):
        response = client.get("/workouts", headers={"Authorization": "Token abc"})
        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/workouts", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_valid_token(self, client, fake_services):
        fake_services.workouts.seed("user-7", create_workouts(num_workouts=1))
        token = jwt.encode(
            {"sub": "user-7", "aud": "authenticated", "exp": int(time.time()) + 60},
            TEST_JWT_SECRET,
            algorithm="HS256",
        )

        response = client.get("/workouts", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["count"] == 1


class TestUnconfiguredStore:

    def test_returns_503(self, test_app):
        test_app.dependency_overrides.pop(deps.get_workout_repo)
        test_app.dependency_overrides[deps.get_supabase_client] = lambda: None

        response = TestClient(test_app).get("/workouts")

        assert response.status_code == 503


class TestProfileRouter:

    def test_get_missing_profile(self, api_client):
        assert api_client.get("/profile").status_code == 404

    def test_put_then_get(self, api_client):
        profile = UserProfile(username="ana", email="ana@example.com", height=170.0)

        put = api_client.put("/profile", json=profile.to_document())
        got = api_client.get("/profile")

        assert put.status_code == 200
        assert got.status_code == 200
        assert got.json()["profile"] == profile.to_document()

    def test_put_invalid_profile(self, api_client):
        response = api_client.put("/profile", json={"username": "ana", "height": -3})
        assert response.status_code == 422

    def test_store_failure_maps_to_502(self, api_client, fake_services):
        fake_services.store.fail_on("fetch_profile", StoreError("offline"))
        response = api_client.get("/profile")
        assert response.status_code == 502
        assert response.json()["detail"] == "offline"

    def test_upload_profile_image(self, api_client, fake_services):
        fake_services.profiles.seed(
            TEST_USER_ID, UserProfile(username="ana", email="ana@example.com")
        )

        response = api_client.post("/profile/image", content=b"\xff\xd8image")

        assert response.status_code == 200
        key = f"profile_images/{TEST_USER_ID}.jpg"
        assert response.json()["url"].endswith(key)
        assert fake_services.profiles.get(TEST_USER_ID).profile_image.endswith(key)

    def test_upload_empty_body(self, api_client):
        assert api_client.post("/profile/image", content=b"").status_code == 400


class TestExercisesRouter:

    def test_list_and_search(self, api_client, fake_services):
        fake_services.exercises.seed(sample_exercises())

        listed = api_client.get("/exercises")
        searched = api_client.get("/exercises", params={"search": "bench"})

        assert listed.json()["count"] == 3
        assert [e["name"] for e in searched.json()["exercises"]] == ["Barbell Bench Press"]

    def test_put_exercise(self, api_client, fake_services):
        exercise = sample_exercises()[1]

        response = api_client.put(f"/exercises/{exercise.id}", json=exercise.to_document())

        assert response.status_code == 200
        assert fake_services.exercises.get_all() == [exercise]

    def test_put_id_mismatch(self, api_client):
        exercise = sample_exercises()[1]
        response = api_client.put(f"/exercises/{uuid.uuid4()}", json=exercise.to_document())
        assert response.status_code == 400

    def test_delete_exercise(self, api_client, fake_services):
        exercise = sample_exercises()[0]
        fake_services.exercises.seed([exercise])

        response = api_client.delete(f"/exercises/{exercise.id}")

        assert response.status_code == 200
        assert fake_services.exercises.get_all() == []

    def test_upload_image_for_missing_exercise(self, api_client):
        response = api_client.post(f"/exercises/{uuid.uuid4()}/image", content=b"img")
        assert response.status_code == 404

    def test_upload_exercise_image(self, api_client, fake_services):
        exercise = sample_exercises()[2]
        fake_services.exercises.seed([exercise])

        response = api_client.post(f"/exercises/{exercise.id}/image", content=b"img")

        assert response.status_code == 200
        stored = fake_services.exercises.get_all()[0]
        assert stored.image_names[:-1] == exercise.image_names
        assert stored.image_names[-1].endswith(f"exercise_images/{exercise.id}.jpg")


class TestWorkoutsRouter:

    def test_list_newest_first(self, api_client, fake_services):
        workouts = create_workouts(num_workouts=3)
        fake_services.workouts.seed(TEST_USER_ID, workouts)

        response = api_client.get("/workouts")

        ids = [w["id"] for w in response.json()["workouts"]]
        assert ids == [str(w.id) for w in reversed(workouts)]

    def test_list_empty(self, api_client):
        assert api_client.get("/workouts").json() == {
            "success": True,
            "workouts": [],
            "count": 0,
        }

    def test_put_and_delete(self, api_client, fake_services):
        workout = create_workouts(num_workouts=1)[0]

        put = api_client.put(f"/workouts/{workout.id}", json=workout.to_document())
        assert put.status_code == 200
        assert fake_services.workouts.get_all(TEST_USER_ID) == [workout]

        deleted = api_client.delete(f"/workouts/{workout.id}")
        assert deleted.status_code == 200
        assert fake_services.workouts.get_all(TEST_USER_ID) == []

    def test_put_id_mismatch(self, api_client):
        workout = create_workouts(num_workouts=1)[0]
        response = api_client.put(f"/workouts/{uuid.uuid4()}", json=workout.to_document())
        assert response.status_code == 400

    def test_workouts_are_scoped_to_user(self, api_client, fake_services):
        fake_services.workouts.seed("someone-else", create_workouts(num_workouts=2))
        assert api_client.get("/workouts").json()["count"] == 0
