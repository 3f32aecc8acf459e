"""
Shared pytest fixtures.

Provides fresh fakes per test and a FastAPI app whose repository and auth
dependencies are overridden with them.

Usage:
    def test_something(api_client, fake_services):
        fake_services.workouts.seed(TEST_USER_ID, create_workouts())
        response = api_client.get("/workouts", headers=AUTH_HEADERS)
"""

import pytest
from fastapi.testclient import TestClient

from api import deps
from backend.main import create_app
from backend.settings import Settings, get_settings
from tests.fakes import (
    TEST_JWT_SECRET,
    TEST_USER_ID,
    FakeServices,
    create_fake_services,
)


@pytest.fixture
def fake_services() -> FakeServices:
    """Fresh fakes sharing one in-memory document store."""
    return create_fake_services()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="test",
        supabase_jwt_secret=TEST_JWT_SECRET,
        _env_file=None,
    )


@pytest.fixture
def test_app(fake_services, test_settings):
    """
    App with all data dependencies overridden by fakes.

    Requests are authenticated as TEST_USER_ID without a token.
    """
    app = create_app(settings=test_settings)
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[deps.get_settings] = lambda: test_settings
    app.dependency_overrides[deps.get_current_user] = lambda: TEST_USER_ID
    app.dependency_overrides[deps.get_profile_repo] = lambda: fake_services.profiles
    app.dependency_overrides[deps.get_exercise_repo] = lambda: fake_services.exercises
    app.dependency_overrides[deps.get_workout_repo] = lambda: fake_services.workouts
    app.dependency_overrides[deps.get_media_repo] = lambda: fake_services.media
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def api_client(test_app) -> TestClient:
    return TestClient(test_app)
