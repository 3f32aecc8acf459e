"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of the port interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Documents are stored encoded, keyed by their logical path
- Supports seeding with test data and reset() for test isolation
- Supports failure injection per operation (store.fail_on)
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, create_fake_services

    repo = FakeWorkoutRepository()
    repo.seed("user-1", [Workout(name="Push Day")])

    services = create_fake_services()
    services.store.fail_on("save_profile", StoreError("offline"))
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from application.auth_session import AuthSessionManager
from domain.models import Workout, WorkoutExercise, WorkoutType
from domain.sample_data import sample_exercises

from tests.fakes.document_store import InMemoryDocumentStore
from tests.fakes.profile_repository import FakeProfileRepository
from tests.fakes.exercise_repository import FakeExerciseRepository
from tests.fakes.workout_repository import FakeWorkoutRepository
from tests.fakes.media_repository import FakeMediaRepository
from tests.fakes.identity_provider import FakeIdentityProvider

TEST_USER_ID = "3f1c2a9e-0000-4000-8000-000000000001"
TEST_JWT_SECRET = "test-jwt-secret-with-at-least-32-bytes!!"


# =============================================================================
# Factory Functions
# =============================================================================


class FakeServices:
    """All fakes sharing one document store."""

    def __init__(self, store: Optional[InMemoryDocumentStore] = None):
        self.store = store if store is not None else InMemoryDocumentStore()
        self.identity = FakeIdentityProvider(self.store)
        self.profiles = FakeProfileRepository(self.store)
        self.exercises = FakeExerciseRepository(self.store)
        self.workouts = FakeWorkoutRepository(self.store)
        self.media = FakeMediaRepository(store=self.store)

    def auth_session(self) -> AuthSessionManager:
        return AuthSessionManager(identity=self.identity, profiles=self.profiles)

    def reset(self) -> None:
        for fake in (self.identity, self.profiles, self.exercises, self.workouts, self.media):
            fake.reset()


def create_fake_services() -> FakeServices:
    """Create a fresh set of fakes over a shared in-memory store."""
    return FakeServices()


def create_workouts(
    *,
    num_workouts: int = 3,
    start: Optional[datetime] = None,
) -> List[Workout]:
    """
    Create sample workouts one day apart, oldest first.

    Args:
        num_workouts: Number of workouts to create
        start: Date of the oldest workout

    Returns:
        List of workouts, each with one exercise from the sample library
    """
    start = start or datetime(2024, 1, 1, 7, 30, tzinfo=timezone.utc)
    library = sample_exercises()
    workouts = []
    for i in range(num_workouts):
        exercise = library[i % len(library)]
        workouts.append(
            Workout(
                name=f"Test Workout {i + 1}",
                date=start + timedelta(days=i),
                duration=1800.0 + i * 60,
                exercises=[WorkoutExercise.from_exercise(exercise)],
                workout_type=WorkoutType.CARDIO if exercise.is_cardio else WorkoutType.STRENGTH,
            )
        )
    return workouts


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Test identity
    "TEST_USER_ID",
    "TEST_JWT_SECRET",
    # Fake implementations
    "InMemoryDocumentStore",
    "FakeProfileRepository",
    "FakeExerciseRepository",
    "FakeWorkoutRepository",
    "FakeMediaRepository",
    "FakeIdentityProvider",
    # Factory functions
    "FakeServices",
    "create_fake_services",
    "create_workouts",
]
