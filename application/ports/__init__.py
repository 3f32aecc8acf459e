"""
Repository Interfaces (Ports) for the PushPullRun data layer.

This package defines abstract interfaces that decouple application logic from
infrastructure (Supabase tables, storage buckets, auth). Implementations are
provided in the infrastructure layer; in-memory fakes live in tests/fakes.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository

    class WorkoutService:
        def __init__(self, workout_repo: WorkoutRepository):
            self.workout_repo = workout_repo

        async def save(self, workout, user_id):
            await self.workout_repo.save_workout(workout, user_id)
"""

from application.ports.profile_repository import ProfileRepository
from application.ports.exercise_repository import ExerciseRepository
from application.ports.workout_repository import WorkoutRepository
from application.ports.media_repository import (
    MediaRepository,
    exercise_image_key,
    profile_image_key,
)
from application.ports.identity_provider import Identity, IdentityProvider

__all__ = [
    # Document store
    "ProfileRepository",
    "ExerciseRepository",
    "WorkoutRepository",
    # File storage
    "MediaRepository",
    "profile_image_key",
    "exercise_image_key",
    # Identity
    "Identity",
    "IdentityProvider",
]
