"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the document
repository interfaces defined in application.ports. Supabase tables act as a
document store: every row holds one encoded record plus the keys of its
logical path (see documents.py).

Usage:
    from supabase import acreate_client
    from infrastructure.db import (
        SupabaseProfileRepository,
        SupabaseExerciseRepository,
        SupabaseWorkoutRepository,
    )

    # Create Supabase client
    client = await acreate_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    profile_repo = SupabaseProfileRepository(client)
    exercise_repo = SupabaseExerciseRepository(client)
    workout_repo = SupabaseWorkoutRepository(client)
"""

from infrastructure.db.profile_repository import SupabaseProfileRepository
from infrastructure.db.exercise_repository import SupabaseExerciseRepository
from infrastructure.db.workout_repository import SupabaseWorkoutRepository

__all__ = [
    "SupabaseProfileRepository",
    "SupabaseExerciseRepository",
    "SupabaseWorkoutRepository",
]
