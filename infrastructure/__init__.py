"""
Infrastructure Layer for the PushPullRun data layer.

This package contains concrete implementations of the application ports:
- db/: Supabase tables used as a document store
- storage/: Supabase Storage image uploads
- auth/: Supabase Auth identity provider
"""

from infrastructure.db import (
    SupabaseProfileRepository,
    SupabaseExerciseRepository,
    SupabaseWorkoutRepository,
)
from infrastructure.storage import SupabaseMediaRepository
from infrastructure.auth import SupabaseIdentityProvider

__all__ = [
    "SupabaseProfileRepository",
    "SupabaseExerciseRepository",
    "SupabaseWorkoutRepository",
    "SupabaseMediaRepository",
    "SupabaseIdentityProvider",
]
