"""
API package for the PushPullRun API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Mapping from application errors to HTTP errors
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_profile_repo,
    get_exercise_repo,
    get_workout_repo,
    get_media_repo,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_profile_repo",
    "get_exercise_repo",
    "get_workout_repo",
    "get_media_repo",
    # Authentication
    "get_current_user",
]
