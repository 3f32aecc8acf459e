"""
FastAPI Dependency Providers for the PushPullRun API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake
implementations.

Architecture:
- Settings are cached per-process (lru_cache)
- The async Supabase client is created once per process on first use
- Repository providers create new instances per-request
- Auth providers wrap backend.auth

Usage in routers:
    from api.deps import get_workout_repo, get_current_user
    from application.ports import WorkoutRepository

    @router.get("/workouts")
    async def list_workouts(
        user_id: str = Depends(get_current_user),
        workout_repo: WorkoutRepository = Depends(get_workout_repo),
    ):
        return await workout_repo.fetch_workouts(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository(store)
"""

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import AsyncClient, acreate_client

# Protocol types (interfaces)
from application.ports import (
    ExerciseRepository,
    MediaRepository,
    ProfileRepository,
    WorkoutRepository,
)

# Concrete implementations
from infrastructure import (
    SupabaseExerciseRepository,
    SupabaseMediaRepository,
    SupabaseProfileRepository,
    SupabaseWorkoutRepository,
)

from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import get_current_user as _get_current_user

logger = logging.getLogger(__name__)

_supabase_client: Optional[AsyncClient] = None


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


async def get_supabase_client() -> Optional[AsyncClient]:
    """
    Get the async Supabase client (created once per process).

    Returns:
        AsyncClient, or None if Supabase credentials are not configured
    """
    global _supabase_client
    if _supabase_client is not None:
        return _supabase_client

    settings = _get_settings()
    if not settings.supabase_configured:
        logger.warning("Supabase credentials not configured. Storage will be disabled.")
        return None

    _supabase_client = await acreate_client(settings.supabase_url, settings.supabase_key)
    return _supabase_client


async def get_supabase_client_required(
    client: Optional[AsyncClient] = Depends(get_supabase_client),
) -> AsyncClient:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_profile_repo(
    client: AsyncClient = Depends(get_supabase_client_required),
) -> ProfileRepository:
    """
    Get ProfileRepository implementation.

    Returns a SupabaseProfileRepository instance with injected client.
    The return type is the Protocol to enable easy faking.
    """
    return SupabaseProfileRepository(client)


def get_exercise_repo(
    client: AsyncClient = Depends(get_supabase_client_required),
) -> ExerciseRepository:
    """
    Get ExerciseRepository implementation.

    Returns a SupabaseExerciseRepository instance with injected client.
    """
    return SupabaseExerciseRepository(client)


def get_workout_repo(
    client: AsyncClient = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Returns a SupabaseWorkoutRepository instance with injected client.
    """
    return SupabaseWorkoutRepository(client)


def get_media_repo(
    client: AsyncClient = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> MediaRepository:
    """
    Get MediaRepository implementation.

    Returns a SupabaseMediaRepository writing to the configured bucket.
    """
    return SupabaseMediaRepository(
        client,
        bucket=settings.storage_bucket,
        jpeg_quality=settings.image_jpeg_quality,
    )


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.

    Returns:
        str: User ID from the Supabase access token

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(authorization=authorization, settings=settings)


# =============================================================================
# Exports
# =============================================================================

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
