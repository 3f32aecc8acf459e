"""
Wiring for client-side use of the data layer.

Builds the Supabase client, the repositories and the services from Settings
and hands back a ready AppStateController. Nothing here is a global: callers
own the returned objects.

Usage:
    from backend.container import create_state_controller

    controller = await create_state_controller()
    controller.restore_session()
"""

import logging
from dataclasses import dataclass
from typing import Optional

from supabase import AsyncClient, acreate_client

from application.auth_session import AuthSessionManager
from application.state_controller import AppStateController
from backend.settings import Settings, get_settings
from infrastructure import (
    SupabaseExerciseRepository,
    SupabaseIdentityProvider,
    SupabaseMediaRepository,
    SupabaseProfileRepository,
    SupabaseWorkoutRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Adapters built around one Supabase client."""

    identity: SupabaseIdentityProvider
    profiles: SupabaseProfileRepository
    exercises: SupabaseExerciseRepository
    workouts: SupabaseWorkoutRepository
    media: SupabaseMediaRepository


def build_services(client: AsyncClient, settings: Settings) -> Services:
    """Instantiate every adapter with the injected client."""
    return Services(
        identity=SupabaseIdentityProvider(client),
        profiles=SupabaseProfileRepository(client),
        exercises=SupabaseExerciseRepository(client),
        workouts=SupabaseWorkoutRepository(client),
        media=SupabaseMediaRepository(
            client,
            bucket=settings.storage_bucket,
            jpeg_quality=settings.image_jpeg_quality,
        ),
    )


async def create_client_from_settings(settings: Settings) -> AsyncClient:
    """
    Create an async Supabase client.

    Raises:
        RuntimeError: If Supabase credentials are not configured
    """
    if not settings.supabase_configured:
        raise RuntimeError(
            "Supabase credentials not configured (SUPABASE_URL and a Supabase key are required)"
        )
    return await acreate_client(settings.supabase_url, settings.supabase_key)


async def create_state_controller(
    settings: Optional[Settings] = None,
) -> AppStateController:
    """Build an AppStateController backed by Supabase."""
    if settings is None:
        settings = get_settings()

    client = await create_client_from_settings(settings)
    services = build_services(client, settings)
    auth = AuthSessionManager(identity=services.identity, profiles=services.profiles)
    logger.info("State controller wired to Supabase project %s", settings.supabase_url)
    return AppStateController(
        auth=auth,
        exercises=services.exercises,
        workouts=services.workouts,
        media=services.media,
    )
