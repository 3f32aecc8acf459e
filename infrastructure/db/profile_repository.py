"""
Supabase implementation of ProfileRepository.

Profiles are stored one row per user in the `users` table, keyed by the
identity's user id (logical path users/{userId}).
"""
import logging

from supabase import AsyncClient

from application.exceptions import NotFoundError
from domain.models import UserProfile
from infrastructure.db.documents import (
    DOCUMENT_COLUMN,
    decode_document,
    encode_document,
    user_ref,
)
from infrastructure.db.errors import store_error

logger = logging.getLogger(__name__)


class SupabaseProfileRepository:
    """
    Supabase implementation of ProfileRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: AsyncClient):
        """
        Initialize with Supabase client.

        Args:
            client: Async Supabase client instance (injected, not global)
        """
        self._client = client

    async def save_profile(self, profile: UserProfile, user_id: str) -> None:
        """Upsert the whole profile document at users/{user_id}."""
        ref = user_ref(user_id)
        document = encode_document(profile)

        logger.debug(f"Saving user profile at {ref.path}")
        try:
            await (
                self._client.table(ref.table)
                .upsert(ref.row(document), on_conflict="user_id")
                .execute()
            )
        except Exception as e:
            raise store_error(f"save user profile at {ref.path}", e) from e
        logger.info(f"User profile saved at {ref.path}")

    async def fetch_profile(self, user_id: str) -> UserProfile:
        """Fetch the profile document at users/{user_id}."""
        ref = user_ref(user_id)
        try:
            result = (
                await self._client.table(ref.table)
                .select(DOCUMENT_COLUMN)
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise store_error(f"fetch user profile at {ref.path}", e) from e

        if not result.data:
            logger.info(f"User profile document does not exist at {ref.path}")
            raise NotFoundError("User profile not found", path=ref.path)

        return decode_document(UserProfile, result.data[0].get(DOCUMENT_COLUMN), ref.path)
