"""
Profile Repository Interface (Port).

Profiles live at users/{userId}. Implementations may use Supabase or
in-memory storage.
"""
from typing import Protocol

from domain.models import UserProfile


class ProfileRepository(Protocol):
    """
    Abstract interface for user profile persistence.
    """

    async def save_profile(self, profile: UserProfile, user_id: str) -> None:
        """
        Upsert the profile document for a user, overwriting the whole record.

        Args:
            profile: Profile to store
            user_id: Identity id used as the storage partition key

        Raises:
            EncodingError: If the profile cannot be serialized (nothing is written)
            StoreError: If the write is rejected
        """
        ...

    async def fetch_profile(self, user_id: str) -> UserProfile:
        """
        Fetch the profile document for a user.

        Args:
            user_id: Identity id used as the storage partition key

        Returns:
            The stored profile

        Raises:
            NotFoundError: If no profile document exists
            DecodeError: If the stored document does not match the schema
            StoreError: For any other store failure
        """
        ...
