"""
Media Repository Interface (Port).

Binary assets are stored under deterministic keys:
- profile_images/{userId}.jpg
- exercise_images/{exerciseId}.jpg
"""
from typing import Protocol
from uuid import UUID


class MediaRepository(Protocol):
    """
    Abstract interface for image uploads.
    """

    async def upload_image(self, data: bytes, path_key: str) -> str:
        """
        Compress and store an image under `path_key`.

        Args:
            data: Raw image bytes in any format the encoder can read
            path_key: Deterministic storage key

        Returns:
            URL the stored image can be retrieved from

        Raises:
            EncodingError: If the bytes cannot be decoded or re-encoded as an image
            StoreError: If the upload fails
        """
        ...


def profile_image_key(user_id: str) -> str:
    """Storage key for a user's profile image."""
    return f"profile_images/{user_id}.jpg"


def exercise_image_key(exercise_id: UUID) -> str:
    """Storage key for an exercise demonstration image."""
    return f"exercise_images/{exercise_id}.jpg"
