"""
Supabase Storage implementation of MediaRepository.

Images are re-encoded as JPEG before upload (the only processing applied)
and stored in a single bucket under deterministic keys such as
profile_images/{userId}.jpg. Uploading to an existing key replaces it.
"""
import logging

import cv2
import numpy as np
from supabase import AsyncClient

from application.exceptions import EncodingError
from infrastructure.db.errors import store_error

logger = logging.getLogger(__name__)

DEFAULT_JPEG_QUALITY = 50


def compress_jpeg(data: bytes, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    """
    Decode arbitrary image bytes and re-encode them as JPEG.

    Args:
        data: Raw image bytes (JPEG, PNG, ...)
        quality: JPEG quality, 1-100

    Returns:
        JPEG-encoded bytes

    Raises:
        EncodingError: If the bytes are not a decodable image or encoding fails
    """
    if not data:
        raise EncodingError("Failed to convert image to data: empty payload")

    try:
        buffer = np.frombuffer(data, dtype=np.uint8)
        image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
    except cv2.error as e:
        raise EncodingError(f"Failed to convert image to data: {e}") from e
    if image is None:
        raise EncodingError("Failed to convert image to data: unsupported image format")

    encode_param = [int(cv2.IMWRITE_JPEG_QUALITY), int(quality)]
    ok, encoded = cv2.imencode(".jpg", image, encode_param)
    if not ok:
        raise EncodingError("Failed to convert image to data: JPEG encoding failed")
    return encoded.tobytes()


class SupabaseMediaRepository:
    """
    Supabase Storage implementation of MediaRepository protocol.
    """

    def __init__(
        self,
        client: AsyncClient,
        bucket: str = "media",
        jpeg_quality: int = DEFAULT_JPEG_QUALITY,
    ):
        """
        Initialize with Supabase client.

        Args:
            client: Async Supabase client instance (injected, not global)
            bucket: Storage bucket holding all images
            jpeg_quality: Quality used when re-encoding uploads
        """
        self._client = client
        self._bucket = bucket
        self._jpeg_quality = jpeg_quality

    async def upload_image(self, data: bytes, path_key: str) -> str:
        jpeg = compress_jpeg(data, self._jpeg_quality)
        bucket = self._client.storage.from_(self._bucket)

        try:
            await bucket.upload(
                path=path_key,
                file=jpeg,
                file_options={"content-type": "image/jpeg", "upsert": "true"},
            )
            url = await bucket.get_public_url(path_key)
        except Exception as e:
            raise store_error(f"upload image to {self._bucket}/{path_key}", e) from e

        logger.info(f"Uploaded {len(jpeg)} bytes to {self._bucket}/{path_key}")
        return url
