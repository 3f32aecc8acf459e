"""
Infrastructure Storage Layer.

Supabase Storage implementation of the MediaRepository port.
"""

from infrastructure.storage.media_repository import SupabaseMediaRepository, compress_jpeg

__all__ = [
    "SupabaseMediaRepository",
    "compress_jpeg",
]
