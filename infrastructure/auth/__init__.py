"""
Infrastructure Auth Layer.

Supabase Auth implementation of the IdentityProvider port.
"""

from infrastructure.auth.supabase_identity import SupabaseIdentityProvider, decode_access_token

__all__ = [
    "SupabaseIdentityProvider",
    "decode_access_token",
]
