"""
Identity Provider Interface (Port).

Wraps a hosted email/password identity service. The identity's user_id is
the opaque session identifier used as the storage partition key.
"""
from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class Identity:
    """An authenticated principal returned by the identity provider."""

    user_id: str
    email: str
    access_token: Optional[str] = None


class IdentityProvider(Protocol):
    """
    Abstract interface for the identity provider.

    All methods raise AuthError when the provider rejects the request.
    """

    async def create_identity(self, email: str, password: str) -> Identity:
        """Create an email/password identity and start a session for it."""
        ...

    async def sign_in(self, email: str, password: str) -> Identity:
        """Authenticate and start a session."""
        ...

    async def sign_out(self) -> None:
        """Clear the local session."""
        ...

    async def send_password_reset(self, email: str) -> None:
        """Ask the provider to send a password reset email."""
        ...

    async def delete_identity(self, user_id: str) -> None:
        """Delete an identity. Used to roll back a failed sign-up."""
        ...

    async def current_identity(self) -> Optional[Identity]:
        """Return the identity of the persisted session, if any."""
        ...
