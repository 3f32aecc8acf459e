"""
Supabase Auth implementation of IdentityProvider.

Email/password identities are managed through the Supabase Auth API. Access
tokens issued by Supabase are HS256 JWTs signed with the project's JWT
secret, validated locally with PyJWT.
"""
import logging
from typing import Any, Optional

import jwt
from supabase import AsyncClient

from application.exceptions import AuthError
from application.ports import Identity

logger = logging.getLogger(__name__)

SUPABASE_JWT_ALGORITHM = "HS256"
SUPABASE_JWT_AUDIENCE = "authenticated"


def _auth_error(action: str, error: Exception) -> AuthError:
    message = str(error) or error.__class__.__name__
    logger.warning(f"Supabase auth error during {action}: {message}")
    return AuthError(message)


def _identity_from(response: Any, action: str) -> Identity:
    """Extract an Identity from a Supabase AuthResponse."""
    user = getattr(response, "user", None)
    if user is None:
        logger.error(f"No user returned after successful {action}")
        raise AuthError(f"Failed to {action}")
    session = getattr(response, "session", None)
    return Identity(
        user_id=str(user.id),
        email=user.email or "",
        access_token=getattr(session, "access_token", None),
    )


def decode_access_token(token: str, jwt_secret: Optional[str]) -> str:
    """
    Validate a Supabase access token and return the user id it was issued to.

    Raises:
        AuthError: If validation is not configured, the token is expired or
            invalid, or it carries no subject
    """
    if not jwt_secret:
        raise AuthError("Token validation not configured (missing SUPABASE_JWT_SECRET)")
    try:
        payload = jwt.decode(
            token,
            jwt_secret,
            algorithms=[SUPABASE_JWT_ALGORITHM],
            audience=SUPABASE_JWT_AUDIENCE,
        )
    except jwt.ExpiredSignatureError as e:
        raise AuthError("Token expired") from e
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid access token: {e}")
        raise AuthError(f"Invalid token: {e}") from e

    user_id = payload.get("sub")
    if not user_id:
        raise AuthError("Token missing user ID")
    return user_id


class SupabaseIdentityProvider:
    """
    Supabase Auth implementation of IdentityProvider protocol.

    Deleting identities goes through the admin API and therefore needs a
    client created with the service role key.
    """

    def __init__(self, client: AsyncClient):
        """
        Initialize with Supabase client.

        Args:
            client: Async Supabase client instance (injected, not global)
        """
        self._client = client

    async def create_identity(self, email: str, password: str) -> Identity:
        logger.debug(f"Attempting to create user with email: {email}")
        try:
            response = await self._client.auth.sign_up(
                {"email": email, "password": password}
            )
        except Exception as e:
            raise _auth_error("sign up", e) from e
        identity = _identity_from(response, "create user")
        logger.info(f"User created with id {identity.user_id}")
        return identity

    async def sign_in(self, email: str, password: str) -> Identity:
        logger.debug(f"Attempting to sign in with email: {email}")
        try:
            response = await self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as e:
            raise _auth_error("sign in", e) from e
        identity = _identity_from(response, "sign in")
        logger.info(f"User signed in with id {identity.user_id}")
        return identity

    async def sign_out(self) -> None:
        try:
            await self._client.auth.sign_out({"scope": "local"})
        except Exception as e:
            raise _auth_error("sign out", e) from e

    async def send_password_reset(self, email: str) -> None:
        try:
            await self._client.auth.reset_password_for_email(email)
        except Exception as e:
            raise _auth_error("password reset", e) from e

    async def delete_identity(self, user_id: str) -> None:
        try:
            await self._client.auth.admin.delete_user(user_id)
        except Exception as e:
            raise _auth_error("delete user", e) from e
        logger.info(f"Deleted auth user {user_id}")

    async def current_identity(self) -> Optional[Identity]:
        try:
            session = await self._client.auth.get_session()
        except Exception as e:
            raise _auth_error("session lookup", e) from e
        if session is None or session.user is None:
            return None
        return Identity(
            user_id=str(session.user.id),
            email=session.user.email or "",
            access_token=session.access_token,
        )
