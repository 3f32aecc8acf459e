"""
Auth session management.

Coordinates the identity provider and the profile repository. There is no
atomic commit between the two services, so sign-up compensates for a failed
profile write by deleting the identity it just created, and sign-in repairs
identities whose profile document is missing.
"""

import logging
from typing import Optional

from application.exceptions import AuthError, NotFoundError
from application.ports import Identity, IdentityProvider, ProfileRepository
from domain.models import UserProfile

logger = logging.getLogger(__name__)


class AuthSessionManager:
    """
    Sign-up, sign-in, sign-out and password reset against the identity provider.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> manager = AuthSessionManager(identity=provider, profiles=profile_repo)
        >>> profile = await manager.sign_in("ana@example.com", "secret")
        >>> manager.current_user_id()
        'c0ffee...'
    """

    def __init__(
        self,
        identity: IdentityProvider,
        profiles: ProfileRepository,
    ) -> None:
        """
        Initialize the manager with required dependencies.

        Args:
            identity: Identity provider adapter
            profiles: Repository for user profiles
        """
        self._identity = identity
        self._profiles = profiles
        self._current: Optional[Identity] = None

    def current_user_id(self) -> Optional[str]:
        """Session identifier of the signed-in user, or None."""
        return self._current.user_id if self._current else None

    async def sign_up(self, email: str, password: str, username: str) -> UserProfile:
        """
        Create an identity and its profile.

        If the profile cannot be saved the identity is deleted again so the
        same email can be used for a retry.

        Raises:
            AuthError: If the identity cannot be created
            StoreError: If the profile cannot be saved (after rollback)
        """
        identity = await self._identity.create_identity(email, password)

        profile = UserProfile(username=username, email=email)
        try:
            await self._profiles.save_profile(profile, identity.user_id)
        except Exception:
            logger.error(
                f"Error creating user profile for {identity.user_id}, rolling back identity"
            )
            await self._rollback_identity(identity)
            raise

        self._current = identity
        logger.info(f"User profile created for {identity.user_id}")
        return profile

    async def sign_in(self, email: str, password: str) -> UserProfile:
        """
        Authenticate and load the user's profile.

        An identity without a profile document gets a default profile, which
        is persisted before returning.

        Raises:
            AuthError: If authentication fails
            StoreError: If the profile cannot be fetched or repaired. The new
                provider session is ended and nobody is signed in afterwards.
        """
        identity = await self._identity.sign_in(email, password)
        try:
            profile = await self._ensure_profile(identity)
        except Exception:
            await self._abandon_session(identity)
            raise
        self._current = identity
        return profile

    async def restore_session(self) -> Optional[UserProfile]:
        """
        Resume a session persisted by the identity provider.

        Returns:
            The user's profile (created if missing), or None if there is no session
        """
        identity = await self._identity.current_identity()
        if identity is None:
            logger.debug("No persisted session to restore")
            return None

        profile = await self._ensure_profile(identity)
        self._current = identity
        logger.info(f"Restored session for {identity.user_id}")
        return profile

    async def sign_out(self) -> None:
        """
        Clear the local session.

        Raises:
            AuthError: If the session could not be cleared
        """
        await self._identity.sign_out()
        self._current = None

    async def reset_password(self, email: str) -> None:
        """
        Request a password reset email.

        Success only means the provider accepted the request.
        """
        await self._identity.send_password_reset(email)
        logger.info("Password reset requested")

    async def update_profile(self, profile: UserProfile) -> UserProfile:
        """
        Overwrite the signed-in user's profile.

        Raises:
            AuthError: If nobody is signed in
            StoreError: If the profile cannot be saved
        """
        user_id = self.current_user_id()
        if user_id is None:
            raise AuthError("No user logged in")
        await self._profiles.save_profile(profile, user_id)
        return profile

    async def _ensure_profile(self, identity: Identity) -> UserProfile:
        try:
            return await self._profiles.fetch_profile(identity.user_id)
        except NotFoundError:
            logger.info(f"Creating default user profile for existing identity {identity.user_id}")

        profile = UserProfile.default_for(identity.email)
        await self._profiles.save_profile(profile, identity.user_id)
        return profile

    async def _abandon_session(self, identity: Identity) -> None:
        self._current = None
        try:
            await self._identity.sign_out()
        except Exception as e:
            logger.warning(f"Failed to sign out {identity.user_id} after profile load failure: {e}")

    async def _rollback_identity(self, identity: Identity) -> None:
        try:
            await self._identity.delete_identity(identity.user_id)
        except Exception as e:
            logger.warning(
                f"Failed to delete auth user {identity.user_id} after profile creation failure: {e}"
            )
