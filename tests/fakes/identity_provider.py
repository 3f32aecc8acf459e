"""
Fake Identity Provider for testing.

Keeps email/password accounts and the current session in memory.
"""
import uuid
from dataclasses import dataclass
from typing import Dict, List, Optional

from application.exceptions import AuthError
from application.ports import Identity
from tests.fakes.document_store import InMemoryDocumentStore

MIN_PASSWORD_LENGTH = 6


@dataclass
class _Account:
    user_id: str
    email: str
    password: str


class FakeIdentityProvider:
    """
    In-memory fake implementation of IdentityProvider for testing.

    Access tokens are opaque strings of the form "token-{user_id}".

    Usage:
        identity = FakeIdentityProvider()
        identity.seed_account("ana@example.com", "secret1")
        await identity.sign_in("ana@example.com", "secret1")
    """

    def __init__(self, store: Optional[InMemoryDocumentStore] = None):
        self.store = store if store is not None else InMemoryDocumentStore()
        self._accounts: Dict[str, _Account] = {}
        self._session: Optional[Identity] = None
        self.password_resets: List[str] = []
        self.deleted: List[str] = []

    def reset(self) -> None:
        self.store.reset()
        self._accounts.clear()
        self._session = None
        self.password_resets.clear()
        self.deleted.clear()

    def seed_account(
        self, email: str, password: str, user_id: Optional[str] = None
    ) -> Identity:
        """Create an account without starting a session."""
        account = _Account(user_id=user_id or str(uuid.uuid4()), email=email, password=password)
        self._accounts[email.lower()] = account
        return self._identity(account)

    def start_session(self, email: str) -> Identity:
        """Mark an existing account as signed in (simulates a persisted session)."""
        self._session = self._identity(self._accounts[email.lower()])
        return self._session

    def has_account(self, email: str) -> bool:
        return email.lower() in self._accounts

    @property
    def session(self) -> Optional[Identity]:
        return self._session

    def _identity(self, account: _Account) -> Identity:
        return Identity(
            user_id=account.user_id,
            email=account.email,
            access_token=f"token-{account.user_id}",
        )

    # =========================================================================
    # IdentityProvider Protocol Methods
    # =========================================================================

    async def create_identity(self, email: str, password: str) -> Identity:
        self.store.check("create_identity")
        if self.has_account(email):
            raise AuthError("User already registered")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise AuthError("Password should be at least 6 characters")
        self.seed_account(email, password)
        return self.start_session(email)

    async def sign_in(self, email: str, password: str) -> Identity:
        self.store.check("sign_in")
        account = self._accounts.get(email.lower())
        if account is None or account.password != password:
            raise AuthError("Invalid login credentials")
        return self.start_session(email)

    async def sign_out(self) -> None:
        self.store.check("sign_out")
        self._session = None

    async def send_password_reset(self, email: str) -> None:
        self.store.check("send_password_reset")
        self.password_resets.append(email)

    async def delete_identity(self, user_id: str) -> None:
        self.store.check("delete_identity")
        for email, account in list(self._accounts.items()):
            if account.user_id == user_id:
                del self._accounts[email]
        if self._session is not None and self._session.user_id == user_id:
            self._session = None
        self.deleted.append(user_id)

    async def current_identity(self) -> Optional[Identity]:
        self.store.check("current_identity")
        return self._session
