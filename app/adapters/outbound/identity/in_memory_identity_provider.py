"""In-memory identity provider adapter."""

import hashlib
import hmac
import secrets
import uuid
from typing import Optional

from app.application.errors import AuthenticationError
from app.application.ports.identity_provider import IdentityProvider
from app.domain.entities.session_state import Identity


class InMemoryIdentityProvider(IdentityProvider):
    """Local stand-in for a hosted identity provider (salted PBKDF2 hashes)."""

    ITERATIONS = 100_000

    def __init__(self) -> None:
        """Initialize in-memory identity storage."""
        self._identities: dict[str, Identity] = {}
        self._by_email: dict[str, str] = {}
        self._hashes: dict[str, tuple[bytes, bytes]] = {}

    def _hash(self, password: str, salt: bytes) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, self.ITERATIONS)

    async def sign_up(self, email: str, password: str) -> Identity:
        """
        Provision a new identity.

        Raises:
            AuthenticationError: If the email is already registered
        """
        if email in self._by_email:
            raise AuthenticationError("Email is already registered")
        identity = Identity(id=str(uuid.uuid4()), email=email)
        salt = secrets.token_bytes(16)
        self._identities[identity.id] = identity
        self._by_email[email] = identity.id
        self._hashes[identity.id] = (salt, self._hash(password, salt))
        return identity

    async def verify(self, email: str, password: str) -> Optional[Identity]:
        """Check credentials; None when the email or password is wrong."""
        user_id = self._by_email.get(email)
        if user_id is None:
            return None
        salt, expected = self._hashes[user_id]
        if not hmac.compare_digest(self._hash(password, salt), expected):
            return None
        return self._identities[user_id]

    async def get(self, user_id: str) -> Optional[Identity]:
        """Get an identity by id."""
        return self._identities.get(user_id)

    async def discard(self, user_id: str) -> None:
        """Remove an identity and its credentials."""
        identity = self._identities.pop(user_id, None)
        self._hashes.pop(user_id, None)
        if identity is not None:
            self._by_email.pop(identity.email, None)
