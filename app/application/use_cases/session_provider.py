"""Session provider use case."""

import secrets
from typing import Optional

from app.application.dtos.auth import AuthSession, Credentials
from app.application.dtos.profile import Profile
from app.application.errors import AuthenticationError
from app.application.ports.identity_provider import IdentityProvider
from app.application.ports.profile_repository import ProfileRepository
from app.application.ports.session_store import SessionStore
from app.domain.entities.session_state import (
    Identity,
    SessionListener,
    SessionState,
    Subscription,
)


class SessionProvider:
    """
    The single source of the current identity.

    Every route resolves its identity here, and sign-in/sign-out events are
    published through one SessionState hub.
    """

    DEFAULT_TTL_SECONDS = 604800

    def __init__(
        self,
        identity_provider: IdentityProvider,
        session_store: SessionStore,
        profile_repository: ProfileRepository,
        state: Optional[SessionState] = None,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ) -> None:
        """
        Initialize session provider.

        Args:
            identity_provider: Credential check and identity provisioning
            session_store: Bearer token storage
            profile_repository: Profiles provisioned on sign-up
            state: Session event hub (a fresh one when omitted)
            ttl_seconds: Session lifetime
        """
        self._identity_provider = identity_provider
        self._session_store = session_store
        self._profile_repository = profile_repository
        self._state = state or SessionState()
        self._ttl_seconds = ttl_seconds

    def subscribe(self, listener: SessionListener) -> Subscription:
        """Subscribe to sign-in/sign-out events."""
        return self._state.subscribe(listener)

    async def sign_up(self, credentials: Credentials) -> AuthSession:
        """
        Create an identity, provision its profile and open a session.

        The profile defaults its full name to the email address. If the
        profile cannot be stored the identity is discarded, so the email can
        sign up again.

        Raises:
            AuthenticationError: If the email is already registered
            ListingSubmissionError: If the profile cannot be stored
        """
        identity = await self._identity_provider.sign_up(credentials.email, credentials.password)
        try:
            await self._profile_repository.create(
                Profile(id=identity.id, email=identity.email, full_name=identity.email)
            )
        except Exception:
            await self._identity_provider.discard(identity.id)
            raise
        return await self._open(identity)

    async def sign_in(self, credentials: Credentials) -> AuthSession:
        """
        Open a session for valid credentials.

        Raises:
            AuthenticationError: If the credentials are wrong
        """
        identity = await self._identity_provider.verify(credentials.email, credentials.password)
        if identity is None:
            raise AuthenticationError("Invalid email or password")
        return await self._open(identity)

    async def sign_out(self, token: Optional[str]) -> None:
        """End a session. Unknown tokens are ignored."""
        identity = await self.current(token)
        if token:
            await self._session_store.delete(token)
        self._state.signed_out(identity)

    async def current(self, token: Optional[str]) -> Optional[Identity]:
        """
        Resolve the identity bound to a bearer token.

        Returns:
            Identity, or None if the token is missing, unknown or expired
        """
        if not token:
            return None
        user_id = await self._session_store.get(token)
        if user_id is None:
            return None
        return await self._identity_provider.get(user_id)

    async def _open(self, identity: Identity) -> AuthSession:
        token = secrets.token_urlsafe(32)
        await self._session_store.put(token, identity.id, self._ttl_seconds)
        self._state.signed_in(identity)
        return AuthSession(access_token=token, user_id=identity.id, email=identity.email)
