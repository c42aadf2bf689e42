"""Identity provider port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.session_state import Identity


class IdentityProvider(ABC):
    """Port interface for the external identity provider."""

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> Identity:
        """
        Provision a new identity.

        Raises:
            AuthenticationError: If the email is already registered
        """
        pass

    @abstractmethod
    async def verify(self, email: str, password: str) -> Optional[Identity]:
        """
        Check credentials.

        Returns:
            The identity, or None if the credentials are wrong
        """
        pass

    @abstractmethod
    async def get(self, user_id: str) -> Optional[Identity]:
        """Get an identity by id."""
        pass

    @abstractmethod
    async def discard(self, user_id: str) -> None:
        """Remove an identity whose provisioning did not complete. Unknown ids are ignored."""
        pass
