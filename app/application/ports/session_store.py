"""Session token store port."""

from abc import ABC, abstractmethod
from typing import Optional


class SessionStore(ABC):
    """Port interface for bearer token to identity id storage."""

    @abstractmethod
    async def put(self, token: str, user_id: str, ttl_seconds: int) -> None:
        """
        Bind a token to an identity id with a TTL.

        Args:
            token: Opaque bearer token
            user_id: Identity identifier
            ttl_seconds: Time-to-live in seconds
        """
        pass

    @abstractmethod
    async def get(self, token: str) -> Optional[str]:
        """
        Resolve a token.

        Returns:
            Identity id, or None if unknown or expired
        """
        pass

    @abstractmethod
    async def delete(self, token: str) -> None:
        """Forget a token."""
        pass
