"""In-memory session store adapter."""

import time
from typing import Optional

from app.application.ports.session_store import SessionStore


class InMemorySessionStore(SessionStore):
    """In-memory token storage with TTL expiry on read."""

    def __init__(self) -> None:
        self._storage: dict[str, tuple[str, float]] = {}

    async def put(self, token: str, user_id: str, ttl_seconds: int) -> None:
        """Bind a token to an identity id with a TTL."""
        self._storage[token] = (user_id, time.monotonic() + ttl_seconds)

    async def get(self, token: str) -> Optional[str]:
        """Resolve a token, dropping it once expired."""
        entry = self._storage.get(token)
        if entry is None:
            return None
        user_id, expires_at = entry
        if time.monotonic() >= expires_at:
            del self._storage[token]
            return None
        return user_id

    async def delete(self, token: str) -> None:
        """Forget a token."""
        self._storage.pop(token, None)
