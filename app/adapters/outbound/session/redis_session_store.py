"""Redis session store adapter."""

from typing import Optional

from redis import asyncio as aioredis

from app.application.ports.session_store import SessionStore


class RedisSessionStore(SessionStore):
    """Redis adapter for bearer token storage."""

    KEY_PREFIX = "auth:session:"

    def __init__(self, redis_url: str) -> None:
        """
        Initialize Redis session store.

        Args:
            redis_url: Redis connection URL
        """
        self._redis_url = redis_url
        self._client: Optional[aioredis.Redis] = None

    async def _get_client(self) -> aioredis.Redis:
        """
        Get or create Redis client.

        Returns:
            Redis client instance
        """
        if self._client is None:
            self._client = await aioredis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    def _make_key(self, token: str) -> str:
        """
        Make Redis key for a session token.

        Args:
            token: Bearer token

        Returns:
            Redis key string
        """
        return f"{self.KEY_PREFIX}{token}"

    async def put(self, token: str, user_id: str, ttl_seconds: int) -> None:
        """
        Bind a token to an identity id with a TTL.

        Args:
            token: Bearer token
            user_id: Identity identifier
            ttl_seconds: Time-to-live in seconds
        """
        client = await self._get_client()
        await client.setex(self._make_key(token), ttl_seconds, user_id)

    async def get(self, token: str) -> Optional[str]:
        """
        Resolve a token.

        Returns:
            Identity id, or None if unknown or expired
        """
        client = await self._get_client()
        return await client.get(self._make_key(token))

    async def delete(self, token: str) -> None:
        """Forget a token."""
        client = await self._get_client()
        await client.delete(self._make_key(token))

    async def close(self) -> None:
        """Close Redis connection."""
        if self._client:
            await self._client.close()
            self._client = None
