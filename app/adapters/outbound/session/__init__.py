"""Session store adapters."""

from app.adapters.outbound.session.in_memory_session_store import InMemorySessionStore
from app.adapters.outbound.session.redis_session_store import RedisSessionStore

__all__ = [
    "InMemorySessionStore",
    "RedisSessionStore",
]
