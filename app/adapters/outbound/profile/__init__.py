"""Profile repository adapters."""

from app.adapters.outbound.profile.postgres_profile_repository import PostgresProfileRepository
from app.adapters.outbound.profile.profile_repository import InMemoryProfileRepository

__all__ = [
    "InMemoryProfileRepository",
    "PostgresProfileRepository",
]
