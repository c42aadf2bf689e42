"""In-memory profile repository adapter."""

from datetime import datetime, timezone
from typing import Any, Optional

from app.application.dtos.profile import Profile
from app.application.ports.profile_repository import ProfileRepository


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of profile repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[str, Profile] = {}

    async def get(self, profile_id: str) -> Optional[Profile]:
        """Get a profile by identity id."""
        return self._storage.get(profile_id)

    async def create(self, profile: Profile) -> None:
        """
        Provision a profile. An existing row for the same id is kept.

        Args:
            profile: Profile DTO
        """
        if profile.id in self._storage:
            return
        now = datetime.now(timezone.utc)
        self._storage[profile.id] = profile.model_copy(
            update={"created_at": profile.created_at or now, "updated_at": now}
        )

    async def update(self, profile_id: str, changes: dict[str, Any]) -> Optional[Profile]:
        """Update owner-editable profile fields."""
        profile = self._storage.get(profile_id)
        if profile is None:
            return None
        updated = profile.model_copy(
            update={**changes, "updated_at": datetime.now(timezone.utc)}
        )
        self._storage[profile_id] = updated
        return updated
