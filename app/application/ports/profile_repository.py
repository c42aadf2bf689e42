"""Profile repository port."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.application.dtos.profile import Profile


class ProfileRepository(ABC):
    """Port interface for profile repository."""

    @abstractmethod
    async def get(self, profile_id: str) -> Optional[Profile]:
        """
        Get a profile by identity id.

        Returns:
            Profile DTO, or None if not found
        """
        pass

    @abstractmethod
    async def create(self, profile: Profile) -> None:
        """
        Provision the profile of a newly created identity.

        Args:
            profile: Profile DTO whose id equals the identity id
        """
        pass

    @abstractmethod
    async def update(self, profile_id: str, changes: dict[str, Any]) -> Optional[Profile]:
        """
        Update owner-editable profile fields.

        Returns:
            The updated profile, or None if not found
        """
        pass
