"""Profile use cases."""

from typing import Optional

from app.application.dtos.profile import Profile, ProfileUpdate
from app.application.errors import NotAuthenticatedError
from app.application.ports.profile_repository import ProfileRepository
from app.domain.entities.session_state import Identity


class ManageProfile:
    """Use case for reading and editing the current identity's profile."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self._profile_repository = profile_repository

    async def get(self, identity: Optional[Identity]) -> Optional[Profile]:
        """
        Get the current profile.

        Returns:
            Profile, or None if the row is missing

        Raises:
            NotAuthenticatedError: If there is no identity
        """
        if identity is None:
            raise NotAuthenticatedError("Sign in to view your profile")
        return await self._profile_repository.get(identity.id)

    async def update(self, identity: Optional[Identity], form: ProfileUpdate) -> Optional[Profile]:
        """Update the current profile; the target row is always the identity's own."""
        if identity is None:
            raise NotAuthenticatedError("Sign in to edit your profile")
        return await self._profile_repository.update(
            identity.id, form.model_dump(exclude_unset=True)
        )
