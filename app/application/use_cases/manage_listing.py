"""Owner-only listing update and delete use cases."""

from typing import Optional

from app.application.dtos.listing import ListingSummary, ListingUpdateForm
from app.application.errors import (
    ListingValidationError,
    NotAuthenticatedError,
    PermissionDeniedError,
)
from app.application.ports.listing_repository import ListingRepository
from app.domain.entities.session_state import Identity


class ManageListing:
    """Use case for changing or removing a listing its seller owns."""

    def __init__(self, listing_repository: ListingRepository, max_images: int = 20) -> None:
        self._listing_repository = listing_repository
        self._max_images = max_images

    async def _owned(self, identity: Optional[Identity], listing_id: str) -> bool:
        """
        Check ownership.

        Returns:
            False if the listing does not exist

        Raises:
            NotAuthenticatedError: If there is no identity
            PermissionDeniedError: If another seller owns the listing
        """
        if identity is None:
            raise NotAuthenticatedError("Sign in to manage your listings")
        listing = await self._listing_repository.get(listing_id)
        if listing is None:
            return False
        if listing.seller_id != identity.id:
            raise PermissionDeniedError("Only the seller can change this listing")
        return True

    async def update(
        self, identity: Optional[Identity], listing_id: str, form: ListingUpdateForm
    ) -> Optional[ListingSummary]:
        """
        Update a listing.

        Returns:
            The updated listing, or None if not found
        """
        if not await self._owned(identity, listing_id):
            return None
        changes = form.changes()
        if len(changes.get("images") or []) > self._max_images:
            raise ListingValidationError(
                f"A listing can have at most {self._max_images} images", field="images"
            )
        return await self._listing_repository.update(listing_id, changes)

    async def delete(self, identity: Optional[Identity], listing_id: str) -> bool:
        """
        Delete a listing.

        Returns:
            True if deleted, False if not found
        """
        if not await self._owned(identity, listing_id):
            return False
        return await self._listing_repository.delete(listing_id)
