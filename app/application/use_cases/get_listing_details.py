"""Get listing details use case."""

from typing import Optional

from app.application.dtos.listing import ListingDetail
from app.application.ports.listing_repository import ListingRepository


class GetListingDetails:
    """Use case for the listing detail page."""

    def __init__(self, listing_repository: ListingRepository) -> None:
        self._listing_repository = listing_repository

    async def execute(self, listing_id: str) -> Optional[ListingDetail]:
        """
        Get one listing.

        Returns:
            Listing detail, or None when no listing has that id

        Raises:
            ListingRetrievalError: If the read request fails
        """
        if not listing_id:
            return None
        return await self._listing_repository.get(listing_id)
