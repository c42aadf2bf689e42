"""Listing repository port."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.application.dtos.listing import (
    ListingDetail,
    ListingPredicate,
    ListingSummary,
    NewListing,
)


class ListingRepository(ABC):
    """Port interface for listing repository."""

    @abstractmethod
    async def search(self, predicates: list[ListingPredicate]) -> list[ListingSummary]:
        """
        Search listings matching every predicate, newest first.

        Args:
            predicates: Conjunctive predicates (empty list matches everything)

        Returns:
            Listings ordered by created_at descending, then id descending

        Raises:
            ListingRetrievalError: If the read request fails
        """
        pass

    @abstractmethod
    async def get(self, listing_id: str) -> Optional[ListingDetail]:
        """
        Get one listing with brand, model and seller contact.

        Args:
            listing_id: Listing identifier

        Returns:
            Listing detail, or None if not found

        Raises:
            ListingRetrievalError: If the read request fails
        """
        pass

    @abstractmethod
    async def add(self, listing: NewListing) -> ListingSummary:
        """
        Insert one listing row.

        Args:
            listing: Validated insert request

        Returns:
            The stored listing

        Raises:
            ListingSubmissionError: If the write request fails
        """
        pass

    @abstractmethod
    async def update(self, listing_id: str, changes: dict[str, Any]) -> Optional[ListingSummary]:
        """
        Apply changes to one listing.

        Returns:
            The updated listing, or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, listing_id: str) -> bool:
        """
        Delete one listing.

        Returns:
            True if a row was deleted
        """
        pass
