"""Listing repository adapters."""

from app.adapters.outbound.listing.listing_repository import InMemoryListingRepository
from app.adapters.outbound.listing.postgres_listing_repository import PostgresListingRepository

__all__ = [
    "InMemoryListingRepository",
    "PostgresListingRepository",
]
