"""Dependency injection factory functions."""

from typing import Optional

from app.adapters.outbound.catalog import InMemoryCatalogRepository, PostgresCatalogRepository
from app.adapters.outbound.identity.in_memory_identity_provider import InMemoryIdentityProvider
from app.adapters.outbound.listing import InMemoryListingRepository, PostgresListingRepository
from app.adapters.outbound.profile import InMemoryProfileRepository, PostgresProfileRepository
from app.adapters.outbound.session import InMemorySessionStore, RedisSessionStore
from app.application.ports.catalog_repository import CatalogRepository
from app.application.ports.identity_provider import IdentityProvider
from app.application.ports.listing_repository import ListingRepository
from app.application.ports.profile_repository import ProfileRepository
from app.application.ports.session_store import SessionStore
from app.application.use_cases.browse_listings import BrowseListings
from app.application.use_cases.brand_model_cascade import BrandModelCascade
from app.application.use_cases.create_listing import CreateListing
from app.application.use_cases.session_provider import SessionProvider
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_listing_created, log_listing_search


def _require_database_url(option: str) -> None:
    if not settings.database_url:
        raise ValueError(f"DATABASE_URL is required when {option}=postgres")


def create_catalog_repository() -> CatalogRepository:
    """
    Factory function to create catalog repository.

    Returns:
        CatalogRepository instance
    """
    if settings.catalog_repository == "postgres":
        _require_database_url("CATALOG_REPOSITORY")
        return PostgresCatalogRepository()
    return InMemoryCatalogRepository()


def create_profile_repository() -> ProfileRepository:
    """
    Factory function to create profile repository.

    Returns:
        ProfileRepository instance
    """
    if settings.profile_repository == "postgres":
        _require_database_url("PROFILE_REPOSITORY")
        return PostgresProfileRepository()
    return InMemoryProfileRepository()


def create_listing_repository(
    catalog_repository: CatalogRepository,
    profile_repository: Optional[ProfileRepository] = None,
) -> ListingRepository:
    """
    Factory function to create listing repository.

    Args:
        catalog_repository: Catalog used by the in-memory adapter for joins
        profile_repository: Profiles used by the in-memory adapter for joins

    Returns:
        ListingRepository instance
    """
    if settings.listing_repository == "postgres":
        _require_database_url("LISTING_REPOSITORY")
        return PostgresListingRepository()
    return InMemoryListingRepository(catalog_repository, profile_repository)


def create_session_store() -> SessionStore:
    """
    Factory function to create session store.

    Returns:
        SessionStore instance (Redis or in-memory)
    """
    if settings.session_store == "redis" and settings.redis_url:
        return RedisSessionStore(settings.redis_url)
    return InMemorySessionStore()


def create_identity_provider() -> IdentityProvider:
    """Factory function to create identity provider."""
    return InMemoryIdentityProvider()


def create_session_provider(profile_repository: ProfileRepository) -> SessionProvider:
    """
    Factory function to create the session provider.

    Args:
        profile_repository: Profiles provisioned on sign-up

    Returns:
        SessionProvider instance
    """
    return SessionProvider(
        create_identity_provider(),
        create_session_store(),
        profile_repository,
        ttl_seconds=settings.session_ttl_seconds,
    )


def create_browse_listings_use_case(
    listing_repository: ListingRepository, cascade: BrandModelCascade
) -> BrowseListings:
    """Factory function to create BrowseListings with structured logging."""
    return BrowseListings(listing_repository, cascade, logger=log_listing_search)


def create_create_listing_use_case(
    listing_repository: ListingRepository, cascade: BrandModelCascade
) -> CreateListing:
    """Factory function to create CreateListing with structured logging."""
    return CreateListing(
        listing_repository,
        cascade,
        max_images=settings.max_listing_images,
        logger=log_listing_created,
    )
