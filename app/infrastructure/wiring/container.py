"""Dependency injection container."""

from app.application.ports.catalog_repository import CatalogRepository
from app.application.ports.listing_repository import ListingRepository
from app.application.ports.profile_repository import ProfileRepository
from app.application.use_cases.browse_listings import BrowseListings
from app.application.use_cases.brand_model_cascade import BrandModelCascade
from app.application.use_cases.create_listing import CreateListing
from app.application.use_cases.get_listing_details import GetListingDetails
from app.application.use_cases.manage_listing import ManageListing
from app.application.use_cases.manage_profile import ManageProfile
from app.application.use_cases.session_provider import SessionProvider
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_session_event
from app.infrastructure.wiring.dependencies import (
    create_browse_listings_use_case,
    create_catalog_repository,
    create_create_listing_use_case,
    create_listing_repository,
    create_profile_repository,
    create_session_provider,
)


class Container:
    """Dependency injection container."""

    def __init__(self) -> None:
        """Initialize container with dependencies."""
        # Repositories
        self._catalog_repository: CatalogRepository = create_catalog_repository()
        self._profile_repository: ProfileRepository = create_profile_repository()
        self._listing_repository: ListingRepository = create_listing_repository(
            self._catalog_repository, self._profile_repository
        )

        # Session provider (the single source of the current identity)
        self._session_provider = create_session_provider(self._profile_repository)
        self._session_subscription = self._session_provider.subscribe(log_session_event)

        # Use cases
        self._cascade = BrandModelCascade(self._catalog_repository)
        self._browse_listings = create_browse_listings_use_case(
            self._listing_repository, self._cascade
        )
        self._create_listing = create_create_listing_use_case(
            self._listing_repository, self._cascade
        )
        self._get_listing_details = GetListingDetails(self._listing_repository)
        self._manage_listing = ManageListing(
            self._listing_repository, max_images=settings.max_listing_images
        )
        self._manage_profile = ManageProfile(self._profile_repository)

    @property
    def catalog_repository(self) -> CatalogRepository:
        """Get catalog repository."""
        return self._catalog_repository

    @property
    def listing_repository(self) -> ListingRepository:
        """Get listing repository."""
        return self._listing_repository

    @property
    def session_provider(self) -> SessionProvider:
        """Get session provider."""
        return self._session_provider

    @property
    def cascade(self) -> BrandModelCascade:
        """Get brand/model cascade."""
        return self._cascade

    @property
    def browse_listings(self) -> BrowseListings:
        """Get browse listings use case."""
        return self._browse_listings

    @property
    def create_listing(self) -> CreateListing:
        """Get create listing use case."""
        return self._create_listing

    @property
    def get_listing_details(self) -> GetListingDetails:
        """Get listing details use case."""
        return self._get_listing_details

    @property
    def manage_listing(self) -> ManageListing:
        """Get manage listing use case."""
        return self._manage_listing

    @property
    def manage_profile(self) -> ManageProfile:
        """Get manage profile use case."""
        return self._manage_profile


# Global container instance
container = Container()
