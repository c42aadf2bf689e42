"""Create listing use case."""

from typing import Any, Callable, Optional

from app.application.dtos.listing import ListingCreateForm, ListingSummary, NewListing
from app.application.errors import ListingValidationError, NotAuthenticatedError
from app.application.ports.listing_repository import ListingRepository
from app.application.use_cases.brand_model_cascade import BrandModelCascade
from app.domain.entities.session_state import Identity


class CreateListing:
    """Use case for submitting a new listing."""

    DEFAULT_MAX_IMAGES = 20

    def __init__(
        self,
        listing_repository: ListingRepository,
        cascade: BrandModelCascade,
        max_images: int = DEFAULT_MAX_IMAGES,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize create listing use case.

        Args:
            listing_repository: Repository for listings
            cascade: Brand/model cascade used to check the model belongs to the brand
            max_images: Maximum number of image URLs per listing
            logger: Optional logger function (request_id, listing_id, seller_id, **kwargs)
        """
        self._listing_repository = listing_repository
        self._cascade = cascade
        self._max_images = max_images
        self._logger = logger

    async def execute(
        self,
        identity: Optional[Identity],
        form: ListingCreateForm,
        request_id: str = "",
    ) -> ListingSummary:
        """
        Insert a listing owned by the current identity.

        Args:
            identity: Authenticated identity, or None
            form: Validated creation form
            request_id: Request correlation id for logging

        Returns:
            The stored listing

        Raises:
            NotAuthenticatedError: If there is no identity (nothing is inserted)
            ListingValidationError: If the model is not one of the brand's models
            ListingSubmissionError: If the insert fails
        """
        if identity is None:
            raise NotAuthenticatedError("Sign in to create a listing")

        if len(form.images) > self._max_images:
            raise ListingValidationError(
                f"A listing can have at most {self._max_images} images", field="images"
            )

        try:
            await self._cascade.resolve(form.brand_id, form.model_id, strict=True)
        except ValueError as err:
            raise ListingValidationError(str(err), field="model_id") from err

        listing = await self._listing_repository.add(NewListing(seller_id=identity.id, form=form))

        self._log(request_id, listing.id, identity.id)
        return listing

    def _log(self, request_id: str, listing_id: str, seller_id: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger(request_id, listing_id, seller_id, **kwargs)
