"""Browse listings use case."""

import itertools
from typing import Any, Callable, Optional

from app.application.dtos.listing import ListingFilters, ListingSearchResult
from app.application.ports.listing_repository import ListingRepository
from app.application.use_cases.brand_model_cascade import BrandModelCascade


class BrowseListings:
    """Use case for the filtered, newest-first listing index."""

    def __init__(
        self,
        listing_repository: ListingRepository,
        cascade: BrandModelCascade,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize browse listings use case.

        Args:
            listing_repository: Repository for listings
            cascade: Brand/model cascade used to normalise the model filter
            logger: Optional logger function (request_id, filters, results_count, **kwargs)
        """
        self._listing_repository = listing_repository
        self._cascade = cascade
        self._logger = logger
        self._sequence = itertools.count(1)

    async def execute(
        self, filters: Optional[ListingFilters] = None, request_id: str = ""
    ) -> ListingSearchResult:
        """
        Search listings.

        Args:
            filters: Optional sparse filters (None means no filter)
            request_id: Request correlation id for logging

        Returns:
            Result tagged with a monotonically increasing sequence number so
            callers can drop responses that arrive out of order

        Raises:
            ListingRetrievalError: If the listing or catalog read fails
        """
        sequence = next(self._sequence)
        filters = await self._cascade.normalize_filters(filters or ListingFilters())
        listings = await self._listing_repository.search(filters.predicates())

        self._log(request_id, filters.active(), len(listings), sequence=sequence)

        return ListingSearchResult(sequence=sequence, count=len(listings), listings=listings)

    def _log(self, request_id: str, filters: dict[str, Any], count: int, **kwargs: Any) -> None:
        if self._logger:
            self._logger(request_id, filters, count, **kwargs)
