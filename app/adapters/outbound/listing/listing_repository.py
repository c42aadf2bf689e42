"""In-memory listing repository adapter."""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from app.application.dtos.catalog import CarModel
from app.application.dtos.listing import (
    ListingDetail,
    ListingPredicate,
    ListingSummary,
    NewListing,
)
from app.application.errors import ListingSubmissionError
from app.application.ports.catalog_repository import CatalogRepository
from app.application.ports.listing_repository import ListingRepository
from app.application.ports.profile_repository import ProfileRepository

FIXED_FIELDS = ("id", "seller_id", "brand_id", "model_id", "created_at", "updated_at")


class InMemoryListingRepository(ListingRepository):
    """In-memory implementation of listing repository."""

    def __init__(
        self,
        catalog: CatalogRepository,
        profiles: Optional[ProfileRepository] = None,
    ) -> None:
        """
        Initialize in-memory repository.

        Args:
            catalog: Catalog used to join brand and model names
            profiles: Profiles used to join seller contact on detail reads
        """
        self._catalog = catalog
        self._profiles = profiles
        self._storage: dict[str, dict[str, Any]] = {}

    async def _find_model(self, brand_id: str, model_id: str) -> Optional[CarModel]:
        for model in await self._catalog.list_models(brand_id):
            if model.id == model_id:
                return model
        return None

    async def _summary(self, row: dict[str, Any]) -> ListingSummary:
        brand = await self._catalog.get_brand(row["brand_id"])
        model = await self._find_model(row["brand_id"], row["model_id"])
        return ListingSummary(
            **row,
            brand_name=brand.name if brand else "",
            model_name=model.name if model else "",
        )

    async def search(self, predicates: list[ListingPredicate]) -> list[ListingSummary]:
        """Search listings matching every predicate, newest first."""
        rows = [
            row
            for row in self._storage.values()
            if all(predicate.apply(row[predicate.field]) for predicate in predicates)
        ]
        rows.sort(key=lambda row: (row["created_at"], row["id"]), reverse=True)
        return [await self._summary(row) for row in rows]

    async def get(self, listing_id: str) -> Optional[ListingDetail]:
        """Get one listing with brand, model and seller contact."""
        row = self._storage.get(listing_id)
        if row is None:
            return None
        summary = await self._summary(row)
        seller = await self._profiles.get(row["seller_id"]) if self._profiles else None
        return ListingDetail(
            **summary.model_dump(),
            seller_full_name=seller.full_name if seller else None,
            seller_email=seller.email if seller else None,
        )

    async def add(self, listing: NewListing) -> ListingSummary:
        """Insert one listing row owned by listing.seller_id."""
        form = listing.form
        if await self._catalog.get_brand(form.brand_id) is None:
            raise ListingSubmissionError(f"Unknown brand {form.brand_id}")
        if await self._find_model(form.brand_id, form.model_id) is None:
            raise ListingSubmissionError(f"Unknown model {form.model_id}")

        now = datetime.now(timezone.utc)
        row = {
            "id": str(uuid.uuid4()),
            "seller_id": listing.seller_id,
            **form.model_dump(),
            "created_at": now,
            "updated_at": now,
        }
        self._storage[row["id"]] = row
        return await self._summary(row)

    async def update(self, listing_id: str, changes: dict[str, Any]) -> Optional[ListingSummary]:
        """Apply owner changes to one listing."""
        row = self._storage.get(listing_id)
        if row is None:
            return None
        editable = {
            key: value
            for key, value in changes.items()
            if key in row and key not in FIXED_FIELDS
        }
        row.update(editable, updated_at=datetime.now(timezone.utc))
        return await self._summary(row)

    async def delete(self, listing_id: str) -> bool:
        """Delete one listing."""
        return self._storage.pop(listing_id, None) is not None
