"""Unit tests for ManageListing use case."""

from decimal import Decimal

import pytest
import pytest_asyncio

from app.adapters.outbound.catalog.catalog_repository import InMemoryCatalogRepository
from app.adapters.outbound.listing.listing_repository import InMemoryListingRepository
from app.application.dtos.catalog import Brand, CarModel
from app.application.dtos.listing import ListingCreateForm, ListingUpdateForm, NewListing
from app.application.errors import (
    ListingValidationError,
    NotAuthenticatedError,
    PermissionDeniedError,
)
from app.application.use_cases.manage_listing import ManageListing
from app.domain.entities.session_state import Identity

OWNER = Identity(id="owner", email="owner@example.com")
STRANGER = Identity(id="stranger", email="stranger@example.com")


@pytest.fixture
def repository():
    """Create in-memory listing repository with a one-model catalog."""
    catalog = InMemoryCatalogRepository(
        brands=[Brand(id="vw", name="Volkswagen")],
        models=[CarModel(id="vw-golf", brand_id="vw", name="Golf")],
    )
    return InMemoryListingRepository(catalog)


@pytest.fixture
def use_case(repository):
    """Create manage listing use case."""
    return ManageListing(repository, max_images=2)


@pytest_asyncio.fixture
async def listing(repository):
    """Insert a listing owned by OWNER."""
    form = ListingCreateForm(
        title="Golf VII",
        brand_id="vw",
        model_id="vw-golf",
        year=2017,
        price="9500",
        mileage=120000,
        condition="used",
        transmission="manual",
    )
    return await repository.add(NewListing(seller_id=OWNER.id, form=form))


@pytest.mark.asyncio
async def test_owner_can_update(use_case, listing):
    """Test a partial update by the seller."""
    updated = await use_case.update(OWNER, listing.id, ListingUpdateForm(price="8999.50"))

    assert updated.price == Decimal("8999.50")
    assert updated.title == "Golf VII"
    assert updated.seller_id == OWNER.id


@pytest.mark.asyncio
async def test_stranger_cannot_update(use_case, listing, repository):
    """Test that only the seller can change a listing."""
    with pytest.raises(PermissionDeniedError):
        await use_case.update(STRANGER, listing.id, ListingUpdateForm(title="Mine now"))

    assert repository._storage[listing.id]["title"] == "Golf VII"


@pytest.mark.asyncio
async def test_anonymous_cannot_update(use_case, listing):
    """Test that an update needs an identity."""
    with pytest.raises(NotAuthenticatedError):
        await use_case.update(None, listing.id, ListingUpdateForm(title="x"))


@pytest.mark.asyncio
async def test_update_missing_listing(use_case):
    """Test that a missing listing yields None."""
    assert await use_case.update(OWNER, "missing", ListingUpdateForm(title="x")) is None


@pytest.mark.asyncio
async def test_update_image_limit(use_case, listing):
    """Test the image count limit on update."""
    with pytest.raises(ListingValidationError):
        await use_case.update(OWNER, listing.id, ListingUpdateForm(images="a,b,c"))


@pytest.mark.asyncio
async def test_owner_can_delete(use_case, listing, repository):
    """Test deleting an owned listing."""
    assert await use_case.delete(OWNER, listing.id) is True
    assert listing.id not in repository._storage
    assert await use_case.delete(OWNER, listing.id) is False


@pytest.mark.asyncio
async def test_stranger_cannot_delete(use_case, listing, repository):
    """Test that only the seller can delete a listing."""
    with pytest.raises(PermissionDeniedError):
        await use_case.delete(STRANGER, listing.id)

    assert listing.id in repository._storage
