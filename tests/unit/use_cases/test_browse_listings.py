"""Unit tests for BrowseListings use case."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.adapters.outbound.catalog.catalog_repository import InMemoryCatalogRepository
from app.adapters.outbound.listing.listing_repository import InMemoryListingRepository
from app.application.dtos.catalog import Brand, CarModel
from app.application.dtos.listing import ListingCreateForm, ListingFilters, NewListing
from app.application.use_cases.brand_model_cascade import BrandModelCascade
from app.application.use_cases.browse_listings import BrowseListings

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def catalog():
    """Create a two-brand catalog."""
    return InMemoryCatalogRepository(
        brands=[Brand(id="bmw-uuid", name="BMW"), Brand(id="audi-uuid", name="Audi")],
        models=[
            CarModel(id="bmw-3", brand_id="bmw-uuid", name="3 Series"),
            CarModel(id="bmw-x5", brand_id="bmw-uuid", name="X5"),
            CarModel(id="audi-a4", brand_id="audi-uuid", name="A4"),
        ],
    )


@pytest.fixture
def repository(catalog):
    """Create in-memory listing repository."""
    return InMemoryListingRepository(catalog)


@pytest.fixture
def use_case(repository, catalog):
    """Create browse listings use case."""
    return BrowseListings(repository, BrandModelCascade(catalog))


async def add_listing(repository, offset_minutes, **overrides):
    """Insert a listing with a fixed creation time."""
    fields = {
        "title": "Car",
        "brand_id": "bmw-uuid",
        "model_id": "bmw-3",
        "year": 2020,
        "price": "20000",
        "mileage": 50000,
        "condition": "used",
        "transmission": "automatic",
    }
    fields.update(overrides)
    listing = await repository.add(NewListing(seller_id="seller-1", form=ListingCreateForm(**fields)))
    repository._storage[listing.id]["created_at"] = BASE_TIME + timedelta(minutes=offset_minutes)
    return listing


@pytest.mark.asyncio
async def test_brand_and_price_range(use_case, repository):
    """Test that brand plus price bounds keep only the listing inside the range."""
    await add_listing(repository, 1, price="15000")
    inside = await add_listing(repository, 2, price="25000")
    await add_listing(repository, 3, price="60000")
    await add_listing(repository, 4, price="30000", brand_id="audi-uuid", model_id="audi-a4")

    result = await use_case.execute(
        ListingFilters(brand_id="bmw-uuid", min_price=20000, max_price=50000)
    )

    assert result.count == 1
    assert [listing.id for listing in result.listings] == [inside.id]
    assert result.listings[0].price == Decimal("25000.00")
    assert result.listings[0].brand_name == "BMW"
    assert result.listings[0].model_name == "3 Series"


@pytest.mark.asyncio
async def test_no_filters_returns_all_newest_first(use_case, repository):
    """Test the default newest-first order."""
    oldest = await add_listing(repository, 1)
    newest = await add_listing(repository, 30)
    middle = await add_listing(repository, 10)

    result = await use_case.execute()

    assert [listing.id for listing in result.listings] == [newest.id, middle.id, oldest.id]


@pytest.mark.asyncio
async def test_bounds_are_inclusive(use_case, repository):
    """Test that listings on the bounds are kept."""
    await add_listing(repository, 1, year=2018, mileage=0)
    await add_listing(repository, 2, year=2022, mileage=100000)

    result = await use_case.execute(ListingFilters(min_year=2018, max_year=2022, max_mileage=100000))

    assert result.count == 2


@pytest.mark.asyncio
async def test_zero_mileage_filter_is_applied(use_case, repository):
    """Test that a zero bound is a real filter."""
    brand_new = await add_listing(repository, 1, mileage=0, condition="new")
    await add_listing(repository, 2, mileage=10)

    result = await use_case.execute(ListingFilters(max_mileage=0))

    assert [listing.id for listing in result.listings] == [brand_new.id]


@pytest.mark.asyncio
async def test_enum_filters(use_case, repository):
    """Test transmission and condition equality filters."""
    manual = await add_listing(repository, 1, transmission="manual", condition="certified")
    await add_listing(repository, 2, transmission="manual", condition="used")
    await add_listing(repository, 3, transmission="automatic", condition="certified")

    result = await use_case.execute(ListingFilters(transmission="manual", condition="certified"))

    assert [listing.id for listing in result.listings] == [manual.id]


@pytest.mark.asyncio
async def test_model_of_other_brand_is_dropped(use_case, repository):
    """Test that a stale model filter does not survive a brand change."""
    bmw = await add_listing(repository, 1)
    await add_listing(repository, 2, brand_id="audi-uuid", model_id="audi-a4")

    result = await use_case.execute(ListingFilters(brand_id="bmw-uuid", model_id="audi-a4"))

    assert [listing.id for listing in result.listings] == [bmw.id]


@pytest.mark.asyncio
async def test_model_without_brand_is_dropped(use_case, repository):
    """Test that a model filter needs a brand."""
    await add_listing(repository, 1)
    await add_listing(repository, 2, model_id="bmw-x5")

    result = await use_case.execute(ListingFilters(model_id="bmw-x5"))

    assert result.count == 2


@pytest.mark.asyncio
async def test_sequence_increases_per_request(use_case):
    """Test that every search gets a newer sequence number."""
    first = await use_case.execute()
    second = await use_case.execute()

    assert second.sequence > first.sequence


@pytest.mark.asyncio
async def test_logger_receives_active_filters(repository, catalog):
    """Test that the injected logger sees only the filters that were set."""
    calls = []

    def logger(request_id, filters, results_count, **kwargs):
        calls.append((request_id, filters, results_count, kwargs))

    use_case = BrowseListings(repository, BrandModelCascade(catalog), logger=logger)
    await add_listing(repository, 1)

    await use_case.execute(ListingFilters(brand_id="bmw-uuid"), request_id="req-1")

    assert calls == [("req-1", {"brand_id": "bmw-uuid"}, 1, {"sequence": 1})]
