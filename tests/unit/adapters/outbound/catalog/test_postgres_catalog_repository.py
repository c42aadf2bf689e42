"""Unit tests for Postgres catalog repository using SQLite in-memory."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.adapters.outbound.catalog.postgres_catalog_repository import PostgresCatalogRepository
from app.adapters.outbound.catalog.seed import brand_id, seed_brands, seed_models
from app.adapters.outbound.persistence.models import Base, CarBrandModel, CarModelModel


@pytest.fixture
def repository(monkeypatch):
    """Create Postgres catalog repository over the seeded SQLite database."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    db = SessionLocal()
    db.add_all([CarBrandModel(**row) for row in seed_brands()])
    db.add_all([CarModelModel(**row) for row in seed_models()])
    db.commit()
    db.close()

    monkeypatch.setattr(
        "app.adapters.outbound.catalog.postgres_catalog_repository.get_db_session",
        SessionLocal,
    )
    return PostgresCatalogRepository()


@pytest.mark.asyncio
async def test_list_brands_sorted(repository):
    """Test the five German brands ordered by name."""
    brands = await repository.list_brands()

    assert [brand.name for brand in brands] == [
        "Audi",
        "BMW",
        "Mercedes-Benz",
        "Porsche",
        "Volkswagen",
    ]


@pytest.mark.asyncio
async def test_list_models_scoped_to_brand(repository):
    """Test that only the brand's models come back."""
    models = await repository.list_models(brand_id("Volkswagen"))

    assert [model.name for model in models] == ["Golf", "Passat", "Tiguan"]
    assert {model.brand_id for model in models} == {brand_id("Volkswagen")}


@pytest.mark.asyncio
async def test_list_models_unknown_brand(repository):
    """Test that an unknown brand has no models."""
    assert await repository.list_models("unknown") == []


@pytest.mark.asyncio
async def test_get_brand(repository):
    """Test brand lookup by id."""
    brand = await repository.get_brand(brand_id("BMW"))

    assert brand.name == "BMW"
    assert brand.logo_url == "https://example.com/bmw.png"
    assert await repository.get_brand("unknown") is None
