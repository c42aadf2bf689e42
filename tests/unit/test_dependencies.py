"""Unit tests for dependency factory functions."""

import pytest

from app.adapters.outbound.catalog import InMemoryCatalogRepository, PostgresCatalogRepository
from app.adapters.outbound.listing import InMemoryListingRepository
from app.adapters.outbound.session import InMemorySessionStore, RedisSessionStore
from app.infrastructure.config.settings import settings
from app.infrastructure.wiring import dependencies


def test_defaults_are_in_memory(monkeypatch):
    """Test that the default settings wire in-memory adapters."""
    monkeypatch.setattr(settings, "catalog_repository", "in_memory")
    monkeypatch.setattr(settings, "listing_repository", "in_memory")
    monkeypatch.setattr(settings, "session_store", "in_memory")

    catalog = dependencies.create_catalog_repository()

    assert isinstance(catalog, InMemoryCatalogRepository)
    assert isinstance(dependencies.create_listing_repository(catalog), InMemoryListingRepository)
    assert isinstance(dependencies.create_session_store(), InMemorySessionStore)


def test_postgres_requires_database_url(monkeypatch):
    """Test that postgres adapters need DATABASE_URL."""
    monkeypatch.setattr(settings, "catalog_repository", "postgres")
    monkeypatch.setattr(settings, "database_url", "")

    with pytest.raises(ValueError, match="DATABASE_URL"):
        dependencies.create_catalog_repository()


def test_postgres_and_redis_selection(monkeypatch):
    """Test selecting the external adapters."""
    monkeypatch.setattr(settings, "catalog_repository", "postgres")
    monkeypatch.setattr(settings, "database_url", "postgresql://localhost/marketplace")
    monkeypatch.setattr(settings, "session_store", "redis")
    monkeypatch.setattr(settings, "redis_url", "redis://localhost:6379/1")

    assert isinstance(dependencies.create_catalog_repository(), PostgresCatalogRepository)
    assert isinstance(dependencies.create_session_store(), RedisSessionStore)


def test_session_provider_uses_configured_ttl(monkeypatch):
    """Test that the session lifetime comes from settings."""
    monkeypatch.setattr(settings, "session_store", "in_memory")
    monkeypatch.setattr(settings, "session_ttl_seconds", 60)

    provider = dependencies.create_session_provider(dependencies.create_profile_repository())

    assert provider._ttl_seconds == 60
