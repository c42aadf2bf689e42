"""Catalog repository adapters."""

from app.adapters.outbound.catalog.catalog_repository import InMemoryCatalogRepository
from app.adapters.outbound.catalog.postgres_catalog_repository import PostgresCatalogRepository

__all__ = [
    "InMemoryCatalogRepository",
    "PostgresCatalogRepository",
]
