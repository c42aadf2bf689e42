"""Brand and model catalog repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.application.dtos.catalog import Brand, CarModel


class CatalogRepository(ABC):
    """Port interface for the read-only brand/model reference data."""

    @abstractmethod
    async def list_brands(self) -> list[Brand]:
        """
        List all brands.

        Returns:
            Brands ordered by name
        """
        pass

    @abstractmethod
    async def list_models(self, brand_id: str) -> list[CarModel]:
        """
        List the models of one brand.

        Args:
            brand_id: Brand identifier

        Returns:
            Models ordered by name (empty for an unknown brand)
        """
        pass

    @abstractmethod
    async def get_brand(self, brand_id: str) -> Optional[Brand]:
        """Get a brand by id, or None if not found."""
        pass
