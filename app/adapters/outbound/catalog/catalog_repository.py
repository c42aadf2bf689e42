"""In-memory catalog repository adapter."""

from typing import Optional

from app.adapters.outbound.catalog.seed import seed_brands, seed_models
from app.application.dtos.catalog import Brand, CarModel
from app.application.ports.catalog_repository import CatalogRepository


class InMemoryCatalogRepository(CatalogRepository):
    """In-memory implementation of the brand/model catalog."""

    def __init__(
        self, brands: Optional[list[Brand]] = None, models: Optional[list[CarModel]] = None
    ) -> None:
        """
        Initialize in-memory catalog.

        Args:
            brands: Brands to serve. Defaults to the German brand seed.
            models: Models to serve. Defaults to the German model seed.
        """
        if brands is None:
            brands = [Brand(**row) for row in seed_brands()]
        if models is None:
            models = [CarModel(**row) for row in seed_models()]
        self._brands = {brand.id: brand for brand in brands}
        self._models = {model.id: model for model in models}

    async def list_brands(self) -> list[Brand]:
        """List all brands ordered by name."""
        return sorted(self._brands.values(), key=lambda brand: brand.name)

    async def list_models(self, brand_id: str) -> list[CarModel]:
        """List one brand's models ordered by name."""
        models = [model for model in self._models.values() if model.brand_id == brand_id]
        return sorted(models, key=lambda model: model.name)

    async def get_brand(self, brand_id: str) -> Optional[Brand]:
        """Get a brand by id."""
        return self._brands.get(brand_id)
