"""Brand to model cascade use case."""

from typing import Optional

from app.application.dtos.catalog import FilterOptions
from app.application.dtos.listing import ListingFilters
from app.application.ports.catalog_repository import CatalogRepository
from app.domain.entities.brand_model_selection import BrandModelSelection


class BrandModelCascade:
    """
    Drive a BrandModelSelection from the catalog.

    Shared by the listing filters and the listing create form so the
    "changing brand invalidates model" rule lives in one place.
    """

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        """
        Initialize cascade.

        Args:
            catalog_repository: Brand/model reference data
        """
        self._catalog_repository = catalog_repository

    async def select_brand(
        self, selection: BrandModelSelection, brand_id: Optional[str]
    ) -> BrandModelSelection:
        """
        Select (or clear) a brand, loading that brand's models.

        Any previously selected model is cleared.
        """
        if not brand_id:
            selection.clear_brand()
            return selection
        models = await self._catalog_repository.list_models(brand_id)
        selection.select_brand(brand_id, models)
        return selection

    async def resolve(
        self, brand_id: Optional[str], model_id: Optional[str] = None, strict: bool = False
    ) -> BrandModelSelection:
        """
        Build a selection from a brand/model pair.

        Args:
            brand_id: Selected brand, if any
            model_id: Selected model, if any
            strict: Raise instead of dropping a model outside the brand

        Returns:
            Selection in which the model, if kept, belongs to the brand

        Raises:
            ValueError: In strict mode, if the model cannot be selected
        """
        selection = await self.select_brand(BrandModelSelection(), brand_id)
        try:
            selection.select_model(model_id)
        except ValueError:
            if strict:
                raise
            selection.select_model(None)
        return selection

    async def normalize_filters(self, filters: ListingFilters) -> ListingFilters:
        """
        Drop a model filter that no longer matches the brand filter.

        Args:
            filters: Filters as submitted

        Returns:
            Filters whose model_id is None or belongs to brand_id
        """
        if filters.model_id is None:
            return filters
        selection = await self.resolve(filters.brand_id, filters.model_id)
        if selection.model_id == filters.model_id:
            return filters
        return filters.model_copy(update={"model_id": None})

    async def options(
        self, brand_id: Optional[str] = None, model_id: Optional[str] = None
    ) -> FilterOptions:
        """
        Get the brand list and the model list for the current brand.

        Returns:
            Filter options with the normalised selection
        """
        brands = await self._catalog_repository.list_brands()
        selection = await self.resolve(brand_id, model_id)
        return FilterOptions(
            brands=brands,
            models=list(selection.models),
            brand_id=selection.brand_id,
            model_id=selection.model_id,
            step=selection.step,
        )
