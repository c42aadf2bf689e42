"""Brand and model reference DTOs."""

from typing import Optional

from app.application.dtos.base import DTO


class Brand(DTO):
    """Car brand DTO."""

    id: str
    name: str
    logo_url: Optional[str] = None


class CarModel(DTO):
    """Car model DTO, always scoped to a brand."""

    id: str
    brand_id: str
    name: str


class FilterOptions(DTO):
    """Brand/model options for a filter or create form."""

    brands: list[Brand]
    models: list[CarModel]
    brand_id: Optional[str] = None
    model_id: Optional[str] = None
    step: str
