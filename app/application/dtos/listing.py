"""Listing DTOs."""

import operator
from datetime import datetime
from decimal import Decimal
from typing import Any, Literal, Optional, Union

from pydantic import ConfigDict, Field, field_validator

from app.application.dtos.base import DTO
from app.domain.value_objects.model_year import ModelYear
from app.domain.value_objects.money import Money
from app.domain.value_objects.vehicle import Condition, Transmission


def split_image_urls(value: Union[str, list[str], None]) -> list[str]:
    """
    Split a comma-separated image field into an ordered URL list.

    Entries are trimmed and empty entries dropped, so an empty or
    separator-only value yields an empty list.
    """
    if value is None:
        return []
    parts = value.split(",") if isinstance(value, str) else value
    return [str(part).strip() for part in parts if str(part).strip()]


# (filter field, listing column, operator)
FILTER_PREDICATES = (
    ("brand_id", "brand_id", "eq"),
    ("model_id", "model_id", "eq"),
    ("min_price", "price", "gte"),
    ("max_price", "price", "lte"),
    ("min_year", "year", "gte"),
    ("max_year", "year", "lte"),
    ("min_mileage", "mileage", "gte"),
    ("max_mileage", "mileage", "lte"),
    ("transmission", "transmission", "eq"),
    ("condition", "condition", "eq"),
)

OPERATORS = {
    "eq": operator.eq,
    "gte": operator.ge,
    "lte": operator.le,
}


class ListingPredicate(DTO):
    """A single filter predicate against a listing column."""

    field: str
    operator: Literal["eq", "gte", "lte"]
    value: Any

    def apply(self, left: Any) -> Any:
        """
        Compare a column (or a plain value) against this predicate.

        Works for SQLAlchemy columns, producing a SQL expression, and for
        Python values, producing a bool.
        """
        return OPERATORS[self.operator](left, self.value)


class ListingFilters(DTO):
    """Sparse set of optional listing filters."""

    model_config = ConfigDict(extra="forbid")

    brand_id: Optional[str] = None
    model_id: Optional[str] = None
    min_price: Optional[Decimal] = Field(default=None, ge=0)
    max_price: Optional[Decimal] = Field(default=None, ge=0)
    min_year: Optional[int] = None
    max_year: Optional[int] = None
    min_mileage: Optional[int] = Field(default=None, ge=0)
    max_mileage: Optional[int] = Field(default=None, ge=0)
    transmission: Optional[Transmission] = None
    condition: Optional[Condition] = None

    @field_validator("brand_id", "model_id", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def predicates(self) -> list[ListingPredicate]:
        """
        Build the conjunctive predicate list for present fields only.

        A field set to None adds nothing; 0 is a present value.

        Returns:
            Predicates in a fixed order
        """
        predicates = []
        for name, column, operator in FILTER_PREDICATES:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, (Transmission, Condition)):
                value = value.value
            predicates.append(ListingPredicate(field=column, operator=operator, value=value))
        return predicates

    def active(self) -> dict[str, Any]:
        """Get the present filters as a plain dictionary (for logging)."""
        return self.model_dump(exclude_none=True, mode="json")


class ListingSummary(DTO):
    """Listing row joined with its brand and model names."""

    id: str
    seller_id: str
    brand_id: str
    model_id: str
    title: str
    description: Optional[str] = None
    year: int
    price: Decimal
    mileage: int
    condition: Condition
    transmission: Transmission
    color: Optional[str] = None
    vin: Optional[str] = None
    images: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    brand_name: str
    model_name: str


class ListingDetail(ListingSummary):
    """Listing joined with brand, model and seller contact."""

    seller_full_name: Optional[str] = None
    seller_email: Optional[str] = None


class ListingSearchResult(DTO):
    """Ordered listing search result."""

    sequence: int
    count: int
    listings: list[ListingSummary]


class ListingCreateForm(DTO):
    """
    Typed listing creation form validated at the boundary.

    The seller is never part of the form; it is derived from the
    authenticated identity, so unknown fields are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=200)
    brand_id: str = Field(..., min_length=1)
    model_id: str = Field(..., min_length=1)
    year: int
    price: Decimal
    mileage: int = Field(..., ge=0)
    condition: Condition
    transmission: Transmission
    color: Optional[str] = None
    vin: Optional[str] = Field(default=None, max_length=17)
    description: Optional[str] = None
    images: list[str] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("year", mode="after")
    @classmethod
    def check_year(cls, value: int) -> int:
        return ModelYear(value).year

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, value: Any) -> Decimal:
        return Money.parse(value).amount

    @field_validator("images", mode="before")
    @classmethod
    def parse_images(cls, value: Any) -> list[str]:
        return split_image_urls(value)

    @field_validator("color", "vin", "description", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class ListingUpdateForm(DTO):
    """Owner-editable listing fields; brand and model stay fixed."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    year: Optional[int] = None
    price: Optional[Decimal] = None
    mileage: Optional[int] = Field(default=None, ge=0)
    condition: Optional[Condition] = None
    transmission: Optional[Transmission] = None
    color: Optional[str] = None
    vin: Optional[str] = Field(default=None, max_length=17)
    images: Optional[list[str]] = None

    @field_validator("year", mode="after")
    @classmethod
    def check_year(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return None
        return ModelYear(value).year

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, value: Any) -> Optional[Decimal]:
        if value is None:
            return None
        return Money.parse(value).amount

    @field_validator("images", mode="before")
    @classmethod
    def parse_images(cls, value: Any) -> Optional[list[str]]:
        if value is None:
            return None
        return split_image_urls(value)

    def changes(self) -> dict[str, Any]:
        """Get only the fields the owner actually sent."""
        return self.model_dump(exclude_unset=True)


class NewListing(DTO):
    """Validated insert request for one listing row."""

    seller_id: str
    form: ListingCreateForm
