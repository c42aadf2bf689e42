"""SQL query shaping for listing reads."""

from sqlalchemy import and_
from sqlalchemy.orm import Query, Session

from app.adapters.outbound.persistence.models import (
    CarBrandModel,
    CarListingModel,
    CarModelModel,
    ProfileModel,
)
from app.application.dtos.listing import ListingPredicate

FILTERABLE_COLUMNS = {
    "brand_id": CarListingModel.brand_id,
    "model_id": CarListingModel.model_id,
    "price": CarListingModel.price,
    "year": CarListingModel.year,
    "mileage": CarListingModel.mileage,
    "transmission": CarListingModel.transmission,
    "condition": CarListingModel.condition,
}


def listings_query(db: Session) -> Query:
    """
    Listings joined with brand and model names, newest first.

    Rows are (CarListingModel, brand_name, model_name) tuples; equal
    created_at values fall back to id descending.
    """
    return (
        db.query(
            CarListingModel,
            CarBrandModel.name.label("brand_name"),
            CarModelModel.name.label("model_name"),
        )
        .join(CarBrandModel, CarListingModel.brand_id == CarBrandModel.id)
        .join(CarModelModel, CarListingModel.model_id == CarModelModel.id)
        .order_by(CarListingModel.created_at.desc(), CarListingModel.id.desc())
    )


def apply_predicates(query: Query, predicates: list[ListingPredicate]) -> Query:
    """
    Narrow a listing query with conjunctive predicates.

    Raises:
        ValueError: If a predicate targets a column that cannot be filtered
    """
    conds = []
    for predicate in predicates:
        column = FILTERABLE_COLUMNS.get(predicate.field)
        if column is None:
            raise ValueError(f"Cannot filter listings by {predicate.field!r}")
        conds.append(predicate.apply(column))
    if conds:
        query = query.filter(and_(*conds))
    return query


def listing_detail_query(db: Session, listing_id: str) -> Query:
    """One listing joined with brand, model and seller contact."""
    return (
        db.query(
            CarListingModel,
            CarBrandModel.name.label("brand_name"),
            CarModelModel.name.label("model_name"),
            ProfileModel.full_name.label("seller_full_name"),
            ProfileModel.email.label("seller_email"),
        )
        .join(CarBrandModel, CarListingModel.brand_id == CarBrandModel.id)
        .join(CarModelModel, CarListingModel.model_id == CarModelModel.id)
        .outerjoin(ProfileModel, CarListingModel.seller_id == ProfileModel.id)
        .filter(CarListingModel.id == listing_id)
    )
