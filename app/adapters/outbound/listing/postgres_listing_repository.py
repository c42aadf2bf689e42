"""Postgres-backed listing repository adapter."""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.adapters.outbound.listing.query_builder import (
    apply_predicates,
    listing_detail_query,
    listings_query,
)
from app.adapters.outbound.persistence.models import CarListingModel, aware_utc
from app.application.dtos.listing import (
    ListingDetail,
    ListingPredicate,
    ListingSummary,
    NewListing,
)
from app.application.errors import ListingRetrievalError, ListingSubmissionError
from app.application.ports.listing_repository import ListingRepository
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

EDITABLE_FIELDS = (
    "title",
    "description",
    "year",
    "price",
    "mileage",
    "condition",
    "transmission",
    "color",
    "vin",
    "images",
)


class PostgresListingRepository(ListingRepository):
    """Postgres implementation of listing repository."""

    def _model_fields(self, model: CarListingModel) -> dict[str, Any]:
        """
        Extract listing columns from a CarListingModel.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Column values keyed by DTO field name
        """
        return {
            "id": model.id,
            "seller_id": model.seller_id,
            "brand_id": model.brand_id,
            "model_id": model.model_id,
            "title": model.title,
            "description": model.description,
            "year": model.year,
            "price": model.price,
            "mileage": model.mileage,
            "condition": model.condition,
            "transmission": model.transmission,
            "color": model.color,
            "vin": model.vin,
            "images": list(model.images or []),
            "created_at": aware_utc(model.created_at),
            "updated_at": aware_utc(model.updated_at),
        }

    def _row_to_summary(self, row) -> ListingSummary:
        model, brand_name, model_name = row
        return ListingSummary(
            **self._model_fields(model), brand_name=brand_name, model_name=model_name
        )

    def _fetch_summary(self, db: Session, listing_id: str) -> Optional[ListingSummary]:
        row = listings_query(db).filter(CarListingModel.id == listing_id).first()
        if row is None:
            return None
        return self._row_to_summary(row)

    async def search(self, predicates: list[ListingPredicate]) -> list[ListingSummary]:
        """
        Search listings matching every predicate, newest first.

        Raises:
            ListingRetrievalError: If the read fails
        """
        db: Session = get_db_session()
        try:
            rows = apply_predicates(listings_query(db), predicates).all()
            return [self._row_to_summary(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Database error while searching listings: {str(e)}")
            raise ListingRetrievalError("Could not load listings") from e
        finally:
            db.close()

    async def get(self, listing_id: str) -> Optional[ListingDetail]:
        """
        Get one listing with brand, model and seller contact.

        Returns:
            Listing detail, or None if not found

        Raises:
            ListingRetrievalError: If the read fails
        """
        db: Session = get_db_session()
        try:
            row = listing_detail_query(db, listing_id).first()
            if row is None:
                return None
            model, brand_name, model_name, seller_full_name, seller_email = row
            return ListingDetail(
                **self._model_fields(model),
                brand_name=brand_name,
                model_name=model_name,
                seller_full_name=seller_full_name,
                seller_email=seller_email,
            )
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting listing {listing_id}: {str(e)}")
            raise ListingRetrievalError("Could not load listing") from e
        finally:
            db.close()

    async def add(self, listing: NewListing) -> ListingSummary:
        """
        Insert one listing row owned by listing.seller_id.

        Raises:
            ListingSubmissionError: If the insert fails
        """
        form = listing.form
        now = datetime.now(timezone.utc)
        db: Session = get_db_session()
        try:
            model = CarListingModel(
                seller_id=listing.seller_id,
                brand_id=form.brand_id,
                model_id=form.model_id,
                title=form.title,
                description=form.description,
                year=form.year,
                price=form.price,
                mileage=form.mileage,
                condition=form.condition,
                transmission=form.transmission,
                color=form.color,
                vin=form.vin,
                images=list(form.images),
                created_at=now,
                updated_at=now,
            )
            db.add(model)
            db.commit()
            summary = self._fetch_summary(db, model.id)
            if summary is None:
                raise ListingSubmissionError("Listing was not stored")
            return summary
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Database error while creating listing for seller {listing.seller_id}: {str(e)}"
            )
            raise ListingSubmissionError("Could not create listing") from e
        finally:
            db.close()

    async def update(self, listing_id: str, changes: dict[str, Any]) -> Optional[ListingSummary]:
        """
        Apply owner changes to one listing.

        Returns:
            The updated listing, or None if not found

        Raises:
            ListingSubmissionError: If the update fails
        """
        db: Session = get_db_session()
        try:
            model = db.query(CarListingModel).filter(CarListingModel.id == listing_id).first()
            if model is None:
                return None
            for key, value in changes.items():
                if key in EDITABLE_FIELDS:
                    setattr(model, key, value)
            model.updated_at = datetime.now(timezone.utc)
            db.commit()
            return self._fetch_summary(db, listing_id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while updating listing {listing_id}: {str(e)}")
            raise ListingSubmissionError("Could not update listing") from e
        finally:
            db.close()

    async def delete(self, listing_id: str) -> bool:
        """
        Delete one listing.

        Raises:
            ListingSubmissionError: If the delete fails
        """
        db: Session = get_db_session()
        try:
            deleted = (
                db.query(CarListingModel).filter(CarListingModel.id == listing_id).delete()
            )
            db.commit()
            return deleted > 0
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting listing {listing_id}: {str(e)}")
            raise ListingSubmissionError("Could not delete listing") from e
        finally:
            db.close()
