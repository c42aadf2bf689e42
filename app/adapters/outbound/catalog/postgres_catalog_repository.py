"""Postgres-backed catalog repository adapter."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.adapters.outbound.persistence.models import CarBrandModel, CarModelModel
from app.application.dtos.catalog import Brand, CarModel
from app.application.errors import ListingRetrievalError
from app.application.ports.catalog_repository import CatalogRepository
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger


class PostgresCatalogRepository(CatalogRepository):
    """Postgres implementation of the brand/model catalog."""

    async def list_brands(self) -> list[Brand]:
        """
        List all brands ordered by name.

        Raises:
            ListingRetrievalError: If the read fails
        """
        db: Session = get_db_session()
        try:
            models = db.query(CarBrandModel).order_by(CarBrandModel.name).all()
            return [Brand(id=m.id, name=m.name, logo_url=m.logo_url) for m in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing brands: {str(e)}")
            raise ListingRetrievalError("Could not load brands") from e
        finally:
            db.close()

    async def list_models(self, brand_id: str) -> list[CarModel]:
        """
        List one brand's models ordered by name.

        Raises:
            ListingRetrievalError: If the read fails
        """
        db: Session = get_db_session()
        try:
            models = (
                db.query(CarModelModel)
                .filter(CarModelModel.brand_id == brand_id)
                .order_by(CarModelModel.name)
                .all()
            )
            return [CarModel(id=m.id, brand_id=m.brand_id, name=m.name) for m in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing models for brand {brand_id}: {str(e)}")
            raise ListingRetrievalError("Could not load models") from e
        finally:
            db.close()

    async def get_brand(self, brand_id: str) -> Optional[Brand]:
        """Get a brand by id."""
        db: Session = get_db_session()
        try:
            model = db.query(CarBrandModel).filter(CarBrandModel.id == brand_id).first()
            if model is None:
                return None
            return Brand(id=model.id, name=model.name, logo_url=model.logo_url)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting brand {brand_id}: {str(e)}")
            raise ListingRetrievalError("Could not load brand") from e
        finally:
            db.close()
