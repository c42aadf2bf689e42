"""Postgres-backed profile repository adapter."""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.adapters.outbound.persistence.models import ProfileModel, aware_utc
from app.application.dtos.profile import Profile
from app.application.errors import ListingRetrievalError, ListingSubmissionError
from app.application.ports.profile_repository import ProfileRepository
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

EDITABLE_FIELDS = ("full_name", "phone")


class PostgresProfileRepository(ProfileRepository):
    """Postgres implementation of profile repository."""

    def _model_to_dto(self, model: ProfileModel) -> Profile:
        """
        Convert ProfileModel to Profile DTO.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Profile DTO
        """
        return Profile(
            id=model.id,
            email=model.email,
            full_name=model.full_name,
            phone=model.phone,
            created_at=aware_utc(model.created_at),
            updated_at=aware_utc(model.updated_at),
        )

    async def get(self, profile_id: str) -> Optional[Profile]:
        """
        Get a profile by identity id.

        Returns:
            Profile DTO, or None if not found

        Raises:
            ListingRetrievalError: If the read fails
        """
        db: Session = get_db_session()
        try:
            model = db.query(ProfileModel).filter(ProfileModel.id == profile_id).first()
            if model is None:
                return None
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting profile {profile_id}: {str(e)}")
            raise ListingRetrievalError("Could not load profile") from e
        finally:
            db.close()

    async def create(self, profile: Profile) -> None:
        """
        Provision a profile. An existing row for the same id is kept.

        Args:
            profile: Profile DTO

        Raises:
            ListingSubmissionError: If the insert fails
        """
        db: Session = get_db_session()
        try:
            if db.query(ProfileModel).filter(ProfileModel.id == profile.id).first():
                return
            now = datetime.now(timezone.utc)
            db.add(
                ProfileModel(
                    id=profile.id,
                    email=profile.email,
                    full_name=profile.full_name,
                    phone=profile.phone,
                    created_at=profile.created_at or now,
                    updated_at=now,
                )
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while creating profile {profile.id}: {str(e)}")
            raise ListingSubmissionError("Could not create profile") from e
        finally:
            db.close()

    async def update(self, profile_id: str, changes: dict[str, Any]) -> Optional[Profile]:
        """
        Update owner-editable profile fields.

        Returns:
            The updated profile, or None if not found

        Raises:
            ListingSubmissionError: If the update fails
        """
        db: Session = get_db_session()
        try:
            model = db.query(ProfileModel).filter(ProfileModel.id == profile_id).first()
            if model is None:
                return None
            for key, value in changes.items():
                if key in EDITABLE_FIELDS:
                    setattr(model, key, value)
            model.updated_at = datetime.now(timezone.utc)
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while updating profile {profile_id}: {str(e)}")
            raise ListingSubmissionError("Could not update profile") from e
        finally:
            db.close()
