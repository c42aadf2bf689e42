"""SQLAlchemy ORM models for the marketplace tables."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base

from app.domain.value_objects.vehicle import Condition, Transmission

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def aware_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes (SQLite returns them without tzinfo)."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _new_id() -> str:
    return str(uuid.uuid4())


def _enum_values(enum_class) -> list[str]:
    return [member.value for member in enum_class]


class ProfileModel(Base):
    """SQLAlchemy model for profiles table. The id is the identity id."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True)
    email = Column(Text, nullable=False)
    full_name = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)


class CarBrandModel(Base):
    """SQLAlchemy model for car_brands table."""

    __tablename__ = "car_brands"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(Text, nullable=False, unique=True)
    logo_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class CarModelModel(Base):
    """SQLAlchemy model for car_models table."""

    __tablename__ = "car_models"
    __table_args__ = (UniqueConstraint("brand_id", "name", name="uq_car_models_brand_id_name"),)

    id = Column(String(36), primary_key=True, default=_new_id)
    brand_id = Column(String(36), ForeignKey("car_brands.id"), nullable=False, index=True)
    name = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class CarListingModel(Base):
    """SQLAlchemy model for car_listings table."""

    __tablename__ = "car_listings"

    id = Column(String(36), primary_key=True, default=_new_id)
    seller_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    brand_id = Column(String(36), ForeignKey("car_brands.id"), nullable=False, index=True)
    model_id = Column(String(36), ForeignKey("car_models.id"), nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    year = Column(Integer, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    mileage = Column(Integer, nullable=False)
    condition = Column(
        Enum(Condition, name="car_condition", values_callable=_enum_values), nullable=False
    )
    transmission = Column(
        Enum(Transmission, name="transmission_type", values_callable=_enum_values),
        nullable=False,
    )
    color = Column(Text, nullable=True)
    vin = Column(Text, nullable=True)
    images = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
