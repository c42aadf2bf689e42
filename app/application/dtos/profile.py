"""Profile DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from app.application.dtos.base import DTO


class Profile(DTO):
    """Seller profile DTO. The id equals the identity id."""

    id: str
    email: str
    full_name: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileUpdate(DTO):
    """Owner-editable profile fields."""

    model_config = ConfigDict(extra="forbid")

    full_name: Optional[str] = None
    phone: Optional[str] = None
