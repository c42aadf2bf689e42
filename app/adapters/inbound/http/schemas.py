"""HTTP adapter schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.application.dtos.auth import AuthSession
from app.application.dtos.listing import ListingSummary


class ListingCreatedResponse(BaseModel):
    """Created listing plus the page the client should move to."""

    listing: ListingSummary
    redirect_to: str = "/"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "listing": {
                    "id": "8a6f7c1e-3c55-4a51-9f5e-6f1f1d0f9b21",
                    "title": "2021 BMW 330i",
                    "year": 2021,
                    "price": "15999.99",
                    "mileage": 42000,
                    "condition": "used",
                    "transmission": "manual",
                    "brand_name": "BMW",
                    "model_name": "3 Series",
                },
                "redirect_to": "/",
            }
        }
    )


class SessionResponse(BaseModel):
    """Current identity, if any."""

    authenticated: bool
    user_id: Optional[str] = None
    email: Optional[str] = None


class SignedInResponse(BaseModel):
    """Issued session plus the page the client should move to."""

    session: AuthSession
    redirect_to: str = "/"
