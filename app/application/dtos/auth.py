"""Authentication DTOs."""

from pydantic import Field, field_validator

from app.application.dtos.base import DTO


class Credentials(DTO):
    """Email and password pair for sign-up and sign-in."""

    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if "@" not in value:
            raise ValueError("Email address must contain '@'")
        return value


class AuthSession(DTO):
    """Issued session."""

    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str
