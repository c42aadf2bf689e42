"""Application errors."""

from typing import Optional


class MarketplaceError(Exception):
    """Base class for errors raised by marketplace use cases."""


class NotAuthenticatedError(MarketplaceError):
    """No identity is attached to the request; the caller must sign in."""

    redirect_to = "/login"


class AuthenticationError(MarketplaceError):
    """Credentials were rejected by the identity provider."""


class PermissionDeniedError(MarketplaceError):
    """The identity does not own the row it tries to change."""


class ListingValidationError(MarketplaceError):
    """A listing form failed validation before any write was issued."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ListingRetrievalError(MarketplaceError):
    """A read request against the listing store failed."""


class ListingSubmissionError(MarketplaceError):
    """A write request against the marketplace store failed."""
