"""Structured logger for observability."""

import logging
from typing import Any, Optional

# Configure root logger with JSON-like structured format
_logger = logging.getLogger("german_autos_marketplace")
_logger.setLevel(logging.INFO)

if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    request_id: str,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for a single request.

    Args:
        request_id: Request correlation identifier (UUID string)
        component: Component name (e.g., 'http', 'listings', 'auth')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "request_id": request_id,
        "component": component,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_listing_search(
    request_id: str,
    filters: dict[str, Any],
    results_count: int,
    **kwargs: Any,
) -> None:
    """
    Log listing search event.

    Args:
        request_id: Request identifier
        filters: Filters that produced a predicate
        results_count: Number of results
        **kwargs: Additional fields
    """
    log_event(
        request_id=request_id,
        component="listings",
        listing_filters=filters,
        listing_results_count=results_count,
        **kwargs,
    )


def log_listing_created(
    request_id: str,
    listing_id: str,
    seller_id: str,
    **kwargs: Any,
) -> None:
    """Log a successful listing insert."""
    log_event(
        request_id=request_id,
        component="listings",
        listing_created=listing_id,
        seller_id=seller_id,
        **kwargs,
    )


def log_auth_event(
    request_id: str,
    event: str,
    user_id: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log authentication boundary event.

    Args:
        request_id: Request identifier
        event: Event name (e.g., 'signed_in', 'signed_out', 'redirect_login')
        user_id: Identity id, when known
        **kwargs: Additional fields
    """
    fields: dict[str, Any] = {"auth_event": event}
    if user_id is not None:
        fields["user_id"] = user_id
    fields.update(kwargs)

    log_event(
        request_id=request_id,
        component="auth",
        **fields,
    )


def log_session_event(event: str, identity: Optional[Any]) -> None:
    """Log a sign-in or sign-out published by the session provider."""
    log_auth_event(
        request_id="",
        event=event,
        user_id=getattr(identity, "id", None),
    )


logger = _logger
