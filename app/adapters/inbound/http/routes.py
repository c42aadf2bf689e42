"""HTTP routes."""

from decimal import Decimal
from typing import Optional
from uuid import uuid4

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Response, status

from app.adapters.inbound.http.schemas import (
    ListingCreatedResponse,
    SessionResponse,
    SignedInResponse,
)
from app.application.dtos.auth import Credentials
from app.application.dtos.catalog import Brand, CarModel, FilterOptions
from app.application.dtos.listing import (
    ListingCreateForm,
    ListingDetail,
    ListingFilters,
    ListingSearchResult,
    ListingSummary,
    ListingUpdateForm,
)
from app.application.dtos.profile import Profile, ProfileUpdate
from app.application.errors import (
    AuthenticationError,
    ListingRetrievalError,
    ListingSubmissionError,
    ListingValidationError,
    NotAuthenticatedError,
    PermissionDeniedError,
)
from app.domain.entities.session_state import Identity
from app.domain.value_objects.vehicle import Condition, Transmission
from app.infrastructure.logging.logger import log_auth_event, log_event
from app.infrastructure.wiring.container import container

router = APIRouter()


def _bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """Extract the bearer token from the Authorization header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def current_identity(token: Optional[str] = Depends(_bearer_token)) -> Optional[Identity]:
    """Resolve the current identity (None when signed out)."""
    return await container.session_provider.current(token)


def _not_authenticated(request_id: str, err: NotAuthenticatedError) -> HTTPException:
    log_auth_event(request_id, "redirect_login", reason=str(err))
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"message": str(err), "redirect_to": err.redirect_to},
    )


def _retrieval_failed(request_id: str, err: ListingRetrievalError) -> HTTPException:
    log_event(request_id, "http", error=str(err))
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Could not retrieve data, please try again",
    )


def listing_filters(
    brand_id: Optional[str] = None,
    model_id: Optional[str] = None,
    min_price: Optional[Decimal] = Query(None, ge=0),
    max_price: Optional[Decimal] = Query(None, ge=0),
    min_year: Optional[int] = None,
    max_year: Optional[int] = None,
    min_mileage: Optional[int] = Query(None, ge=0),
    max_mileage: Optional[int] = Query(None, ge=0),
    transmission: Optional[Transmission] = None,
    condition: Optional[Condition] = None,
) -> ListingFilters:
    """Build listing filters from query parameters."""
    return ListingFilters(
        brand_id=brand_id,
        model_id=model_id,
        min_price=min_price,
        max_price=max_price,
        min_year=min_year,
        max_year=max_year,
        min_mileage=min_mileage,
        max_mileage=max_mileage,
        transmission=transmission,
        condition=condition,
    )


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.get("/brands", response_model=list[Brand])
async def list_brands() -> list[Brand]:
    """List all brands ordered by name."""
    request_id = str(uuid4())
    try:
        return await container.catalog_repository.list_brands()
    except ListingRetrievalError as err:
        raise _retrieval_failed(request_id, err) from err


@router.get("/brands/{brand_id}/models", response_model=list[CarModel])
async def list_models(brand_id: str) -> list[CarModel]:
    """List a brand's models ordered by name."""
    request_id = str(uuid4())
    try:
        return await container.catalog_repository.list_models(brand_id)
    except ListingRetrievalError as err:
        raise _retrieval_failed(request_id, err) from err


@router.get("/listings/filter-options", response_model=FilterOptions)
async def filter_options(
    brand_id: Optional[str] = None, model_id: Optional[str] = None
) -> FilterOptions:
    """
    Get brands, the models of the selected brand and the normalised selection.

    A model that does not belong to the selected brand is dropped.
    """
    request_id = str(uuid4())
    try:
        return await container.cascade.options(brand_id or None, model_id or None)
    except ListingRetrievalError as err:
        raise _retrieval_failed(request_id, err) from err


@router.get("/listings", response_model=ListingSearchResult)
async def list_listings(filters: ListingFilters = Depends(listing_filters)) -> ListingSearchResult:
    """
    Listing index, newest first, narrowed by the optional filters.

    Returns:
        Search result (an empty list is a valid result)
    """
    request_id = str(uuid4())
    try:
        return await container.browse_listings.execute(filters, request_id=request_id)
    except ListingRetrievalError as err:
        raise _retrieval_failed(request_id, err) from err


@router.post(
    "/listings",
    status_code=status.HTTP_201_CREATED,
    response_model=ListingCreatedResponse,
)
async def create_listing(
    form: ListingCreateForm,
    identity: Optional[Identity] = Depends(current_identity),
) -> ListingCreatedResponse:
    """
    Create a listing owned by the signed-in seller.

    Raises:
        HTTPException: 401 with a login redirect when signed out, 422 on
            validation failure, 500 when the insert fails
    """
    request_id = str(uuid4())
    try:
        listing = await container.create_listing.execute(identity, form, request_id=request_id)
    except NotAuthenticatedError as err:
        raise _not_authenticated(request_id, err) from err
    except ListingValidationError as err:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(err), "field": err.field},
        ) from err
    except (ListingSubmissionError, ListingRetrievalError) as err:
        log_event(request_id, "http", error=str(err))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not create listing, please try again",
        ) from err

    return ListingCreatedResponse(listing=listing, redirect_to="/")


@router.get("/listings/{listing_id}", response_model=ListingDetail)
async def get_listing(listing_id: str) -> ListingDetail:
    """
    Listing detail with seller contact.

    Raises:
        HTTPException: 404 when no listing has that id, 503 on read failure
    """
    request_id = str(uuid4())
    try:
        listing = await container.get_listing_details.execute(listing_id)
    except ListingRetrievalError as err:
        raise _retrieval_failed(request_id, err) from err

    if listing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Listing not found")
    return listing


@router.patch("/listings/{listing_id}", response_model=ListingSummary)
async def update_listing(
    listing_id: str,
    form: ListingUpdateForm,
    identity: Optional[Identity] = Depends(current_identity),
) -> ListingSummary:
    """Update a listing the signed-in seller owns."""
    request_id = str(uuid4())
    try:
        listing = await container.manage_listing.update(identity, listing_id, form)
    except NotAuthenticatedError as err:
        raise _not_authenticated(request_id, err) from err
    except PermissionDeniedError as err:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(err)) from err
    except ListingValidationError as err:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(err), "field": err.field},
        ) from err
    except ListingRetrievalError as err:
        raise _retrieval_failed(request_id, err) from err
    except ListingSubmissionError as err:
        log_event(request_id, "http", error=str(err))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not update listing, please try again",
        ) from err

    if listing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Listing not found")
    return listing


@router.delete("/listings/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_listing(
    listing_id: str,
    identity: Optional[Identity] = Depends(current_identity),
) -> Response:
    """Delete a listing the signed-in seller owns."""
    request_id = str(uuid4())
    try:
        deleted = await container.manage_listing.delete(identity, listing_id)
    except NotAuthenticatedError as err:
        raise _not_authenticated(request_id, err) from err
    except PermissionDeniedError as err:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(err)) from err
    except ListingRetrievalError as err:
        raise _retrieval_failed(request_id, err) from err
    except ListingSubmissionError as err:
        log_event(request_id, "http", error=str(err))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not delete listing, please try again",
        ) from err

    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Listing not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/profile", response_model=Profile)
async def get_profile(identity: Optional[Identity] = Depends(current_identity)) -> Profile:
    """Profile of the signed-in identity."""
    request_id = str(uuid4())
    try:
        profile = await container.manage_profile.get(identity)
    except NotAuthenticatedError as err:
        raise _not_authenticated(request_id, err) from err
    except ListingRetrievalError as err:
        raise _retrieval_failed(request_id, err) from err

    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile


@router.patch("/profile", response_model=Profile)
async def update_profile(
    form: ProfileUpdate,
    identity: Optional[Identity] = Depends(current_identity),
) -> Profile:
    """Update the signed-in identity's own profile."""
    request_id = str(uuid4())
    try:
        profile = await container.manage_profile.update(identity, form)
    except NotAuthenticatedError as err:
        raise _not_authenticated(request_id, err) from err
    except ListingRetrievalError as err:
        raise _retrieval_failed(request_id, err) from err
    except ListingSubmissionError as err:
        log_event(request_id, "http", error=str(err))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not update profile, please try again",
        ) from err

    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile


@router.post(
    "/auth/sign-up",
    status_code=status.HTTP_201_CREATED,
    response_model=SignedInResponse,
)
async def sign_up(credentials: Credentials) -> SignedInResponse:
    """Register an identity, provision its profile and sign it in."""
    request_id = str(uuid4())
    try:
        session = await container.session_provider.sign_up(credentials)
    except AuthenticationError as err:
        log_auth_event(request_id, "sign_up_rejected", reason=str(err))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err)) from err
    except ListingSubmissionError as err:
        log_event(request_id, "http", error=str(err))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not create account, please try again",
        ) from err

    log_auth_event(request_id, "signed_up", user_id=session.user_id)
    return SignedInResponse(session=session, redirect_to="/")


@router.post("/auth/sign-in", response_model=SignedInResponse)
async def sign_in(credentials: Credentials) -> SignedInResponse:
    """Exchange credentials for a bearer token."""
    request_id = str(uuid4())
    try:
        session = await container.session_provider.sign_in(credentials)
    except AuthenticationError as err:
        log_auth_event(request_id, "sign_in_rejected")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(err)) from err

    log_auth_event(request_id, "signed_in", user_id=session.user_id)
    return SignedInResponse(session=session, redirect_to="/")


@router.post("/auth/sign-out")
async def sign_out(token: Optional[str] = Depends(_bearer_token)) -> dict[str, str]:
    """End the current session and send the client home."""
    request_id = str(uuid4())
    await container.session_provider.sign_out(token)
    log_auth_event(request_id, "signed_out")
    return {"status": "signed_out", "redirect_to": "/"}


@router.get("/auth/session", response_model=SessionResponse)
async def get_session(identity: Optional[Identity] = Depends(current_identity)) -> SessionResponse:
    """Report whether the request carries a live session."""
    if identity is None:
        return SessionResponse(authenticated=False)
    return SessionResponse(authenticated=True, user_id=identity.id, email=identity.email)
