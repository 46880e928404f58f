# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Accommodation API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, get_owned_trip
from src.models import Accommodation, Trip
from src.models.enums import AccommodationType
from src.schemas.accommodation import (
    AccommodationCreate,
    AccommodationListResponse,
    AccommodationResponse,
    AccommodationUpdate,
)
from src.schemas.common import PaginationMeta
from src.services import accommodation_service
from src.services.accommodation_service import (
    InvalidStayDatesError,
    OverlappingStayError,
)

router = APIRouter()


def _get_accommodation_or_404(
    db: Session, accommodation_id: uuid.UUID, trip_id: uuid.UUID
) -> Accommodation:
    accommodation = accommodation_service.get_accommodation_for_trip(
        db, accommodation_id, trip_id
    )
    if not accommodation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Accommodation not found",
        )
    return accommodation


@router.get("/{trip_id}/accommodation", response_model=AccommodationListResponse)
def list_accommodation(
    search: str | None = None,
    type: AccommodationType | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> AccommodationListResponse:
    """List a trip's stays."""
    stays, total = accommodation_service.get_accommodations(
        db,
        trip.id,
        search=search,
        accommodation_type=type,
        page=page,
        per_page=per_page,
    )
    return AccommodationListResponse(
        data=[AccommodationResponse.model_validate(a) for a in stays],
        meta=PaginationMeta.build(total, page, per_page),
    )


@router.post(
    "/{trip_id}/accommodation",
    response_model=AccommodationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_accommodation(
    data: AccommodationCreate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> AccommodationResponse:
    """Book a stay for a trip."""
    try:
        accommodation = accommodation_service.create_accommodation(db, trip, data)
    except (InvalidStayDatesError, OverlappingStayError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return AccommodationResponse.model_validate(accommodation)


@router.get(
    "/{trip_id}/accommodation/{accommodation_id}",
    response_model=AccommodationResponse,
)
def get_accommodation(
    accommodation_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> AccommodationResponse:
    """Get a stay."""
    accommodation = _get_accommodation_or_404(db, accommodation_id, trip.id)
    return AccommodationResponse.model_validate(accommodation)


@router.put(
    "/{trip_id}/accommodation/{accommodation_id}",
    response_model=AccommodationResponse,
)
def update_accommodation(
    accommodation_id: uuid.UUID,
    data: AccommodationUpdate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> AccommodationResponse:
    """Update a stay."""
    accommodation = _get_accommodation_or_404(db, accommodation_id, trip.id)
    try:
        accommodation = accommodation_service.update_accommodation(
            db, trip, accommodation, data
        )
    except (InvalidStayDatesError, OverlappingStayError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return AccommodationResponse.model_validate(accommodation)


@router.delete(
    "/{trip_id}/accommodation/{accommodation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_accommodation(
    accommodation_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> None:
    """Delete a stay."""
    accommodation = _get_accommodation_or_404(db, accommodation_id, trip.id)
    accommodation_service.delete_accommodation(db, accommodation)
