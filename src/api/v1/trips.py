# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import get_current_user, get_db, get_owned_trip
from src.models import Trip, User
from src.models.enums import TripStatus
from src.schemas.common import PaginatedResponse, PaginationMeta
from src.schemas.trip import TripCreate, TripResponse, TripUpdate
from src.services import trip_service
from src.services.trip_service import InvalidTripDatesError

router = APIRouter()


@router.get("", response_model=PaginatedResponse[TripResponse])
def list_trips(
    trip_status: TripStatus | None = Query(None, alias="status"),
    search: str | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PaginatedResponse[TripResponse]:
    """List the current user's trips."""
    trips, total = trip_service.get_trips(
        db,
        current_user.id,
        status=trip_status,
        search=search,
        page=page,
        per_page=per_page,
    )
    return PaginatedResponse[TripResponse](
        data=[TripResponse.model_validate(t) for t in trips],
        meta=PaginationMeta.build(total, page, per_page),
    )


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
def create_trip(
    data: TripCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TripResponse:
    """Create a new trip."""
    trip = trip_service.create_trip(db, data, current_user.id)
    return TripResponse.model_validate(trip)


@router.get("/{trip_id}", response_model=TripResponse)
def get_trip(trip: Trip = Depends(get_owned_trip)) -> TripResponse:
    """Get a trip."""
    return TripResponse.model_validate(trip)


@router.put("/{trip_id}", response_model=TripResponse)
def update_trip(
    data: TripUpdate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> TripResponse:
    """Update a trip."""
    try:
        trip = trip_service.update_trip(db, trip, data)
    except InvalidTripDatesError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return TripResponse.model_validate(trip)


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_trip(
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> None:
    """Delete a trip and all of its planning records."""
    trip_service.delete_trip(db, trip)
