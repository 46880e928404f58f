# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Transportation API endpoints."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, get_owned_trip
from src.models import Transportation, Trip
from src.models.enums import TransportType
from src.schemas.common import PaginationMeta
from src.schemas.transportation import (
    TransportationCreate,
    TransportationListResponse,
    TransportationResponse,
    TransportationUpdate,
)
from src.services import transportation_service
from src.services.transportation_service import InvalidTransportationTimesError

router = APIRouter()
logger = logging.getLogger(__name__)


def _get_transportation_or_404(
    db: Session, transportation_id: uuid.UUID, trip_id: uuid.UUID
) -> Transportation:
    transportation = transportation_service.get_transportation_for_trip(
        db, transportation_id, trip_id
    )
    if not transportation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transportation not found",
        )
    return transportation


@router.get("/{trip_id}/transportation", response_model=TransportationListResponse)
def list_transportation(
    search: str | None = None,
    type: TransportType | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> TransportationListResponse:
    """List a trip's legs of travel."""
    legs, total = transportation_service.get_transportation(
        db,
        trip.id,
        search=search,
        transport_type=type,
        page=page,
        per_page=per_page,
    )
    return TransportationListResponse(
        data=[TransportationResponse.model_validate(t) for t in legs],
        meta=PaginationMeta.build(total, page, per_page),
    )


@router.post(
    "/{trip_id}/transportation",
    response_model=TransportationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_transportation(
    data: TransportationCreate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> TransportationResponse:
    """Book a leg of travel for a trip."""
    try:
        transportation = transportation_service.create_transportation(db, trip, data)
    except InvalidTransportationTimesError as e:
        logger.warning(f"Rejected transportation for trip {trip.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return TransportationResponse.model_validate(transportation)


@router.get(
    "/{trip_id}/transportation/{transportation_id}",
    response_model=TransportationResponse,
)
def get_transportation(
    transportation_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> TransportationResponse:
    """Get a leg of travel."""
    transportation = _get_transportation_or_404(db, transportation_id, trip.id)
    return TransportationResponse.model_validate(transportation)


@router.put(
    "/{trip_id}/transportation/{transportation_id}",
    response_model=TransportationResponse,
)
def update_transportation(
    transportation_id: uuid.UUID,
    data: TransportationUpdate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> TransportationResponse:
    """Update a leg of travel."""
    transportation = _get_transportation_or_404(db, transportation_id, trip.id)
    try:
        transportation = transportation_service.update_transportation(
            db, trip, transportation, data
        )
    except InvalidTransportationTimesError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return TransportationResponse.model_validate(transportation)


@router.delete(
    "/{trip_id}/transportation/{transportation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_transportation(
    transportation_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> None:
    """Delete a leg of travel."""
    transportation = _get_transportation_or_404(db, transportation_id, trip.id)
    transportation_service.delete_transportation(db, transportation)
