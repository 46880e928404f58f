# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Activity API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, get_owned_trip
from src.models import Activity, Trip
from src.models.enums import ActivityCategory
from src.schemas.activity import (
    ActivityCreate,
    ActivityListResponse,
    ActivityResponse,
    ActivityUpdate,
)
from src.schemas.common import PaginationMeta
from src.services import activity_service

router = APIRouter()


def _get_activity_or_404(
    db: Session, activity_id: uuid.UUID, trip_id: uuid.UUID
) -> Activity:
    activity = activity_service.get_activity_for_trip(db, activity_id, trip_id)
    if not activity:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Activity not found",
        )
    return activity


@router.get("/{trip_id}/activities", response_model=ActivityListResponse)
def list_activities(
    search: str | None = None,
    category: ActivityCategory | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ActivityListResponse:
    """List a trip's activities."""
    activities, total = activity_service.get_activities(
        db,
        trip.id,
        search=search,
        category=category,
        page=page,
        per_page=per_page,
    )
    return ActivityListResponse(
        data=[ActivityResponse.model_validate(a) for a in activities],
        meta=PaginationMeta.build(total, page, per_page),
    )


@router.post(
    "/{trip_id}/activities",
    response_model=ActivityResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_activity(
    data: ActivityCreate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ActivityResponse:
    """Create an activity for a trip."""
    activity = activity_service.create_activity(db, trip.id, data)
    return ActivityResponse.model_validate(activity)


@router.get("/{trip_id}/activities/{activity_id}", response_model=ActivityResponse)
def get_activity(
    activity_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ActivityResponse:
    """Get an activity."""
    activity = _get_activity_or_404(db, activity_id, trip.id)
    return ActivityResponse.model_validate(activity)


@router.put("/{trip_id}/activities/{activity_id}", response_model=ActivityResponse)
def update_activity(
    activity_id: uuid.UUID,
    data: ActivityUpdate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ActivityResponse:
    """Update an activity."""
    activity = _get_activity_or_404(db, activity_id, trip.id)
    activity = activity_service.update_activity(db, activity, data)
    return ActivityResponse.model_validate(activity)


@router.delete(
    "/{trip_id}/activities/{activity_id}", status_code=status.HTTP_204_NO_CONTENT
)
def delete_activity(
    activity_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> None:
    """Delete an activity."""
    activity = _get_activity_or_404(db, activity_id, trip.id)
    activity_service.delete_activity(db, activity)
