# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip photo API endpoints."""

import datetime
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, get_owned_trip
from src.models import Photo, Trip
from src.schemas.common import PaginationMeta
from src.schemas.photo import (
    PhotoCreate,
    PhotoListResponse,
    PhotoResponse,
    PhotoUpdate,
)
from src.services import activity_service, itinerary_service, photo_service

router = APIRouter()


def _get_photo_or_404(db: Session, photo_id: uuid.UUID, trip_id: uuid.UUID) -> Photo:
    photo = photo_service.get_photo_for_trip(db, photo_id, trip_id)
    if not photo:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Photo not found",
        )
    return photo


def _check_links(
    db: Session,
    trip_id: uuid.UUID,
    itinerary_id: uuid.UUID | None,
    activity_id: uuid.UUID | None,
) -> None:
    """Ensure a photo only links to an itinerary day and activity of its trip."""
    if itinerary_id and not itinerary_service.get_itinerary_for_trip(
        db, itinerary_id, trip_id
    ):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Itinerary not found",
        )
    if activity_id and not activity_service.get_activity_for_trip(
        db, activity_id, trip_id
    ):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Activity not found",
        )


@router.get("/{trip_id}/photos", response_model=PhotoListResponse)
def list_photos(
    itinerary_id: uuid.UUID | None = None,
    activity_id: uuid.UUID | None = None,
    date: datetime.date | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> PhotoListResponse:
    """List a trip's photos, optionally for one day, itinerary or activity."""
    photos, total = photo_service.get_photos(
        db,
        trip.id,
        itinerary_id=itinerary_id,
        activity_id=activity_id,
        day=date,
        page=page,
        per_page=per_page,
    )
    return PhotoListResponse(
        data=[PhotoResponse.model_validate(p) for p in photos],
        meta=PaginationMeta.build(total, page, per_page),
        statistics=photo_service.get_photo_statistics(db, trip.id),
    )


@router.post(
    "/{trip_id}/photos",
    response_model=PhotoResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_photo(
    data: PhotoCreate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> PhotoResponse:
    """Add an uploaded photo to a trip."""
    _check_links(db, trip.id, data.itinerary_id, data.activity_id)
    photo = photo_service.create_photo(db, trip.id, data)
    return PhotoResponse.model_validate(photo)


@router.get("/{trip_id}/photos/{photo_id}", response_model=PhotoResponse)
def get_photo(
    photo_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> PhotoResponse:
    """Get a photo."""
    photo = _get_photo_or_404(db, photo_id, trip.id)
    return PhotoResponse.model_validate(photo)


@router.put("/{trip_id}/photos/{photo_id}", response_model=PhotoResponse)
def update_photo(
    photo_id: uuid.UUID,
    data: PhotoUpdate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> PhotoResponse:
    """Update a photo's caption, capture details or links."""
    photo = _get_photo_or_404(db, photo_id, trip.id)
    _check_links(db, trip.id, data.itinerary_id, data.activity_id)
    photo = photo_service.update_photo(db, photo, data)
    return PhotoResponse.model_validate(photo)


@router.delete("/{trip_id}/photos/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_photo(
    photo_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> None:
    """Delete a photo."""
    photo = _get_photo_or_404(db, photo_id, trip.id)
    photo_service.delete_photo(db, photo)
