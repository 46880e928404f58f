# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Itinerary API endpoints, including the activities scheduled on each day."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, get_owned_trip
from src.models import Itinerary, ItineraryActivity, Trip
from src.schemas.itinerary import (
    ItineraryActivityCreate,
    ItineraryActivityReorder,
    ItineraryActivityResponse,
    ItineraryActivityUpdate,
    ItineraryCreate,
    ItineraryResponse,
    ItineraryUpdate,
)
from src.services import activity_service, itinerary_service
from src.services.itinerary_service import (
    ActivityAlreadyScheduledError,
    DuplicateItineraryDateError,
    InvalidItineraryDateError,
    InvalidScheduleTimesError,
    UnknownScheduledActivityError,
)

router = APIRouter()


def _get_itinerary_or_404(
    db: Session, itinerary_id: uuid.UUID, trip_id: uuid.UUID
) -> Itinerary:
    itinerary = itinerary_service.get_itinerary_for_trip(db, itinerary_id, trip_id)
    if not itinerary:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Itinerary not found",
        )
    return itinerary


def _get_entry_or_404(
    db: Session, entry_id: uuid.UUID, itinerary_id: uuid.UUID
) -> ItineraryActivity:
    entry = itinerary_service.get_itinerary_activity(db, entry_id, itinerary_id)
    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Activity not found on this itinerary",
        )
    return entry


@router.get("/{trip_id}/itineraries", response_model=list[ItineraryResponse])
def list_itineraries(
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> list[ItineraryResponse]:
    """List a trip's itinerary days with their schedules."""
    return [
        ItineraryResponse.model_validate(i)
        for i in itinerary_service.get_itineraries(db, trip.id)
    ]


@router.post(
    "/{trip_id}/itineraries",
    response_model=ItineraryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_itinerary(
    data: ItineraryCreate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ItineraryResponse:
    """Plan a day of the trip."""
    try:
        itinerary = itinerary_service.create_itinerary(db, trip, data)
    except (InvalidItineraryDateError, DuplicateItineraryDateError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return ItineraryResponse.model_validate(itinerary)


@router.get("/{trip_id}/itineraries/{itinerary_id}", response_model=ItineraryResponse)
def get_itinerary(
    itinerary_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ItineraryResponse:
    """Get an itinerary day with its schedule."""
    itinerary = _get_itinerary_or_404(db, itinerary_id, trip.id)
    return ItineraryResponse.model_validate(itinerary)


@router.put("/{trip_id}/itineraries/{itinerary_id}", response_model=ItineraryResponse)
def update_itinerary(
    itinerary_id: uuid.UUID,
    data: ItineraryUpdate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ItineraryResponse:
    """Update an itinerary day."""
    itinerary = _get_itinerary_or_404(db, itinerary_id, trip.id)
    try:
        itinerary = itinerary_service.update_itinerary(db, trip, itinerary, data)
    except (InvalidItineraryDateError, DuplicateItineraryDateError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return ItineraryResponse.model_validate(itinerary)


@router.delete(
    "/{trip_id}/itineraries/{itinerary_id}", status_code=status.HTTP_204_NO_CONTENT
)
def delete_itinerary(
    itinerary_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> None:
    """Delete an itinerary day."""
    itinerary = _get_itinerary_or_404(db, itinerary_id, trip.id)
    itinerary_service.delete_itinerary(db, itinerary)


@router.get(
    "/{trip_id}/itineraries/{itinerary_id}/activities",
    response_model=list[ItineraryActivityResponse],
)
def list_itinerary_activities(
    itinerary_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> list[ItineraryActivityResponse]:
    """List the activities scheduled on a day, in order."""
    itinerary = _get_itinerary_or_404(db, itinerary_id, trip.id)
    return [ItineraryActivityResponse.model_validate(e) for e in itinerary.activities]


@router.post(
    "/{trip_id}/itineraries/{itinerary_id}/activities",
    response_model=ItineraryActivityResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_itinerary_activity(
    itinerary_id: uuid.UUID,
    data: ItineraryActivityCreate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ItineraryActivityResponse:
    """Schedule one of the trip's activities at the end of a day."""
    itinerary = _get_itinerary_or_404(db, itinerary_id, trip.id)
    activity = activity_service.get_activity_for_trip(db, data.activity_id, trip.id)
    if not activity:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Activity not found",
        )

    try:
        entry = itinerary_service.add_itinerary_activity(db, itinerary, activity, data)
    except ActivityAlreadyScheduledError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return ItineraryActivityResponse.model_validate(entry)


@router.put(
    "/{trip_id}/itineraries/{itinerary_id}/activities",
    response_model=list[ItineraryActivityResponse],
)
def reorder_itinerary_activities(
    itinerary_id: uuid.UUID,
    data: ItineraryActivityReorder,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> list[ItineraryActivityResponse]:
    """Reorder the activities scheduled on a day."""
    itinerary = _get_itinerary_or_404(db, itinerary_id, trip.id)
    try:
        entries = itinerary_service.reorder_itinerary_activities(
            db, itinerary, data.activities
        )
    except UnknownScheduledActivityError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return [ItineraryActivityResponse.model_validate(e) for e in entries]


@router.get(
    "/{trip_id}/itineraries/{itinerary_id}/activities/{entry_id}",
    response_model=ItineraryActivityResponse,
)
def get_itinerary_activity(
    itinerary_id: uuid.UUID,
    entry_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ItineraryActivityResponse:
    """Get a scheduled activity."""
    itinerary = _get_itinerary_or_404(db, itinerary_id, trip.id)
    entry = _get_entry_or_404(db, entry_id, itinerary.id)
    return ItineraryActivityResponse.model_validate(entry)


@router.put(
    "/{trip_id}/itineraries/{itinerary_id}/activities/{entry_id}",
    response_model=ItineraryActivityResponse,
)
def update_itinerary_activity(
    itinerary_id: uuid.UUID,
    entry_id: uuid.UUID,
    data: ItineraryActivityUpdate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ItineraryActivityResponse:
    """Update the times or notes of a scheduled activity."""
    itinerary = _get_itinerary_or_404(db, itinerary_id, trip.id)
    entry = _get_entry_or_404(db, entry_id, itinerary.id)
    try:
        entry = itinerary_service.update_itinerary_activity(db, entry, data)
    except InvalidScheduleTimesError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return ItineraryActivityResponse.model_validate(entry)


@router.delete(
    "/{trip_id}/itineraries/{itinerary_id}/activities/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def remove_itinerary_activity(
    itinerary_id: uuid.UUID,
    entry_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> None:
    """Take an activity off a day."""
    itinerary = _get_itinerary_or_404(db, itinerary_id, trip.id)
    entry = _get_entry_or_404(db, entry_id, itinerary.id)
    itinerary_service.remove_itinerary_activity(db, itinerary, entry)
