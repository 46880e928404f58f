# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip service."""

import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Session

from src.models import Trip
from src.models.enums import TripStatus
from src.schemas.trip import TripCreate, TripUpdate

REQUIRED_FIELDS = frozenset({"name", "destination", "start_date", "end_date", "status"})


class InvalidTripDatesError(ValueError):
    """Raised when an update would leave the trip ending before it starts."""


def get_trip_for_user(
    db: Session,
    trip_id: uuid.UUID,
    user_id: uuid.UUID,
) -> Trip | None:
    """Get a trip by ID that belongs to a specific user.

    Missing trips and trips owned by someone else both return None, so
    callers cannot tell the two apart.
    """
    return db.query(Trip).filter(Trip.id == trip_id, Trip.user_id == user_id).first()


def get_trips(
    db: Session,
    user_id: uuid.UUID,
    status: TripStatus | None = None,
    search: str | None = None,
    page: int = 1,
    per_page: int = 10,
) -> tuple[list[Trip], int]:
    """Get a page of a user's trips, newest start date first.

    Returns the trips and the total number matching the filters.
    """
    query = db.query(Trip).filter(Trip.user_id == user_id)
    if status:
        query = query.filter(Trip.status == status)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Trip.name.ilike(pattern),
                Trip.destination.ilike(pattern),
                Trip.description.ilike(pattern),
            )
        )

    total = query.count()
    trips = (
        query.order_by(Trip.start_date.desc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return trips, total


def create_trip(db: Session, data: TripCreate, user_id: uuid.UUID) -> Trip:
    """Create a new trip in planning status."""
    trip = Trip(
        user_id=user_id,
        name=data.name,
        destination=data.destination,
        description=data.description,
        start_date=data.start_date,
        end_date=data.end_date,
        cover_image_url=data.cover_image_url,
        status=TripStatus.PLANNING,
    )
    db.add(trip)
    db.commit()
    db.refresh(trip)
    return trip


def update_trip(db: Session, trip: Trip, data: TripUpdate) -> Trip:
    """Update an existing trip with the fields that were set."""
    update_data = data.model_dump(exclude_unset=True)

    start_date = update_data.get("start_date") or trip.start_date
    end_date = update_data.get("end_date") or trip.end_date
    if end_date <= start_date:
        raise InvalidTripDatesError("end_date must be after start_date")

    for field, value in update_data.items():
        # Required columns cannot be cleared
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(trip, field, value)

    db.commit()
    db.refresh(trip)
    return trip


def delete_trip(db: Session, trip: Trip) -> None:
    """Delete a trip and everything planned under it."""
    db.delete(trip)
    db.commit()
