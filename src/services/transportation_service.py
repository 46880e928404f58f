# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Transportation service."""

import uuid
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from src.models import Transportation, Trip
from src.models.enums import TransportType
from src.schemas.transportation import TransportationCreate, TransportationUpdate

REQUIRED_FIELDS = frozenset(
    {
        "type",
        "departure_location",
        "arrival_location",
        "departure_datetime",
        "arrival_datetime",
        "currency",
    }
)


class InvalidTransportationTimesError(ValueError):
    """Raised when a leg arrives before it departs or falls outside the trip."""


def _check_times(trip: Trip, departure: datetime, arrival: datetime) -> None:
    if arrival <= departure:
        raise InvalidTransportationTimesError(
            "arrival_datetime must be after departure_datetime"
        )
    if departure < trip.start_date or arrival > trip.end_date:
        raise InvalidTransportationTimesError(
            "Transportation dates must be within the trip dates"
        )


def get_transportation(
    db: Session,
    trip_id: uuid.UUID,
    search: str | None = None,
    transport_type: TransportType | None = None,
    page: int = 1,
    per_page: int = 20,
) -> tuple[list[Transportation], int]:
    """Get a page of a trip's legs of travel, earliest departure first."""
    query = db.query(Transportation).filter(Transportation.trip_id == trip_id)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Transportation.company.ilike(pattern),
                Transportation.departure_location.ilike(pattern),
                Transportation.arrival_location.ilike(pattern),
                Transportation.confirmation_code.ilike(pattern),
                Transportation.notes.ilike(pattern),
            )
        )
    if transport_type:
        query = query.filter(Transportation.type == transport_type)

    total = query.count()
    legs = (
        query.order_by(Transportation.departure_datetime.asc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return legs, total


def get_transportation_for_trip(
    db: Session,
    transportation_id: uuid.UUID,
    trip_id: uuid.UUID,
) -> Transportation | None:
    """Get a leg of travel that belongs to a specific trip."""
    return (
        db.query(Transportation)
        .filter(
            Transportation.id == transportation_id,
            Transportation.trip_id == trip_id,
        )
        .first()
    )


def create_transportation(
    db: Session, trip: Trip, data: TransportationCreate
) -> Transportation:
    """Book a leg of travel. It must depart and arrive within the trip."""
    _check_times(trip, data.departure_datetime, data.arrival_datetime)

    transportation = Transportation(trip_id=trip.id, **data.model_dump())
    db.add(transportation)
    db.commit()
    db.refresh(transportation)
    return transportation


def update_transportation(
    db: Session,
    trip: Trip,
    transportation: Transportation,
    data: TransportationUpdate,
) -> Transportation:
    """Update a leg of travel with the fields that were set."""
    update_data = data.model_dump(exclude_unset=True)

    _check_times(
        trip,
        update_data.get("departure_datetime") or transportation.departure_datetime,
        update_data.get("arrival_datetime") or transportation.arrival_datetime,
    )

    for field, value in update_data.items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(transportation, field, value)

    db.commit()
    db.refresh(transportation)
    return transportation


def delete_transportation(db: Session, transportation: Transportation) -> None:
    """Delete a leg of travel."""
    db.delete(transportation)
    db.commit()
