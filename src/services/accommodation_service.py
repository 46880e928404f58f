# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Accommodation service.

A trip has at most one place to stay per night: stays are half-open
intervals from check-in to check-out, so checking out of one place and into
the next on the same day is allowed.
"""

import uuid
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from src.models import Accommodation, Trip
from src.models.enums import AccommodationType
from src.schemas.accommodation import AccommodationCreate, AccommodationUpdate

REQUIRED_FIELDS = frozenset(
    {"name", "type", "address", "check_in_date", "check_out_date", "currency"}
)


class InvalidStayDatesError(ValueError):
    """Raised when a stay ends before it starts or falls outside the trip."""


class OverlappingStayError(ValueError):
    """Raised when a stay overlaps another booking of the same trip."""


def _check_stay(
    db: Session,
    trip: Trip,
    check_in: datetime,
    check_out: datetime,
    exclude_id: uuid.UUID | None = None,
) -> None:
    if check_out <= check_in:
        raise InvalidStayDatesError("check_out_date must be after check_in_date")
    if check_in < trip.start_date or check_out > trip.end_date:
        raise InvalidStayDatesError("Accommodation dates must be within the trip dates")

    query = db.query(Accommodation).filter(
        Accommodation.trip_id == trip.id,
        Accommodation.check_in_date < check_out,
        Accommodation.check_out_date > check_in,
    )
    if exclude_id:
        query = query.filter(Accommodation.id != exclude_id)
    if query.first():
        raise OverlappingStayError("Accommodation is already booked for these dates")


def get_accommodations(
    db: Session,
    trip_id: uuid.UUID,
    search: str | None = None,
    accommodation_type: AccommodationType | None = None,
    page: int = 1,
    per_page: int = 20,
) -> tuple[list[Accommodation], int]:
    """Get a page of a trip's stays, earliest check-in first."""
    query = db.query(Accommodation).filter(Accommodation.trip_id == trip_id)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Accommodation.name.ilike(pattern),
                Accommodation.address.ilike(pattern),
                Accommodation.confirmation_code.ilike(pattern),
                Accommodation.notes.ilike(pattern),
            )
        )
    if accommodation_type:
        query = query.filter(Accommodation.type == accommodation_type)

    total = query.count()
    stays = (
        query.order_by(Accommodation.check_in_date.asc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return stays, total


def get_accommodation_for_trip(
    db: Session,
    accommodation_id: uuid.UUID,
    trip_id: uuid.UUID,
) -> Accommodation | None:
    """Get a stay that belongs to a specific trip."""
    return (
        db.query(Accommodation)
        .filter(Accommodation.id == accommodation_id, Accommodation.trip_id == trip_id)
        .first()
    )


def create_accommodation(
    db: Session, trip: Trip, data: AccommodationCreate
) -> Accommodation:
    """Book a stay within the trip that overlaps no other stay."""
    _check_stay(db, trip, data.check_in_date, data.check_out_date)

    accommodation = Accommodation(trip_id=trip.id, **data.model_dump())
    db.add(accommodation)
    db.commit()
    db.refresh(accommodation)
    return accommodation


def update_accommodation(
    db: Session,
    trip: Trip,
    accommodation: Accommodation,
    data: AccommodationUpdate,
) -> Accommodation:
    """Update a stay with the fields that were set.

    The merged dates are checked again, ignoring the stay itself.
    """
    update_data = data.model_dump(exclude_unset=True)

    check_in = update_data.get("check_in_date") or accommodation.check_in_date
    check_out = update_data.get("check_out_date") or accommodation.check_out_date
    if (check_in, check_out) != (
        accommodation.check_in_date,
        accommodation.check_out_date,
    ):
        _check_stay(db, trip, check_in, check_out, exclude_id=accommodation.id)

    for field, value in update_data.items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(accommodation, field, value)

    db.commit()
    db.refresh(accommodation)
    return accommodation


def delete_accommodation(db: Session, accommodation: Accommodation) -> None:
    """Delete a stay."""
    db.delete(accommodation)
    db.commit()
