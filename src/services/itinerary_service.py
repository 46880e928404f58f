# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Itinerary service.

An itinerary is one calendar day of a trip; each day holds an ordered list of
scheduled activities. Orders are 1-based and renumbered without gaps when an
activity is taken off the day.
"""

import datetime
import logging
import uuid

from sqlalchemy import func
from sqlalchemy.orm import Session

from src.models import Activity, Itinerary, ItineraryActivity, Photo, Trip
from src.schemas.itinerary import (
    ItineraryActivityCreate,
    ItineraryActivityPosition,
    ItineraryActivityUpdate,
    ItineraryCreate,
    ItineraryUpdate,
)

logger = logging.getLogger(__name__)


class InvalidItineraryDateError(ValueError):
    """Raised when an itinerary day falls outside the trip."""


class DuplicateItineraryDateError(ValueError):
    """Raised when a trip already has an itinerary for the day."""


class ActivityAlreadyScheduledError(ValueError):
    """Raised when an activity is added twice to the same day."""


class InvalidScheduleTimesError(ValueError):
    """Raised when a scheduled activity would end before it starts."""


class UnknownScheduledActivityError(ValueError):
    """Raised when a reorder names an entry that is not on the day."""


def _check_date(
    db: Session,
    trip: Trip,
    day: datetime.date,
    exclude_id: uuid.UUID | None = None,
) -> None:
    if not trip.start_date.date() <= day <= trip.end_date.date():
        raise InvalidItineraryDateError("Date must be within the trip dates")

    query = db.query(Itinerary).filter(
        Itinerary.trip_id == trip.id, Itinerary.date == day
    )
    if exclude_id:
        query = query.filter(Itinerary.id != exclude_id)
    if query.first():
        raise DuplicateItineraryDateError("An itinerary already exists for this date")


def get_itineraries(db: Session, trip_id: uuid.UUID) -> list[Itinerary]:
    """Get every itinerary day of a trip in date order."""
    return (
        db.query(Itinerary)
        .filter(Itinerary.trip_id == trip_id)
        .order_by(Itinerary.date.asc())
        .all()
    )


def get_itinerary_for_trip(
    db: Session,
    itinerary_id: uuid.UUID,
    trip_id: uuid.UUID,
) -> Itinerary | None:
    """Get an itinerary day that belongs to a specific trip."""
    return (
        db.query(Itinerary)
        .filter(Itinerary.id == itinerary_id, Itinerary.trip_id == trip_id)
        .first()
    )


def create_itinerary(db: Session, trip: Trip, data: ItineraryCreate) -> Itinerary:
    """Plan a day of the trip. Each date may be planned once."""
    _check_date(db, trip, data.date)

    itinerary = Itinerary(trip_id=trip.id, date=data.date, notes=data.notes)
    db.add(itinerary)
    db.commit()
    db.refresh(itinerary)
    return itinerary


def update_itinerary(
    db: Session, trip: Trip, itinerary: Itinerary, data: ItineraryUpdate
) -> Itinerary:
    """Update an itinerary day. Moving it to another date rechecks the date."""
    update_data = data.model_dump(exclude_unset=True)

    new_date = update_data.get("date")
    if new_date and new_date != itinerary.date:
        _check_date(db, trip, new_date, exclude_id=itinerary.id)
        itinerary.date = new_date
    if "notes" in update_data:
        itinerary.notes = update_data["notes"]

    db.commit()
    db.refresh(itinerary)
    return itinerary


def delete_itinerary(db: Session, itinerary: Itinerary) -> None:
    """Delete an itinerary day and its schedule. Its photos are unlinked."""
    db.query(Photo).filter(Photo.itinerary_id == itinerary.id).update(
        {Photo.itinerary_id: None}, synchronize_session=False
    )
    db.delete(itinerary)
    db.commit()


def get_itinerary_activity(
    db: Session,
    entry_id: uuid.UUID,
    itinerary_id: uuid.UUID,
) -> ItineraryActivity | None:
    """Get a scheduled activity of a specific itinerary day."""
    return (
        db.query(ItineraryActivity)
        .filter(
            ItineraryActivity.id == entry_id,
            ItineraryActivity.itinerary_id == itinerary_id,
        )
        .first()
    )


def add_itinerary_activity(
    db: Session,
    itinerary: Itinerary,
    activity: Activity,
    data: ItineraryActivityCreate,
) -> ItineraryActivity:
    """Schedule an activity at the end of an itinerary day."""
    already_scheduled = (
        db.query(ItineraryActivity)
        .filter(
            ItineraryActivity.itinerary_id == itinerary.id,
            ItineraryActivity.activity_id == activity.id,
        )
        .first()
    )
    if already_scheduled:
        raise ActivityAlreadyScheduledError(
            "Activity is already scheduled on this itinerary"
        )

    last_order = (
        db.query(func.max(ItineraryActivity.order))
        .filter(ItineraryActivity.itinerary_id == itinerary.id)
        .scalar()
    )
    entry = ItineraryActivity(
        itinerary_id=itinerary.id,
        activity_id=activity.id,
        start_time=data.start_time,
        end_time=data.end_time,
        notes=data.notes,
        order=(last_order or 0) + 1,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def update_itinerary_activity(
    db: Session, entry: ItineraryActivity, data: ItineraryActivityUpdate
) -> ItineraryActivity:
    """Update times and notes of a scheduled activity."""
    update_data = data.model_dump(exclude_unset=True)

    start_time = update_data.get("start_time", entry.start_time)
    end_time = update_data.get("end_time", entry.end_time)
    if start_time and end_time and start_time >= end_time:
        raise InvalidScheduleTimesError("start_time must be before end_time")

    for field, value in update_data.items():
        setattr(entry, field, value)

    db.commit()
    db.refresh(entry)
    return entry


def remove_itinerary_activity(
    db: Session, itinerary: Itinerary, entry: ItineraryActivity
) -> None:
    """Take an activity off a day and close the gap in the ordering."""
    db.delete(entry)
    db.flush()

    remaining = (
        db.query(ItineraryActivity)
        .filter(ItineraryActivity.itinerary_id == itinerary.id)
        .order_by(ItineraryActivity.order.asc())
        .all()
    )
    for position, item in enumerate(remaining, start=1):
        item.order = position

    db.commit()


def reorder_itinerary_activities(
    db: Session,
    itinerary: Itinerary,
    positions: list[ItineraryActivityPosition],
) -> list[ItineraryActivity]:
    """Apply new positions to a day's scheduled activities.

    Entries not named keep their position. All named entries must belong to
    the day, otherwise nothing is changed.
    """
    entries = {
        entry.id: entry
        for entry in db.query(ItineraryActivity)
        .filter(ItineraryActivity.itinerary_id == itinerary.id)
        .all()
    }
    unknown = [str(p.id) for p in positions if p.id not in entries]
    if unknown:
        raise UnknownScheduledActivityError(
            f"Activities not on this itinerary: {', '.join(unknown)}"
        )

    for position in positions:
        entries[position.id].order = position.order
    db.commit()
    logger.debug(f"Reordered {len(positions)} activities on itinerary {itinerary.id}")

    return (
        db.query(ItineraryActivity)
        .filter(ItineraryActivity.itinerary_id == itinerary.id)
        .order_by(ItineraryActivity.order.asc())
        .all()
    )
