# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Activity service."""

import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Session

from src.models import Activity, Photo
from src.models.enums import ActivityCategory
from src.schemas.activity import ActivityCreate, ActivityUpdate

REQUIRED_FIELDS = frozenset({"name", "category"})


def get_activities(
    db: Session,
    trip_id: uuid.UUID,
    search: str | None = None,
    category: ActivityCategory | None = None,
    page: int = 1,
    per_page: int = 20,
) -> tuple[list[Activity], int]:
    """Get a page of a trip's activities, newest first."""
    query = db.query(Activity).filter(Activity.trip_id == trip_id)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Activity.name.ilike(pattern),
                Activity.address.ilike(pattern),
                Activity.notes.ilike(pattern),
            )
        )
    if category:
        query = query.filter(Activity.category == category)

    total = query.count()
    activities = (
        query.order_by(Activity.created_at.desc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return activities, total


def get_activity_for_trip(
    db: Session,
    activity_id: uuid.UUID,
    trip_id: uuid.UUID,
) -> Activity | None:
    """Get an activity that belongs to a specific trip."""
    return (
        db.query(Activity)
        .filter(Activity.id == activity_id, Activity.trip_id == trip_id)
        .first()
    )


def create_activity(db: Session, trip_id: uuid.UUID, data: ActivityCreate) -> Activity:
    """Create a new activity."""
    activity = Activity(trip_id=trip_id, **data.model_dump())
    db.add(activity)
    db.commit()
    db.refresh(activity)
    return activity


def update_activity(db: Session, activity: Activity, data: ActivityUpdate) -> Activity:
    """Update an activity with the fields that were set."""
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(activity, field, value)

    db.commit()
    db.refresh(activity)
    return activity


def delete_activity(db: Session, activity: Activity) -> None:
    """Delete an activity and take it off every itinerary day.

    Photos of the activity are kept and unlinked.
    """
    db.query(Photo).filter(Photo.activity_id == activity.id).update(
        {Photo.activity_id: None}, synchronize_session=False
    )
    db.delete(activity)
    db.commit()
