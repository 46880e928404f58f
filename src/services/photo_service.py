# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip photo service."""

import datetime
import uuid

from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session

from src.models import Itinerary, Photo
from src.schemas.photo import PhotoCreate, PhotoStatistics, PhotoUpdate


def get_photos(
    db: Session,
    trip_id: uuid.UUID,
    itinerary_id: uuid.UUID | None = None,
    activity_id: uuid.UUID | None = None,
    day: datetime.date | None = None,
    page: int = 1,
    per_page: int = 20,
) -> tuple[list[Photo], int]:
    """Get a page of a trip's photos, most recently taken first.

    Filtering by day matches photos taken that day, and photos without a
    capture time that belong to that day's itinerary.
    """
    query = db.query(Photo).filter(Photo.trip_id == trip_id)
    if itinerary_id:
        query = query.filter(Photo.itinerary_id == itinerary_id)
    if activity_id:
        query = query.filter(Photo.activity_id == activity_id)
    if day:
        start = datetime.datetime.combine(day, datetime.time.min)
        end = start + datetime.timedelta(days=1)
        day_itineraries = select(Itinerary.id).where(
            Itinerary.trip_id == trip_id, Itinerary.date == day
        )
        query = query.filter(
            or_(
                and_(Photo.taken_at >= start, Photo.taken_at < end),
                and_(
                    Photo.taken_at.is_(None),
                    Photo.itinerary_id.in_(day_itineraries),
                ),
            )
        )

    total = query.count()
    photos = (
        query.order_by(Photo.taken_at.desc(), Photo.created_at.desc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return photos, total


def get_photo_for_trip(
    db: Session,
    photo_id: uuid.UUID,
    trip_id: uuid.UUID,
) -> Photo | None:
    """Get a photo that belongs to a specific trip."""
    return db.query(Photo).filter(Photo.id == photo_id, Photo.trip_id == trip_id).first()


def get_photo_statistics(db: Session, trip_id: uuid.UUID) -> PhotoStatistics:
    """Count a trip's photos and those with full coordinates."""
    total = db.query(func.count(Photo.id)).filter(Photo.trip_id == trip_id).scalar()
    with_location = (
        db.query(func.count(Photo.id))
        .filter(
            Photo.trip_id == trip_id,
            Photo.latitude.is_not(None),
            Photo.longitude.is_not(None),
        )
        .scalar()
    )
    return PhotoStatistics(total=total or 0, with_location=with_location or 0)


def create_photo(db: Session, trip_id: uuid.UUID, data: PhotoCreate) -> Photo:
    """Add a photo to a trip.

    A linked itinerary or activity must already have been checked to belong
    to the trip.
    """
    photo = Photo(trip_id=trip_id, **data.model_dump())
    db.add(photo)
    db.commit()
    db.refresh(photo)
    return photo


def update_photo(db: Session, photo: Photo, data: PhotoUpdate) -> Photo:
    """Update a photo's metadata with the fields that were set."""
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(photo, field, value)

    db.commit()
    db.refresh(photo)
    return photo


def delete_photo(db: Session, photo: Photo) -> None:
    """Delete a photo record. The uploaded file is not touched."""
    db.delete(photo)
    db.commit()
