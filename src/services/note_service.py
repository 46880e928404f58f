# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip note service."""

import uuid
from datetime import datetime, timedelta

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from src.models import TripNote
from src.models.enums import NoteType
from src.schemas.note import NoteCreate, NoteStatistics, NoteTypeCount, NoteUpdate

RECENT_NOTE_DAYS = 7


def get_notes(
    db: Session,
    trip_id: uuid.UUID,
    search: str | None = None,
    note_type: NoteType | None = None,
    page: int = 1,
    per_page: int = 20,
) -> tuple[list[TripNote], int]:
    """Get a page of notes for a trip, most recently edited first."""
    query = db.query(TripNote).filter(TripNote.trip_id == trip_id)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(TripNote.title.ilike(pattern), TripNote.content.ilike(pattern))
        )
    if note_type:
        query = query.filter(TripNote.note_type == note_type)

    total = query.count()
    notes = (
        query.order_by(TripNote.updated_at.desc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return notes, total


def get_note_for_trip(
    db: Session,
    note_id: uuid.UUID,
    trip_id: uuid.UUID,
) -> TripNote | None:
    """Get a note that belongs to a specific trip."""
    return (
        db.query(TripNote)
        .filter(TripNote.id == note_id, TripNote.trip_id == trip_id)
        .first()
    )


def get_note_statistics(
    db: Session,
    trip_id: uuid.UUID,
    now: datetime | None = None,
) -> NoteStatistics:
    """Count a trip's notes, recent notes and notes per type."""
    now = now or datetime.utcnow()

    by_type = (
        db.query(TripNote.note_type, func.count(TripNote.id))
        .filter(TripNote.trip_id == trip_id)
        .group_by(TripNote.note_type)
        .all()
    )
    recent = (
        db.query(func.count(TripNote.id))
        .filter(
            TripNote.trip_id == trip_id,
            TripNote.created_at >= now - timedelta(days=RECENT_NOTE_DAYS),
        )
        .scalar()
    )

    return NoteStatistics(
        total=sum(count for _, count in by_type),
        recent=recent or 0,
        by_type=[NoteTypeCount(type=t, count=count) for t, count in by_type],
    )


def create_note(db: Session, trip_id: uuid.UUID, data: NoteCreate) -> TripNote:
    """Create a new note."""
    note = TripNote(
        trip_id=trip_id,
        title=data.title,
        content=data.content,
        note_type=data.note_type,
    )
    db.add(note)
    db.commit()
    db.refresh(note)
    return note


def update_note(db: Session, note: TripNote, data: NoteUpdate) -> TripNote:
    """Update an existing note."""
    update_data = data.model_dump(exclude_unset=True)
    if "title" in update_data:
        note.title = data.title
    if data.content is not None:
        note.content = data.content
    if data.note_type is not None:
        note.note_type = data.note_type

    db.commit()
    db.refresh(note)
    return note


def delete_note(db: Session, note: TripNote) -> None:
    """Delete a note."""
    db.delete(note)
    db.commit()
