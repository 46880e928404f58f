# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip note API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, get_owned_trip
from src.models import Trip, TripNote
from src.models.enums import NoteType
from src.schemas.common import PaginationMeta
from src.schemas.note import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate
from src.services import note_service

router = APIRouter()


def _get_note_or_404(db: Session, note_id: uuid.UUID, trip_id: uuid.UUID) -> TripNote:
    note = note_service.get_note_for_trip(db, note_id, trip_id)
    if not note:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Note not found",
        )
    return note


@router.get("/{trip_id}/notes", response_model=NoteListResponse)
def list_notes(
    search: str | None = None,
    note_type: NoteType | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> NoteListResponse:
    """List notes for a trip with per-type statistics."""
    notes, total = note_service.get_notes(
        db,
        trip.id,
        search=search,
        note_type=note_type,
        page=page,
        per_page=per_page,
    )
    return NoteListResponse(
        data=[NoteResponse.model_validate(n) for n in notes],
        meta=PaginationMeta.build(total, page, per_page),
        statistics=note_service.get_note_statistics(db, trip.id),
    )


@router.post(
    "/{trip_id}/notes",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_note(
    data: NoteCreate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> NoteResponse:
    """Create a note for a trip."""
    note = note_service.create_note(db, trip.id, data)
    return NoteResponse.model_validate(note)


@router.get("/{trip_id}/notes/{note_id}", response_model=NoteResponse)
def get_note(
    note_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> NoteResponse:
    """Get a note."""
    note = _get_note_or_404(db, note_id, trip.id)
    return NoteResponse.model_validate(note)


@router.put("/{trip_id}/notes/{note_id}", response_model=NoteResponse)
def update_note(
    note_id: uuid.UUID,
    data: NoteUpdate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> NoteResponse:
    """Update a note."""
    note = _get_note_or_404(db, note_id, trip.id)
    note = note_service.update_note(db, note, data)
    return NoteResponse.model_validate(note)


@router.delete("/{trip_id}/notes/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(
    note_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> None:
    """Delete a note."""
    note = _get_note_or_404(db, note_id, trip.id)
    note_service.delete_note(db, note)
