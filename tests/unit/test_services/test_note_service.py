# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for note_service."""

from datetime import datetime, timedelta

from src.models.enums import NoteType
from src.schemas.note import NoteCreate, NoteUpdate
from src.services import note_service


def create_note(db_session, trip_id, content="Pack adapters", **kwargs):
    return note_service.create_note(
        db_session, trip_id, NoteCreate(content=content, **kwargs)
    )


def test_create_note_defaults_to_general(db_session, test_trip):
    note = create_note(db_session, test_trip.id)

    assert note.note_type == NoteType.GENERAL
    assert note.title is None


def test_update_note_partial(db_session, test_trip):
    note = create_note(db_session, test_trip.id, title="Packing")

    updated = note_service.update_note(
        db_session, note, NoteUpdate(note_type=NoteType.REMINDER)
    )
    assert updated.note_type == NoteType.REMINDER
    assert updated.title == "Packing"
    assert updated.content == "Pack adapters"

    updated = note_service.update_note(db_session, note, NoteUpdate(title=None))
    assert updated.title is None


def test_get_notes_search_and_type(db_session, test_trip):
    create_note(db_session, test_trip.id, content="Book the tram tour")
    create_note(
        db_session, test_trip.id, content="Passport copy", note_type=NoteType.IMPORTANT
    )

    notes, total = note_service.get_notes(db_session, test_trip.id, search="tram")
    assert total == 1
    assert notes[0].content == "Book the tram tour"

    notes, total = note_service.get_notes(
        db_session, test_trip.id, note_type=NoteType.IMPORTANT
    )
    assert total == 1
    assert notes[0].content == "Passport copy"


def test_note_statistics(db_session, test_trip):
    old = create_note(db_session, test_trip.id, note_type=NoteType.IDEA)
    old.created_at = datetime.utcnow() - timedelta(days=30)
    db_session.commit()
    create_note(db_session, test_trip.id, note_type=NoteType.IDEA)
    create_note(db_session, test_trip.id, note_type=NoteType.REMINDER)

    stats = note_service.get_note_statistics(db_session, test_trip.id)

    assert stats.total == 3
    assert stats.recent == 2
    counts = {c.type: c.count for c in stats.by_type}
    assert counts == {NoteType.IDEA: 2, NoteType.REMINDER: 1}


def test_delete_note(db_session, test_trip):
    note = create_note(db_session, test_trip.id)
    note_id = note.id
    note_service.delete_note(db_session, note)

    assert note_service.get_note_for_trip(db_session, note_id, test_trip.id) is None
