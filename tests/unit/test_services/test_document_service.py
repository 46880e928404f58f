# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for document_service."""

from datetime import datetime, timedelta

import pytest

from src.models.enums import DocumentType
from src.schemas.document import DocumentCreate, DocumentUpdate
from src.services import document_service
from src.services.document_service import (
    DocumentExpiredError,
    DuplicateDocumentNameError,
)

NOW = datetime(2030, 5, 1, 12, 0)


def add_document(
    db_session,
    trip_id,
    name: str = "Passport",
    doc_type: DocumentType = DocumentType.PASSPORT,
    expiry_date: datetime | None = None,
):
    data = DocumentCreate(
        name=name,
        type=doc_type,
        file_url=f"/uploads/{name.lower()}.pdf",
        file_type="application/pdf",
        file_size=20480,
        expiry_date=expiry_date,
    )
    return document_service.create_document(db_session, trip_id, data, now=NOW)


def test_create_document(db_session, test_trip):
    document = add_document(db_session, test_trip.id)

    assert document.trip_id == test_trip.id
    assert document.file_size == 20480


def test_file_url_must_be_upload_path_or_http():
    with pytest.raises(ValueError):
        DocumentCreate(
            name="Visa",
            type=DocumentType.VISA,
            file_url="ftp://files.example.com/visa.pdf",
            file_type="application/pdf",
            file_size=100,
        )

    data = DocumentCreate(
        name="Visa",
        type=DocumentType.VISA,
        file_url="https://files.example.com/visa.pdf",
        file_type="application/pdf",
        file_size=100,
    )
    assert data.file_url.startswith("https://")


def test_names_are_unique_per_trip(db_session, test_trip):
    add_document(db_session, test_trip.id)

    with pytest.raises(DuplicateDocumentNameError):
        add_document(db_session, test_trip.id)


def test_expiry_must_be_in_future(db_session, test_trip):
    with pytest.raises(DocumentExpiredError):
        add_document(db_session, test_trip.id, expiry_date=NOW - timedelta(days=1))


def test_update_document(db_session, test_trip):
    add_document(db_session, test_trip.id, name="Ticket", doc_type=DocumentType.TICKET)
    passport = add_document(db_session, test_trip.id)

    with pytest.raises(DuplicateDocumentNameError):
        document_service.update_document(
            db_session, passport, DocumentUpdate(name="Ticket"), now=NOW
        )

    updated = document_service.update_document(
        db_session,
        passport,
        DocumentUpdate(name="Passport", notes="Renewed"),
        now=NOW,
    )
    assert updated.notes == "Renewed"


def test_statistics_count_types_and_expiring(db_session, test_trip):
    add_document(db_session, test_trip.id, expiry_date=NOW + timedelta(days=10))
    add_document(
        db_session,
        test_trip.id,
        name="Visa",
        doc_type=DocumentType.VISA,
        expiry_date=NOW + timedelta(days=90),
    )
    add_document(db_session, test_trip.id, name="Insurance", doc_type=DocumentType.INSURANCE)

    statistics = document_service.get_document_statistics(
        db_session, test_trip.id, expiry_window_days=30, now=NOW
    )

    assert statistics.total == 3
    assert {c.type: c.count for c in statistics.by_type} == {
        DocumentType.PASSPORT: 1,
        DocumentType.VISA: 1,
        DocumentType.INSURANCE: 1,
    }
    assert statistics.expiring == 1
    assert statistics.expiring_documents[0].name == "Passport"


def test_list_documents_search_and_type(db_session, test_trip):
    add_document(db_session, test_trip.id)
    add_document(db_session, test_trip.id, name="Visa", doc_type=DocumentType.VISA)

    _, total = document_service.get_documents(
        db_session, test_trip.id, document_type=DocumentType.VISA
    )
    assert total == 1

    documents, _ = document_service.get_documents(db_session, test_trip.id, search="pass")
    assert [d.name for d in documents] == ["Passport"]
