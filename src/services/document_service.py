# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Travel document service."""

import uuid
from datetime import datetime, timedelta

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from src.models import Document
from src.models.enums import DocumentType
from src.schemas.document import (
    DocumentCreate,
    DocumentStatistics,
    DocumentTypeCount,
    DocumentUpdate,
    ExpiringDocument,
)

REQUIRED_FIELDS = frozenset({"name", "type", "file_url", "file_type", "file_size"})


class DuplicateDocumentNameError(ValueError):
    """Raised when a trip already has a document with the same name."""


class DocumentExpiredError(ValueError):
    """Raised when a document's expiry date is not in the future."""


def _ensure_name_free(
    db: Session,
    trip_id: uuid.UUID,
    name: str,
    exclude_id: uuid.UUID | None = None,
) -> None:
    query = db.query(Document).filter(
        Document.trip_id == trip_id, Document.name == name
    )
    if exclude_id:
        query = query.filter(Document.id != exclude_id)
    if query.first():
        raise DuplicateDocumentNameError("A document with this name already exists")


def _check_expiry(expiry_date: datetime | None, now: datetime) -> None:
    if expiry_date is not None and expiry_date <= now:
        raise DocumentExpiredError("Expiry date must be in the future")


def get_documents(
    db: Session,
    trip_id: uuid.UUID,
    search: str | None = None,
    document_type: DocumentType | None = None,
    page: int = 1,
    per_page: int = 20,
) -> tuple[list[Document], int]:
    """Get a page of a trip's documents, newest first."""
    query = db.query(Document).filter(Document.trip_id == trip_id)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(Document.name.ilike(pattern), Document.notes.ilike(pattern))
        )
    if document_type:
        query = query.filter(Document.type == document_type)

    total = query.count()
    documents = (
        query.order_by(Document.created_at.desc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return documents, total


def get_document_for_trip(
    db: Session,
    document_id: uuid.UUID,
    trip_id: uuid.UUID,
) -> Document | None:
    """Get a document that belongs to a specific trip."""
    return (
        db.query(Document)
        .filter(Document.id == document_id, Document.trip_id == trip_id)
        .first()
    )


def get_document_statistics(
    db: Session,
    trip_id: uuid.UUID,
    expiry_window_days: int,
    now: datetime | None = None,
) -> DocumentStatistics:
    """Count a trip's documents per type and list those expiring soon.

    A document is expiring when its expiry date lies between now and the end
    of the window, both inclusive.
    """
    now = now or datetime.utcnow()

    by_type = (
        db.query(Document.type, func.count(Document.id))
        .filter(Document.trip_id == trip_id)
        .group_by(Document.type)
        .all()
    )
    expiring = (
        db.query(Document)
        .filter(
            Document.trip_id == trip_id,
            Document.expiry_date >= now,
            Document.expiry_date <= now + timedelta(days=expiry_window_days),
        )
        .order_by(Document.expiry_date.asc())
        .all()
    )

    return DocumentStatistics(
        total=sum(count for _, count in by_type),
        by_type=[DocumentTypeCount(type=t, count=count) for t, count in by_type],
        expiring=len(expiring),
        expiring_documents=[ExpiringDocument.model_validate(d) for d in expiring],
    )


def create_document(
    db: Session,
    trip_id: uuid.UUID,
    data: DocumentCreate,
    now: datetime | None = None,
) -> Document:
    """Attach a document to a trip. Names are unique within a trip."""
    _ensure_name_free(db, trip_id, data.name)
    _check_expiry(data.expiry_date, now or datetime.utcnow())

    document = Document(trip_id=trip_id, **data.model_dump())
    db.add(document)
    db.commit()
    db.refresh(document)
    return document


def update_document(
    db: Session,
    document: Document,
    data: DocumentUpdate,
    now: datetime | None = None,
) -> Document:
    """Update a document with the fields that were set."""
    update_data = data.model_dump(exclude_unset=True)

    name = update_data.get("name")
    if name and name != document.name:
        _ensure_name_free(db, document.trip_id, name, exclude_id=document.id)
    if "expiry_date" in update_data:
        _check_expiry(update_data["expiry_date"], now or datetime.utcnow())

    for field, value in update_data.items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(document, field, value)

    db.commit()
    db.refresh(document)
    return document


def delete_document(db: Session, document: Document) -> None:
    """Delete a document record. The uploaded file is not touched."""
    db.delete(document)
    db.commit()
