# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Travel document API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, get_owned_trip
from src.config import get_settings
from src.models import Document, Trip
from src.models.enums import DocumentType
from src.schemas.common import PaginationMeta
from src.schemas.document import (
    DocumentCreate,
    DocumentListResponse,
    DocumentResponse,
    DocumentUpdate,
)
from src.services import document_service
from src.services.document_service import (
    DocumentExpiredError,
    DuplicateDocumentNameError,
)

router = APIRouter()


def _get_document_or_404(
    db: Session, document_id: uuid.UUID, trip_id: uuid.UUID
) -> Document:
    document = document_service.get_document_for_trip(db, document_id, trip_id)
    if not document:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found",
        )
    return document


@router.get("/{trip_id}/documents", response_model=DocumentListResponse)
def list_documents(
    search: str | None = None,
    type: DocumentType | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> DocumentListResponse:
    """List a trip's documents with per-type counts and upcoming expiries."""
    documents, total = document_service.get_documents(
        db,
        trip.id,
        search=search,
        document_type=type,
        page=page,
        per_page=per_page,
    )
    return DocumentListResponse(
        data=[DocumentResponse.model_validate(d) for d in documents],
        meta=PaginationMeta.build(total, page, per_page),
        statistics=document_service.get_document_statistics(
            db, trip.id, get_settings().document_expiry_window_days
        ),
    )


@router.post(
    "/{trip_id}/documents",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_document(
    data: DocumentCreate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> DocumentResponse:
    """Attach an uploaded document to a trip."""
    try:
        document = document_service.create_document(db, trip.id, data)
    except (DuplicateDocumentNameError, DocumentExpiredError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return DocumentResponse.model_validate(document)


@router.get("/{trip_id}/documents/{document_id}", response_model=DocumentResponse)
def get_document(
    document_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> DocumentResponse:
    """Get a document."""
    document = _get_document_or_404(db, document_id, trip.id)
    return DocumentResponse.model_validate(document)


@router.put("/{trip_id}/documents/{document_id}", response_model=DocumentResponse)
def update_document(
    document_id: uuid.UUID,
    data: DocumentUpdate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> DocumentResponse:
    """Update a document."""
    document = _get_document_or_404(db, document_id, trip.id)
    try:
        document = document_service.update_document(db, document, data)
    except (DuplicateDocumentNameError, DocumentExpiredError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return DocumentResponse.model_validate(document)


@router.delete(
    "/{trip_id}/documents/{document_id}", status_code=status.HTTP_204_NO_CONTENT
)
def delete_document(
    document_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> None:
    """Delete a document."""
    document = _get_document_or_404(db, document_id, trip.id)
    document_service.delete_document(db, document)
