# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Travel document schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field

from src.models.enums import DocumentType
from src.schemas.common import FileUrl, PaginatedResponse
from src.schemas.trip import NaiveUTCDatetime


class DocumentCreate(BaseModel):
    """Schema for attaching an uploaded document to a trip."""

    name: str = Field(..., min_length=1, max_length=200)
    type: DocumentType
    file_url: FileUrl = Field(..., max_length=500)
    file_type: str = Field(..., min_length=1, max_length=100)
    file_size: int = Field(..., gt=0)
    expiry_date: NaiveUTCDatetime | None = None
    notes: str | None = None


class DocumentUpdate(BaseModel):
    """Schema for updating a document."""

    name: str | None = Field(None, min_length=1, max_length=200)
    type: DocumentType | None = None
    file_url: FileUrl | None = Field(None, max_length=500)
    file_type: str | None = Field(None, min_length=1, max_length=100)
    file_size: int | None = Field(None, gt=0)
    expiry_date: NaiveUTCDatetime | None = None
    notes: str | None = None


class DocumentResponse(BaseModel):
    """Schema for document response."""

    id: uuid.UUID
    trip_id: uuid.UUID
    name: str
    type: DocumentType
    file_url: str
    file_type: str
    file_size: int
    expiry_date: datetime.datetime | None
    notes: str | None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class DocumentTypeCount(BaseModel):
    """Number of documents of one type."""

    type: DocumentType
    count: int


class ExpiringDocument(BaseModel):
    """A document whose expiry date is coming up."""

    id: uuid.UUID
    name: str
    type: DocumentType
    expiry_date: datetime.datetime

    model_config = {"from_attributes": True}


class DocumentStatistics(BaseModel):
    """Document counts for a trip."""

    total: int
    by_type: list[DocumentTypeCount]
    expiring: int
    expiring_documents: list[ExpiringDocument]


class DocumentListResponse(PaginatedResponse[DocumentResponse]):
    """Page of documents plus trip-wide statistics."""

    statistics: DocumentStatistics
