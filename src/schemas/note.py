# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip note schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field

from src.models.enums import NoteType
from src.schemas.common import PaginatedResponse


class NoteBase(BaseModel):
    """Base note schema."""

    title: str | None = Field(None, max_length=200)
    content: str = Field(..., min_length=1)
    note_type: NoteType = NoteType.GENERAL


class NoteCreate(NoteBase):
    """Schema for creating a note."""

    pass


class NoteUpdate(BaseModel):
    """Schema for updating a note."""

    title: str | None = Field(None, max_length=200)
    content: str | None = Field(None, min_length=1)
    note_type: NoteType | None = None


class NoteResponse(BaseModel):
    """Schema for note response."""

    id: uuid.UUID
    trip_id: uuid.UUID
    title: str | None
    content: str
    note_type: NoteType
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class NoteTypeCount(BaseModel):
    """Number of notes of one type."""

    type: NoteType
    count: int


class NoteStatistics(BaseModel):
    """Note counts for a trip."""

    total: int
    recent: int
    by_type: list[NoteTypeCount]


class NoteListResponse(PaginatedResponse[NoteResponse]):
    """Page of notes plus trip-wide statistics."""

    statistics: NoteStatistics
