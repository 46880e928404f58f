# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip photo schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field

from src.schemas.common import FileUrl, PaginatedResponse
from src.schemas.trip import NaiveUTCDatetime


class PhotoCreate(BaseModel):
    """Schema for adding an uploaded photo to a trip."""

    file_url: FileUrl = Field(..., max_length=500)
    thumbnail_url: str | None = Field(None, max_length=500)
    caption: str | None = None
    taken_at: NaiveUTCDatetime | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    itinerary_id: uuid.UUID | None = None
    activity_id: uuid.UUID | None = None


class PhotoUpdate(BaseModel):
    """Schema for updating a photo's metadata."""

    caption: str | None = None
    taken_at: NaiveUTCDatetime | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    itinerary_id: uuid.UUID | None = None
    activity_id: uuid.UUID | None = None


class PhotoResponse(BaseModel):
    """Schema for photo response."""

    id: uuid.UUID
    trip_id: uuid.UUID
    itinerary_id: uuid.UUID | None
    activity_id: uuid.UUID | None
    file_url: str
    thumbnail_url: str | None
    caption: str | None
    taken_at: datetime.datetime | None
    latitude: float | None
    longitude: float | None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class PhotoStatistics(BaseModel):
    """Photo counts for a trip."""

    total: int
    with_location: int


class PhotoListResponse(PaginatedResponse[PhotoResponse]):
    """Page of photos plus trip-wide statistics."""

    statistics: PhotoStatistics
