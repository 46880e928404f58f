# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Activity schemas."""

import datetime
import uuid
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from src.models.enums import ActivityCategory
from src.schemas.common import PaginatedResponse, SerializedDecimal


class ActivityBase(BaseModel):
    """Optional activity details shared by create and update."""

    address: str | None = Field(None, max_length=500)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    price: Decimal | None = Field(None, gt=0, decimal_places=2)
    currency: str | None = Field(None, min_length=3, max_length=3)
    duration_hours: float | None = Field(None, gt=0)
    opening_hours: str | None = Field(None, max_length=200)
    website_url: str | None = Field(None, max_length=500)
    phone: str | None = Field(None, max_length=50)
    notes: str | None = None
    rating: int | None = Field(None, ge=1, le=5)

    @field_validator("website_url")
    @classmethod
    def empty_website_url(cls, v: str | None) -> str | None:
        """Treat an empty website URL as missing."""
        return v or None


class ActivityCreate(ActivityBase):
    """Schema for creating an activity."""

    name: str = Field(..., min_length=1, max_length=200)
    category: ActivityCategory


class ActivityUpdate(ActivityBase):
    """Schema for updating an activity."""

    name: str | None = Field(None, min_length=1, max_length=200)
    category: ActivityCategory | None = None


class ActivityResponse(BaseModel):
    """Schema for activity response."""

    id: uuid.UUID
    trip_id: uuid.UUID
    name: str
    category: ActivityCategory
    address: str | None
    latitude: float | None
    longitude: float | None
    price: SerializedDecimal | None
    currency: str | None
    duration_hours: float | None
    opening_hours: str | None
    website_url: str | None
    phone: str | None
    notes: str | None
    rating: int | None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class ActivityListResponse(PaginatedResponse[ActivityResponse]):
    """Page of activities."""

    pass
