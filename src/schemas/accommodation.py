# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Accommodation schemas."""

import datetime
import uuid
from decimal import Decimal
from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from src.models.enums import AccommodationType
from src.schemas.common import PaginatedResponse, SerializedDecimal
from src.schemas.trip import NaiveUTCDatetime


class AccommodationBase(BaseModel):
    """Fields shared by accommodation create and update."""

    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    price_per_night: Decimal | None = Field(None, gt=0, decimal_places=2)
    total_price: Decimal | None = Field(None, gt=0, decimal_places=2)
    booking_url: str | None = Field(None, max_length=500)
    confirmation_code: str | None = Field(None, max_length=100)
    rating: int | None = Field(None, ge=1, le=5)
    notes: str | None = None

    @field_validator("booking_url")
    @classmethod
    def empty_booking_url(cls, v: str | None) -> str | None:
        """Treat an empty booking URL as missing."""
        return v or None


class AccommodationCreate(AccommodationBase):
    """Schema for booking accommodation."""

    name: str = Field(..., min_length=1, max_length=200)
    type: AccommodationType
    address: str = Field(..., min_length=1, max_length=500)
    check_in_date: NaiveUTCDatetime
    check_out_date: NaiveUTCDatetime
    currency: str = Field(default="EUR", min_length=3, max_length=3)

    @model_validator(mode="after")
    def validate_dates(self) -> Self:
        """Ensure check-out is after check-in."""
        if self.check_out_date <= self.check_in_date:
            raise ValueError("check_out_date must be after check_in_date")
        return self


class AccommodationUpdate(AccommodationBase):
    """Schema for updating accommodation."""

    name: str | None = Field(None, min_length=1, max_length=200)
    type: AccommodationType | None = None
    address: str | None = Field(None, min_length=1, max_length=500)
    check_in_date: NaiveUTCDatetime | None = None
    check_out_date: NaiveUTCDatetime | None = None
    currency: str | None = Field(None, min_length=3, max_length=3)


class AccommodationResponse(BaseModel):
    """Schema for accommodation response."""

    id: uuid.UUID
    trip_id: uuid.UUID
    name: str
    type: AccommodationType
    address: str
    latitude: float | None
    longitude: float | None
    check_in_date: datetime.datetime
    check_out_date: datetime.datetime
    price_per_night: SerializedDecimal | None
    total_price: SerializedDecimal | None
    currency: str
    booking_url: str | None
    confirmation_code: str | None
    rating: int | None
    notes: str | None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class AccommodationListResponse(PaginatedResponse[AccommodationResponse]):
    """Page of accommodation bookings."""

    pass
