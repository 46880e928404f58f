# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Transportation schemas."""

import datetime
import uuid
from decimal import Decimal
from typing import Self

from pydantic import BaseModel, Field, model_validator

from src.models.enums import TransportType
from src.schemas.common import PaginatedResponse, SerializedDecimal
from src.schemas.trip import NaiveUTCDatetime


class TransportationCreate(BaseModel):
    """Schema for booking a leg of travel."""

    type: TransportType
    company: str | None = Field(None, max_length=200)
    departure_location: str = Field(..., min_length=1, max_length=200)
    arrival_location: str = Field(..., min_length=1, max_length=200)
    departure_datetime: NaiveUTCDatetime
    arrival_datetime: NaiveUTCDatetime
    confirmation_code: str | None = Field(None, max_length=100)
    price: Decimal | None = Field(None, gt=0, decimal_places=2)
    currency: str = Field(default="EUR", min_length=3, max_length=3)
    notes: str | None = None

    @model_validator(mode="after")
    def validate_times(self) -> Self:
        """Ensure arrival is after departure."""
        if self.arrival_datetime <= self.departure_datetime:
            raise ValueError("arrival_datetime must be after departure_datetime")
        return self


class TransportationUpdate(BaseModel):
    """Schema for updating a leg of travel.

    Time ordering and the trip range are checked by the service against the
    merged values.
    """

    type: TransportType | None = None
    company: str | None = Field(None, max_length=200)
    departure_location: str | None = Field(None, min_length=1, max_length=200)
    arrival_location: str | None = Field(None, min_length=1, max_length=200)
    departure_datetime: NaiveUTCDatetime | None = None
    arrival_datetime: NaiveUTCDatetime | None = None
    confirmation_code: str | None = Field(None, max_length=100)
    price: Decimal | None = Field(None, gt=0, decimal_places=2)
    currency: str | None = Field(None, min_length=3, max_length=3)
    notes: str | None = None


class TransportationResponse(BaseModel):
    """Schema for transportation response."""

    id: uuid.UUID
    trip_id: uuid.UUID
    type: TransportType
    company: str | None
    departure_location: str
    arrival_location: str
    departure_datetime: datetime.datetime
    arrival_datetime: datetime.datetime
    confirmation_code: str | None
    price: SerializedDecimal | None
    currency: str
    notes: str | None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class TransportationListResponse(PaginatedResponse[TransportationResponse]):
    """Page of transportation legs."""

    pass
