# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip schemas."""

import datetime
import uuid
from typing import Annotated, Self

from pydantic import AfterValidator, BaseModel, Field, model_validator

from src.models.enums import TripStatus


def _to_naive_utc(value: datetime.datetime | None) -> datetime.datetime | None:
    """Convert aware datetimes to naive UTC, the form stored in the database."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)


NaiveUTCDatetime = Annotated[datetime.datetime, AfterValidator(_to_naive_utc)]


class TripBase(BaseModel):
    """Base trip schema."""

    name: str = Field(..., min_length=1, max_length=200)
    destination: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    start_date: NaiveUTCDatetime
    end_date: NaiveUTCDatetime
    cover_image_url: str | None = Field(None, max_length=500)

    @model_validator(mode="after")
    def validate_dates(self) -> Self:
        """Ensure end_date is after start_date."""
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class TripCreate(TripBase):
    """Schema for creating a trip. New trips always start in planning."""

    pass


class TripUpdate(BaseModel):
    """Schema for updating a trip.

    Date ordering is checked by the service against the merged values.
    """

    name: str | None = Field(None, min_length=1, max_length=200)
    destination: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    start_date: NaiveUTCDatetime | None = None
    end_date: NaiveUTCDatetime | None = None
    cover_image_url: str | None = Field(None, max_length=500)
    status: TripStatus | None = None


class TripResponse(BaseModel):
    """Schema for trip response."""

    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    destination: str
    description: str | None
    start_date: datetime.datetime
    end_date: datetime.datetime
    cover_image_url: str | None
    status: TripStatus
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}
