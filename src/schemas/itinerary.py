# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Itinerary schemas."""

import datetime
import uuid
from typing import Annotated, Self

from pydantic import BaseModel, Field, model_validator

from src.schemas.activity import ActivityResponse

# Wall-clock time of day, zero-padded so that string order is time order
TimeOfDay = Annotated[str, Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")]


class ItineraryCreate(BaseModel):
    """Schema for planning a day of the trip."""

    date: datetime.date
    notes: str | None = None


class ItineraryUpdate(BaseModel):
    """Schema for updating an itinerary day."""

    date: datetime.date | None = None
    notes: str | None = None


class ItineraryActivityCreate(BaseModel):
    """Schema for scheduling an activity on an itinerary day."""

    activity_id: uuid.UUID
    start_time: TimeOfDay | None = None
    end_time: TimeOfDay | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def validate_times(self) -> Self:
        """Ensure the start time is before the end time when both are set."""
        if self.start_time and self.end_time and self.start_time >= self.end_time:
            raise ValueError("start_time must be before end_time")
        return self


class ItineraryActivityUpdate(BaseModel):
    """Schema for updating a scheduled activity.

    Time ordering is checked by the service against the merged values.
    """

    start_time: TimeOfDay | None = None
    end_time: TimeOfDay | None = None
    notes: str | None = None


class ItineraryActivityPosition(BaseModel):
    """New position of one scheduled activity."""

    id: uuid.UUID
    order: int = Field(..., ge=0)


class ItineraryActivityReorder(BaseModel):
    """Schema for reordering the activities of a day."""

    activities: list[ItineraryActivityPosition] = Field(..., min_length=1)


class ItineraryActivityResponse(BaseModel):
    """A scheduled activity with the activity it refers to."""

    id: uuid.UUID
    itinerary_id: uuid.UUID
    activity_id: uuid.UUID
    start_time: str | None
    end_time: str | None
    order: int
    notes: str | None
    activity: ActivityResponse

    model_config = {"from_attributes": True}


class ItineraryResponse(BaseModel):
    """Schema for itinerary response, activities in schedule order."""

    id: uuid.UUID
    trip_id: uuid.UUID
    date: datetime.date
    notes: str | None
    activities: list[ItineraryActivityResponse]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}
