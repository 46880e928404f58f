# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Transportation model."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin
from src.models.enums import TransportType

if TYPE_CHECKING:
    from src.models.trip import Trip


class Transportation(Base, TimestampMixin):
    """A booked leg of travel (flight, train, ...) belonging to a trip."""

    __tablename__ = "transportation"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    trip_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("trips.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[TransportType] = mapped_column(Enum(TransportType), nullable=False)
    company: Mapped[str | None] = mapped_column(String(200), nullable=True)
    departure_location: Mapped[str] = mapped_column(String(200), nullable=False)
    arrival_location: Mapped[str] = mapped_column(String(200), nullable=False)
    departure_datetime: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    arrival_datetime: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    confirmation_code: Mapped[str | None] = mapped_column(String(100), nullable=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    currency: Mapped[str] = mapped_column(String(3), default="EUR", nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    trip: Mapped[Trip] = relationship("Trip", back_populates="transportation")
