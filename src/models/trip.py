# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip model."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin
from src.models.enums import TripStatus

if TYPE_CHECKING:
    from src.models.accommodation import Accommodation
    from src.models.activity import Activity
    from src.models.budget import Budget
    from src.models.document import Document
    from src.models.expense import Expense
    from src.models.itinerary import Itinerary
    from src.models.note import TripNote
    from src.models.photo import Photo
    from src.models.transportation import Transportation
    from src.models.user import User


class Trip(Base, TimestampMixin):
    """Trip model, the root of all planning records."""

    __tablename__ = "trips"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    user_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    destination: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    cover_image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[TripStatus] = mapped_column(
        Enum(TripStatus),
        default=TripStatus.PLANNING,
        nullable=False,
    )

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="trips")
    transportation: Mapped[list[Transportation]] = relationship(
        "Transportation",
        back_populates="trip",
        cascade="all, delete-orphan",
    )
    accommodations: Mapped[list[Accommodation]] = relationship(
        "Accommodation",
        back_populates="trip",
        cascade="all, delete-orphan",
    )
    activities: Mapped[list[Activity]] = relationship(
        "Activity",
        back_populates="trip",
        cascade="all, delete-orphan",
    )
    itineraries: Mapped[list[Itinerary]] = relationship(
        "Itinerary",
        back_populates="trip",
        cascade="all, delete-orphan",
    )
    budgets: Mapped[list[Budget]] = relationship(
        "Budget",
        back_populates="trip",
        cascade="all, delete-orphan",
    )
    expenses: Mapped[list[Expense]] = relationship(
        "Expense",
        back_populates="trip",
        cascade="all, delete-orphan",
    )
    documents: Mapped[list[Document]] = relationship(
        "Document",
        back_populates="trip",
        cascade="all, delete-orphan",
    )
    photos: Mapped[list[Photo]] = relationship(
        "Photo",
        back_populates="trip",
        cascade="all, delete-orphan",
    )
    notes: Mapped[list[TripNote]] = relationship(
        "TripNote",
        back_populates="trip",
        cascade="all, delete-orphan",
    )
