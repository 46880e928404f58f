# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from src.models.accommodation import Accommodation
from src.models.activity import Activity
from src.models.base import Base, TimestampMixin
from src.models.budget import Budget
from src.models.document import Document
from src.models.enums import (
    AccommodationType,
    ActivityCategory,
    BudgetCategory,
    DocumentType,
    NoteType,
    TransportType,
    TripStatus,
)
from src.models.expense import Expense
from src.models.itinerary import Itinerary, ItineraryActivity
from src.models.note import TripNote
from src.models.photo import Photo
from src.models.session import Session
from src.models.transportation import Transportation
from src.models.trip import Trip
from src.models.user import User

__all__ = [
    "Accommodation",
    "AccommodationType",
    "Activity",
    "ActivityCategory",
    "Base",
    "Budget",
    "BudgetCategory",
    "Document",
    "DocumentType",
    "Expense",
    "Itinerary",
    "ItineraryActivity",
    "NoteType",
    "Photo",
    "Session",
    "TimestampMixin",
    "Transportation",
    "TransportType",
    "Trip",
    "TripNote",
    "TripStatus",
    "User",
]
