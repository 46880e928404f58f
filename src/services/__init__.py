# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from src.services import (
    accommodation_service,
    activity_service,
    auth_service,
    budget_service,
    dashboard_service,
    document_service,
    expense_service,
    itinerary_service,
    note_service,
    photo_service,
    transportation_service,
    trip_service,
)

__all__ = [
    "accommodation_service",
    "activity_service",
    "auth_service",
    "budget_service",
    "dashboard_service",
    "document_service",
    "expense_service",
    "itinerary_service",
    "note_service",
    "photo_service",
    "transportation_service",
    "trip_service",
]
