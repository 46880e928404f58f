# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip dashboard schemas."""

from decimal import Decimal

from pydantic import BaseModel

from src.models.enums import ActivityCategory, BudgetCategory
from src.schemas.common import SerializedDecimal
from src.schemas.note import NoteTypeCount
from src.schemas.trip import TripResponse


class DashboardTrip(TripResponse):
    """Trip record with derived schedule and completion fields."""

    duration: int
    days_until_trip: int
    completion_percentage: int


class TransportationOverview(BaseModel):
    """Booked transportation for a trip."""

    count: int = 0
    total_cost: SerializedDecimal = Decimal(0)


class AccommodationOverview(BaseModel):
    """Booked accommodation for a trip."""

    count: int = 0
    total_cost: SerializedDecimal = Decimal(0)


class ActivityCategoryCount(BaseModel):
    """Number of activities in one category."""

    category: ActivityCategory
    count: int


class ActivityOverview(BaseModel):
    """Activities and how many of them are scheduled."""

    total: int = 0
    scheduled: int = 0
    by_category: list[ActivityCategoryCount] = []


class BudgetOverview(BaseModel):
    """Planned budget against spending."""

    planned: SerializedDecimal = Decimal(0)
    actual: SerializedDecimal = Decimal(0)
    remaining: SerializedDecimal = Decimal(0)


class ExpenseCategoryOverview(BaseModel):
    """Spending in one category."""

    category: BudgetCategory
    amount: SerializedDecimal
    count: int


class ExpenseOverview(BaseModel):
    """Expense totals for a trip."""

    total: SerializedDecimal = Decimal(0)
    count: int = 0
    by_category: list[ExpenseCategoryOverview] = []


class DocumentOverview(BaseModel):
    """Documents and how many expire soon."""

    total: int = 0
    expiring: int = 0


class ItineraryOverview(BaseModel):
    """Planned itinerary days against trip length."""

    days: int = 0
    activities: int = 0
    planned_days: int = 0


class PhotoOverview(BaseModel):
    """Photos and how many carry a location."""

    total: int = 0
    with_location: int = 0


class NoteOverview(BaseModel):
    """Notes broken down by type."""

    total: int = 0
    by_type: list[NoteTypeCount] = []


class DashboardOverview(BaseModel):
    """Raw per-module counts and sums."""

    transportation: TransportationOverview
    accommodation: AccommodationOverview
    activities: ActivityOverview
    budget: BudgetOverview
    expenses: ExpenseOverview
    documents: DocumentOverview
    itinerary: ItineraryOverview
    photos: PhotoOverview
    notes: NoteOverview


class ModuleProgress(BaseModel):
    """Completion of one planning module, for progress bars."""

    name: str
    completion: int
    count: int
    target: int


class TripDashboard(BaseModel):
    """Complete dashboard snapshot for one trip."""

    trip: DashboardTrip
    overview: DashboardOverview
    modules: list[ModuleProgress]
