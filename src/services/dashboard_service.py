# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Trip dashboard service: per-module aggregates and completion scoring.

Every module is read independently and concurrently, each reader on its own
session. The readers only ever query; nothing is cached or written back.
"""

import asyncio
import logging
import math
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from src.config import get_settings
from src.models import (
    Accommodation,
    Activity,
    Budget,
    Document,
    Expense,
    Itinerary,
    ItineraryActivity,
    Photo,
    Transportation,
    Trip,
    TripNote,
)
from src.schemas.dashboard import (
    AccommodationOverview,
    ActivityCategoryCount,
    ActivityOverview,
    BudgetOverview,
    DashboardOverview,
    DashboardTrip,
    DocumentOverview,
    ExpenseCategoryOverview,
    ExpenseOverview,
    ItineraryOverview,
    ModuleProgress,
    NoteOverview,
    PhotoOverview,
    TransportationOverview,
    TripDashboard,
)
from src.schemas.note import NoteTypeCount
from src.schemas.trip import TripResponse

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

# Expected number of records per module for it to count as complete.
# The itinerary target depends on trip length, see itinerary_target().
TRANSPORTATION_TARGET = 2
ACCOMMODATION_TARGET = 1
ACTIVITIES_TARGET = 5
BUDGET_TARGET = 1
DOCUMENTS_TARGET = 3
PHOTOS_TARGET = 1
NOTES_TARGET = 1


class DashboardAggregationError(Exception):
    """Raised when any module read fails or the reads exceed the deadline."""


@dataclass
class TripAggregates:
    """Raw results of all module reads for one trip."""

    transportation: TransportationOverview
    accommodation: AccommodationOverview
    activities: ActivityOverview
    budget_planned: Decimal | None
    expenses: ExpenseOverview
    documents: DocumentOverview
    itinerary_days: int
    itinerary_activities: int
    photos: PhotoOverview
    notes: NoteOverview


# Module readers


def get_transportation_overview(
    db: Session, trip_id: uuid.UUID
) -> TransportationOverview:
    """Count transportation legs and sum their prices."""
    count, total = (
        db.query(func.count(Transportation.id), func.sum(Transportation.price))
        .filter(Transportation.trip_id == trip_id)
        .one()
    )
    return TransportationOverview(count=count, total_cost=total or Decimal(0))


def get_accommodation_overview(
    db: Session, trip_id: uuid.UUID
) -> AccommodationOverview:
    """Count accommodations and sum their total prices."""
    count, total = (
        db.query(func.count(Accommodation.id), func.sum(Accommodation.total_price))
        .filter(Accommodation.trip_id == trip_id)
        .one()
    )
    return AccommodationOverview(count=count, total_cost=total or Decimal(0))


def _count_scheduled_activities(db: Session, trip_id: uuid.UUID) -> int:
    return (
        db.query(func.count(ItineraryActivity.id))
        .join(Itinerary, ItineraryActivity.itinerary_id == Itinerary.id)
        .filter(Itinerary.trip_id == trip_id)
        .scalar()
    ) or 0


def get_activity_overview(db: Session, trip_id: uuid.UUID) -> ActivityOverview:
    """Count activities per category and how many are on the itinerary."""
    by_category = (
        db.query(Activity.category, func.count(Activity.id))
        .filter(Activity.trip_id == trip_id)
        .group_by(Activity.category)
        .all()
    )
    return ActivityOverview(
        total=sum(count for _, count in by_category),
        scheduled=_count_scheduled_activities(db, trip_id),
        by_category=[
            ActivityCategoryCount(category=category, count=count)
            for category, count in by_category
        ],
    )


def get_budget_planned_total(db: Session, trip_id: uuid.UUID) -> Decimal | None:
    """Sum planned budget amounts.

    Returns None when the trip has no budget lines or none has a planned
    amount, so callers can tell "no budget" from a zero budget.
    """
    return (
        db.query(func.sum(Budget.planned_amount))
        .filter(Budget.trip_id == trip_id)
        .scalar()
    )


def get_expense_overview(db: Session, trip_id: uuid.UUID) -> ExpenseOverview:
    """Sum and count expenses, overall and per category."""
    results = (
        db.query(
            Expense.category,
            func.sum(Expense.amount).label("amount"),
            func.count(Expense.id).label("count"),
        )
        .filter(Expense.trip_id == trip_id)
        .group_by(Expense.category)
        .all()
    )
    by_category = [
        ExpenseCategoryOverview(
            category=r.category,
            amount=r.amount or Decimal(0),
            count=r.count,
        )
        for r in results
    ]
    return ExpenseOverview(
        total=sum((c.amount for c in by_category), Decimal(0)),
        count=sum(c.count for c in by_category),
        by_category=by_category,
    )


def get_document_overview(
    db: Session,
    trip_id: uuid.UUID,
    now: datetime,
    expiry_window_days: int = 30,
) -> DocumentOverview:
    """Count documents and those expiring between now and the window end."""
    total = (
        db.query(func.count(Document.id)).filter(Document.trip_id == trip_id).scalar()
    )
    expiring = (
        db.query(func.count(Document.id))
        .filter(
            Document.trip_id == trip_id,
            Document.expiry_date >= now,
            Document.expiry_date <= now + timedelta(days=expiry_window_days),
        )
        .scalar()
    )
    return DocumentOverview(total=total or 0, expiring=expiring or 0)


def get_itinerary_counts(db: Session, trip_id: uuid.UUID) -> tuple[int, int]:
    """Return (planned days, scheduled activities) for a trip."""
    days = (
        db.query(func.count(Itinerary.id)).filter(Itinerary.trip_id == trip_id).scalar()
    )
    return days or 0, _count_scheduled_activities(db, trip_id)


def get_photo_overview(db: Session, trip_id: uuid.UUID) -> PhotoOverview:
    """Count photos and those carrying both coordinates."""
    total = db.query(func.count(Photo.id)).filter(Photo.trip_id == trip_id).scalar()
    with_location = (
        db.query(func.count(Photo.id))
        .filter(
            Photo.trip_id == trip_id,
            Photo.latitude.is_not(None),
            Photo.longitude.is_not(None),
        )
        .scalar()
    )
    return PhotoOverview(total=total or 0, with_location=with_location or 0)


def get_note_overview(db: Session, trip_id: uuid.UUID) -> NoteOverview:
    """Count notes per type."""
    by_type = (
        db.query(TripNote.note_type, func.count(TripNote.id))
        .filter(TripNote.trip_id == trip_id)
        .group_by(TripNote.note_type)
        .all()
    )
    return NoteOverview(
        total=sum(count for _, count in by_type),
        by_type=[NoteTypeCount(type=t, count=count) for t, count in by_type],
    )


async def gather_trip_aggregates(
    db: Session,
    trip_id: uuid.UUID,
    now: datetime,
    timeout: float,
    expiry_window_days: int = 30,
) -> TripAggregates:
    """Run every module reader concurrently and wait for all of them.

    Each reader gets its own session on the request session's engine, since
    a session must not be shared between threads. A failing reader or an
    overrun of the deadline fails the whole aggregation.
    """
    bind = db.get_bind()

    def run(reader: Callable[..., Any], *args: Any) -> Any:
        with Session(bind=bind) as session:
            return reader(session, trip_id, *args)

    try:
        (
            transportation,
            accommodation,
            activities,
            budget_planned,
            expenses,
            documents,
            (itinerary_days, itinerary_activities),
            photos,
            notes,
        ) = await asyncio.wait_for(
            asyncio.gather(
                asyncio.to_thread(run, get_transportation_overview),
                asyncio.to_thread(run, get_accommodation_overview),
                asyncio.to_thread(run, get_activity_overview),
                asyncio.to_thread(run, get_budget_planned_total),
                asyncio.to_thread(run, get_expense_overview),
                asyncio.to_thread(
                    run, get_document_overview, now, expiry_window_days
                ),
                asyncio.to_thread(run, get_itinerary_counts),
                asyncio.to_thread(run, get_photo_overview),
                asyncio.to_thread(run, get_note_overview),
            ),
            timeout=timeout,
        )
    except TimeoutError as e:
        raise DashboardAggregationError(
            f"Dashboard reads for trip {trip_id} timed out after {timeout}s"
        ) from e
    except Exception as e:
        raise DashboardAggregationError(
            f"Dashboard read failed for trip {trip_id}: {e!r}"
        ) from e

    return TripAggregates(
        transportation=transportation,
        accommodation=accommodation,
        activities=activities,
        budget_planned=budget_planned,
        expenses=expenses,
        documents=documents,
        itinerary_days=itinerary_days,
        itinerary_activities=itinerary_activities,
        photos=photos,
        notes=notes,
    )


# Completion scoring


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up."""
    return math.floor(value + 0.5)


def calculate_duration(start_date: datetime, end_date: datetime) -> int:
    """Trip length in days, partial days rounded up.

    A trip ending before it starts has a duration of 0.
    """
    days = math.ceil((end_date - start_date).total_seconds() / SECONDS_PER_DAY)
    return max(0, days)


def calculate_days_until(start_date: datetime, now: datetime) -> int:
    """Days from now until the trip starts, partial days rounded up.

    Negative once the trip has started.
    """
    return math.ceil((start_date - now).total_seconds() / SECONDS_PER_DAY)


def itinerary_target(duration: int) -> int:
    """Expect a planned itinerary day for every two days of trip, at least one."""
    return max(1, duration // 2)


def module_completion(count: int, target: int) -> int:
    """Displayed completion percentage for a module, capped at 100."""
    return min(100, round_half_up(count / target * 100))


def calculate_overall_completion(modules: list[ModuleProgress]) -> int:
    """Unweighted mean of the per-module ratios, as a percentage.

    Each ratio is capped at 1 before averaging so over-filled modules cannot
    make up for empty ones.
    """
    if not modules:
        return 0
    ratio_sum = math.fsum(min(1.0, m.count / m.target) for m in modules)
    return round_half_up(ratio_sum / len(modules) * 100)


def build_module_progress(
    aggregates: TripAggregates, duration: int
) -> list[ModuleProgress]:
    """Score the eight planning modules against their targets."""
    counts = [
        ("transportation", aggregates.transportation.count, TRANSPORTATION_TARGET),
        ("accommodation", aggregates.accommodation.count, ACCOMMODATION_TARGET),
        ("activities", aggregates.activities.total, ACTIVITIES_TARGET),
        (
            "budget",
            1 if aggregates.budget_planned is not None else 0,
            BUDGET_TARGET,
        ),
        ("documents", aggregates.documents.total, DOCUMENTS_TARGET),
        ("itinerary", aggregates.itinerary_days, itinerary_target(duration)),
        ("photos", aggregates.photos.total, PHOTOS_TARGET),
        ("notes", aggregates.notes.total, NOTES_TARGET),
    ]
    return [
        ModuleProgress(
            name=name,
            completion=module_completion(count, target),
            count=count,
            target=target,
        )
        for name, count, target in counts
    ]


def build_trip_dashboard(
    trip: Trip,
    aggregates: TripAggregates,
    now: datetime,
) -> TripDashboard:
    """Assemble the dashboard snapshot from already-read aggregates."""
    duration = calculate_duration(trip.start_date, trip.end_date)
    modules = build_module_progress(aggregates, duration)

    planned = aggregates.budget_planned or Decimal(0)
    actual = aggregates.expenses.total

    return TripDashboard(
        trip=DashboardTrip(
            **TripResponse.model_validate(trip).model_dump(),
            duration=duration,
            days_until_trip=calculate_days_until(trip.start_date, now),
            completion_percentage=calculate_overall_completion(modules),
        ),
        overview=DashboardOverview(
            transportation=aggregates.transportation,
            accommodation=aggregates.accommodation,
            activities=aggregates.activities,
            budget=BudgetOverview(
                planned=planned,
                actual=actual,
                remaining=planned - actual,
            ),
            expenses=aggregates.expenses,
            documents=aggregates.documents,
            itinerary=ItineraryOverview(
                days=aggregates.itinerary_days,
                activities=aggregates.itinerary_activities,
                planned_days=duration,
            ),
            photos=aggregates.photos,
            notes=aggregates.notes,
        ),
        modules=modules,
    )


async def get_trip_dashboard(
    db: Session,
    trip: Trip,
    now: datetime | None = None,
) -> TripDashboard:
    """Build the dashboard for a trip the caller has already been checked to own."""
    settings = get_settings()
    now = now or datetime.utcnow()

    aggregates = await gather_trip_aggregates(
        db,
        trip.id,
        now,
        timeout=settings.dashboard_timeout_seconds,
        expiry_window_days=settings.document_expiry_window_days,
    )
    logger.debug(f"Aggregated dashboard data for trip {trip.id}")
    return build_trip_dashboard(trip, aggregates, now)
