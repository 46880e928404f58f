# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Expense service."""

import datetime
import uuid
from decimal import Decimal

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from src.models import Expense, Trip
from src.models.enums import BudgetCategory
from src.schemas.expense import (
    ExpenseCategoryTotal,
    ExpenseCreate,
    ExpenseSummary,
    ExpenseUpdate,
)

REQUIRED_FIELDS = frozenset(
    {"description", "amount", "currency", "date", "category"}
)


class ExpenseOutsideTripError(ValueError):
    """Raised when an expense date falls outside the trip dates."""


def _check_within_trip(trip: Trip, day: datetime.date) -> None:
    if not trip.start_date.date() <= day <= trip.end_date.date():
        raise ExpenseOutsideTripError("Expense date must be within the trip dates")


def get_expenses(
    db: Session,
    trip_id: uuid.UUID,
    search: str | None = None,
    category: BudgetCategory | None = None,
    page: int = 1,
    per_page: int = 20,
) -> tuple[list[Expense], int]:
    """Get a page of expenses for a trip, most recent first."""
    query = db.query(Expense).filter(Expense.trip_id == trip_id)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Expense.description.ilike(pattern),
                Expense.location.ilike(pattern),
                Expense.notes.ilike(pattern),
            )
        )
    if category:
        query = query.filter(Expense.category == category)

    total = query.count()
    expenses = (
        query.order_by(Expense.date.desc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return expenses, total


def get_expense_for_trip(
    db: Session,
    expense_id: uuid.UUID,
    trip_id: uuid.UUID,
) -> Expense | None:
    """Get an expense that belongs to a specific trip."""
    return (
        db.query(Expense)
        .filter(Expense.id == expense_id, Expense.trip_id == trip_id)
        .first()
    )


def get_expense_summary(db: Session, trip_id: uuid.UUID) -> ExpenseSummary:
    """Get total spending and a per-category breakdown for a trip."""
    results = (
        db.query(
            Expense.category,
            func.sum(Expense.amount).label("total"),
            func.count(Expense.id).label("count"),
        )
        .filter(Expense.trip_id == trip_id)
        .group_by(Expense.category)
        .all()
    )

    category_totals = [
        ExpenseCategoryTotal(
            category=r.category,
            total=r.total or Decimal(0),
            count=r.count,
        )
        for r in results
    ]
    category_totals.sort(key=lambda x: x.total, reverse=True)

    return ExpenseSummary(
        total_spent=sum((c.total for c in category_totals), Decimal(0)),
        total_expenses=sum(c.count for c in category_totals),
        category_totals=category_totals,
    )


def create_expense(db: Session, trip: Trip, data: ExpenseCreate) -> Expense:
    """Create a new expense for a trip.

    The expense date must fall within the trip's calendar dates. A budget_id,
    when given, must already have been checked to belong to the trip.
    """
    _check_within_trip(trip, data.date)

    expense = Expense(
        trip_id=trip.id,
        budget_id=data.budget_id,
        description=data.description,
        amount=data.amount,
        currency=data.currency,
        date=data.date,
        category=data.category,
        location=data.location,
        receipt_url=data.receipt_url,
        notes=data.notes,
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)
    return expense


def update_expense(
    db: Session, trip: Trip, expense: Expense, data: ExpenseUpdate
) -> Expense:
    """Update an expense with the fields that were set.

    A new date must still fall within the trip. An explicit null budget_id
    unlinks the expense from its budget line.
    """
    update_data = data.model_dump(exclude_unset=True)

    if update_data.get("date"):
        _check_within_trip(trip, update_data["date"])

    for field, value in update_data.items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(expense, field, value)

    db.commit()
    db.refresh(expense)
    return expense


def delete_expense(db: Session, expense: Expense) -> None:
    """Delete an expense."""
    db.delete(expense)
    db.commit()
