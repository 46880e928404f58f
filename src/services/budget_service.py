# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Budget service."""

import uuid
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from src.models import Budget, Expense
from src.models.enums import BudgetCategory
from src.schemas.budget import (
    BudgetCreate,
    BudgetResponse,
    BudgetSummary,
    BudgetUpdate,
)

REQUIRED_FIELDS = frozenset({"category", "currency"})


class DuplicateBudgetCategoryError(ValueError):
    """Raised when a trip already has a budget line for the category."""


def _to_response(budget: Budget, spent: Decimal | None) -> BudgetResponse:
    return BudgetResponse(
        id=budget.id,
        trip_id=budget.trip_id,
        category=budget.category,
        planned_amount=budget.planned_amount,
        actual_amount=spent or Decimal(0),
        currency=budget.currency,
        notes=budget.notes,
        created_at=budget.created_at,
        updated_at=budget.updated_at,
    )


def _ensure_category_free(
    db: Session,
    trip_id: uuid.UUID,
    category: BudgetCategory,
    exclude_id: uuid.UUID | None = None,
) -> None:
    query = db.query(Budget).filter(
        Budget.trip_id == trip_id, Budget.category == category
    )
    if exclude_id:
        query = query.filter(Budget.id != exclude_id)
    if query.first():
        raise DuplicateBudgetCategoryError(
            f"A budget already exists for category {category.value}"
        )


def get_budget_for_trip(
    db: Session,
    budget_id: uuid.UUID,
    trip_id: uuid.UUID,
) -> Budget | None:
    """Get a budget line that belongs to a specific trip."""
    return (
        db.query(Budget)
        .filter(Budget.id == budget_id, Budget.trip_id == trip_id)
        .first()
    )


def get_budgets(db: Session, trip_id: uuid.UUID) -> list[BudgetResponse]:
    """Get budget lines for a trip, each with the amount spent against it.

    The actual amount is the sum of expenses linked to the line, not the
    stored actual_amount column.
    """
    results = (
        db.query(Budget, func.sum(Expense.amount).label("spent"))
        .outerjoin(Expense, Expense.budget_id == Budget.id)
        .filter(Budget.trip_id == trip_id)
        .group_by(Budget.id)
        .order_by(Budget.category)
        .all()
    )

    return [_to_response(budget, spent) for budget, spent in results]


def get_budget_response(db: Session, budget: Budget) -> BudgetResponse:
    """Build the response for one budget line, with its linked expense total."""
    spent = (
        db.query(func.sum(Expense.amount))
        .filter(Expense.budget_id == budget.id)
        .scalar()
    )
    return _to_response(budget, spent)


def get_budget_summary(items: list[BudgetResponse]) -> BudgetSummary:
    """Summarize planned against actual spending for a list of budget lines."""
    total_planned = sum(
        (item.planned_amount or Decimal(0) for item in items), Decimal(0)
    )
    total_actual = sum((item.actual_amount for item in items), Decimal(0))
    percentage_used = (
        float(total_actual / total_planned * 100) if total_planned > 0 else 0.0
    )
    return BudgetSummary(
        total_planned=total_planned,
        total_actual=total_actual,
        remaining=total_planned - total_actual,
        percentage_used=round(percentage_used, 1),
    )


def create_budget(db: Session, trip_id: uuid.UUID, data: BudgetCreate) -> Budget:
    """Create a budget line. Each category may appear once per trip."""
    _ensure_category_free(db, trip_id, data.category)

    budget = Budget(
        trip_id=trip_id,
        category=data.category,
        planned_amount=data.planned_amount,
        currency=data.currency,
        notes=data.notes,
    )
    db.add(budget)
    db.commit()
    db.refresh(budget)
    return budget


def update_budget(db: Session, budget: Budget, data: BudgetUpdate) -> Budget:
    """Update a budget line with the fields that were set.

    Moving the line to another category is refused when the trip already has
    a line for that category.
    """
    update_data = data.model_dump(exclude_unset=True)

    category = update_data.get("category")
    if category and category != budget.category:
        _ensure_category_free(db, budget.trip_id, category, exclude_id=budget.id)

    for field, value in update_data.items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(budget, field, value)

    db.commit()
    db.refresh(budget)
    return budget


def delete_budget(db: Session, budget: Budget) -> None:
    """Delete a budget line. Linked expenses are kept and unlinked."""
    db.delete(budget)
    db.commit()
