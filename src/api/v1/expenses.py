# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Expense API endpoints."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, get_owned_trip
from src.models import Expense, Trip
from src.models.enums import BudgetCategory
from src.schemas.common import PaginationMeta
from src.schemas.expense import (
    ExpenseCreate,
    ExpenseListResponse,
    ExpenseResponse,
    ExpenseUpdate,
)
from src.services import budget_service, expense_service
from src.services.expense_service import ExpenseOutsideTripError

router = APIRouter()
logger = logging.getLogger(__name__)


def _get_expense_or_404(
    db: Session, expense_id: uuid.UUID, trip_id: uuid.UUID
) -> Expense:
    expense = expense_service.get_expense_for_trip(db, expense_id, trip_id)
    if not expense:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found",
        )
    return expense


def _check_budget(db: Session, budget_id: uuid.UUID | None, trip_id: uuid.UUID) -> None:
    if budget_id and not budget_service.get_budget_for_trip(db, budget_id, trip_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Budget not found",
        )


@router.get("/{trip_id}/expenses", response_model=ExpenseListResponse)
def list_expenses(
    search: str | None = None,
    category: BudgetCategory | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ExpenseListResponse:
    """List expenses for a trip with trip-wide spending totals."""
    expenses, total = expense_service.get_expenses(
        db,
        trip.id,
        search=search,
        category=category,
        page=page,
        per_page=per_page,
    )
    return ExpenseListResponse(
        data=[ExpenseResponse.model_validate(e) for e in expenses],
        meta=PaginationMeta.build(total, page, per_page),
        summary=expense_service.get_expense_summary(db, trip.id),
    )


@router.post(
    "/{trip_id}/expenses",
    response_model=ExpenseResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_expense(
    data: ExpenseCreate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ExpenseResponse:
    """Create a new expense for a trip."""
    _check_budget(db, data.budget_id, trip.id)

    try:
        expense = expense_service.create_expense(db, trip, data)
    except ExpenseOutsideTripError as e:
        logger.warning(f"Rejected expense for trip {trip.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return ExpenseResponse.model_validate(expense)


@router.get("/{trip_id}/expenses/{expense_id}", response_model=ExpenseResponse)
def get_expense(
    expense_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ExpenseResponse:
    """Get an expense."""
    expense = _get_expense_or_404(db, expense_id, trip.id)
    return ExpenseResponse.model_validate(expense)


@router.put("/{trip_id}/expenses/{expense_id}", response_model=ExpenseResponse)
def update_expense(
    expense_id: uuid.UUID,
    data: ExpenseUpdate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> ExpenseResponse:
    """Update an expense."""
    expense = _get_expense_or_404(db, expense_id, trip.id)
    _check_budget(db, data.budget_id, trip.id)

    try:
        expense = expense_service.update_expense(db, trip, expense, data)
    except ExpenseOutsideTripError as e:
        logger.warning(f"Rejected expense update for trip {trip.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return ExpenseResponse.model_validate(expense)


@router.delete(
    "/{trip_id}/expenses/{expense_id}", status_code=status.HTTP_204_NO_CONTENT
)
def delete_expense(
    expense_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> None:
    """Delete an expense."""
    expense = _get_expense_or_404(db, expense_id, trip.id)
    expense_service.delete_expense(db, expense)
