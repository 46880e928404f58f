# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Budget API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, get_owned_trip
from src.models import Budget, Trip
from src.schemas.budget import (
    BudgetCreate,
    BudgetListResponse,
    BudgetResponse,
    BudgetUpdate,
)
from src.services import budget_service
from src.services.budget_service import DuplicateBudgetCategoryError

router = APIRouter()


def _get_budget_or_404(db: Session, budget_id: uuid.UUID, trip_id: uuid.UUID) -> Budget:
    budget = budget_service.get_budget_for_trip(db, budget_id, trip_id)
    if not budget:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Budget not found",
        )
    return budget


@router.get("/{trip_id}/budget", response_model=BudgetListResponse)
def list_budget(
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> BudgetListResponse:
    """List budget lines for a trip with planned vs actual totals."""
    items = budget_service.get_budgets(db, trip.id)
    return BudgetListResponse(
        items=items,
        summary=budget_service.get_budget_summary(items),
    )


@router.post(
    "/{trip_id}/budget",
    response_model=BudgetResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_budget(
    data: BudgetCreate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> BudgetResponse:
    """Create a budget line for a trip."""
    try:
        budget = budget_service.create_budget(db, trip.id, data)
    except DuplicateBudgetCategoryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return budget_service.get_budget_response(db, budget)


@router.get("/{trip_id}/budget/{budget_id}", response_model=BudgetResponse)
def get_budget(
    budget_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> BudgetResponse:
    """Get a budget line with the amount spent against it."""
    budget = _get_budget_or_404(db, budget_id, trip.id)
    return budget_service.get_budget_response(db, budget)


@router.put("/{trip_id}/budget/{budget_id}", response_model=BudgetResponse)
def update_budget(
    budget_id: uuid.UUID,
    data: BudgetUpdate,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> BudgetResponse:
    """Update a budget line."""
    budget = _get_budget_or_404(db, budget_id, trip.id)
    try:
        budget = budget_service.update_budget(db, budget, data)
    except DuplicateBudgetCategoryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return budget_service.get_budget_response(db, budget)


@router.delete("/{trip_id}/budget/{budget_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_budget(
    budget_id: uuid.UUID,
    trip: Trip = Depends(get_owned_trip),
    db: Session = Depends(get_db),
) -> None:
    """Delete a budget line."""
    budget = _get_budget_or_404(db, budget_id, trip.id)
    budget_service.delete_budget(db, budget)
