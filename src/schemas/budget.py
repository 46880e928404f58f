# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Budget schemas."""

import datetime
import uuid
from decimal import Decimal

from pydantic import BaseModel, Field

from src.models.enums import BudgetCategory
from src.schemas.common import SerializedDecimal


class BudgetCreate(BaseModel):
    """Schema for creating a budget line."""

    category: BudgetCategory
    planned_amount: Decimal = Field(..., gt=0, decimal_places=2)
    currency: str = Field(default="EUR", min_length=3, max_length=3)
    notes: str | None = None


class BudgetUpdate(BaseModel):
    """Schema for updating a budget line."""

    category: BudgetCategory | None = None
    planned_amount: Decimal | None = Field(None, gt=0, decimal_places=2)
    currency: str | None = Field(None, min_length=3, max_length=3)
    notes: str | None = None


class BudgetResponse(BaseModel):
    """Budget line with the amount actually spent against it."""

    id: uuid.UUID
    trip_id: uuid.UUID
    category: BudgetCategory
    planned_amount: SerializedDecimal | None
    actual_amount: SerializedDecimal
    currency: str
    notes: str | None
    created_at: datetime.datetime
    updated_at: datetime.datetime


class BudgetSummary(BaseModel):
    """Totals across all budget lines of a trip."""

    total_planned: SerializedDecimal
    total_actual: SerializedDecimal
    remaining: SerializedDecimal
    percentage_used: float


class BudgetListResponse(BaseModel):
    """Budget lines and their summary."""

    items: list[BudgetResponse]
    summary: BudgetSummary
